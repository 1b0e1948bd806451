"""Shopping list aggregation across selected recipes."""

from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from forked.documents import Recipe, parse_document_id, utcnow
from forked.errors import InvalidArgument, InternalError, NotFound
from forked.logging_config import get_logger
from forked.store.base import DocumentStore

logger = get_logger(__name__)


@dataclass
class LineItem:
    """One aggregated shopping list entry, keyed by (name, unit)."""

    name: str
    unit: str
    quantity: int = 0

    def to_document(self) -> dict[str, Any]:
        return {"nome": self.name, "quantita": self.quantity, "unita": self.unit}


@dataclass
class ShoppingList:
    """Transient aggregation result; never persisted."""

    line_items: list[LineItem]
    recipe_names: list[str]
    guest_count: int
    created_at: datetime = field(default_factory=utcnow)


def coerce_guest_count(value: Any) -> int:
    """
    Validate a guest count given as an int or a numeric string.

    Raises:
        InvalidArgument: If the value is not a whole number or is below 1.
    """
    if isinstance(value, bool):
        raise InvalidArgument("Guest count must be a positive integer")

    if isinstance(value, int):
        count = value
    elif isinstance(value, float) and value.is_integer():
        count = int(value)
    elif isinstance(value, str):
        try:
            count = int(value.strip())
        except ValueError:
            raise InvalidArgument(f"Guest count must be a number, got {value!r}") from None
    else:
        raise InvalidArgument("Guest count must be a positive integer")

    if count < 1:
        raise InvalidArgument("Guest count must be at least 1")
    return count


def parse_recipe_ids(raw_ids: Any) -> list[str]:
    """
    Validate a list of recipe identifiers.

    Duplicates are kept so the fetched-count check compares against the
    number of ids the caller actually sent.
    """
    if not isinstance(raw_ids, Sequence) or isinstance(raw_ids, str) or not raw_ids:
        raise InvalidArgument("At least one recipe id is required")
    return [parse_document_id(raw) for raw in raw_ids]


def split_recipe_ids_param(raw_ids: str | None) -> list[str]:
    """Split a comma-separated query parameter into trimmed raw ids."""
    if not raw_ids or not raw_ids.strip():
        raise InvalidArgument(
            "Missing parameters: ricette (comma-separated ids) and persone (number)"
        )
    return [part.strip() for part in raw_ids.split(",")]


class ShoppingListAggregator:
    """
    Builds shopping lists by merging ingredient quantities of recipes.

    Quantities of ingredients sharing the same name and unit are summed and
    scaled by the guest count. Different units of the same ingredient stay
    separate line items.
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    async def aggregate(self, recipe_ids: Any, guest_count: Any) -> ShoppingList:
        """
        Aggregate the ingredients of the given recipes.

        Args:
            recipe_ids: Sequence of recipe identifiers (duplicates not collapsed).
            guest_count: Number of people to scale quantities for.

        Returns:
            ShoppingList with line items in first-encounter order and recipe
            names in fetch order.

        Raises:
            InvalidArgument: Bad ids or guest count; raised before any fetch.
            NotFound: Fewer recipes were fetched than ids were requested.
            InternalError: The store failed or holds a malformed quantity, name
                or unit.
        """
        ids = parse_recipe_ids(recipe_ids)
        guests = coerce_guest_count(guest_count)

        recipes = await self.store.find_recipes_by_ids(ids)

        if len(recipes) != len(ids):
            logger.info(f"Requested {len(ids)} recipes, found {len(recipes)}")
            raise NotFound("Some recipes were not found")

        line_items = self._merge(recipes, guests)

        logger.info(
            f"Aggregated shopping list: {len(recipes)} recipes, "
            f"{len(line_items)} line items, {guests} guests"
        )

        return ShoppingList(
            line_items=line_items,
            recipe_names=[recipe.name for recipe in recipes],
            guest_count=guests,
        )

    async def aggregate_from_query(
        self,
        raw_ids: str | None,
        raw_guest_count: str | None,
    ) -> ShoppingList:
        """Aggregate from query string values such as ("id1,id2", "4")."""
        if raw_guest_count is None or not raw_guest_count.strip():
            raise InvalidArgument(
                "Missing parameters: ricette (comma-separated ids) and persone (number)"
            )
        return await self.aggregate(split_recipe_ids_param(raw_ids), raw_guest_count)

    def _merge(self, recipes: list[Recipe], guests: int) -> list[LineItem]:
        merged: dict[tuple[str, str], LineItem] = {}

        for recipe in recipes:
            for ingredient in recipe.ingredients:
                quantity = ingredient.quantity
                if isinstance(quantity, bool) or not isinstance(quantity, (int, float)):
                    raise InternalError(
                        f"Recipe {recipe.name!r} has a malformed quantity for "
                        f"{ingredient.name!r}: {quantity!r}"
                    )

                key = ingredient.key
                if not isinstance(key[0], Hashable) or not isinstance(key[1], Hashable):
                    raise InternalError(
                        f"Recipe {recipe.name!r} has a malformed name or unit: "
                        f"{ingredient.name!r} {ingredient.unit!r}"
                    )
                if key not in merged:
                    merged[key] = LineItem(name=ingredient.name, unit=ingredient.unit)
                merged[key].quantity += quantity * guests

        return list(merged.values())
