"""Recipe creation, editing and listing."""

from dataclasses import dataclass
from typing import Any

from forked.documents import Creator, Recipe, UserContext, parse_document_id, utcnow
from forked.errors import InvalidArgument, NotFound
from forked.logging_config import get_logger
from forked.normalize.ingredients import normalize_ingredients
from forked.store.base import DocumentStore

logger = get_logger(__name__)


@dataclass
class RecipeDraft:
    """Raw recipe fields as sent by a client."""

    name: Any
    ingredients: Any
    instructions: Any
    image_url: Any = None


def coerce_instructions(instructions: list[str] | str) -> list[str]:
    """A single instruction string becomes a one-step list."""
    if isinstance(instructions, str):
        return [instructions]
    return list(instructions)


def _validate(draft: RecipeDraft) -> None:
    """Reject drafts with missing or wrongly typed fields."""
    if not draft.name or not draft.ingredients or not draft.instructions:
        raise InvalidArgument("Name, ingredients and instructions are required")

    if not isinstance(draft.name, str) or not draft.name.strip():
        raise InvalidArgument("Name must be non-empty text")
    if not isinstance(draft.ingredients, list):
        raise InvalidArgument("Ingredients must be a list")
    if not isinstance(draft.instructions, str) and not (
        isinstance(draft.instructions, list)
        and all(isinstance(step, str) for step in draft.instructions)
    ):
        raise InvalidArgument("Instructions must be text or a list of text")
    if draft.image_url is not None and not isinstance(draft.image_url, str):
        raise InvalidArgument("imageUrl must be text")


class RecipeService:
    """Recipe use cases over an injected document store."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def list_recipes(self) -> list[Recipe]:
        return await self.store.list_recipes()

    async def list_recipes_by_creator(self, user: UserContext) -> list[Recipe]:
        return await self.store.list_recipes_by_creator(user.id)

    async def create_recipe(self, draft: RecipeDraft, user: UserContext) -> Recipe:
        """
        Normalize and store a new recipe authored by user.

        Raises:
            InvalidArgument: If name, ingredients or instructions are missing.
        """
        _validate(draft)

        now = utcnow()
        recipe = Recipe(
            name=draft.name.strip(),
            ingredients=normalize_ingredients(draft.ingredients),
            instructions=coerce_instructions(draft.instructions),
            image_url=draft.image_url or None,
            creator=Creator.from_user(user),
            created_at=now,
            updated_at=now,
        )
        recipe.id = await self.store.insert_recipe(recipe)

        logger.info(f"Created recipe {recipe.id} ({recipe.name!r}) by user {user.id}")
        return recipe

    async def update_recipe(
        self,
        recipe_id: str,
        draft: RecipeDraft,
        user: UserContext,
    ) -> Recipe:
        """
        Replace the editable fields of a recipe owned by user.

        The creator snapshot and creation time are never changed. The
        previous image is kept when the draft carries none.

        Raises:
            InvalidArgument: Missing fields, malformed id, or nothing modified.
            NotFound: The recipe does not exist or belongs to someone else.
        """
        _validate(draft)
        recipe_id = parse_document_id(recipe_id)

        existing = await self.store.find_recipe_by_id(recipe_id)
        if existing is None or existing.creator.id != user.id:
            raise NotFound("Recipe not found or not owned by you")

        updated = Recipe(
            id=recipe_id,
            name=draft.name.strip(),
            ingredients=normalize_ingredients(draft.ingredients),
            instructions=coerce_instructions(draft.instructions),
            image_url=draft.image_url or existing.image_url,
            creator=existing.creator,
            created_at=existing.created_at,
            updated_at=utcnow(),
        )

        modified = await self.store.update_recipe(
            recipe_id,
            {
                "name": updated.name,
                "ingredients": updated.ingredients,
                "instructions": updated.instructions,
                "image_url": updated.image_url,
                "updated_at": updated.updated_at,
            },
        )
        if modified == 0:
            raise InvalidArgument("No changes were applied")

        logger.info(f"Updated recipe {recipe_id} by user {user.id}")
        return updated
