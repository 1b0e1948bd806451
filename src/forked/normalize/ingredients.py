"""Ingredient normalization from free-text or partially structured input."""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from forked.logging_config import get_logger

logger = get_logger(__name__)

PLACEHOLDER_UNIT = "pz"
DEFAULT_QUANTITY = 1

# Document keys used for ingredients in storage and on the wire
NAME_KEY = "nome"
QUANTITY_KEY = "quantita"
UNIT_KEY = "unita"

# Fused quantity+unit token such as "200g", "3" or "1kg"
QUANTITY_TOKEN_PATTERN = re.compile(r"^(\d+)([a-zA-Z]*)$")


@dataclass
class Ingredient:
    """A normalized ingredient line of a recipe."""

    name: str
    quantity: int = DEFAULT_QUANTITY
    unit: str = PLACEHOLDER_UNIT
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def key(self) -> tuple[str, str]:
        """Shopping list merge key."""
        return self.name, self.unit

    def to_document(self) -> dict[str, Any]:
        """Serialize to the stored/wire document form."""
        return {
            **self.extra,
            NAME_KEY: self.name,
            QUANTITY_KEY: self.quantity,
            UNIT_KEY: self.unit,
        }

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "Ingredient":
        """
        Build an ingredient from a stored document.

        Present values are kept as they are; only absent quantity or unit
        fields fall back to the defaults.
        """
        extra = {
            k: v for k, v in document.items() if k not in (NAME_KEY, QUANTITY_KEY, UNIT_KEY)
        }
        return cls(
            name=document[NAME_KEY],
            quantity=document.get(QUANTITY_KEY, DEFAULT_QUANTITY),
            unit=document.get(UNIT_KEY, PLACEHOLDER_UNIT),
            extra=extra,
        )


# =============================================================================
# Raw input variants
# =============================================================================


@dataclass(frozen=True)
class StructuredInput:
    """A mapping that already carries an ingredient name."""

    document: Mapping[str, Any]


@dataclass(frozen=True)
class TextInput:
    """Free text such as "200g pomodoro" or "sale"."""

    text: str


@dataclass(frozen=True)
class OtherInput:
    """Anything else; only its string form is usable."""

    value: Any


RawIngredient = StructuredInput | TextInput | OtherInput


def classify_raw_ingredient(raw: Any) -> RawIngredient:
    """Tag raw client input with the normalization rule that applies to it."""
    if isinstance(raw, Mapping) and raw.get(NAME_KEY):
        return StructuredInput(raw)
    if isinstance(raw, str):
        return TextInput(raw)
    return OtherInput(raw)


def parse_quantity_token(token: str) -> tuple[int, str] | None:
    """
    Split a fused quantity+unit token.

    Examples:
        "200g" -> (200, "g")
        "3" -> (3, "pz")
        "200g." -> None
    """
    match = QUANTITY_TOKEN_PATTERN.match(token)
    if not match:
        return None
    return int(match.group(1)), match.group(2) or PLACEHOLDER_UNIT


def _normalize_text(text: str) -> Ingredient:
    trimmed = text.strip()
    parts = trimmed.split()

    if len(parts) >= 2:
        parsed = parse_quantity_token(parts[0])
        if parsed is not None:
            quantity, unit = parsed
            return Ingredient(name=" ".join(parts[1:]), quantity=quantity, unit=unit)

    return Ingredient(name=trimmed)


def normalize_ingredient(raw: Any) -> Ingredient:
    """
    Convert raw client input into a normalized ingredient.

    Never raises: input that cannot be parsed becomes a name-only ingredient
    with the default quantity and placeholder unit.
    """
    variant = classify_raw_ingredient(raw)

    if isinstance(variant, StructuredInput):
        return Ingredient.from_document(variant.document)
    if isinstance(variant, TextInput):
        return _normalize_text(variant.text)

    logger.debug(f"Stringifying unsupported ingredient input of type {type(raw).__name__}")
    return Ingredient(name=str(variant.value))


def normalize_ingredients(raws: Iterable[Any]) -> list[Ingredient]:
    """Normalize every raw ingredient of a recipe, keeping their order."""
    return [normalize_ingredient(raw) for raw in raws]
