"""Normalize raw client input into canonical recipe data."""

from forked.normalize.ingredients import (
    PLACEHOLDER_UNIT,
    Ingredient,
    OtherInput,
    RawIngredient,
    StructuredInput,
    TextInput,
    classify_raw_ingredient,
    normalize_ingredient,
    normalize_ingredients,
    parse_quantity_token,
)

__all__ = [
    "PLACEHOLDER_UNIT",
    "Ingredient",
    "OtherInput",
    "RawIngredient",
    "StructuredInput",
    "TextInput",
    "classify_raw_ingredient",
    "normalize_ingredient",
    "normalize_ingredients",
    "parse_quantity_token",
]
