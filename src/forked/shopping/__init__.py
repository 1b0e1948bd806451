"""Shopping list generation from selected recipes."""

from forked.shopping.aggregator import (
    LineItem,
    ShoppingList,
    ShoppingListAggregator,
    coerce_guest_count,
    parse_recipe_ids,
    split_recipe_ids_param,
)

__all__ = [
    "LineItem",
    "ShoppingList",
    "ShoppingListAggregator",
    "coerce_guest_count",
    "parse_recipe_ids",
    "split_recipe_ids_param",
]
