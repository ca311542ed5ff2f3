"""Shopping list store, consolidation and mutation logic."""

from recipebasket.shopping.consolidation import (
    ShoppingListSummary,
    consolidate,
    summarize,
)
from recipebasket.shopping.intake import entry_from_ingredient_groups
from recipebasket.shopping.models import (
    ConsolidatedIngredient,
    QuantityEntry,
    RawIngredient,
    RecipeListEntry,
    normalize_name,
)
from recipebasket.shopping.render import render_text
from recipebasket.shopping.store import DEFAULT_LIST_KEY, ShoppingListStore

__all__ = [
    "ConsolidatedIngredient",
    "DEFAULT_LIST_KEY",
    "QuantityEntry",
    "RawIngredient",
    "RecipeListEntry",
    "ShoppingListStore",
    "ShoppingListSummary",
    "consolidate",
    "entry_from_ingredient_groups",
    "normalize_name",
    "render_text",
    "summarize",
]
