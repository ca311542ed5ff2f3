"""Conversion of CMS ingredient groups into shopping list entries."""

from collections.abc import Iterable, Mapping
from typing import Any

from recipebasket.normalize.quantities import scale_quantity
from recipebasket.shopping.models import RawIngredient, RecipeListEntry

FALLBACK_INGREDIENT_NAME = "Ingredient"


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return f"{value:g}"
    return str(value)


def ingredient_name(item: Mapping[str, Any]) -> str:
    """Pick the display name of a CMS ingredient item."""
    text = _text(item.get("ingredientText")).strip()
    if text:
        return text
    ref = item.get("ingredientRef") or {}
    if isinstance(ref, Mapping):
        ref_name = _text(ref.get("name")).strip()
        if ref_name:
            return ref_name
    return FALLBACK_INGREDIENT_NAME


def entry_from_ingredient_groups(
    recipe_slug: str,
    recipe_title: str,
    groups: Iterable[Mapping[str, Any]] | None,
    multiplier: float = 1,
) -> RecipeListEntry:
    """
    Flatten a recipe's ingredient groups into a shopping list entry.

    Args:
        recipe_slug: Recipe identifier.
        recipe_title: Recipe display name.
        groups: Ingredient groups as published, each with an ``items`` list.
        multiplier: Servings multiplier applied to every quantity.

    Returns:
        Entry with one RawIngredient per group item, in authored order.
    """
    ingredients = []
    for group in groups or []:
        for item in group.get("items") or []:
            quantity = _text(item.get("quantity"))
            if multiplier != 1:
                quantity = scale_quantity(quantity, multiplier)
            ingredients.append(
                RawIngredient(
                    name=ingredient_name(item),
                    quantity=quantity,
                    unit=_text(item.get("unit")),
                    notes=_text(item.get("notes")),
                )
            )

    return RecipeListEntry(
        recipe_slug=recipe_slug,
        recipe_title=recipe_title,
        ingredients=ingredients,
    )
