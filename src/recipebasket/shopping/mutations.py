"""Removal and insertion operations over the raw per-recipe data.

Every function returns a new list of entries and leaves its input untouched.
Operations that match nothing return an equal copy.
"""

from recipebasket.shopping.models import RecipeListEntry, normalize_name


def upsert_recipe(
    entries: list[RecipeListEntry], entry: RecipeListEntry
) -> list[RecipeListEntry]:
    """Insert an entry, or replace the one with the same slug in place."""
    replaced = False
    result = []
    for existing in entries:
        if existing.recipe_slug == entry.recipe_slug:
            if not replaced:
                result.append(entry.copy())
                replaced = True
            continue
        result.append(existing.copy())
    if not replaced:
        result.append(entry.copy())
    return result


def remove_recipe(entries: list[RecipeListEntry], recipe_slug: str) -> list[RecipeListEntry]:
    """Drop a recipe and all of its ingredients."""
    return [entry.copy() for entry in entries if entry.recipe_slug != recipe_slug]


def remove_ingredient_from_recipe(
    entries: list[RecipeListEntry], name: str, recipe_slug: str
) -> list[RecipeListEntry]:
    """
    Drop an ingredient from one recipe only.

    The recipe stays on the list even when its last ingredient goes.
    """
    key = normalize_name(name)
    result = []
    for entry in entries:
        entry = entry.copy()
        if entry.recipe_slug == recipe_slug:
            entry.ingredients = [ing for ing in entry.ingredients if ing.identity != key]
        result.append(entry)
    return result


def remove_ingredient_globally(entries: list[RecipeListEntry], name: str) -> list[RecipeListEntry]:
    """Drop an ingredient from every recipe on the list."""
    key = normalize_name(name)
    result = []
    for entry in entries:
        entry = entry.copy()
        entry.ingredients = [ing for ing in entry.ingredients if ing.identity != key]
        result.append(entry)
    return result
