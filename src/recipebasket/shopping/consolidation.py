"""Consolidation of per-recipe ingredients into one shopping list."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from recipebasket.shopping.models import (
    ConsolidatedIngredient,
    QuantityEntry,
    RawIngredient,
    RecipeListEntry,
    normalize_name,
)


@dataclass
class ShoppingListSummary:
    """Header counts for the shopping list view."""

    recipe_count: int
    ingredient_count: int


def _occurrences(
    entries: Iterable[RecipeListEntry],
) -> Iterator[tuple[RawIngredient, RecipeListEntry]]:
    """Flatten entries into (ingredient, owning entry) pairs in list order."""
    for entry in entries:
        for ingredient in entry.ingredients:
            yield ingredient, entry


def consolidate(entries: Iterable[RecipeListEntry]) -> list[ConsolidatedIngredient]:
    """
    Group ingredient occurrences across recipes by identity.

    Groups keep first-seen order and the first-seen spelling of the name.
    Each occurrence contributes one attributed quantity entry, and notes are
    deduplicated case-insensitively. The input is never modified, so calling
    this twice on the same entries yields equal results.

    Args:
        entries: Recipes currently on the list.

    Returns:
        Consolidated rows, one per ingredient identity.
    """
    groups: dict[str, ConsolidatedIngredient] = {}
    seen_notes: dict[str, set[str]] = {}

    for ingredient, entry in _occurrences(entries):
        key = normalize_name(ingredient.name)
        if not key:
            continue

        group = groups.get(key)
        if group is None:
            group = ConsolidatedIngredient(name=ingredient.name.strip())
            groups[key] = group
            seen_notes[key] = set()

        group.quantities.append(
            QuantityEntry(
                quantity=(ingredient.quantity or "").strip(),
                unit=(ingredient.unit or "").strip(),
                from_recipe=entry.recipe_title,
                recipe_slug=entry.recipe_slug,
            )
        )

        note = (ingredient.notes or "").strip()
        if note and note.casefold() not in seen_notes[key]:
            seen_notes[key].add(note.casefold())
            group.notes.append(note)

    return [group for group in groups.values() if group.quantities]


def summarize(entries: Iterable[RecipeListEntry]) -> ShoppingListSummary:
    """Count recipes on the list and distinct ingredients across them."""
    entries = list(entries)
    return ShoppingListSummary(
        recipe_count=len(entries),
        ingredient_count=len(consolidate(entries)),
    )
