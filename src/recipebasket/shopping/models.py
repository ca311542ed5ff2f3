"""Domain types for the recipe shopping list."""

from dataclasses import dataclass, field


def normalize_name(name: str | None) -> str:
    """Identity key for an ingredient name: trimmed and case-folded."""
    return (name or "").strip().casefold()


@dataclass
class RawIngredient:
    """One ingredient line as authored in a recipe."""

    name: str
    quantity: str = ""
    unit: str = ""
    notes: str = ""

    @property
    def identity(self) -> str:
        return normalize_name(self.name)


@dataclass
class RecipeListEntry:
    """One recipe currently on the shopping list."""

    recipe_slug: str
    recipe_title: str
    ingredients: list[RawIngredient] = field(default_factory=list)

    def copy(self) -> "RecipeListEntry":
        """Return a copy that shares no mutable state with this entry."""
        return RecipeListEntry(
            recipe_slug=self.recipe_slug,
            recipe_title=self.recipe_title,
            ingredients=[
                RawIngredient(ing.name, ing.quantity, ing.unit, ing.notes)
                for ing in self.ingredients
            ],
        )


@dataclass
class QuantityEntry:
    """A single contributing occurrence, attributed to its recipe."""

    quantity: str
    unit: str
    from_recipe: str
    recipe_slug: str

    @property
    def is_blank(self) -> bool:
        return not self.quantity.strip() and not self.unit.strip()


@dataclass
class ConsolidatedIngredient:
    """
    One display row of the consolidated shopping list.

    Quantities are listed side by side with attribution and never summed,
    since units and forms differ between recipes ("2 cloves" vs "1 tsp").
    """

    name: str
    quantities: list[QuantityEntry] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)

    @property
    def identity(self) -> str:
        return normalize_name(self.name)

    @property
    def recipe_slugs(self) -> list[str]:
        """Slugs of the recipes asking for this ingredient, without repeats."""
        return list(dict.fromkeys(q.recipe_slug for q in self.quantities))
