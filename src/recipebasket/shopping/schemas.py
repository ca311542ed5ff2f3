"""Wire schemas for shopping list entries, shared by persistence and the API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

from recipebasket.shopping.models import RawIngredient, RecipeListEntry


class RawIngredientSchema(BaseModel):
    """Ingredient line as stored and as received from recipe pages."""

    name: str = Field(min_length=1)
    quantity: str = ""
    unit: str = ""
    notes: str = ""

    @field_validator("quantity", "unit", "notes", mode="before")
    @classmethod
    def _blank_if_missing(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return f"{value:g}"
        return value

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("ingredient name must not be blank")
        return value

    def to_domain(self) -> RawIngredient:
        return RawIngredient(
            name=self.name, quantity=self.quantity, unit=self.unit, notes=self.notes
        )

    @classmethod
    def from_domain(cls, ingredient: RawIngredient) -> "RawIngredientSchema":
        return cls(
            name=ingredient.name,
            quantity=ingredient.quantity,
            unit=ingredient.unit,
            notes=ingredient.notes,
        )


class RecipeListEntrySchema(BaseModel):
    """Recipe on the shopping list, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    recipe_slug: str = Field(min_length=1)
    recipe_title: str
    ingredients: list[RawIngredientSchema] = Field(default_factory=list)

    def to_domain(self) -> RecipeListEntry:
        return RecipeListEntry(
            recipe_slug=self.recipe_slug,
            recipe_title=self.recipe_title,
            ingredients=[ing.to_domain() for ing in self.ingredients],
        )

    @classmethod
    def from_domain(cls, entry: RecipeListEntry) -> "RecipeListEntrySchema":
        return cls(
            recipe_slug=entry.recipe_slug,
            recipe_title=entry.recipe_title,
            ingredients=[RawIngredientSchema.from_domain(ing) for ing in entry.ingredients],
        )


_entries_adapter = TypeAdapter(list[RecipeListEntrySchema])


def dump_entries(entries: list[RecipeListEntry]) -> str:
    """Serialize entries to the persisted JSON blob."""
    schemas = [RecipeListEntrySchema.from_domain(entry) for entry in entries]
    return _entries_adapter.dump_json(schemas, by_alias=True).decode("utf-8")


def load_entries(blob: str | bytes) -> list[RecipeListEntry]:
    """
    Parse the persisted JSON blob.

    Raises:
        pydantic.ValidationError: If the blob is not valid JSON or not a list
            of entries.
    """
    return [schema.to_domain() for schema in _entries_adapter.validate_json(blob)]
