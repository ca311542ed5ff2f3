"""API routes for the consolidated shopping list."""

from typing import Any

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from recipebasket.dependencies import get_store
from recipebasket.logging_config import get_logger
from recipebasket.shopping.consolidation import consolidate
from recipebasket.shopping.intake import entry_from_ingredient_groups
from recipebasket.shopping.models import ConsolidatedIngredient
from recipebasket.shopping.render import render_text
from recipebasket.shopping.schemas import RecipeListEntrySchema
from recipebasket.shopping.store import ShoppingListStore

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/shopping-list", tags=["shopping-list"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class QuantitySchema(BaseModel):
    """One recipe's contribution to a consolidated ingredient."""

    model_config = ConfigDict(populate_by_name=True)

    quantity: str
    unit: str
    from_recipe: str = Field(alias="from")
    recipe_slug: str


class ConsolidatedIngredientSchema(BaseModel):
    """Consolidated shopping list row."""

    name: str
    quantities: list[QuantitySchema]
    notes: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, item: ConsolidatedIngredient) -> "ConsolidatedIngredientSchema":
        return cls(
            name=item.name,
            quantities=[
                QuantitySchema(
                    quantity=q.quantity,
                    unit=q.unit,
                    from_recipe=q.from_recipe,
                    recipe_slug=q.recipe_slug,
                )
                for q in item.quantities
            ],
            notes=list(item.notes),
        )


class RecipeOnList(BaseModel):
    """Recipe currently on the list."""

    recipe_slug: str
    recipe_title: str
    ingredient_count: int


class ShoppingListResponse(BaseModel):
    """Recipes on the list and their consolidated ingredients."""

    recipes: list[RecipeOnList]
    ingredients: list[ConsolidatedIngredientSchema]
    recipe_count: int
    ingredient_count: int
    persisted: bool = Field(description="False when the last save failed")


class RecipeStatusResponse(BaseModel):
    """Whether a recipe is on the list."""

    recipe_slug: str
    on_list: bool


class AddFromGroupsRequest(BaseModel):
    """Add a recipe straight from its published ingredient groups."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    recipe_slug: str = Field(min_length=1)
    recipe_title: str
    ingredient_groups: list[dict[str, Any]] = Field(default_factory=list)
    multiplier: float = Field(default=1, gt=0, le=20, description="Servings multiplier")


# =============================================================================
# Helper Functions
# =============================================================================


def build_response(store: ShoppingListStore) -> ShoppingListResponse:
    """Consolidate the store's current state into a response."""
    entries = store.entries
    consolidated = consolidate(entries)
    return ShoppingListResponse(
        recipes=[
            RecipeOnList(
                recipe_slug=entry.recipe_slug,
                recipe_title=entry.recipe_title,
                ingredient_count=len(entry.ingredients),
            )
            for entry in entries
        ],
        ingredients=[ConsolidatedIngredientSchema.from_domain(item) for item in consolidated],
        recipe_count=len(entries),
        ingredient_count=len(consolidated),
        persisted=store.persisted,
    )


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/", response_model=ShoppingListResponse)
def get_shopping_list(store: ShoppingListStore = Depends(get_store)) -> ShoppingListResponse:
    """Get the consolidated shopping list."""
    return build_response(store)


@router.get("/print", response_class=PlainTextResponse)
def print_shopping_list(store: ShoppingListStore = Depends(get_store)) -> str:
    """Get the consolidated shopping list as printable text."""
    return render_text(store.consolidated())


@router.get("/recipes/{recipe_slug}", response_model=RecipeStatusResponse)
def get_recipe_status(
    recipe_slug: str,
    store: ShoppingListStore = Depends(get_store),
) -> RecipeStatusResponse:
    """Check whether a recipe is already on the list."""
    return RecipeStatusResponse(recipe_slug=recipe_slug, on_list=store.has_recipe(recipe_slug))


@router.post("/recipes", response_model=ShoppingListResponse, status_code=status.HTTP_201_CREATED)
def add_recipe(
    request: RecipeListEntrySchema,
    store: ShoppingListStore = Depends(get_store),
) -> ShoppingListResponse:
    """
    Add a recipe and its ingredients to the list.

    Adding a recipe that is already on the list replaces its ingredients
    with the ones sent, restoring any that were removed.
    """
    store.add_recipe(request.to_domain())
    return build_response(store)


@router.post(
    "/recipes/from-groups",
    response_model=ShoppingListResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_recipe_from_groups(
    request: AddFromGroupsRequest,
    store: ShoppingListStore = Depends(get_store),
) -> ShoppingListResponse:
    """Add a recipe from its ingredient groups, scaled by a servings multiplier."""
    entry = entry_from_ingredient_groups(
        request.recipe_slug,
        request.recipe_title,
        request.ingredient_groups,
        multiplier=request.multiplier,
    )
    store.add_recipe(entry)
    return build_response(store)


@router.delete("/recipes/{recipe_slug}", response_model=ShoppingListResponse)
def remove_recipe(
    recipe_slug: str,
    store: ShoppingListStore = Depends(get_store),
) -> ShoppingListResponse:
    """Remove a recipe and all of its ingredients."""
    store.remove_recipe(recipe_slug)
    return build_response(store)


@router.delete("/ingredients/{name:path}", response_model=ShoppingListResponse)
def remove_ingredient(
    name: str,
    recipe_slug: str | None = Query(None, description="Only remove it from this recipe"),
    store: ShoppingListStore = Depends(get_store),
) -> ShoppingListResponse:
    """
    Remove an ingredient from one recipe, or from every recipe.

    Without ``recipe_slug`` the ingredient is removed everywhere it appears.
    An empty ``recipe_slug`` matches no recipe and removes nothing.
    """
    if recipe_slug is not None:
        logger.info(f"Removing {name!r} from recipe {recipe_slug}")
        store.remove_ingredient_from_recipe(name, recipe_slug)
    else:
        logger.info(f"Removing {name!r} from all recipes")
        store.remove_ingredient_globally(name)
    return build_response(store)


@router.delete("/", response_model=ShoppingListResponse)
def clear_shopping_list(store: ShoppingListStore = Depends(get_store)) -> ShoppingListResponse:
    """Remove every recipe from the list."""
    store.clear_all()
    return build_response(store)
