"""API routers for the recipebasket application."""

from recipebasket.routers.shopping_list import router as shopping_list_router

__all__ = [
    "shopping_list_router",
]
