"""FastAPI dependencies for the shopping list store."""

from fastapi import Request

from recipebasket.config import Settings
from recipebasket.logging_config import get_logger
from recipebasket.shopping.store import ShoppingListStore
from recipebasket.storage import create_storage

logger = get_logger(__name__)


def build_store(settings: Settings) -> ShoppingListStore:
    """Create the shopping list store configured in settings."""
    storage = create_storage(settings)
    store = ShoppingListStore(storage, key=settings.shopping_list_key)
    logger.info(
        f"Shopping list store ready: backend={storage.name}, "
        f"key={settings.shopping_list_key}, recipes={len(store)}"
    )
    return store


def get_store(request: Request) -> ShoppingListStore:
    """Dependency returning the application's shopping list store."""
    return request.app.state.shopping_list_store
