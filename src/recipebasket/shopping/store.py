"""Persistent store for the recipes currently on a shopping list."""

from pydantic import ValidationError

from recipebasket.logging_config import LoggingContext, get_logger
from recipebasket.shopping import mutations
from recipebasket.shopping.consolidation import consolidate
from recipebasket.shopping.models import ConsolidatedIngredient, RecipeListEntry
from recipebasket.shopping.schemas import dump_entries, load_entries
from recipebasket.storage.base import KeyValueStorage, StorageError

logger = get_logger(__name__)

DEFAULT_LIST_KEY = "bb-shopping-list"


class ShoppingListStore:
    """
    Holds the recipes on one shopping list and mirrors them to storage.

    The in-memory list is authoritative. Storage is read once on
    construction and written after every mutation; read failures start an
    empty list and write failures are logged and otherwise ignored, so a
    broken backend degrades to an in-memory session instead of failing.
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_LIST_KEY):
        self.storage = storage
        self.key = key
        self._entries: list[RecipeListEntry] = []
        self.persisted = True
        self.load()

    @property
    def entries(self) -> list[RecipeListEntry]:
        """Snapshot of the recipes on the list, in the order they were added."""
        return [entry.copy() for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def load(self) -> list[RecipeListEntry]:
        """Restore state from storage, falling back to an empty list."""
        with LoggingContext(list_key=self.key):
            try:
                blob = self.storage.get(self.key)
            except StorageError as e:
                logger.warning(f"Failed to load shopping list from {self.storage.name}: {e}")
                blob = None

            if not blob:
                self._entries = []
                return self.entries

            try:
                self._entries = load_entries(blob)
            except ValidationError as e:
                logger.warning(
                    f"Discarding unreadable shopping list ({e.error_count()} errors)"
                )
                self._entries = []
            else:
                logger.debug(f"Loaded {len(self._entries)} recipes")

        return self.entries

    def _save(self) -> None:
        with LoggingContext(list_key=self.key):
            try:
                self.storage.set(self.key, dump_entries(self._entries))
            except (StorageError, ValidationError) as e:
                self.persisted = False
                logger.warning(f"Failed to save shopping list to {self.storage.name}: {e}")
            else:
                self.persisted = True

    def _apply(self, entries: list[RecipeListEntry]) -> None:
        self._entries = entries
        self._save()

    def has_recipe(self, recipe_slug: str) -> bool:
        return any(entry.recipe_slug == recipe_slug for entry in self._entries)

    def add_recipe(self, entry: RecipeListEntry) -> None:
        """Add a recipe, replacing any entry with the same slug."""
        logger.info(
            f"Adding recipe {entry.recipe_slug} with {len(entry.ingredients)} ingredients"
        )
        self._apply(mutations.upsert_recipe(self._entries, entry))

    def remove_recipe(self, recipe_slug: str) -> None:
        self._apply(mutations.remove_recipe(self._entries, recipe_slug))

    def clear_all(self) -> None:
        logger.info(f"Clearing shopping list with {len(self._entries)} recipes")
        self._apply([])

    def remove_ingredient_from_recipe(self, name: str, recipe_slug: str) -> None:
        self._apply(mutations.remove_ingredient_from_recipe(self._entries, name, recipe_slug))

    def remove_ingredient_globally(self, name: str) -> None:
        self._apply(mutations.remove_ingredient_globally(self._entries, name))

    def consolidated(self) -> list[ConsolidatedIngredient]:
        """Consolidate the current entries. Recomputed on every call."""
        return consolidate(self._entries)
