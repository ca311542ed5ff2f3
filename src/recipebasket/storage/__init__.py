"""Key-value storage backends for persisted shopping lists."""

from recipebasket.config import Settings
from recipebasket.storage.base import KeyValueStorage, StorageError
from recipebasket.storage.file import JsonFileStorage
from recipebasket.storage.memory import InMemoryStorage
from recipebasket.storage.sql import SqlKeyValueStorage


def create_storage(settings: Settings) -> KeyValueStorage:
    """Build the storage backend selected in settings."""
    if settings.storage_backend == "sql":
        return SqlKeyValueStorage(settings.database_url)
    if settings.storage_backend == "memory":
        return InMemoryStorage()
    return JsonFileStorage(settings.storage_dir)


__all__ = [
    "InMemoryStorage",
    "JsonFileStorage",
    "KeyValueStorage",
    "SqlKeyValueStorage",
    "StorageError",
    "create_storage",
]
