"""In-memory storage backend, used for tests and ephemeral sessions."""

from recipebasket.storage.base import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    """Dictionary-backed storage that lives as long as the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    @property
    def name(self) -> str:
        return "memory"

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
