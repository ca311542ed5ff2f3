"""Base interface for key-value storage backends."""

from abc import ABC, abstractmethod


class StorageError(Exception):
    """Raised when a storage backend cannot read or write a key."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class KeyValueStorage(ABC):
    """
    Abstract durable key-value store.

    Values are opaque strings. Backends raise StorageError for any I/O
    failure so callers only need to handle one exception type.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return backend name for logging and identification."""
        pass

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key was never written."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
        pass
