"""JSON file storage backend: one file per key under a data directory."""

import os
import re
from pathlib import Path

from recipebasket.logging_config import get_logger
from recipebasket.storage.base import KeyValueStorage, StorageError

logger = get_logger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class JsonFileStorage(KeyValueStorage):
    """
    Stores each key as ``<data_dir>/<key>.json``.

    Writes go to a temporary file first and are then renamed over the
    target, so a crash mid-write never leaves a truncated file behind.
    """

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)

    @property
    def name(self) -> str:
        return "file"

    def path_for(self, key: str) -> Path:
        """Get the file path holding a key."""
        safe_key = _UNSAFE_CHARS.sub("_", key)
        if not safe_key.strip("."):
            raise StorageError(f"Invalid storage key: {key!r}", key=key)
        return self.data_dir / f"{safe_key}.json"

    def get(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read {path}: {e}", key=key) from e

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(value, encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}", key=key) from e
        logger.debug(f"Wrote {len(value)} bytes to {path}")

    def delete(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to delete {path}: {e}", key=key) from e
