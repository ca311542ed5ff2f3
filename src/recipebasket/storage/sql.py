"""SQL storage backend built on a single key-value table."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from recipebasket.logging_config import get_logger
from recipebasket.storage.base import KeyValueStorage, StorageError

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for storage models."""

    pass


class KeyValueEntry(Base):
    """A stored value addressed by key."""

    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )


class SqlKeyValueStorage(KeyValueStorage):
    """Storage backed by the ``kv_entries`` table of any SQLAlchemy database."""

    def __init__(self, database_url: str | None = None, engine: Engine | None = None):
        if engine is None:
            if database_url is None:
                raise ValueError("Either database_url or engine is required")
            engine = create_engine(database_url)
        self.engine = engine
        self._session_factory = sessionmaker(engine, class_=Session, expire_on_commit=False)
        self._schema_ready = False

    @property
    def name(self) -> str:
        return "sql"

    def _ensure_schema(self) -> None:
        if not self._schema_ready:
            Base.metadata.create_all(self.engine)
            self._schema_ready = True
            logger.info(f"Storage table {KeyValueEntry.__tablename__} initialized")

    def get(self, key: str) -> str | None:
        try:
            self._ensure_schema()
            with self._session_factory() as session:
                entry = session.get(KeyValueEntry, key)
                return entry.value if entry else None
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read key {key}: {e}", key=key) from e

    def set(self, key: str, value: str) -> None:
        try:
            self._ensure_schema()
            with self._session_factory.begin() as session:
                entry = session.get(KeyValueEntry, key)
                if entry is None:
                    session.add(KeyValueEntry(key=key, value=value))
                else:
                    entry.value = value
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to write key {key}: {e}", key=key) from e

    def delete(self, key: str) -> None:
        try:
            self._ensure_schema()
            with self._session_factory.begin() as session:
                entry = session.get(KeyValueEntry, key)
                if entry is not None:
                    session.delete(entry)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to delete key {key}: {e}", key=key) from e
