"""Base repository class."""

from loguru import logger

from resolver.repositories.db import QueryResult, Store, get_store


class BaseRepository:
    """Base repository over an injected reference store."""

    def __init__(self, store: Store | None = None):
        self._store = store or get_store()
        logger.debug("{} initialized ({})", self.__class__.__name__, self._store.dialect)

    @property
    def store(self) -> Store:
        return self._store

    def execute(self, query: str, params: list | None = None) -> QueryResult:
        """Execute SQL query."""
        return self._store.execute(query, params)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None):
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()


def like_escape(value: str) -> str:
    """Escape LIKE wildcards so user input matches literally (ESCAPE '\\')."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
