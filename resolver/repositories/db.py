"""Reference store handles - embedded DuckDB snapshot and process-wide defaults.

Repository SQL is written once, with ? placeholders and a similarity(a, b)
function. DuckDB gets that function as a Python UDF; Postgres resolves it to
pg_trgm. The only dialect-specific fragment is the trigram predicate, see
Store.trigram_match.
"""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from resolver.errors import StoreUnavailableError
from resolver.models import (
    CACHE_DDL,
    CACHE_INDEXES,
    POSTGRES_TRIGRAM_DDL,
    REFERENCE_DDL,
    REFERENCE_INDEXES,
)
from resolver.similarity import similarity
from settings import CACHE_DB_PATH, DATABASE_URL, SIMILARITY_THRESHOLD, SNAPSHOT_PATH, STORE_BACKEND


class QueryResult:
    """Rows fetched by Store.execute."""

    def __init__(self, rows: list[tuple]):
        self._rows = rows

    def fetchall(self) -> list[tuple]:
        return self._rows

    def fetchone(self) -> tuple | None:
        return self._rows[0] if self._rows else None


class Store:
    """Common interface of both reference store backends."""

    dialect = ""

    def __init__(self, threshold: float = SIMILARITY_THRESHOLD):
        self.threshold = threshold

    def execute(self, query: str, params: list | None = None) -> QueryResult:
        raise NotImplementedError

    def trigram_match(self, column: str) -> str:
        """SQL predicate: similarity(column, ?) reaches the threshold (pg_trgm % semantics)."""
        raise NotImplementedError

    def similarity_above(self, column: str) -> str:
        """SQL predicate: similarity(column, ?) strictly exceeds the threshold."""
        return f"similarity({column}, ?) > {self.threshold!r}"

    def close(self) -> None:
        raise NotImplementedError

    def init_tables(self, reference: bool = True, cache: bool = True) -> None:
        init_tables(self, reference, cache)

    def health_check(self) -> bool:
        """Check the store answers a trivial query."""
        try:
            return self.execute("SELECT 1").fetchone() is not None
        except StoreUnavailableError as e:
            logger.warning("Health check failed: {}", e)
            return False


class DuckDBStore(Store):
    """Embedded store over a DuckDB file (read-only snapshot by default).

    One connection per store; queries are serialized by a lock.
    """

    dialect = "duckdb"

    def __init__(self, path: str = SNAPSHOT_PATH, read_only: bool = True, threshold: float = SIMILARITY_THRESHOLD):
        super().__init__(threshold)
        self.path = str(path)
        self.read_only = read_only
        self._lock = threading.Lock()
        self._conn = self._connect()

    def _connect(self) -> duckdb.DuckDBPyConnection:
        if self.read_only and self.path != ":memory:" and not Path(self.path).exists():
            raise StoreUnavailableError(f"Snapshot not found: {self.path}")
        if not self.read_only and self.path != ":memory:":
            Path(self.path).parent.mkdir(parents=True, exist_ok=True)

        try:
            conn = duckdb.connect(self.path, read_only=self.read_only)
        except (duckdb.IOException, duckdb.ConnectionException) as e:
            raise StoreUnavailableError(f"Cannot open {self.path}: {e}") from e

        conn.create_function(
            "similarity",
            similarity,
            ["VARCHAR", "VARCHAR"],
            "DOUBLE",
            null_handling="special",
            side_effects=False,
        )
        logger.debug("DB connected: {} (read_only={})", self.path, self.read_only)
        return conn

    def execute(self, query: str, params: list | None = None) -> QueryResult:
        with self._lock:
            if self._conn is None:
                raise StoreUnavailableError(f"Connection to {self.path} is closed")
            try:
                cursor = self._conn.execute(query, params) if params else self._conn.execute(query)
                rows = cursor.fetchall() if cursor.description else []
            except (duckdb.IOException, duckdb.ConnectionException) as e:
                raise StoreUnavailableError(f"DuckDB store failed: {e}") from e
        return QueryResult(rows)

    def trigram_match(self, column: str) -> str:
        return f"similarity({column}, ?) >= {self.threshold!r}"

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.debug("DB connection closed: {}", self.path)


def init_tables(store: Store, reference: bool = True, cache: bool = True) -> None:
    """Create tables and indexes (idempotent - uses IF NOT EXISTS)."""
    ddl = (REFERENCE_DDL if reference else []) + ([CACHE_DDL] if cache else [])
    indexes = REFERENCE_INDEXES if reference else []
    # DuckDB cannot upsert into an indexed column, so the expiry index is server-only.
    if cache and store.dialect == "postgres":
        indexes = indexes + CACHE_INDEXES

    for statement in ddl + indexes:
        store.execute(statement)

    if store.dialect == "postgres" and reference:
        for statement in POSTGRES_TRIGRAM_DDL:
            store.execute(statement)

    logger.info("DB tables initialized ({})", store.dialect)


_lock = threading.Lock()
_stores: dict[str, Store] = {}


def _create_store(kind: str) -> Store:
    if STORE_BACKEND == "postgres":
        from resolver.repositories.postgres import PostgresStore

        # One pool serves reference queries and the cache table.
        return _stores.get("reference") or PostgresStore(DATABASE_URL)

    if STORE_BACKEND != "duckdb":
        raise ValueError(f"Unknown store backend: {STORE_BACKEND}")

    if kind == "cache":
        store = DuckDBStore(CACHE_DB_PATH, read_only=False)
        init_tables(store, reference=False, cache=True)
        return store
    return DuckDBStore(SNAPSHOT_PATH, read_only=True)


def get_store() -> Store:
    """Process-wide reference store built from settings."""
    with _lock:
        if "reference" not in _stores:
            _stores["reference"] = _create_store("reference")
            logger.info("Reference store ready: {}", _stores["reference"].dialect)
        return _stores["reference"]


def get_cache_store() -> Store:
    """Process-wide writable store holding census_data_cache."""
    with _lock:
        if "cache" not in _stores:
            _stores["cache"] = _create_store("cache")
        return _stores["cache"]


def close_store() -> None:
    """Close process-wide stores."""
    with _lock:
        for store in {id(s): s for s in _stores.values()}.values():
            store.close()
        _stores.clear()
        logger.debug("Stores closed")


def reconnect_store() -> Store:
    """Force reconnect."""
    close_store()
    return get_store()
