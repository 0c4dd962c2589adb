"""Server-side reference store - PostgreSQL with the pg_trgm extension."""

import re
import threading

import psycopg2
from loguru import logger
from psycopg2.pool import PoolError, ThreadedConnectionPool

from resolver.errors import StoreUnavailableError
from resolver.repositories.db import QueryResult, Store
from settings import DB_CONNECT_TIMEOUT, DB_POOL_MAX, DB_POOL_MIN, SIMILARITY_THRESHOLD

_DSN_PASSWORD = re.compile(r":[^:@/]*@")


def to_pyformat(query: str) -> str:
    """Rewrite ? placeholders for psycopg2, escaping literal percent signs."""
    return query.replace("%", "%%").replace("?", "%s")


def mask_dsn(dsn: str) -> str:
    return _DSN_PASSWORD.sub(":***@", dsn)


class PostgresStore(Store):
    """Pooled connections; the trigram predicate uses pg_trgm's % operator."""

    dialect = "postgres"

    def __init__(
        self,
        dsn: str,
        minconn: int = DB_POOL_MIN,
        maxconn: int = DB_POOL_MAX,
        threshold: float = SIMILARITY_THRESHOLD,
    ):
        super().__init__(threshold)
        self.dsn = dsn
        self._minconn = minconn
        self._maxconn = maxconn
        self._pool: ThreadedConnectionPool | None = None
        self._lock = threading.Lock()
        logger.info("PostgresStore initializing: {}", mask_dsn(dsn))

    def _get_pool(self) -> ThreadedConnectionPool:
        with self._lock:
            if self._pool is None:
                try:
                    self._pool = ThreadedConnectionPool(
                        self._minconn,
                        self._maxconn,
                        self.dsn,
                        connect_timeout=DB_CONNECT_TIMEOUT,
                        # % compares against this session setting
                        options=f"-c pg_trgm.similarity_threshold={self.threshold}",
                    )
                except psycopg2.OperationalError as e:
                    raise StoreUnavailableError(f"Cannot connect to {mask_dsn(self.dsn)}: {e}") from e
            return self._pool

    def execute(self, query: str, params: list | None = None) -> QueryResult:
        pool = self._get_pool()
        try:
            conn = pool.getconn()
        except (psycopg2.OperationalError, PoolError) as e:
            raise StoreUnavailableError(f"No database connection available: {e}") from e

        broken = False
        try:
            with conn.cursor() as cur:
                if params:
                    cur.execute(to_pyformat(query), params)
                else:
                    cur.execute(query)
                rows = cur.fetchall() if cur.description else []
            conn.commit()
            return QueryResult(rows)
        except (psycopg2.OperationalError, psycopg2.InterfaceError) as e:
            broken = True
            raise StoreUnavailableError(f"Postgres store failed: {e}") from e
        except psycopg2.Error:
            conn.rollback()
            raise
        finally:
            pool.putconn(conn, close=broken)

    def trigram_match(self, column: str) -> str:
        return f"{column} % ?"

    def close(self) -> None:
        with self._lock:
            if self._pool is not None:
                self._pool.closeall()
                self._pool = None
                logger.debug("Postgres pool closed")
