"""Query cache repository - upstream API results keyed by request fingerprint."""

import json
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from loguru import logger

from resolver.errors import CacheWriteError
from resolver.models.common import CacheDuration, CacheQuery, CacheStats
from resolver.repositories.base import BaseRepository
from resolver.repositories.db import Store, get_cache_store


def utcnow() -> datetime:
    """Naive UTC timestamp (cache columns are TIMESTAMP without time zone)."""
    return datetime.now(UTC).replace(tzinfo=None)


class QueryCacheRepository(BaseRepository):
    """Repository for cached upstream responses.

    At most one row exists per fingerprint. Expired rows read as absent
    whether or not purge_expired() has run.
    """

    def __init__(self, store: Store | None = None, clock: Callable[[], datetime] = utcnow):
        super().__init__(store or get_cache_store())
        self._clock = clock

    def get(self, query: CacheQuery) -> list[list] | None:
        """Cached rows for a live entry, else None."""
        key = query.fingerprint()
        row = self.fetchone(
            "SELECT response_data FROM census_data_cache WHERE request_hash = ? AND expires_at > ?",
            [key, self._clock()],
        )
        if row is None:
            logger.debug("Cache miss: {} {}", query.dataset, key[:12])
            return None

        logger.debug("Cache hit: {} {}", query.dataset, key[:12])
        data = row[0]
        return json.loads(data) if isinstance(data, str) else data

    def set(self, query: CacheQuery, rows: list[list], ttl: CacheDuration | timedelta) -> None:
        """Insert or refresh the entry for this query's fingerprint."""
        if isinstance(ttl, CacheDuration):
            ttl = ttl.to_timedelta()

        now = self._clock()
        try:
            self._upsert(query, rows, now, now + ttl)
        except Exception as e:
            raise CacheWriteError(f"Cache write failed for {query.fingerprint()[:12]}: {e}") from e
        logger.debug("Cache saved: {} ({} rows, ttl={})", query.dataset, len(rows), ttl)

    def _upsert(self, query: CacheQuery, rows: list[list], now: datetime, expires_at: datetime) -> None:
        self.execute(
            """
            INSERT INTO census_data_cache (
                request_hash, dataset_code, group_param, year, variables,
                geography_spec, response_data, row_count,
                expires_at, created_at, last_accessed
            )
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT (request_hash) DO UPDATE SET
                response_data = EXCLUDED.response_data,
                row_count = EXCLUDED.row_count,
                expires_at = EXCLUDED.expires_at,
                last_accessed = EXCLUDED.last_accessed
            """,
            [
                query.fingerprint(),
                query.dataset,
                query.group,
                int(query.year),
                list(query.variables),
                query.geography_spec,
                json.dumps(rows),
                len(rows),
                expires_at,
                now,
                now,
            ],
        )

    def purge_expired(self) -> int:
        """Delete expired entries, return how many were removed."""
        rows = self.fetchall(
            "DELETE FROM census_data_cache WHERE expires_at <= ? RETURNING request_hash",
            [self._clock()],
        )
        logger.info("Purged {} expired cache entries", len(rows))
        return len(rows)

    def stats(self) -> CacheStats:
        """Entry counts and the dataset with most cached responses."""
        now = self._clock()
        row = self.fetchone(
            """
            SELECT COUNT(*), SUM(CASE WHEN expires_at <= ? THEN 1 ELSE 0 END)
            FROM census_data_cache
            """,
            [now],
        )
        top = self.fetchone(
            """
            SELECT dataset_code FROM census_data_cache
            GROUP BY dataset_code
            ORDER BY COUNT(*) DESC, dataset_code ASC
            LIMIT 1
            """
        )
        return CacheStats(
            total_entries=int(row[0]),
            expired_entries=int(row[1] or 0),
            most_cached_dataset=top[0] if top else None,
        )
