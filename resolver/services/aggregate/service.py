"""Aggregate data service - upstream fetches gated by the query cache."""

import asyncio
from collections.abc import Callable
from datetime import timedelta

from loguru import logger

from census_client.aggregate import AggregateClient, AggregateQuery
from resolver.errors import StoreUnavailableError
from resolver.models.common import CacheDuration, CacheDurationUnit, CacheQuery
from resolver.repositories.common import QueryCacheRepository

DEFAULT_TTL = CacheDuration(1, CacheDurationUnit.YEAR)


def to_cache_query(query: AggregateQuery) -> CacheQuery:
    """Cache key fields of an upstream request."""
    return CacheQuery(
        dataset=query.dataset,
        group=query.group,
        year=query.year,
        variables=list(query.variables),
        geography=query.geography,
    )


class AggregateDataService:
    """Serve aggregate data from cache, fetching upstream on a miss.

    Fresh results are written back by a detached task: a failed write is
    logged and counted, never raised to the caller.
    """

    def __init__(
        self,
        cache_repo: QueryCacheRepository,
        client_factory: Callable[[], AggregateClient] = AggregateClient,
        ttl: CacheDuration | timedelta = DEFAULT_TTL,
    ):
        self._cache = cache_repo
        self._client_factory = client_factory
        self._ttl = ttl
        self._pending: set[asyncio.Task] = set()
        self.failed_writes = 0
        logger.debug("AggregateDataService initialized (ttl={})", ttl)

    @staticmethod
    def is_cacheable(query: AggregateQuery) -> bool:
        # Predicates and descriptive headers change the response but not the fingerprint.
        return not query.predicates and not query.descriptive

    async def fetch(self, query: AggregateQuery, api_key: str | None = None) -> list[list[str]]:
        """Rows for one request: header row first."""
        cacheable = self.is_cacheable(query)
        key = to_cache_query(query)

        if cacheable:
            cached = await self._read(key)
            if cached is not None:
                logger.info("Retrieving {} {} from cache", query.dataset, query.year)
                return cached

        async with self._client_factory() as client:
            rows = await client.fetch(query, api_key)

        if cacheable:
            self._schedule_write(key, rows)
        return rows

    async def _read(self, key: CacheQuery) -> list[list] | None:
        try:
            return await asyncio.to_thread(self._cache.get, key)
        except StoreUnavailableError as e:
            logger.warning("Cache read skipped: {}", e)
            return None

    def _schedule_write(self, key: CacheQuery, rows: list[list]) -> None:
        task = asyncio.create_task(self._write(key, rows))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _write(self, key: CacheQuery, rows: list[list]) -> None:
        try:
            await asyncio.to_thread(self._cache.set, key, rows, self._ttl)
        except Exception as e:
            self.failed_writes += 1
            logger.error("Cache write failed for {} {}: {}", key.dataset, key.year, e)

    async def drain(self) -> None:
        """Wait for pending cache writes."""
        if self._pending:
            await asyncio.gather(*list(self._pending))
