"""Tests for aggregate data fetching and its cache."""

import asyncio
from datetime import timedelta

import httpx
import pytest

from census_client.aggregate import AggregateQuery
from census_client.base import _is_retryable_error
from resolver.errors import CacheWriteError, StoreUnavailableError
from resolver.repositories.common import QueryCacheRepository
from resolver.services.aggregate import AggregateDataService, to_cache_query

ROWS = [["NAME", "B01001_001E", "state"], ["Pennsylvania", "12961683", "42"]]


class FakeClient:
    """Stands in for AggregateClient."""

    def __init__(self, rows=ROWS):
        self.rows = rows
        self.calls = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *_):
        return None

    async def fetch(self, query, api_key=None):
        self.calls.append((query, api_key))
        return self.rows


class FailingCache(QueryCacheRepository):
    def set(self, query, rows, ttl):
        raise CacheWriteError("disk full")


class UnreachableCache(QueryCacheRepository):
    def get(self, query):
        raise StoreUnavailableError("cache store down")


def make_query(**overrides) -> AggregateQuery:
    fields = {"dataset": "acs/acs1", "year": 2022, "variables": ["NAME", "B01001_001E"], "for": "state:42"}
    fields.update(overrides)
    return AggregateQuery(**fields)


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def cache(cache_store, clock):
    return QueryCacheRepository(cache_store, clock=clock)


def run_fetch(service, query, api_key=None):
    async def go():
        rows = await service.fetch(query, api_key)
        await service.drain()
        return rows

    return asyncio.run(go())


class TestAggregateQuery:
    def test_params(self):
        query = make_query(group="B01001", **{"in": "us:1"})
        assert query.to_params() == [
            ("get", "NAME,B01001_001E,group(B01001)"),
            ("for", "state:42"),
            ("in", "us:1"),
            ("descriptive", "false"),
        ]

    def test_predicates_follow_geography(self):
        query = make_query(predicates={"AGEGROUP": "29"}, descriptive=True)
        assert query.to_params()[-2:] == [("AGEGROUP", "29"), ("descriptive", "true")]

    def test_requires_variables_or_group(self):
        with pytest.raises(ValueError):
            AggregateQuery(dataset="acs/acs1", year=2022)

    def test_geography(self):
        assert make_query().geography == {"for": "state:42", "in": None, "ucgid": None}

    def test_cache_key(self):
        key = to_cache_query(make_query())
        assert key.dataset == "acs/acs1"
        assert key.variables == ["NAME", "B01001_001E"]
        assert key.fingerprint() == to_cache_query(make_query()).fingerprint()


class TestRetryPolicy:
    def test_network_errors(self):
        assert _is_retryable_error(httpx.ConnectError("refused"))
        assert _is_retryable_error(httpx.ReadTimeout("slow"))

    def test_status_codes(self):
        request = httpx.Request("GET", "https://api.census.gov/data/2022/acs/acs1")
        server = httpx.HTTPStatusError("boom", request=request, response=httpx.Response(503, request=request))
        client = httpx.HTTPStatusError("bad", request=request, response=httpx.Response(400, request=request))
        assert _is_retryable_error(server)
        assert not _is_retryable_error(client)

    def test_other_errors(self):
        assert not _is_retryable_error(ValueError("nope"))


class TestAggregateDataService:
    def test_miss_fetches_and_caches(self, cache, client):
        service = AggregateDataService(cache, client_factory=lambda: client)

        assert run_fetch(service, make_query(), "secret") == ROWS
        assert client.calls[0][1] == "secret"
        assert cache.get(to_cache_query(make_query())) == ROWS

    def test_hit_skips_client(self, cache, client):
        cache.set(to_cache_query(make_query()), ROWS, timedelta(days=1))
        service = AggregateDataService(cache, client_factory=lambda: client)

        assert run_fetch(service, make_query()) == ROWS
        assert client.calls == []

    def test_second_call_served_from_cache(self, cache, client):
        service = AggregateDataService(cache, client_factory=lambda: client)
        run_fetch(service, make_query())
        run_fetch(service, make_query())
        assert len(client.calls) == 1

    def test_expired_entry_refetches(self, cache, client, clock):
        service = AggregateDataService(cache, client_factory=lambda: client, ttl=timedelta(hours=1))
        run_fetch(service, make_query())
        clock.advance(hours=2)
        run_fetch(service, make_query())
        assert len(client.calls) == 2

    def test_failed_write_does_not_fail_request(self, cache_store, clock, client):
        service = AggregateDataService(FailingCache(cache_store, clock=clock), client_factory=lambda: client)

        assert run_fetch(service, make_query()) == ROWS
        assert service.failed_writes == 1

    def test_unreachable_cache_is_a_miss(self, cache_store, client):
        service = AggregateDataService(UnreachableCache(cache_store), client_factory=lambda: client)
        assert run_fetch(service, make_query()) == ROWS
        assert len(client.calls) == 1

    @pytest.mark.parametrize(
        "overrides",
        [{"predicates": {"AGEGROUP": "29"}}, {"descriptive": True}],
    )
    def test_uncacheable_requests_bypass_cache(self, cache, client, overrides):
        service = AggregateDataService(cache, client_factory=lambda: client)
        run_fetch(service, make_query(**overrides))
        run_fetch(service, make_query(**overrides))

        assert len(client.calls) == 2
        assert cache.stats().total_entries == 0
