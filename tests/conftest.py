"""Shared fixtures: seeded reference stores and a writable cache store."""

import os
from datetime import datetime, timedelta

import pytest

from resolver.models.geography import HIERARCHY_LEVELS
from resolver.repositories.db import DuckDBStore, Store, init_tables

TEST_DATABASE_URL = os.getenv("CENSUS_TEST_DATABASE_URL")

SUMMARY_LEVELS = [
    # id, code, name, hierarchy_level (500 is unranked)
    (id_, code, name, HIERARCHY_LEVELS.get(code))
    for id_, code, name in [
        (1, "010", "Nation"),
        (2, "040", "State"),
        (3, "050", "County"),
        (4, "060", "County Subdivision"),
        (5, "160", "Place"),
        (6, "140", "Census Tract"),
        (7, "500", "Congressional District"),
    ]
]

GEOGRAPHIES = [
    # id, name, summary_level_code, latitude, longitude, for_param, in_param
    (1, "United States", "010", 39.8, -98.6, "us:*", None),
    (2, "Pennsylvania", "040", 40.9, -77.8, "state:42", None),
    (3, "Washington", "040", 47.4, -120.4, "state:53", None),
    (4, "Philadelphia city, Pennsylvania", "160", 40.0, -75.1, "place:60000", "state:42"),
    (5, "Philadelphia County, Pennsylvania", "050", 40.0, -75.1, "county:101", "state:42"),
    (6, "Washington city, District of Columbia", "160", 38.9, -77.0, "place:50000", "state:11"),
    (7, "Washington County, Pennsylvania", "050", 40.2, -80.2, "county:125", "state:42"),
    (8, "Congressional District 3, Pennsylvania", "500", None, None, "congressional district:03", "state:42"),
    (9, "Orphan Place", None, None, None, "place:99999", None),
]

YEARS = [(1, 2019), (2, 2020), (3, 2022)]

DATASETS = [
    # id, dataset_id, dataset_param, year_id
    (1, "ACSDT1Y2019", "acs/acs1", 1),
    (2, "ACSDT1Y2022", "acs/acs1", 3),
    (3, "ACSDT5Y2020", "acs/acs5", 2),
    (4, "PEPPOP", "pep/population", None),
]

LANGUAGE_LABEL = "Nativity by Language Spoken at Home by Ability to Speak English for the Population 5 Years and Over"

DATA_TABLES = [
    (1, "B16005", LANGUAGE_LABEL),
    (2, "B16005D", LANGUAGE_LABEL + " (Asian Alone)"),
    (3, "B01001", "Sex by Age"),
    (4, "B19013", "Median Household Income in the Past 12 Months"),
    (5, "B16001", "Language Spoken at Home by Ability to Speak English for the Population 5 Years and Over"),
]

DATA_TABLE_DATASETS = [
    # id, dataset_id, data_table_id, label
    (1, 1, 1, LANGUAGE_LABEL),
    (2, 2, 1, "  " + LANGUAGE_LABEL.upper().replace(" BY ", "  BY  ") + " "),
    (3, 3, 1, "Nativity by Language Spoken at Home (Five-Year Estimates)"),
    (4, 1, 2, LANGUAGE_LABEL + " (Asian Alone)"),
    (5, 4, 3, "Sex by Age"),
    (6, 1, 3, "Sex By Age"),
    (7, 2, 4, "Median Household Income in the Past 12 Months (in 2022 Inflation-Adjusted Dollars)"),
    (8, 3, 5, "Language Spoken at Home by Ability to Speak English for the Population 5 Years and Over"),
]


def seed_reference_data(store: Store, ranks: dict[str, int] | None = None) -> None:
    ranks = ranks or {}
    for id_, code, name, rank in SUMMARY_LEVELS:
        rank = ranks.get(code, rank)
        store.execute(
            "INSERT INTO summary_levels (id, code, name, description, hierarchy_level) VALUES (?, ?, ?, ?, ?)",
            [id_, code, name, f"{name} summary level", rank],
        )
    for row in GEOGRAPHIES:
        store.execute(
            """
            INSERT INTO geographies (id, name, summary_level_code, latitude, longitude, for_param, in_param)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            list(row),
        )
    for row in YEARS:
        store.execute("INSERT INTO years (id, year) VALUES (?, ?)", list(row))
    for row in DATASETS:
        store.execute("INSERT INTO datasets (id, dataset_id, dataset_param, year_id) VALUES (?, ?, ?, ?)", list(row))
    for row in DATA_TABLES:
        store.execute("INSERT INTO data_tables (id, data_table_id, label) VALUES (?, ?, ?)", list(row))
    for row in DATA_TABLE_DATASETS:
        store.execute(
            "INSERT INTO data_table_datasets (id, dataset_id, data_table_id, label) VALUES (?, ?, ?, ?)",
            list(row),
        )


def _duckdb_store(ranks: dict[str, int] | None = None) -> Store:
    store = DuckDBStore(":memory:", read_only=False)
    init_tables(store)
    seed_reference_data(store, ranks)
    return store


def _postgres_store(ranks: dict[str, int] | None = None) -> Store:
    from resolver.repositories.postgres import PostgresStore

    store = PostgresStore(TEST_DATABASE_URL, minconn=1, maxconn=2)
    store.execute(
        "DROP TABLE IF EXISTS data_table_datasets, data_tables, datasets, years, "
        "geographies, summary_levels, census_data_cache CASCADE"
    )
    init_tables(store)
    seed_reference_data(store, ranks)
    return store


def _open_store(backend: str, ranks: dict[str, int] | None = None) -> Store:
    if backend == "postgres":
        if not TEST_DATABASE_URL:
            pytest.skip("CENSUS_TEST_DATABASE_URL not set")
        return _postgres_store(ranks)
    return _duckdb_store(ranks)


@pytest.fixture(params=["duckdb", "postgres"])
def store(request):
    """Seeded reference store, once per backend."""
    s = _open_store(request.param)
    yield s
    s.close()


@pytest.fixture(params=["duckdb", "postgres"])
def county_first_store(request):
    """Seeded store where County outranks Place."""
    s = _open_store(request.param, ranks={"050": 2, "160": 5})
    yield s
    s.close()


@pytest.fixture
def duckdb_store():
    """Seeded embedded reference store."""
    s = _duckdb_store()
    yield s
    s.close()


class FakeClock:
    """Controllable naive-UTC clock."""

    def __init__(self, now: datetime = datetime(2025, 1, 1, 12, 0, 0)):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache_store():
    """Writable in-memory store holding only the cache table."""
    s = DuckDBStore(":memory:", read_only=False)
    init_tables(s, reference=False, cache=True)
    yield s
    s.close()
