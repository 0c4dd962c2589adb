"""Repositories package - data access layer for the reference and cache stores."""

from resolver.repositories.base import BaseRepository
from resolver.repositories.common import QueryCacheRepository
from resolver.repositories.data_tables import DataTableRepository
from resolver.repositories.db import (
    DuckDBStore,
    QueryResult,
    Store,
    close_store,
    get_cache_store,
    get_store,
    init_tables,
    reconnect_store,
)
from resolver.repositories.geography import GeographyRepository, SummaryLevelRepository

__all__ = [
    # DB
    "Store",
    "DuckDBStore",
    "QueryResult",
    "get_store",
    "get_cache_store",
    "close_store",
    "reconnect_store",
    "init_tables",
    # Base
    "BaseRepository",
    # Common
    "QueryCacheRepository",
    # Geography
    "SummaryLevelRepository",
    "GeographyRepository",
    # Data tables
    "DataTableRepository",
]
