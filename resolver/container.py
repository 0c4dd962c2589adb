"""Dependency Injection container - initialized at app startup."""

from resolver.repositories.common.cache import QueryCacheRepository
from resolver.repositories.data_tables.data_table import DataTableRepository
from resolver.repositories.db import Store, get_cache_store, get_store
from resolver.repositories.geography.geography import GeographyRepository
from resolver.repositories.geography.summary_level import SummaryLevelRepository
from resolver.services.aggregate.service import AggregateDataService
from resolver.services.data_tables.service import DataTableService
from resolver.services.geography.service import GeographyService


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, store: Store | None = None, cache_store: Store | None = None) -> None:
        """Initialize all dependencies. Call once at app startup.

        Stores default to the process-wide ones built from settings.
        """
        if self._initialized:
            return

        self.store = store or get_store()
        self.cache_store = cache_store or get_cache_store()

        # Repositories (singletons)
        self._summary_level_repo = SummaryLevelRepository(self.store)
        self._geography_repo = GeographyRepository(self.store)
        self._data_table_repo = DataTableRepository(self.store)
        self._cache_repo = QueryCacheRepository(self.cache_store)

        # Services (with injected repos)
        self.geography = GeographyService(
            summary_level_repo=self._summary_level_repo,
            geography_repo=self._geography_repo,
        )

        self.data_tables = DataTableService(
            repo=self._data_table_repo,
        )

        self.aggregate = AggregateDataService(
            cache_repo=self._cache_repo,
        )

        self._initialized = True

    def reset(self) -> None:
        """Drop all instances so init() can run again."""
        for name in ("geography", "data_tables", "aggregate", "store", "cache_store"):
            self.__dict__.pop(name, None)
        self._initialized = False


# Global container instance
container = Container()
