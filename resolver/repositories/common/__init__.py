"""Common repositories - query result cache."""

from resolver.repositories.common.cache import QueryCacheRepository, utcnow

__all__ = [
    "QueryCacheRepository",
    "utcnow",
]
