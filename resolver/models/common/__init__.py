"""Common models - base classes and shared tables."""

from resolver.models.common.base import BaseEntity
from resolver.models.common.cache import CACHE_DDL, CACHE_INDEXES
from resolver.models.common.query import (
    CacheDuration,
    CacheDurationUnit,
    CacheQuery,
    CacheStats,
    normalize_geography,
)

__all__ = [
    "BaseEntity",
    "CACHE_DDL",
    "CACHE_INDEXES",
    "CacheQuery",
    "CacheDuration",
    "CacheDurationUnit",
    "CacheStats",
    "normalize_geography",
]
