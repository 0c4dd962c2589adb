"""Aggregate data services."""

from resolver.services.aggregate.service import AggregateDataService, to_cache_query

__all__ = [
    "AggregateDataService",
    "to_cache_query",
]
