"""Aggregate data API client."""

from census_client.aggregate.client import AggregateClient
from census_client.aggregate.schemas import AggregateQuery

__all__ = [
    "AggregateClient",
    "AggregateQuery",
]
