"""Census data API client package."""

from census_client.aggregate import AggregateClient, AggregateQuery
from census_client.base import BaseClient

__all__ = [
    # Base
    "BaseClient",
    # Clients
    "AggregateClient",
    "AggregateQuery",
]
