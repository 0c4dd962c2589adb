"""Aggregate data API client - statistical tables."""

from census_client.aggregate.schemas import AggregateQuery
from census_client.base import BaseClient


class AggregateClient(BaseClient):
    """Client for the aggregate data endpoints."""

    async def fetch(self, query: AggregateQuery, api_key: str | None = None) -> list[list[str]]:
        """GET /data/{year}/{dataset} - header row followed by data rows."""
        params = query.to_params()
        if api_key:
            params.append(("key", api_key))
        return await self._get(f"{query.year}/{query.dataset}", params)
