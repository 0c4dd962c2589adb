"""Aggregate data API views - thin layer over services."""

from typing import Any

from census_client.aggregate import AggregateQuery
from resolver.container import container
from settings import API_KEY
from web.api.errors import parse_args

from .schemas import AggregateDataResponse


async def fetch_aggregate_data(
    args: AggregateQuery | dict[str, Any],
    api_key: str | None = API_KEY,
) -> AggregateDataResponse:
    """Fetch a statistical table, served from cache when possible."""
    query = parse_args(AggregateQuery, args)
    data = await container.aggregate.fetch(query, api_key)

    headers, *rows = data or [[]]
    return AggregateDataResponse(dataset=query.dataset, year=query.year, headers=headers, rows=rows)
