"""Aggregate data API."""

from web.api.aggregate.views import fetch_aggregate_data

__all__ = ["fetch_aggregate_data"]
