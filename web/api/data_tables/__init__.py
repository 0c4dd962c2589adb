"""Data tables API."""

from web.api.data_tables.views import search_data_tables

__all__ = ["search_data_tables"]
