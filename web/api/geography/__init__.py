"""Geography API."""

from web.api.geography.views import resolve_geography, search_summary_levels

__all__ = [
    "resolve_geography",
    "search_summary_levels",
]
