"""Geography API views - thin layer over services."""

from typing import Any

from resolver.container import container
from web.api.errors import parse_args

from .schemas import (
    GeographyItem,
    ResolveGeographyArgs,
    ResolveGeographyResponse,
    SearchSummaryLevelsArgs,
    SummaryLevelItem,
    SummaryLevelsResponse,
)


def resolve_geography(args: ResolveGeographyArgs | dict[str, Any]) -> ResolveGeographyResponse:
    """Resolve a place name to ranked geographies."""
    args = parse_args(ResolveGeographyArgs, args)
    data = container.geography.resolve(args.geography_name, args.summary_level, args.limit)

    items = [GeographyItem(**g.to_dict()) for g in data]
    return ResolveGeographyResponse(query=args.geography_name, items=items)


def search_summary_levels(args: SearchSummaryLevelsArgs | dict[str, Any]) -> SummaryLevelsResponse:
    """Match a summary level by code or name."""
    args = parse_args(SearchSummaryLevelsArgs, args)
    data = container.geography.search_summary_levels(args.query, args.limit)

    items = [SummaryLevelItem(code=s.code, name=s.name) for s in data]
    return SummaryLevelsResponse(query=args.query, items=items)
