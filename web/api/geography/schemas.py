"""Geography API schemas."""

from pydantic import BaseModel, Field


class ResolveGeographyArgs(BaseModel):
    """Arguments of resolve_geography."""

    geography_name: str = Field(min_length=1)
    summary_level: str | None = None
    limit: int = Field(default=10, ge=1, le=100)

    class Config:
        str_strip_whitespace = True


class SearchSummaryLevelsArgs(BaseModel):
    """Arguments of search_summary_levels."""

    query: str = Field(min_length=1)
    limit: int = Field(default=1, ge=1, le=50)

    class Config:
        str_strip_whitespace = True


class GeographyItem(BaseModel):
    """Matched geography."""

    id: int
    name: str
    summary_level_name: str
    latitude: float | None
    longitude: float | None
    for_param: str
    in_param: str | None
    score: float


class ResolveGeographyResponse(BaseModel):
    """Resolve geography response."""

    query: str
    items: list[GeographyItem]


class SummaryLevelItem(BaseModel):
    """Matched summary level."""

    code: str
    name: str


class SummaryLevelsResponse(BaseModel):
    """Summary level search response."""

    query: str
    items: list[SummaryLevelItem]
