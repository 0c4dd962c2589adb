"""Aggregate data API schemas."""

from pydantic import BaseModel


class AggregateDataResponse(BaseModel):
    """Aggregate data response: header row plus data rows."""

    dataset: str
    year: int
    headers: list[str]
    rows: list[list[str | None]]
