"""Geography domain entities - search results."""

from dataclasses import dataclass

from resolver.models.common import BaseEntity


@dataclass
class SummaryLevel(BaseEntity):
    """A geography kind with its priority rank."""

    code: str
    name: str
    description: str | None
    hierarchy_level: int
    parent_code: str | None


@dataclass
class SummaryLevelMatch(BaseEntity):
    """Summary level matched by a free-text or numeric query."""

    code: str
    name: str


@dataclass
class GeographyMatch(BaseEntity):
    """Geography matched by name, with its ranking score."""

    id: int
    name: str
    summary_level_name: str
    latitude: float | None
    longitude: float | None
    for_param: str
    in_param: str | None
    score: float
