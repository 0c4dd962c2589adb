"""Geography domain - summary levels and geographies."""

from resolver.models.geography.entities import GeographyMatch, SummaryLevel, SummaryLevelMatch
from resolver.models.geography.geography import GEOGRAPHY_DDL, GEOGRAPHY_INDEXES
from resolver.models.geography.summary_level import HIERARCHY_LEVELS, SUMMARY_LEVEL_DDL

__all__ = [
    "SUMMARY_LEVEL_DDL",
    "HIERARCHY_LEVELS",
    "GEOGRAPHY_DDL",
    "GEOGRAPHY_INDEXES",
    "SummaryLevel",
    "SummaryLevelMatch",
    "GeographyMatch",
]
