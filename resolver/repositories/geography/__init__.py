"""Geography repositories - summary levels and geographies."""

from resolver.repositories.geography.geography import GeographyRepository
from resolver.repositories.geography.summary_level import SummaryLevelRepository

__all__ = [
    "GeographyRepository",
    "SummaryLevelRepository",
]
