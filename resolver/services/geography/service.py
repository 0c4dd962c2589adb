"""Geography resolution service."""

from loguru import logger

from resolver.models.geography import GeographyMatch, SummaryLevel, SummaryLevelMatch
from resolver.repositories.geography import GeographyRepository, SummaryLevelRepository
from settings import GEOGRAPHY_LIMIT, SUMMARY_LEVEL_LIMIT


class GeographyService:
    """Resolve place names, optionally scoped to a summary level."""

    def __init__(
        self,
        summary_level_repo: SummaryLevelRepository,
        geography_repo: GeographyRepository,
    ):
        self._summary_levels = summary_level_repo
        self._geographies = geography_repo
        logger.debug("GeographyService initialized")

    def list_summary_levels(self) -> list[SummaryLevel]:
        return self._summary_levels.get_all()

    def search_summary_levels(self, query: str, limit: int = SUMMARY_LEVEL_LIMIT) -> list[SummaryLevelMatch]:
        return self._summary_levels.search(query, limit)

    def search(self, term: str, limit: int = GEOGRAPHY_LIMIT) -> list[GeographyMatch]:
        return self._geographies.search(term, limit)

    def search_by_summary_level(self, term: str, code: str, limit: int = GEOGRAPHY_LIMIT) -> list[GeographyMatch]:
        return self._geographies.search_by_summary_level(term, code, limit)

    def resolve(
        self,
        name: str,
        summary_level: str | None = None,
        limit: int = GEOGRAPHY_LIMIT,
    ) -> list[GeographyMatch]:
        """Resolve a place name.

        With a summary level, the best matching level scopes the search; an
        unrecognised level falls back to the unscoped search.
        """
        if summary_level:
            levels = self._summary_levels.search(summary_level, limit=1)
            if levels:
                return self._geographies.search_by_summary_level(name, levels[0].code, limit)
            logger.warning("Unknown summary level {!r}, searching all levels", summary_level)

        return self._geographies.search(name, limit)
