"""Summary level repository - lookup of geography kinds by code or name."""

from loguru import logger

from resolver.models.geography import SummaryLevel, SummaryLevelMatch
from resolver.repositories.base import BaseRepository
from settings import SUMMARY_LEVEL_LIMIT, UNRANKED_HIERARCHY_LEVEL

EXACT_TIER = 1
FUZZY_TIER = 3


class SummaryLevelRepository(BaseRepository):
    """Repository for summary level data access."""

    def get_all(self) -> list[SummaryLevel]:
        """All summary levels, highest priority first."""
        rows = self.fetchall(
            f"""
            SELECT code, name, description,
                   COALESCE(hierarchy_level, {UNRANKED_HIERARCHY_LEVEL}) AS hierarchy_level,
                   parent_summary_level
            FROM summary_levels
            ORDER BY hierarchy_level ASC, code ASC
            """
        )
        return [SummaryLevel(code=r[0], name=r[1], description=r[2], hierarchy_level=int(r[3]), parent_code=r[4]) for r in rows]

    def search(self, query: str, limit: int = SUMMARY_LEVEL_LIMIT) -> list[SummaryLevelMatch]:
        """Match by zero-padded code, exact name or fuzzy name.

        Exact matches score 1.0 and always precede fuzzy ones, even when a
        fuzzy candidate also scores 1.0.
        """
        term = (query or "").strip().lower()
        if not term:
            return []

        code = term.zfill(3) if term.isdigit() else None
        exact = "(sl.code = ? OR LOWER(sl.name) = ?)"

        rows = self.fetchall(
            f"""
            SELECT sl.code, sl.name,
                   CAST(CASE WHEN {exact} THEN 1.0
                             ELSE similarity(LOWER(sl.name), ?) END AS DOUBLE PRECISION) AS score,
                   CASE WHEN {exact} THEN {EXACT_TIER} ELSE {FUZZY_TIER} END AS tier
            FROM summary_levels sl
            WHERE {exact} OR {self.store.similarity_above("LOWER(sl.name)")}
            ORDER BY score DESC, tier ASC, sl.code ASC
            LIMIT ?
            """,
            [code, term, term, code, term, code, term, term, limit],
        )
        result = [SummaryLevelMatch(code=r[0], name=r[1]) for r in rows]
        logger.debug("search_summary_levels({!r}): {} matches", query, len(result))
        return result
