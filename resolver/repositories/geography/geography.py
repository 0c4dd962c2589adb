"""Geography repository - fuzzy search of named places."""

from loguru import logger

from resolver.models.geography import GeographyMatch
from resolver.repositories.base import BaseRepository, like_escape
from settings import GEOGRAPHY_LIMIT, UNRANKED_HIERARCHY_LEVEL

_COLUMNS = """
    g.id, g.name, COALESCE(sl.name, '') AS summary_level_name,
    g.latitude, g.longitude, g.for_param, g.in_param
"""


def _to_match(row) -> GeographyMatch:
    return GeographyMatch(
        id=row[0],
        name=row[1],
        summary_level_name=row[2],
        latitude=row[3],
        longitude=row[4],
        for_param=row[5],
        in_param=row[6],
        score=float(row[7]),
    )


class GeographyRepository(BaseRepository):
    """Repository for geography search.

    Candidates pass the trigram test or contain the term as a
    case-insensitive substring; the substring branch catches short or
    unusual terms the trigram test misses.
    """

    def _candidate_filter(self) -> str:
        return f"({self.store.trigram_match('g.name')} OR g.name ILIKE ? ESCAPE '\\')"

    def search(self, term: str, limit: int = GEOGRAPHY_LIMIT) -> list[GeographyMatch]:
        """Search all geographies, boosting high-priority summary levels.

        score = similarity + (1 - hierarchy_level / 100)
        """
        term = (term or "").strip()
        if not term:
            return []

        rows = self.fetchall(
            f"""
            SELECT {_COLUMNS},
                   CAST(similarity(g.name, ?)
                        + (1.0 - CAST(COALESCE(sl.hierarchy_level, {UNRANKED_HIERARCHY_LEVEL}) AS DOUBLE PRECISION) / 100.0)
                        AS DOUBLE PRECISION) AS score
            FROM geographies g
            LEFT JOIN summary_levels sl ON g.summary_level_code = sl.code
            WHERE {self._candidate_filter()}
            ORDER BY score DESC, LENGTH(g.name) ASC, g.name ASC
            LIMIT ?
            """,
            [term, term, f"%{like_escape(term)}%", limit],
        )
        result = [_to_match(r) for r in rows]
        logger.debug("search_geographies({!r}): {} matches", term, len(result))
        return result

    def search_by_summary_level(
        self,
        term: str,
        summary_level_code: str,
        limit: int = GEOGRAPHY_LIMIT,
    ) -> list[GeographyMatch]:
        """Search geographies of one summary level; score is plain similarity."""
        term = (term or "").strip()
        if not term:
            return []

        rows = self.fetchall(
            f"""
            SELECT {_COLUMNS},
                   CAST(similarity(g.name, ?) AS DOUBLE PRECISION) AS score
            FROM geographies g
            LEFT JOIN summary_levels sl ON g.summary_level_code = sl.code
            WHERE g.summary_level_code = ?
              AND {self._candidate_filter()}
            ORDER BY score DESC, LENGTH(g.name) ASC, g.name ASC
            LIMIT ?
            """,
            [term, summary_level_code, term, f"%{like_escape(term)}%", limit],
        )
        result = [_to_match(r) for r in rows]
        logger.debug(
            "search_geographies_by_summary_level({!r}, {}): {} matches",
            term,
            summary_level_code,
            len(result),
        )
        return result
