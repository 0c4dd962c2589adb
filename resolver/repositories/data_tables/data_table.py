"""Data table repository - candidate selection and dataset enrichment."""

from loguru import logger

from resolver.repositories.base import BaseRepository, like_escape


class DataTableRepository(BaseRepository):
    """Repository for data table search."""

    def find_candidates(
        self,
        table_id_prefix: str | None = None,
        label_query: str | None = None,
        dataset_scope: str | None = None,
        limit: int = 20,
    ) -> list[dict]:
        """Select distinct tables matching every provided filter.

        With a dataset scope the label test runs against the per-dataset
        (join record) label, otherwise against the canonical label.
        """
        if dataset_scope:
            source = """
                data_tables dt
                JOIN data_table_datasets dtd ON dtd.data_table_id = dt.id
                JOIN datasets d ON d.id = dtd.dataset_id
            """
            label_column = "dtd.label"
        else:
            source = "data_tables dt"
            label_column = "dt.label"

        select_params: list = []
        where_params: list = []
        conditions = []

        if label_query:
            score = f"MAX(similarity({label_column}, ?))"
            select_params.append(label_query)
        else:
            score = "0.0"

        if table_id_prefix:
            conditions.append("(dt.data_table_id = ? OR dt.data_table_id LIKE ? ESCAPE '\\')")
            where_params += [table_id_prefix, f"{like_escape(table_id_prefix)}%"]

        if dataset_scope:
            conditions.append("(d.dataset_id = ? OR d.dataset_param = ?)")
            where_params += [dataset_scope, dataset_scope]

        if label_query:
            conditions.append(f"({self.store.trigram_match(label_column)} OR {label_column} ILIKE ? ESCAPE '\\')")
            where_params += [label_query, f"%{like_escape(label_query)}%"]

        where = " AND ".join(conditions) if conditions else "TRUE"

        rows = self.fetchall(
            f"""
            SELECT dt.id, dt.data_table_id, dt.label,
                   CAST({score} AS DOUBLE PRECISION) AS score
            FROM {source}
            WHERE {where}
            GROUP BY dt.id, dt.data_table_id, dt.label
            ORDER BY score DESC, dt.data_table_id ASC
            LIMIT ?
            """,
            select_params + where_params + [limit],
        )
        result = [{"id": r[0], "data_table_id": r[1], "label": r[2], "score": float(r[3])} for r in rows]
        logger.debug(
            "find_candidates(prefix={!r}, label={!r}, scope={!r}): {} tables",
            table_id_prefix,
            label_query,
            dataset_scope,
            len(result),
        )
        return result

    def get_dataset_rows(self, table_ids: list[int]) -> list[dict]:
        """Every dataset join row of the given tables, by year ascending."""
        if not table_ids:
            return []

        placeholders = ", ".join("?" for _ in table_ids)
        rows = self.fetchall(
            f"""
            SELECT dtd.data_table_id, d.dataset_id, d.dataset_param, y.year, dtd.label
            FROM data_table_datasets dtd
            JOIN datasets d ON d.id = dtd.dataset_id
            LEFT JOIN years y ON y.id = d.year_id
            WHERE dtd.data_table_id IN ({placeholders})
            ORDER BY dtd.data_table_id, y.year ASC NULLS LAST, d.dataset_id ASC
            """,
            list(table_ids),
        )
        return [
            {
                "table_pk": r[0],
                "dataset_id": r[1],
                "dataset_param": r[2],
                "year": r[3],
                "label": r[4],
            }
            for r in rows
        ]
