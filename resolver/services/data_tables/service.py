"""Data table search service."""

from loguru import logger

from resolver.models.data_tables import DataTableDataset, DataTableMatch
from resolver.repositories.data_tables import DataTableRepository
from settings import DATA_TABLE_LIMIT, DATA_TABLE_MAX_LIMIT


def normalize_label(label: str | None) -> str:
    """Case- and whitespace-insensitive form of a label."""
    return " ".join((label or "").split()).lower()


def is_variant_label(label: str | None, canonical: str) -> bool:
    """True when a dataset-specific label differs from the canonical one."""
    return label is not None and normalize_label(label) != normalize_label(canonical)


class DataTableService:
    """Search data tables and fold in the datasets they appear in."""

    def __init__(self, repo: DataTableRepository):
        self._repo = repo
        logger.debug("DataTableService initialized")

    def search(
        self,
        table_id_prefix: str | None = None,
        label_query: str | None = None,
        dataset_scope: str | None = None,
        limit: int = DATA_TABLE_LIMIT,
    ) -> list[DataTableMatch]:
        """Ranked, de-duplicated tables; limit counts tables, not dataset rows."""
        limit = max(1, min(int(limit or DATA_TABLE_LIMIT), DATA_TABLE_MAX_LIMIT))

        candidates = self._repo.find_candidates(
            table_id_prefix=table_id_prefix or None,
            label_query=(label_query or "").strip() or None,
            dataset_scope=dataset_scope or None,
            limit=limit,
        )
        if not candidates:
            return []

        by_pk = {
            c["id"]: DataTableMatch(data_table_id=c["data_table_id"], label=c["label"])
            for c in candidates
        }
        for row in self._repo.get_dataset_rows(list(by_pk)):
            table = by_pk[row["table_pk"]]
            table.datasets.append(
                DataTableDataset(
                    dataset_id=row["dataset_id"],
                    dataset_param=row["dataset_param"],
                    year=row["year"],
                    label=row["label"] if is_variant_label(row["label"], table.label) else None,
                )
            )

        result = [by_pk[c["id"]] for c in candidates]
        logger.info("search_data_tables: {} tables", len(result))
        return result
