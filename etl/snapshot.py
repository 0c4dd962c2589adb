"""Snapshot builder - copies reference tables into an embedded DuckDB file."""

from pathlib import Path

import duckdb
import polars as pl
from loguru import logger

from resolver.models import REFERENCE_DDL, REFERENCE_INDEXES
from resolver.repositories.db import Store

# Parents before children so foreign keys hold during the copy.
SNAPSHOT_TABLES = {
    "summary_levels": [
        "id",
        "code",
        "name",
        "description",
        "get_variable",
        "query_name",
        "on_spine",
        "parent_summary_level",
        "hierarchy_level",
    ],
    "geographies": ["id", "name", "summary_level_code", "latitude", "longitude", "for_param", "in_param"],
    "years": ["id", "year"],
    "datasets": ["id", "dataset_id", "dataset_param", "year_id"],
    "data_tables": ["id", "data_table_id", "label"],
    "data_table_datasets": ["id", "dataset_id", "data_table_id", "label"],
}


def _copy_table(source: Store, conn: duckdb.DuckDBPyConnection, table: str, columns: list[str]) -> int:
    cols = ", ".join(columns)
    rows = source.execute(f"SELECT {cols} FROM {table} ORDER BY id").fetchall()
    if not rows:
        logger.warning("{}: source table is empty", table)
        return 0

    df = pl.DataFrame(rows, schema=columns, orient="row", infer_schema_length=None)
    conn.register("snapshot_df", df)
    conn.execute(f"INSERT INTO {table} ({cols}) SELECT {cols} FROM snapshot_df")
    conn.unregister("snapshot_df")
    logger.info("{}: {} rows", table, len(rows))
    return len(rows)


def build_snapshot(source: Store, path: str | Path) -> dict[str, int]:
    """Write a fresh snapshot of the reference tables to path.

    An existing file at path is replaced. Returns row counts per table.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.exists():
        logger.info("Replacing existing snapshot {}", path)
        path.unlink()

    conn = duckdb.connect(str(path))
    try:
        for statement in REFERENCE_DDL:
            conn.execute(statement)

        counts = {table: _copy_table(source, conn, table, columns) for table, columns in SNAPSHOT_TABLES.items()}

        for statement in REFERENCE_INDEXES:
            conn.execute(statement)
        conn.execute("CHECKPOINT")
    finally:
        conn.close()

    logger.info("Snapshot written: {} ({} rows)", path, sum(counts.values()))
    return counts
