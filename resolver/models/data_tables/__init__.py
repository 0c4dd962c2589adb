"""Data tables domain - tables, datasets and year vintages."""

from resolver.models.data_tables.data_table import (
    DATA_TABLE_DATASET_DDL,
    DATA_TABLE_DDL,
    DATA_TABLE_INDEXES,
    DATASET_DDL,
    YEAR_DDL,
)
from resolver.models.data_tables.entities import DataTableDataset, DataTableMatch

__all__ = [
    "YEAR_DDL",
    "DATASET_DDL",
    "DATA_TABLE_DDL",
    "DATA_TABLE_DATASET_DDL",
    "DATA_TABLE_INDEXES",
    "DataTableDataset",
    "DataTableMatch",
]
