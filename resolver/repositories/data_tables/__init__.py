"""Data table repositories."""

from resolver.repositories.data_tables.data_table import DataTableRepository

__all__ = [
    "DataTableRepository",
]
