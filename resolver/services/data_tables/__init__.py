"""Data table services."""

from resolver.services.data_tables.service import DataTableService, is_variant_label, normalize_label

__all__ = [
    "DataTableService",
    "is_variant_label",
    "normalize_label",
]
