"""Models package - DDL and entities for all domains."""

from resolver.models.common import (
    CACHE_DDL,
    CACHE_INDEXES,
    BaseEntity,
    CacheDuration,
    CacheDurationUnit,
    CacheQuery,
    CacheStats,
)
from resolver.models.data_tables import (
    DATA_TABLE_DATASET_DDL,
    DATA_TABLE_DDL,
    DATA_TABLE_INDEXES,
    DATASET_DDL,
    YEAR_DDL,
    DataTableDataset,
    DataTableMatch,
)
from resolver.models.geography import (
    GEOGRAPHY_DDL,
    GEOGRAPHY_INDEXES,
    HIERARCHY_LEVELS,
    SUMMARY_LEVEL_DDL,
    GeographyMatch,
    SummaryLevel,
    SummaryLevelMatch,
)

REFERENCE_DDL = [
    # Geography
    SUMMARY_LEVEL_DDL,
    GEOGRAPHY_DDL,
    # Data tables
    YEAR_DDL,
    DATASET_DDL,
    DATA_TABLE_DDL,
    DATA_TABLE_DATASET_DDL,
]

REFERENCE_INDEXES = GEOGRAPHY_INDEXES + DATA_TABLE_INDEXES

# Server store only: native trigram operator and GIN indexes backing it.
POSTGRES_TRIGRAM_DDL = [
    "CREATE EXTENSION IF NOT EXISTS pg_trgm",
    "CREATE INDEX IF NOT EXISTS idx_summary_levels_name_trgm ON summary_levels USING gin (name gin_trgm_ops)",
    "CREATE INDEX IF NOT EXISTS idx_geographies_name_trgm ON geographies USING gin (name gin_trgm_ops)",
    "CREATE INDEX IF NOT EXISTS idx_data_tables_label_trgm ON data_tables USING gin (label gin_trgm_ops)",
    "CREATE INDEX IF NOT EXISTS idx_dtd_label_trgm ON data_table_datasets USING gin (label gin_trgm_ops)",
]

__all__ = [
    # Common
    "BaseEntity",
    "CACHE_DDL",
    "CACHE_INDEXES",
    "CacheQuery",
    "CacheDuration",
    "CacheDurationUnit",
    "CacheStats",
    # Geography
    "SUMMARY_LEVEL_DDL",
    "GEOGRAPHY_DDL",
    "GEOGRAPHY_INDEXES",
    "HIERARCHY_LEVELS",
    "SummaryLevel",
    "SummaryLevelMatch",
    "GeographyMatch",
    # Data tables
    "YEAR_DDL",
    "DATASET_DDL",
    "DATA_TABLE_DDL",
    "DATA_TABLE_DATASET_DDL",
    "DATA_TABLE_INDEXES",
    "DataTableDataset",
    "DataTableMatch",
    # Schema sets
    "REFERENCE_DDL",
    "REFERENCE_INDEXES",
    "POSTGRES_TRIGRAM_DDL",
]
