"""Data table models - statistical tables, datasets and their join records."""

YEAR_DDL = """
CREATE TABLE IF NOT EXISTS years (
    id INTEGER PRIMARY KEY,
    year INTEGER NOT NULL UNIQUE
)
"""

DATASET_DDL = """
CREATE TABLE IF NOT EXISTS datasets (
    id INTEGER PRIMARY KEY,
    dataset_id VARCHAR NOT NULL UNIQUE,
    dataset_param VARCHAR NOT NULL,
    year_id INTEGER REFERENCES years(id)
)
"""

DATA_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS data_tables (
    id INTEGER PRIMARY KEY,
    data_table_id VARCHAR NOT NULL UNIQUE,
    label VARCHAR NOT NULL
)
"""

# label: the table's label as published in that dataset (may differ from data_tables.label)
DATA_TABLE_DATASET_DDL = """
CREATE TABLE IF NOT EXISTS data_table_datasets (
    id INTEGER PRIMARY KEY,
    dataset_id INTEGER NOT NULL REFERENCES datasets(id),
    data_table_id INTEGER NOT NULL REFERENCES data_tables(id),
    label VARCHAR NOT NULL,
    UNIQUE (dataset_id, data_table_id)
)
"""

DATA_TABLE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_dtd_data_table ON data_table_datasets(data_table_id)",
    "CREATE INDEX IF NOT EXISTS idx_dtd_dataset ON data_table_datasets(dataset_id)",
    "CREATE INDEX IF NOT EXISTS idx_datasets_year ON datasets(year_id)",
]
