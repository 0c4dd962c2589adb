"""Geography model - named places with coordinates and API query fragments."""

GEOGRAPHY_DDL = """
CREATE TABLE IF NOT EXISTS geographies (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL,
    summary_level_code VARCHAR(3) REFERENCES summary_levels(code),
    latitude DOUBLE PRECISION,
    longitude DOUBLE PRECISION,
    for_param VARCHAR NOT NULL,
    in_param VARCHAR
)
"""

GEOGRAPHY_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_geographies_summary_level ON geographies(summary_level_code)",
    "CREATE INDEX IF NOT EXISTS idx_geographies_name ON geographies(name)",
]
