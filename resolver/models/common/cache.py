"""Query result cache table - upstream API responses keyed by request fingerprint."""

CACHE_DDL = """
CREATE TABLE IF NOT EXISTS census_data_cache (
    request_hash VARCHAR(64) PRIMARY KEY,
    dataset_code VARCHAR NOT NULL,
    group_param VARCHAR,
    year INTEGER NOT NULL,
    variables TEXT[],
    geography_spec TEXT NOT NULL,
    response_data TEXT NOT NULL,
    row_count INTEGER,
    expires_at TIMESTAMP NOT NULL,
    created_at TIMESTAMP NOT NULL,
    last_accessed TIMESTAMP NOT NULL
)
"""

CACHE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_census_data_cache_expires_at ON census_data_cache(expires_at)",
]
