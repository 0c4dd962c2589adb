"""Summary level model - geography kinds (State, County, ...) with a priority rank."""

SUMMARY_LEVEL_DDL = """
CREATE TABLE IF NOT EXISTS summary_levels (
    id INTEGER PRIMARY KEY,
    code VARCHAR(3) NOT NULL UNIQUE,
    name VARCHAR NOT NULL,
    description VARCHAR,
    get_variable VARCHAR NOT NULL DEFAULT '',
    query_name VARCHAR NOT NULL DEFAULT '',
    on_spine BOOLEAN NOT NULL DEFAULT FALSE,
    parent_summary_level VARCHAR(3),
    hierarchy_level INTEGER DEFAULT 99
)
"""

# Lower rank wins ties between equally similar geographies.
HIERARCHY_LEVELS = {
    "010": 1,  # Nation
    "040": 2,  # State
    "160": 3,  # Place
    "050": 4,  # County
    "060": 5,  # County Subdivision
    "020": 6,  # Region
    "030": 7,  # Division
    "140": 8,  # Census Tract
    "150": 9,  # Block Group
    "860": 10,  # ZIP Code Tabulation Area
}
