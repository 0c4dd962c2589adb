"""Reference data validation."""

from resolver.repositories.db import Store


def validate_reference_data(store: Store) -> dict:
    """Validate integrity of the reference tables."""
    issues = []
    stats = {}

    for table in ("summary_levels", "geographies", "datasets", "data_tables", "data_table_datasets"):
        count = store.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
        stats[table] = count
        if count == 0:
            issues.append(f"No rows in {table}")

    orphan_geographies = store.execute(
        """
        SELECT COUNT(*) FROM geographies g
        LEFT JOIN summary_levels sl ON sl.code = g.summary_level_code
        WHERE g.summary_level_code IS NOT NULL AND sl.id IS NULL
        """
    ).fetchone()[0]
    stats["orphan_geographies"] = orphan_geographies
    if orphan_geographies > 0:
        issues.append(f"{orphan_geographies} geographies reference a missing summary level")

    orphan_links = store.execute(
        """
        SELECT COUNT(*) FROM data_table_datasets dtd
        LEFT JOIN data_tables dt ON dt.id = dtd.data_table_id
        LEFT JOIN datasets d ON d.id = dtd.dataset_id
        WHERE dt.id IS NULL OR d.id IS NULL
        """
    ).fetchone()[0]
    stats["orphan_table_links"] = orphan_links
    if orphan_links > 0:
        issues.append(f"{orphan_links} table/dataset links point at missing rows")

    unranked = store.execute("SELECT COUNT(*) FROM summary_levels WHERE hierarchy_level IS NULL").fetchone()[0]
    stats["unranked_summary_levels"] = unranked

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
