#!/usr/bin/env python3
"""
Build the embedded reference snapshot from the Postgres reference database.

Usage:
    python build_snapshot.py                  # Write to SNAPSHOT_PATH
    python build_snapshot.py out.duckdb       # Write to a specific file
    python build_snapshot.py --validate       # Check snapshot integrity only
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from etl import build_snapshot, validate_reference_data
from resolver.errors import StoreUnavailableError
from resolver.repositories.db import DuckDBStore
from resolver.repositories.postgres import PostgresStore, mask_dsn
from settings import DATABASE_URL, SNAPSHOT_PATH
from settings.logging import setup_logging

logger = setup_logging()


def run_validation(path: str) -> bool:
    """Validate a snapshot file."""
    store = DuckDBStore(path, read_only=True)
    try:
        result = validate_reference_data(store)
    finally:
        store.close()

    print("\n" + "=" * 60)
    print(f"SNAPSHOT VALIDATION REPORT: {path}")
    print("=" * 60)
    for name, value in result["stats"].items():
        print(f"  {name}: {value:,}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")
    print("=" * 60)
    print("✅ Snapshot valid!" if result["valid"] else "❌ Some issues found.")
    print("=" * 60 + "\n")
    return result["valid"]


def main():
    args = sys.argv[1:]
    validate_only = "--validate" in args
    args = [a for a in args if a != "--validate"]

    if len(args) > 1 or any(a.startswith("-") for a in args):
        print(__doc__)
        sys.exit(1)
    path = args[0] if args else SNAPSHOT_PATH

    try:
        if not validate_only:
            if not DATABASE_URL:
                logger.error("DATABASE_URL is not set")
                sys.exit(1)

            logger.info("Building snapshot {} from {}", path, mask_dsn(DATABASE_URL))
            source = PostgresStore(DATABASE_URL)
            try:
                counts = build_snapshot(source, path)
            finally:
                source.close()
            logger.info("Copied: {}", counts)

        logger.info("Running validation...")
        valid = run_validation(path)
    except StoreUnavailableError as e:
        logger.error("{}", e)
        sys.exit(2)

    sys.exit(0 if valid else 1)


if __name__ == "__main__":
    main()
