"""ETL package - reference snapshot build and validation."""

from etl.snapshot import build_snapshot
from etl.validation import validate_reference_data

__all__ = [
    "build_snapshot",
    "validate_reference_data",
]
