"""Cache entities - request fingerprint, time-to-live and statistics."""

import hashlib
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from enum import StrEnum
from typing import Any

from resolver.models.common.base import BaseEntity

GEOGRAPHY_KEYS = ("for", "in", "ucgid")


def normalize_geography(geography: Mapping[str, Any] | str | None) -> str:
    """Serialize a geography scope as compact, key-sorted JSON.

    Accepts a mapping ({"for": "state:01", "in": None}) or an already
    serialized JSON object. Missing keys become null so that equivalent
    scopes written differently share one fingerprint.
    """
    if geography is None:
        geography = {}
    elif isinstance(geography, str):
        geography = json.loads(geography)

    spec = {key: geography.get(key) or None for key in GEOGRAPHY_KEYS}
    for key, value in geography.items():
        if key not in spec:
            spec[key] = value
    return json.dumps(spec, sort_keys=True, separators=(",", ":"))


@dataclass
class CacheQuery(BaseEntity):
    """Semantically relevant fields of one upstream data request.

    Variable order is significant: callers wanting ["A", "B"] and ["B", "A"]
    to share an entry must sort before building the query.
    """

    dataset: str
    group: str | None
    year: int
    variables: list[str] = field(default_factory=list)
    geography: Mapping[str, Any] | str | None = None

    @property
    def geography_spec(self) -> str:
        return normalize_geography(self.geography)

    def fingerprint(self) -> str:
        """SHA-256 hex digest of (dataset, group, year, variables, geography)."""
        raw = "|".join(
            [
                self.dataset,
                self.group or "",
                str(self.year),
                ",".join(self.variables),
                self.geography_spec,
            ]
        )
        return hashlib.sha256(raw.encode("utf-8")).hexdigest()


class CacheDurationUnit(StrEnum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"


_UNIT_DELTAS = {
    CacheDurationUnit.YEAR: timedelta(days=365),
    CacheDurationUnit.MONTH: timedelta(days=30),
    CacheDurationUnit.DAY: timedelta(days=1),
    CacheDurationUnit.HOUR: timedelta(hours=1),
}


@dataclass(frozen=True)
class CacheDuration:
    """Time-to-live expressed as n units."""

    n: int
    unit: CacheDurationUnit

    def __post_init__(self):
        if isinstance(self.n, bool) or not isinstance(self.n, int):
            raise ValueError(f"Expected 'n' to be an integer but got {self.n!r}.")
        if self.n <= 0:
            raise ValueError(f"Expected 'n' to be greater than zero but got {self.n}.")
        object.__setattr__(self, "unit", CacheDurationUnit(self.unit))

    def to_timedelta(self) -> timedelta:
        return _UNIT_DELTAS[self.unit] * self.n

    def __str__(self) -> str:
        return f"{self.n} {self.unit}"


@dataclass
class CacheStats(BaseEntity):
    """Cache table summary."""

    total_entries: int
    expired_entries: int
    most_cached_dataset: str | None
