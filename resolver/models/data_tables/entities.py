"""Data table domain entities - search results."""

from dataclasses import dataclass, field
from typing import Any

from resolver.models.common import BaseEntity


@dataclass
class DataTableDataset(BaseEntity):
    """One dataset a table appears in. label is set only for variant labels."""

    dataset_id: str
    dataset_param: str
    year: int | None
    label: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.label is None:
            data.pop("label")
        return data


@dataclass
class DataTableMatch(BaseEntity):
    """Data table with every dataset-year it is published in."""

    data_table_id: str
    label: str
    datasets: list[DataTableDataset] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "data_table_id": self.data_table_id,
            "label": self.label,
            "datasets": [d.to_dict() for d in self.datasets],
        }
