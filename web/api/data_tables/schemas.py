"""Data tables API schemas."""

from pydantic import BaseModel, Field, model_serializer, model_validator


class SearchDataTablesArgs(BaseModel):
    """Arguments of search_data_tables - at least one filter is required."""

    data_table_id: str | None = Field(default=None, min_length=1)
    label_query: str | None = Field(default=None, min_length=1)
    dataset_id: str | None = Field(default=None, min_length=1)
    limit: int = Field(default=20, ge=1, le=100)

    class Config:
        str_strip_whitespace = True

    @model_validator(mode="after")
    def _requires_filter(self):
        if self.data_table_id is None and self.label_query is None and self.dataset_id is None:
            raise ValueError(
                "At least one search parameter must be provided: data_table_id, label_query, or dataset_id."
            )
        return self


class DataTableDatasetItem(BaseModel):
    """Dataset a table appears in; label only when it is a variant."""

    dataset_id: str
    dataset_param: str
    year: int | None
    label: str | None = None

    @model_serializer(mode="wrap")
    def _omit_canonical_label(self, handler):
        data = handler(self)
        if self.label is None:
            data.pop("label", None)
        return data


class DataTableItem(BaseModel):
    """Matched data table."""

    data_table_id: str
    label: str
    datasets: list[DataTableDatasetItem]


class SearchDataTablesResponse(BaseModel):
    """Data table search response."""

    items: list[DataTableItem]
