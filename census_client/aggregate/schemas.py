"""Aggregate data API schemas - one statistical table request."""

from pydantic import BaseModel, Field, model_validator


class AggregateQuery(BaseModel):
    """Request for /data/{year}/{dataset}."""

    dataset: str = Field(min_length=1)
    year: int = Field(ge=1790)
    variables: list[str] = []
    group: str | None = None
    for_: str | None = Field(alias="for", default=None)
    in_: str | None = Field(alias="in", default=None)
    ucgid: str | None = None
    predicates: dict[str, str] = {}
    descriptive: bool = False

    class Config:
        populate_by_name = True

    @model_validator(mode="after")
    def _requires_get(self):
        if not self.variables and not self.group:
            raise ValueError("At least one of 'variables' or 'group' must be provided.")
        return self

    @property
    def get_param(self) -> str:
        parts = list(self.variables)
        if self.group:
            parts.append(f"group({self.group})")
        return ",".join(parts)

    @property
    def geography(self) -> dict[str, str | None]:
        return {"for": self.for_, "in": self.in_, "ucgid": self.ucgid}

    def to_params(self) -> list[tuple[str, str]]:
        """Query string parameters, in API order (without the key)."""
        params = [("get", self.get_param)]
        for name, value in (("for", self.for_), ("in", self.in_), ("ucgid", self.ucgid)):
            if value:
                params.append((name, value))
        params += list(self.predicates.items())
        params.append(("descriptive", str(self.descriptive).lower()))
        return params
