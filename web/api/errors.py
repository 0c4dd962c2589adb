"""API errors and validation helpers."""

from typing import Any, TypeVar

import pydantic

ArgsT = TypeVar("ArgsT", bound=pydantic.BaseModel)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


def parse_args(model: type[ArgsT], args: ArgsT | dict[str, Any]) -> ArgsT:
    """Validate a caller-supplied argument bundle."""
    if isinstance(args, model):
        return args
    try:
        return model.model_validate(args)
    except pydantic.ValidationError as e:
        details = "; ".join(err["msg"] for err in e.errors())
        raise ValidationError(f"Invalid arguments for {model.__name__}: {details}") from e
