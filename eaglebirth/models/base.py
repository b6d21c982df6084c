"""Shared base for request models."""

from typing import Any, Self

import pydantic
from pydantic import BaseModel

from eaglebirth.exceptions import ValidationError


class RequestModel(BaseModel):
    """Wire fields for one API operation.

    Field names match the remote API's snake_case names, so a dump of the
    model is the request body.
    """

    model_config = {"extra": "forbid"}

    @classmethod
    def build(cls, **values: Any) -> Self:
        """Validate values, raising the SDK's ValidationError on failure."""
        try:
            return cls(**values)
        except pydantic.ValidationError as e:
            raise ValidationError(_format_errors(cls.__name__, e)) from e

    def to_fields(self) -> dict[str, Any]:
        """Dump to request fields, leaving out unset (None) values."""
        return self.model_dump(mode="json", exclude_none=True)


def _format_errors(model_name: str, error: pydantic.ValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(part) for part in item['loc']) or model_name}: {item['msg']}"
        for item in error.errors()
    )
    return f"Invalid {model_name}: {details}"
