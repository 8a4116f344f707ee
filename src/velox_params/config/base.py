"""Common base for every parameter group."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class ParameterGroup(BaseModel):
    """Immutable record of float parameters, all defaulting to zero.

    Unknown keys are ignored so documents may carry fields newer than this
    schema. Booleans are rejected: YAML reads ``yes``/``on``/``true`` as
    ``True``, which would otherwise slip through as ``1.0``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def reject_booleans(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError(f"expected a number, got boolean {value!r}")
        return value
