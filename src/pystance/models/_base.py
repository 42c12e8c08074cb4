"""Base model and shared field types for persisted stance data.

Every persisted model inherits from :class:`StanceBaseModel` which
provides:

* ``alias_generator=to_camel`` so the camelCase keys of the preset file
  map automatically to snake_case fields.
* ``populate_by_name`` so Python callers can use either spelling.
* A ``model_validator(mode="before")`` that drops ``None`` values so the
  field default is used instead.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

# Threshold to distinguish seconds from milliseconds.
_MS_THRESHOLD = 1_000_000_000_000


def require_finite(value: float) -> float:
    if not math.isfinite(value):
        raise ValueError(f"value must be finite, got {value}")
    return value


FiniteFloat = Annotated[float, AfterValidator(require_finite)]
"""A float that rejects NaN and infinities."""


def parse_epoch_seconds(value: Any) -> Any:
    """Coerce a timestamp (epoch seconds, milliseconds or datetime) to whole seconds.

    Unrecognised values are returned untouched so pydantic reports them.
    """
    if isinstance(value, datetime):
        return int(value.timestamp())
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        ts = int(value)
        if ts >= _MS_THRESHOLD:
            ts //= 1000
        return ts
    return value


EpochSeconds = Annotated[int, BeforeValidator(parse_epoch_seconds)]
"""Annotated type that normalises timestamps to integer epoch seconds."""


class StanceBaseModel(BaseModel):
    """Base for models that round-trip through the preset file."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_none_values(cls, values: Any) -> Any:
        """Drop ``null`` entries so defaults apply."""
        if not isinstance(values, dict):
            return values
        return {key: value for key, value in values.items() if value is not None}

    def to_json_dict(self) -> dict[str, Any]:
        """Return the camelCase dict written to disk."""
        return self.model_dump(mode="json", by_alias=True)
