"""Preset model."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import ConfigDict, Field, field_validator, model_validator

from pystance.models._base import EpochSeconds, StanceBaseModel
from pystance.models.stance import StanceParameters


class Preset(StanceBaseModel):
    """A named, timestamped snapshot of stance parameters.

    ``data`` is deep-copied on construction, so a preset built from the
    live parameters never aliases them.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    data: StanceParameters = Field(default_factory=StanceParameters)
    timestamp: EpochSeconds = 0
    """Epoch seconds at save time."""

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        if not value:
            raise ValueError("preset name must be non-empty")
        return value

    @model_validator(mode="before")
    @classmethod
    def _detach_data(cls, values: Any) -> Any:
        if isinstance(values, dict):
            data = values.get("data")
            if isinstance(data, StanceParameters):
                values = {**values, "data": data.clone()}
        return values

    @property
    def saved_at(self) -> datetime:
        """Save time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.timestamp, tz=UTC)
