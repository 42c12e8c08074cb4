"""Stance parameter model.

Four parallel per-wheel sequences plus a global multiplier. Python lists
are zero-based; wheel index ``i`` (1..4) lives in list slot ``i - 1``.
"""

from __future__ import annotations

import copy
import enum
from enum import StrEnum
from typing import Annotated

from pydantic import ConfigDict, Field

from pystance._constants import MULTIPLIER_DEFAULT, WHEEL_COUNT
from pystance.exceptions import WheelIndexError
from pystance.models._base import FiniteFloat, StanceBaseModel, require_finite

WheelValues = Annotated[list[FiniteFloat], Field(min_length=WHEEL_COUNT, max_length=WHEEL_COUNT)]
"""Exactly four finite numbers, one per wheel."""


def _zeros() -> list[float]:
    return [0.0] * WHEEL_COUNT


class Wheel(enum.IntEnum):
    """Wheel positions addressed by their 1-based index."""

    FRONT_LEFT = 1
    FRONT_RIGHT = 2
    REAR_LEFT = 3
    REAR_RIGHT = 4

    @property
    def label(self) -> str:
        """Long display name, e.g. ``"Front Left"``."""
        return self.name.replace("_", " ").title()

    @property
    def short_name(self) -> str:
        """Two-letter display name, e.g. ``"FL"``."""
        front, side = self.name.split("_")
        return front[0] + side[0]

    @property
    def slot(self) -> int:
        """Zero-based list position (and host wheel index)."""
        return self.value - 1


def wheel_from_index(index: int) -> Wheel:
    """Return the :class:`Wheel` for a 1-based index.

    Raises :class:`WheelIndexError` for anything outside 1..4.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise WheelIndexError(index)
    try:
        return Wheel(index)
    except ValueError:
        raise WheelIndexError(index) from None


class StanceField(StrEnum):
    """The four per-wheel stance parameters."""

    WHEEL_OFFSET = "wheel_offset"
    TRACK_WIDTH = "track_width"
    CAMBER = "camber"
    RIDE_HEIGHT = "ride_height"

    @property
    def label(self) -> str:
        return _FIELD_UI[self][0]

    @property
    def minimum(self) -> float:
        return _FIELD_UI[self][1]

    @property
    def maximum(self) -> float:
        return _FIELD_UI[self][2]

    @property
    def display_format(self) -> str:
        return _FIELD_UI[self][3]

    @property
    def step(self) -> float:
        return _FIELD_UI[self][4]


# label, min, max, format, step
_FIELD_UI: dict[StanceField, tuple[str, float, float, str, float]] = {
    StanceField.WHEEL_OFFSET: ("Offset", -100.0, 100.0, "%.0f mm", 1.0),
    StanceField.TRACK_WIDTH: ("Track Width", -50.0, 50.0, "%.0f mm", 1.0),
    StanceField.CAMBER: ("Camber", -10.0, 10.0, "%.1f°", 0.1),
    StanceField.RIDE_HEIGHT: ("Ride Height", -100.0, 50.0, "%.0f mm", 1.0),
}


class StanceParameters(StanceBaseModel):
    """Per-wheel stance values and the global multiplier.

    Parameters
    ----------
    wheel_offset : list[float]
        Lateral displacement in mm, positive = outward.
    track_width : list[float]
        Extra lateral displacement in mm.
    camber : list[float]
        Rotation about the longitudinal axis in degrees.
    ride_height : list[float]
        Vertical displacement in mm, negative = lower.
    global_multiplier : float
        Scales every value before it reaches the host.
    """

    model_config = ConfigDict(validate_assignment=True)

    wheel_offset: WheelValues = Field(default_factory=_zeros)
    track_width: WheelValues = Field(default_factory=_zeros)
    camber: WheelValues = Field(default_factory=_zeros)
    ride_height: WheelValues = Field(default_factory=_zeros)
    global_multiplier: FiniteFloat = MULTIPLIER_DEFAULT

    def values(self, field: StanceField) -> list[float]:
        """Return the live list backing *field*."""
        return getattr(self, StanceField(field).value)

    def get(self, field: StanceField, wheel: int) -> float:
        return self.values(field)[wheel_from_index(wheel).slot]

    def set(self, field: StanceField, wheel: int, value: float) -> None:
        # In-place list writes bypass validate_assignment; check here instead.
        slot = wheel_from_index(wheel).slot
        self.values(field)[slot] = require_finite(float(value))

    def reset(self) -> None:
        """Zero every wheel value and restore the multiplier to 1.0."""
        for field in StanceField:
            values = self.values(field)
            for slot in range(WHEEL_COUNT):
                values[slot] = 0.0
        self.global_multiplier = MULTIPLIER_DEFAULT

    def clone(self) -> StanceParameters:
        """Return a deep copy sharing no mutable state with this instance."""
        return copy.deepcopy(self)
