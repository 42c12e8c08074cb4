"""Push stance parameters to the host's visual wheel setters.

Unit handling lives here and only here: the store keeps millimetres and
degrees, the host wants metres and radians, and the global multiplier is
applied on the way out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pystance._constants import deg_to_rad, mm_to_m
from pystance.host import CarHandle, HostCapabilities, Vec3
from pystance.models.stance import StanceField, StanceParameters, Wheel

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WheelTransform:
    """Host-space values for one wheel."""

    wheel: Wheel
    lateral: float
    """Metres, positive = outward."""
    height: float
    """Metres, negative = lower."""
    camber: float
    """Radians."""

    @property
    def offset(self) -> Vec3:
        return Vec3(self.lateral, self.height, 0.0)


def compute_transform(parameters: StanceParameters, wheel: Wheel) -> WheelTransform:
    multiplier = parameters.global_multiplier
    offset_mm = parameters.get(StanceField.WHEEL_OFFSET, wheel)
    track_mm = parameters.get(StanceField.TRACK_WIDTH, wheel)
    return WheelTransform(
        wheel=wheel,
        lateral=mm_to_m((offset_mm + track_mm) * multiplier),
        height=mm_to_m(parameters.get(StanceField.RIDE_HEIGHT, wheel) * multiplier),
        camber=deg_to_rad(parameters.get(StanceField.CAMBER, wheel) * multiplier),
    )


def compute_transforms(parameters: StanceParameters) -> tuple[WheelTransform, ...]:
    """Map all four wheels; pure, no host access."""
    return tuple(compute_transform(parameters, wheel) for wheel in Wheel)


class StanceApplier:
    """Forward computed transforms to the host, one call pair per wheel."""

    def __init__(self, capabilities: HostCapabilities, *, car_index: int = 0) -> None:
        self._capabilities = capabilities
        self._car_index = car_index

    @property
    def car_index(self) -> int:
        return self._car_index

    def apply(self, parameters: StanceParameters, car: CarHandle | None) -> None:
        """Apply *parameters* to *car*.

        Does nothing until a car with a wheel list is bound. Wheels the car does not expose and
        setters the host does not offer are skipped silently.
        """
        if car is None:
            return

        set_offset = self._capabilities.set_wheel_visual_offset
        set_camber = self._capabilities.set_wheel_visual_camber
        wheels = car.wheels
        if not wheels:
            return
        for transform in compute_transforms(parameters):
            slot = transform.wheel.slot
            if slot >= len(wheels) or wheels[slot] is None:
                continue
            if set_offset is not None:
                set_offset(self._car_index, slot, transform.offset)
            if set_camber is not None:
                set_camber(self._car_index, slot, transform.camber)
            _logger.debug(
                "Applied %s: lateral=%.4f m height=%.4f m camber=%.4f rad",
                transform.wheel.short_name,
                transform.lateral,
                transform.height,
                transform.camber,
            )
