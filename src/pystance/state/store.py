"""Live stance state.

This is the only component allowed to mutate the parameters the panel
edits; presets and the applier only ever see snapshots or read access.
"""

from __future__ import annotations

import logging

from pystance._constants import MULTIPLIER_MAX, MULTIPLIER_MIN, clamp
from pystance.models.stance import StanceField, StanceParameters, Wheel

_logger = logging.getLogger(__name__)


class StanceStore:
    """In-memory holder for the live :class:`StanceParameters`.

    Created with all-zero values and multiplier 1.0. By default values are
    stored as given; the panel's slider ranges are the only bound. With
    ``clamp=True`` every write is clamped to its field range.
    """

    def __init__(self, parameters: StanceParameters | None = None, *, clamp: bool = False) -> None:
        self._parameters = parameters.clone() if parameters is not None else StanceParameters()
        self._clamp = clamp

    @property
    def parameters(self) -> StanceParameters:
        """The live parameters. Callers must not keep references across frames."""
        return self._parameters

    @property
    def clamps_values(self) -> bool:
        return self._clamp

    @property
    def global_multiplier(self) -> float:
        return self._parameters.global_multiplier

    @global_multiplier.setter
    def global_multiplier(self, value: float) -> None:
        value = float(value)
        if self._clamp:
            value = clamp(value, MULTIPLIER_MIN, MULTIPLIER_MAX)
        self._parameters.global_multiplier = value

    def get(self, field: StanceField, wheel: int) -> float:
        return self._parameters.get(field, wheel)

    def set(self, field: StanceField, wheel: int, value: float) -> None:
        """Write one wheel value.

        Raises :class:`pystance.exceptions.WheelIndexError` when *wheel*
        is outside 1..4.
        """
        field = StanceField(field)
        value = float(value)
        if self._clamp:
            value = clamp(value, field.minimum, field.maximum)
        self._parameters.set(field, wheel, value)

    def set_all(self, field: StanceField, value: float) -> None:
        for wheel in Wheel:
            self.set(field, wheel, value)

    def reset(self) -> None:
        """Zero all wheels and restore the multiplier to 1.0."""
        self._parameters.reset()
        _logger.debug("Stance reset to defaults")

    def clone(self) -> StanceParameters:
        """Return an independent deep copy of the live parameters."""
        return self._parameters.clone()

    def install(self, parameters: StanceParameters) -> None:
        """Replace the live parameters with a copy of *parameters*.

        Clamping, when enabled, is applied to the installed copy as well.
        """
        installed = parameters.clone()
        if self._clamp:
            for field in StanceField:
                values = installed.values(field)
                for slot, value in enumerate(values):
                    values[slot] = clamp(value, field.minimum, field.maximum)
            installed.global_multiplier = clamp(installed.global_multiplier, MULTIPLIER_MIN, MULTIPLIER_MAX)
        self._parameters = installed
