"""Host capability descriptor.

The simulator host is an external collaborator. Instead of probing it for
attributes at call time, everything the panel may use is declared up front
as an optional callable slot on :class:`HostCapabilities`. A slot left as
``None`` means the host build does not offer that entry point and callers
skip it.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Sequence
from typing import Any, Protocol

from pystance._constants import APP_NAME, MIN_HOST_VERSION
from pystance.exceptions import HostVersionError
from pystance.panel.input import Key

_logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class Vec3:
    """Three-component vector in host space (metres)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class CarHandle(Protocol):
    """What the applier needs from a host car object."""

    @property
    def wheels(self) -> Sequence[Any]: ...


@dataclasses.dataclass(frozen=True)
class HostCapabilities:
    """Optional entry points offered by the simulator host.

    Parameters
    ----------
    get_car : callable or None
        ``get_car(car_index)`` returns the car handle or ``None`` while no
        car is loaded.
    set_wheel_visual_offset : callable or None
        ``set_wheel_visual_offset(car_index, wheel_index, offset)`` with a
        zero-based wheel index and a :class:`Vec3` in metres.
    set_wheel_visual_camber : callable or None
        ``set_wheel_visual_camber(car_index, wheel_index, radians)``.
    key_down : callable or None
        ``key_down(key)`` returns whether *key* is currently held.
    patch_version : callable or None
        Returns the host patch build number.
    """

    get_car: Callable[[int], CarHandle | None] | None = None
    set_wheel_visual_offset: Callable[[int, int, Vec3], None] | None = None
    set_wheel_visual_camber: Callable[[int, int, float], None] | None = None
    key_down: Callable[[Key], bool] | None = None
    patch_version: Callable[[], int] | None = None

    def has(self, name: str) -> bool:
        """Whether the capability slot *name* is populated."""
        if name not in {f.name for f in dataclasses.fields(self)}:
            raise AttributeError(f"unknown host capability: {name}")
        return getattr(self, name) is not None

    def keys_down(self, keys: Sequence[Key]) -> frozenset[Key]:
        """Poll *keys* and return the ones currently held."""
        if self.key_down is None:
            return frozenset()
        return frozenset(key for key in keys if self.key_down(key))


def check_host_compatibility(capabilities: HostCapabilities, minimum: int = MIN_HOST_VERSION) -> int:
    """Return the host build, raising :class:`HostVersionError` if it is too old.

    A host that cannot report its build predates the version query itself
    and is rejected as well.
    """
    if capabilities.patch_version is None:
        _logger.error("%s requires host build %d or higher", APP_NAME, minimum)
        raise HostVersionError("Host does not report a patch version", found=None, minimum=minimum)
    found = int(capabilities.patch_version())
    if found < minimum:
        _logger.error("%s requires host build %d or higher. Current: %d", APP_NAME, minimum, found)
        raise HostVersionError(f"Host build {found} is older than {minimum}", found=found, minimum=minimum)
    return found
