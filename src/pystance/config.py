"""Panel configuration for pystance."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pystance._constants import DEFAULT_PRESET_FILENAME, MIN_HOST_VERSION
from pystance.exceptions import StanceConfigError
from pystance.panel.input import Key


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    raise StanceConfigError(f"not a boolean: {value!r}")


def _to_pair(value: Any) -> tuple[float, float]:
    if isinstance(value, str):
        value = [part for part in value.replace(",", " ").split() if part]
    try:
        x, y = (float(part) for part in value)
    except (TypeError, ValueError) as err:
        raise StanceConfigError(f"expected two numbers, got {value!r}") from err
    return (x, y)


def _to_key(value: Any) -> Key:
    try:
        return Key(str(value).strip().lower())
    except ValueError as err:
        raise StanceConfigError(f"unknown key: {value!r}") from err


def _to_keys(value: Any) -> tuple[Key, ...]:
    if isinstance(value, str):
        value = [part for part in value.replace("+", " ").replace(",", " ").split() if part]
    return tuple(_to_key(part) for part in value)


@dataclasses.dataclass(frozen=True)
class StancerConfig:
    """Panel configuration.

    Parameters
    ----------
    preset_file : Path
        JSON file holding saved presets.
    car_index : int
        Host car the stance is applied to. ``0`` is the player car.
    clamp_values : bool
        Clamp every stored value to its slider range. Off by default, so
        values from presets are kept as written.
    min_host_version : int
        Oldest host patch build the adapter accepts.
    window_position : tuple[float, float]
        Initial panel position in pixels.
    window_size : tuple[float, float]
        Panel size in pixels.
    toggle_modifiers : tuple[Key, ...]
        Keys that must be held for the toggle shortcut.
    toggle_key : Key
        Key whose press toggles the panel while the modifiers are held.
    """

    preset_file: Path = Path(DEFAULT_PRESET_FILENAME)
    car_index: int = 0
    clamp_values: bool = False
    min_host_version: int = MIN_HOST_VERSION
    window_position: tuple[float, float] = (50.0, 50.0)
    window_size: tuple[float, float] = (420.0, 600.0)
    toggle_modifiers: tuple[Key, ...] = (Key.CONTROL, Key.SHIFT)
    toggle_key: Key = Key.S

    def __post_init__(self) -> None:
        if self.car_index < 0:
            raise StanceConfigError(f"car_index must be >= 0, got {self.car_index}")
        if self.toggle_key in self.toggle_modifiers:
            raise StanceConfigError("toggle_key cannot also be a modifier")

    @property
    def toggle_keys(self) -> tuple[Key, ...]:
        """Every key the shortcut involves, modifiers first."""
        return (*self.toggle_modifiers, self.toggle_key)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], **overrides: Any) -> StancerConfig:
        """Create configuration from a host settings mapping.

        Values may be strings (as read from an ini section) or native
        types. Explicit keyword arguments override mapping values.

        Raises :class:`StanceConfigError` for unknown keys or values that
        cannot be converted.
        """
        converters = {
            "preset_file": Path,
            "car_index": int,
            "clamp_values": _to_bool,
            "min_host_version": int,
            "window_position": _to_pair,
            "window_size": _to_pair,
            "toggle_modifiers": _to_keys,
            "toggle_key": _to_key,
        }
        merged = {**dict(mapping), **overrides}
        unknown = set(merged) - set(converters)
        if unknown:
            raise StanceConfigError(f"unknown configuration keys: {', '.join(sorted(unknown))}")

        kwargs: dict[str, Any] = {}
        for key, value in merged.items():
            try:
                kwargs[key] = converters[key](value)
            except (TypeError, ValueError) as err:
                raise StanceConfigError(f"invalid value for {key}: {value!r}") from err
        return cls(**kwargs)
