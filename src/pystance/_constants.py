"""Internal constants shared across the library."""

from __future__ import annotations

import math

APP_NAME = "RealTimeStancer"
APP_TITLE = "Real Time Stance Adjuster"
APP_VERSION_LABEL = "v1.0"
WHEEL_COUNT = 4

#: Host patch build matching the 0.1.80 release, the first one exposing
#: the visual wheel offset/camber setters.
MIN_HOST_VERSION = 2286

DEFAULT_PRESET_FILENAME = "config_presets.json"
PRESET_NAME_PREFIX = "Preset_"
PRESET_NAME_TIME_FORMAT = "%Y%m%d_%H%M%S"

MULTIPLIER_MIN = 0.0
MULTIPLIER_MAX = 2.0
MULTIPLIER_DEFAULT = 1.0

# ------------------------------------------------------------------
# Unit conversion
# ------------------------------------------------------------------

_MM_PER_M = 1000.0


def mm_to_m(value_mm: float) -> float:
    """Convert millimetres to metres."""
    return value_mm / _MM_PER_M


def deg_to_rad(value_deg: float) -> float:
    """Convert degrees to radians."""
    return math.radians(value_deg)


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp *value* into ``[minimum, maximum]``."""
    return max(minimum, min(maximum, value))
