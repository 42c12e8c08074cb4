"""Data models for stance parameters and presets."""

from pystance.models._base import EpochSeconds, FiniteFloat, StanceBaseModel, parse_epoch_seconds
from pystance.models.preset import Preset
from pystance.models.stance import StanceField, StanceParameters, Wheel, WheelValues, wheel_from_index

__all__ = [
    "EpochSeconds",
    "FiniteFloat",
    "Preset",
    "StanceBaseModel",
    "StanceField",
    "StanceParameters",
    "Wheel",
    "WheelValues",
    "parse_epoch_seconds",
    "wheel_from_index",
]
