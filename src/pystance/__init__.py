"""pystance - Real-time wheel stance panel and preset store for simulator mods."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pystance")
except PackageNotFoundError:
    __version__ = "0+local"
from pystance.adapter import HostAdapter
from pystance.applier import StanceApplier, WheelTransform, compute_transforms
from pystance.config import StancerConfig
from pystance.context import StancerContext
from pystance.exceptions import (
    HostError,
    HostVersionError,
    PresetStoreError,
    StanceConfigError,
    StanceError,
    WheelIndexError,
)
from pystance.host import HostCapabilities, Vec3, check_host_compatibility
from pystance.models import Preset, StanceField, StanceParameters, Wheel
from pystance.panel.controller import PanelController, PanelState
from pystance.panel.input import FrameInput, Key
from pystance.presets import PresetRepository
from pystance.state.store import StanceStore

__all__ = [
    "__version__",
    "FrameInput",
    "HostAdapter",
    "HostCapabilities",
    "HostError",
    "HostVersionError",
    "Key",
    "PanelController",
    "PanelState",
    "Preset",
    "PresetRepository",
    "PresetStoreError",
    "StanceApplier",
    "StanceConfigError",
    "StanceError",
    "StanceField",
    "StanceParameters",
    "StanceStore",
    "StancerConfig",
    "StancerContext",
    "Vec3",
    "Wheel",
    "WheelIndexError",
    "WheelTransform",
    "check_host_compatibility",
    "compute_transforms",
]
