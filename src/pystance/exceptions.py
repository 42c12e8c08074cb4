"""Custom exception hierarchy for pystance."""

from __future__ import annotations

from pathlib import Path


class StanceError(Exception):
    """Base exception for all pystance errors."""


class StanceConfigError(StanceError):
    """Invalid or missing configuration."""


class WheelIndexError(StanceError, ValueError):
    """Wheel index outside the valid 1..4 range."""

    def __init__(self, index: object) -> None:
        self.index = index
        super().__init__(f"wheel index must be between 1 and 4, got {index!r}")


class PresetStoreError(StanceError):
    """Reading or writing the preset file failed.

    The repository never raises this past its own boundary; it is kept on
    :attr:`pystance.presets.PresetRepository.last_error` and logged.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class HostError(StanceError):
    """The simulator host is missing something the panel needs."""


class HostVersionError(HostError):
    """Host patch build is older than the minimum supported build.

    This is the only startup-fatal condition; the adapter raises it before
    any per-frame work begins.
    """

    def __init__(self, message: str, *, found: int | None = None, minimum: int = 0) -> None:
        self.found = found
        self.minimum = minimum
        super().__init__(message)
