"""JSON-backed preset repository.

The preset file is a flat, pretty-printed JSON array of
``{"name", "data", "timestamp"}`` objects. List order is save order; it is
also the display order and the 1-based addressing index for
:meth:`PresetRepository.load_preset` and :meth:`PresetRepository.delete_preset`.

Nothing in here raises past the repository boundary for I/O or parse
problems. A missing file reads as empty, a malformed one reads as empty with
a warning, and failed writes are logged while the in-memory change stands.
"""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Callable, Iterator
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pystance._constants import PRESET_NAME_PREFIX, PRESET_NAME_TIME_FORMAT
from pystance.exceptions import PresetStoreError
from pystance.models.preset import Preset
from pystance.models.stance import StanceParameters

_logger = logging.getLogger(__name__)


def _localnow() -> datetime:
    return datetime.now().astimezone()


def default_preset_name(now: datetime) -> str:
    """Synthesized name for an unnamed preset, e.g. ``Preset_20260101_120000``."""
    return PRESET_NAME_PREFIX + now.strftime(PRESET_NAME_TIME_FORMAT)


class PresetRepository:
    """Ordered, file-backed list of :class:`Preset` snapshots.

    Parameters
    ----------
    path : Path
        Backing JSON file. Its parent directory is created on first write.
    clock : callable, optional
        Returns the current local time. Used for synthesized names and
        save timestamps. Defaults to the system clock.
    """

    def __init__(self, path: Path | str, *, clock: Callable[[], datetime] | None = None) -> None:
        self._path = Path(path)
        self._clock = clock or _localnow
        self._presets: list[Preset] = []
        self.last_error: PresetStoreError | None = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def presets(self) -> tuple[Preset, ...]:
        """Copies of the stored presets, in save order."""
        return copy.deepcopy(tuple(self._presets))

    def __len__(self) -> int:
        return len(self._presets)

    def __iter__(self) -> Iterator[Preset]:
        return iter(self.presets)

    def get(self, index: int) -> Preset | None:
        """Return a copy of the preset at 1-based *index*, or ``None`` when out of range."""
        preset = self._at(index)
        return copy.deepcopy(preset) if preset is not None else None

    def _at(self, index: int) -> Preset | None:
        if isinstance(index, bool) or not isinstance(index, int):
            return None
        if not 1 <= index <= len(self._presets):
            return None
        return self._presets[index - 1]

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Replace the in-memory list with the contents of the backing file."""
        self._presets = []
        self.last_error = None
        if not self._path.exists():
            _logger.debug("No preset file at %s", self._path)
            return

        try:
            content = self._path.read_text(encoding="utf-8")
            payload = json.loads(content)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as err:
            self.last_error = PresetStoreError(f"Could not read presets: {err}", path=self._path)
            _logger.warning("Ignoring unreadable preset file %s: %s", self._path, err)
            return

        if not isinstance(payload, list):
            self.last_error = PresetStoreError("Preset file is not a JSON list", path=self._path)
            _logger.warning("Ignoring preset file %s: expected a JSON list, got %s", self._path, type(payload).__name__)
            return

        self._presets = self._parse_entries(payload)
        _logger.info("Loaded %d presets", len(self._presets))

    def _parse_entries(self, payload: list[Any]) -> list[Preset]:
        presets: list[Preset] = []
        for position, entry in enumerate(payload, start=1):
            try:
                presets.append(Preset.model_validate(entry))
            except ValidationError as err:
                _logger.warning(
                    "Skipping invalid preset #%d in %s: %d validation error(s)",
                    position,
                    self._path,
                    err.error_count(),
                )
        return presets

    def _write(self) -> bool:
        payload = [preset.to_json_dict() for preset in self._presets]
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as err:
            self.last_error = PresetStoreError(f"Could not write presets: {err}", path=self._path)
            _logger.error("Failed to save presets to %s: %s", self._path, err)
            return False
        self.last_error = None
        _logger.info("Saved %d presets", len(self._presets))
        return True

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def save(self, name: str, current: StanceParameters) -> Preset:
        """Append a snapshot of *current* and persist the whole list.

        An empty *name* is replaced by ``Preset_<YYYYMMDD_HHMMSS>``.
        """
        now = self._clock()
        name = name or default_preset_name(now)
        preset = Preset(name=name, data=current.clone(), timestamp=int(now.timestamp()))
        self._presets.append(preset)
        self._write()
        _logger.info("Saved preset '%s'", name)
        return copy.deepcopy(preset)

    def load_preset(self, index: int) -> StanceParameters | None:
        """Return a copy of the parameters stored at 1-based *index*.

        Out-of-range indices return ``None``. Installing the copy and
        re-applying it is the caller's job.
        """
        preset = self._at(index)
        if preset is None:
            return None
        _logger.info("Loaded preset '%s'", preset.name)
        return preset.data.clone()

    def delete_preset(self, index: int) -> Preset | None:
        """Remove the preset at 1-based *index* and persist immediately.

        Later presets shift down by one. Out-of-range indices are a no-op.
        """
        preset = self._at(index)
        if preset is None:
            return None
        del self._presets[index - 1]
        self._write()
        _logger.info("Deleted preset '%s'", preset.name)
        return preset
