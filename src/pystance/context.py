"""Process-level context shared by the panel and the host adapter.

One :class:`StancerContext` is created by the entry point and handed by
reference to everything else; there is no module-level state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from pystance.applier import StanceApplier
from pystance.config import StancerConfig
from pystance.host import CarHandle, HostCapabilities
from pystance.models.preset import Preset
from pystance.presets import PresetRepository
from pystance.state.store import StanceStore

_logger = logging.getLogger(__name__)


class StancerContext:
    """Owns the live store, the preset repository, the applier and the car binding."""

    def __init__(
        self,
        config: StancerConfig,
        capabilities: HostCapabilities,
        *,
        store: StanceStore | None = None,
        repository: PresetRepository | None = None,
        applier: StanceApplier | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.config = config
        self.capabilities = capabilities
        self.store = store if store is not None else StanceStore(clamp=config.clamp_values)
        self.repository = repository if repository is not None else PresetRepository(config.preset_file, clock=clock)
        self.applier = applier if applier is not None else StanceApplier(capabilities, car_index=config.car_index)
        self._car: CarHandle | None = None

    # ------------------------------------------------------------------
    # Car binding
    # ------------------------------------------------------------------

    @property
    def car(self) -> CarHandle | None:
        return self._car

    def bind_car(self) -> CarHandle | None:
        """Look the car up if it is not bound yet; return the binding."""
        if self._car is None and self.capabilities.get_car is not None:
            self._car = self.capabilities.get_car(self.config.car_index)
            if self._car is not None:
                _logger.info("Bound to car %d", self.config.car_index)
        return self._car

    # ------------------------------------------------------------------
    # Operations shared by the panel actions
    # ------------------------------------------------------------------

    def apply(self) -> None:
        self.applier.apply(self.store.parameters, self._car)

    def reset_stance(self) -> None:
        self.store.reset()
        self.apply()

    def save_preset(self, name: str) -> Preset:
        return self.repository.save(name, self.store.parameters)

    def load_preset(self, index: int) -> bool:
        """Install preset *index* (1-based) into the store and apply it.

        Returns ``False`` without touching the store when *index* is out of range.
        """
        parameters = self.repository.load_preset(index)
        if parameters is None:
            return False
        self.store.install(parameters)
        self.apply()
        return True

    def delete_preset(self, index: int) -> bool:
        return self.repository.delete_preset(index) is not None
