"""Thin loop between the simulator host callbacks and the panel controller.

The host calls :meth:`HostAdapter.update` and :meth:`HostAdapter.draw`
once per frame, strictly in sequence. ``update`` ticks the controller;
``draw`` replays the resulting frame onto the host UI and queues whatever
the user did for the next ``update``.
"""

from __future__ import annotations

import logging

from pystance._constants import APP_NAME, APP_VERSION_LABEL
from pystance.config import StancerConfig
from pystance.context import StancerContext
from pystance.host import HostCapabilities, check_host_compatibility
from pystance.panel.actions import Action
from pystance.panel.controller import PanelController
from pystance.panel.input import FrameInput
from pystance.panel.widgets import RenderCommand, UiToolkit

_logger = logging.getLogger(__name__)


class HostAdapter:
    """Glue for one panel instance.

    Usage::

        adapter = HostAdapter.start(config, capabilities)
        # every frame, from the host callbacks:
        adapter.update(dt)
        adapter.draw(toolkit)
    """

    def __init__(self, context: StancerContext, controller: PanelController | None = None) -> None:
        self._context = context
        self._controller = controller if controller is not None else PanelController(context)
        self._pending: list[Action] = []
        self._frame: RenderCommand | None = None

    @classmethod
    def start(cls, config: StancerConfig, capabilities: HostCapabilities) -> HostAdapter:
        """Check the host build, load presets and return a ready adapter.

        Raises :class:`pystance.exceptions.HostVersionError` when the host
        is too old; nothing else at startup is fatal.
        """
        check_host_compatibility(capabilities, config.min_host_version)
        context = StancerContext(config, capabilities)
        context.repository.load()
        context.bind_car()
        shortcut = "+".join(key.value.capitalize() for key in config.toggle_keys)
        _logger.info("%s %s loaded successfully", APP_NAME, APP_VERSION_LABEL)
        _logger.info("Press %s to open/close the app", shortcut)
        return cls(context)

    @property
    def context(self) -> StancerContext:
        return self._context

    @property
    def controller(self) -> PanelController:
        return self._controller

    @property
    def frame(self) -> RenderCommand | None:
        """The frame produced by the last update, if the panel is visible."""
        return self._frame

    def update(self, dt: float) -> None:
        """Per-frame update callback.

        Until the car is bound the frame is skipped entirely, input included.
        """
        if self._context.car is None:
            self._frame = None
            if self._context.bind_car() is None:
                return
            # Bound this frame; stance edits made before binding show up now.
            self._context.apply()
            return

        config = self._context.config
        actions, self._pending = tuple(self._pending), []
        frame = FrameInput(
            dt=dt,
            keys_down=self._context.capabilities.keys_down(config.toggle_keys),
            actions=actions,
        )
        self._frame = self._controller.tick(frame)

    def draw(self, toolkit: UiToolkit) -> None:
        """Per-frame draw callback."""
        if self._frame is None:
            return
        self._pending.extend(self._frame.draw(toolkit))

    def toggle(self) -> None:
        """Host settings-button callback."""
        self._controller.toggle()
