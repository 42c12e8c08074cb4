"""Per-frame input handed to the panel controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from pystance.panel.actions import Action


class Key(StrEnum):
    """Keyboard keys the panel listens to."""

    CONTROL = "control"
    SHIFT = "shift"
    ALT = "alt"
    S = "s"


@dataclass(frozen=True, slots=True)
class FrameInput:
    """Everything the controller sees for one frame.

    ``actions`` are the interactions collected while drawing the previous
    frame, in the order the widgets were drawn.
    """

    dt: float = 0.0
    keys_down: frozenset[Key] = field(default_factory=frozenset)
    actions: tuple[Action, ...] = ()
