"""User actions emitted by panel widgets.

Widgets never touch the store. Drawing a widget yields one of these when
the user interacts with it, and :class:`~pystance.panel.controller.PanelController`
handles it on the next tick.
"""

from __future__ import annotations

from dataclasses import dataclass

from pystance.models.stance import StanceField


@dataclass(frozen=True, slots=True)
class SelectWheel:
    """Pick the slider scope: ``0`` for all wheels, otherwise a wheel index."""

    selection: int


@dataclass(frozen=True, slots=True)
class SetParameter:
    field: StanceField
    wheel: int
    value: float


@dataclass(frozen=True, slots=True)
class ResetParameter:
    field: StanceField
    wheel: int


@dataclass(frozen=True, slots=True)
class SetMultiplier:
    value: float


@dataclass(frozen=True, slots=True)
class EditPresetName:
    text: str


@dataclass(frozen=True, slots=True)
class SavePreset:
    pass


@dataclass(frozen=True, slots=True)
class LoadPreset:
    index: int


@dataclass(frozen=True, slots=True)
class DeletePreset:
    index: int


@dataclass(frozen=True, slots=True)
class ResetAll:
    pass


@dataclass(frozen=True, slots=True)
class ApplyStance:
    pass


@dataclass(frozen=True, slots=True)
class ClosePanel:
    pass


Action = (
    SelectWheel
    | SetParameter
    | ResetParameter
    | SetMultiplier
    | EditPresetName
    | SavePreset
    | LoadPreset
    | DeletePreset
    | ResetAll
    | ApplyStance
    | ClosePanel
)
"""Union of every panel action."""
