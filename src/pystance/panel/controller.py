"""Panel state machine and frame composition.

The controller is driven by :meth:`PanelController.tick`, once per frame.
It handles the actions collected while drawing the previous frame, checks
the toggle shortcut, and returns the :class:`RenderCommand` for the current
frame (``None`` while hidden). It never calls into a UI toolkit itself.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import Any

from pystance._constants import APP_NAME, APP_TITLE, MULTIPLIER_MAX, MULTIPLIER_MIN
from pystance.context import StancerContext
from pystance.exceptions import WheelIndexError
from pystance.models.stance import StanceField, Wheel
from pystance.panel.actions import (
    Action,
    ApplyStance,
    ClosePanel,
    DeletePreset,
    EditPresetName,
    LoadPreset,
    ResetAll,
    ResetParameter,
    SavePreset,
    SelectWheel,
    SetMultiplier,
    SetParameter,
)
from pystance.panel.input import FrameInput, Key
from pystance.panel.widgets import (
    Button,
    ChildRegion,
    Combo,
    RenderCommand,
    SameLine,
    Separator,
    Slider,
    Spacing,
    Text,
    TextDisabled,
    TextInput,
    Widget,
)

_logger = logging.getLogger(__name__)

ALL_WHEELS = 0
WHEEL_OPTIONS: tuple[str, ...] = ("All Wheels", *(wheel.label for wheel in Wheel))

_PRESET_LIST_SIZE = (400.0, 150.0)
_SMALL_BUTTON = 50.0


class PanelState(StrEnum):
    HIDDEN = "hidden"
    VISIBLE = "visible"


class PanelController:
    """Hidden/visible panel that edits the live stance.

    Every action that changes the store re-applies the stance right away.
    """

    def __init__(self, context: StancerContext) -> None:
        self._context = context
        self._state = PanelState.HIDDEN
        self._selected_wheel = ALL_WHEELS
        self._preset_name = ""
        self._trigger_was_down = False
        self._handlers: dict[type[Any], Callable[[Any], None]] = {
            SelectWheel: self._on_select_wheel,
            SetParameter: self._on_set_parameter,
            ResetParameter: self._on_reset_parameter,
            SetMultiplier: self._on_set_multiplier,
            EditPresetName: self._on_edit_preset_name,
            SavePreset: self._on_save_preset,
            LoadPreset: self._on_load_preset,
            DeletePreset: self._on_delete_preset,
            ResetAll: self._on_reset_all,
            ApplyStance: self._on_apply,
            ClosePanel: self._on_close,
        }

    @property
    def context(self) -> StancerContext:
        return self._context

    @property
    def state(self) -> PanelState:
        return self._state

    @property
    def visible(self) -> bool:
        return self._state is PanelState.VISIBLE

    @property
    def selected_wheel(self) -> int:
        """``0`` for all wheels, otherwise the 1-based wheel index."""
        return self._selected_wheel

    @property
    def preset_name(self) -> str:
        return self._preset_name

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------

    def toggle(self) -> PanelState:
        """Flip visibility. Also the host's settings-button entry point."""
        self._state = PanelState.HIDDEN if self.visible else PanelState.VISIBLE
        _logger.debug("%s panel %s", APP_NAME, self._state.value)
        return self._state

    def hide(self) -> None:
        if self.visible:
            self.toggle()

    def _check_shortcut(self, keys_down: frozenset[Key]) -> None:
        config = self._context.config
        trigger_down = config.toggle_key in keys_down
        pressed = trigger_down and not self._trigger_was_down
        self._trigger_was_down = trigger_down
        if pressed and all(key in keys_down for key in config.toggle_modifiers):
            self.toggle()

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    def tick(self, frame: FrameInput) -> RenderCommand | None:
        """Advance one frame and return what to draw, or ``None`` while hidden."""
        for action in frame.actions:
            self.dispatch(action)
        self._check_shortcut(frame.keys_down)
        if not self.visible:
            return None
        return self.render()

    def dispatch(self, action: Action) -> None:
        handler = self._handlers.get(type(action))
        if handler is None:
            raise TypeError(f"unsupported panel action: {action!r}")
        handler(action)

    # ------------------------------------------------------------------
    # Action handlers
    # ------------------------------------------------------------------

    def _on_select_wheel(self, action: SelectWheel) -> None:
        if action.selection != ALL_WHEELS and action.selection not in tuple(Wheel):
            raise WheelIndexError(action.selection)
        self._selected_wheel = action.selection

    def _on_set_parameter(self, action: SetParameter) -> None:
        self._context.store.set(action.field, action.wheel, action.value)
        self._context.apply()

    def _on_reset_parameter(self, action: ResetParameter) -> None:
        self._context.store.set(action.field, action.wheel, 0.0)
        self._context.apply()

    def _on_set_multiplier(self, action: SetMultiplier) -> None:
        self._context.store.global_multiplier = action.value
        self._context.apply()

    def _on_edit_preset_name(self, action: EditPresetName) -> None:
        self._preset_name = action.text

    def _on_save_preset(self, action: SavePreset) -> None:
        self._context.save_preset(self._preset_name)
        self._preset_name = ""

    def _on_load_preset(self, action: LoadPreset) -> None:
        self._context.load_preset(action.index)

    def _on_delete_preset(self, action: DeletePreset) -> None:
        self._context.delete_preset(action.index)

    def _on_reset_all(self, action: ResetAll) -> None:
        self._context.reset_stance()

    def _on_apply(self, action: ApplyStance) -> None:
        self._context.apply()

    def _on_close(self, action: ClosePanel) -> None:
        self.hide()

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def _wheel_scope(self) -> tuple[Wheel, ...]:
        if self._selected_wheel == ALL_WHEELS:
            return tuple(Wheel)
        return (Wheel(self._selected_wheel),)

    def _stance_slider(self, field: StanceField, wheel: Wheel) -> list[Widget]:
        widget_id = f"{field.value}{wheel.value}"
        return [
            Text(f"{field.label}:"),
            SameLine(),
            Slider(
                widget_id=widget_id,
                value=self._context.store.get(field, wheel),
                minimum=field.minimum,
                maximum=field.maximum,
                display_format=field.display_format,
                step=field.step,
                field=field,
                wheel=wheel.value,
            ),
            SameLine(),
            Button("Reset", ResetParameter(field, wheel.value), widget_id=widget_id, width=_SMALL_BUTTON),
        ]

    def _preset_rows(self) -> list[Widget]:
        rows: list[Widget] = []
        for index, preset in enumerate(self._context.repository, start=1):
            rows += [
                Text(f"{index}. {preset.name}"),
                SameLine(),
                Button("Load", LoadPreset(index), widget_id=str(index), width=_SMALL_BUTTON),
                SameLine(5.0),
                Button("Delete", DeletePreset(index), widget_id=str(index), width=_SMALL_BUTTON),
            ]
        return rows

    def render(self) -> RenderCommand:
        """Describe the panel for the current state."""
        section_break: list[Widget] = [Spacing(10.0), Separator(), Spacing(5.0)]
        widgets: list[Widget] = [
            Text(APP_TITLE),
            Separator(),
            Spacing(5.0),
            Text("Adjust:"),
            SameLine(),
            Combo("wheelSelect", self._selected_wheel, WHEEL_OPTIONS),
            *section_break,
        ]

        single = self._selected_wheel != ALL_WHEELS
        scope = self._wheel_scope()
        for wheel in scope:
            if single:
                widgets += [Text(f"{wheel.label} ({wheel.short_name})"), Spacing(5.0)]
            for field in StanceField:
                widgets += self._stance_slider(field, wheel)
            if not single and wheel is not scope[-1]:
                widgets.append(Spacing(10.0))

        widgets += section_break
        widgets += [
            Text("Global Multiplier:"),
            SameLine(),
            Slider(
                widget_id="globalMult",
                value=self._context.store.global_multiplier,
                minimum=MULTIPLIER_MIN,
                maximum=MULTIPLIER_MAX,
                display_format="%.2fx",
                step=0.01,
            ),
        ]

        widgets += section_break
        widgets += [
            Text("Presets:"),
            Spacing(5.0),
            TextInput("Preset Name", self._preset_name),
            SameLine(),
            Button("Save Preset", SavePreset()),
            Spacing(5.0),
        ]
        if len(self._context.repository):
            widgets.append(ChildRegion("presetList", _PRESET_LIST_SIZE, tuple(self._preset_rows())))
        else:
            widgets.append(TextDisabled("No presets saved"))

        widgets += section_break
        widgets += [
            Button("Reset All", ResetAll()),
            SameLine(),
            Button("Apply", ApplyStance()),
            SameLine(),
            Button("Close", ClosePanel()),
        ]

        config = self._context.config
        return RenderCommand(
            title=APP_NAME,
            position=config.window_position,
            size=config.window_size,
            widgets=tuple(widgets),
        )
