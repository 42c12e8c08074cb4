"""Immutable description of one panel frame.

:class:`RenderCommand` is what :meth:`PanelController.tick` returns. It
holds plain data only, so tests can inspect it directly. A host adapter
replays it onto an immediate-mode :class:`UiToolkit` with
:meth:`RenderCommand.draw`, which reports user interactions as
:mod:`pystance.panel.actions` objects.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Protocol

from pystance.models.stance import StanceField
from pystance.panel.actions import Action, EditPresetName, SelectWheel, SetMultiplier, SetParameter

Emit = Callable[[Action], None]


class UiToolkit(Protocol):
    """Immediate-mode UI calls offered by the host."""

    def begin_window(self, title: str, position: tuple[float, float], size: tuple[float, float]) -> None: ...

    def end_window(self) -> None: ...

    def text(self, text: str) -> None: ...

    def text_disabled(self, text: str) -> None: ...

    def separator(self) -> None: ...

    def new_line(self, spacing: float) -> None: ...

    def same_line(self, offset: float, spacing: float) -> None: ...

    def push_item_width(self, width: float) -> None: ...

    def pop_item_width(self) -> None: ...

    def slider(
        self,
        widget_id: str,
        value: float,
        minimum: float,
        maximum: float,
        display_format: str,
        step: float,
    ) -> tuple[bool, float]: ...

    def button(self, label: str, size: tuple[float, float]) -> bool: ...

    def combo(self, widget_id: str, selected: int, options: Sequence[str]) -> tuple[bool, int]: ...

    def input_text(self, label: str, value: str) -> str: ...

    def child_window(self, widget_id: str, size: tuple[float, float], content: Callable[[], None]) -> None: ...


@dataclass(frozen=True, slots=True)
class Text:
    text: str

    def draw(self, toolkit: UiToolkit, emit: Emit) -> None:
        toolkit.text(self.text)


@dataclass(frozen=True, slots=True)
class TextDisabled:
    text: str

    def draw(self, toolkit: UiToolkit, emit: Emit) -> None:
        toolkit.text_disabled(self.text)


@dataclass(frozen=True, slots=True)
class Separator:
    def draw(self, toolkit: UiToolkit, emit: Emit) -> None:
        toolkit.separator()


@dataclass(frozen=True, slots=True)
class Spacing:
    height: float = 5.0

    def draw(self, toolkit: UiToolkit, emit: Emit) -> None:
        toolkit.new_line(self.height)


@dataclass(frozen=True, slots=True)
class SameLine:
    """Keep the next widget on the current line."""

    spacing: float = 10.0

    def draw(self, toolkit: UiToolkit, emit: Emit) -> None:
        toolkit.same_line(0, self.spacing)


@dataclass(frozen=True, slots=True)
class Combo:
    widget_id: str
    selected: int
    options: tuple[str, ...]
    width: float = 150.0

    def changed(self, value: int) -> Action:
        return SelectWheel(value)

    def draw(self, toolkit: UiToolkit, emit: Emit) -> None:
        toolkit.push_item_width(self.width)
        changed, value = toolkit.combo(f"##{self.widget_id}", self.selected, self.options)
        toolkit.pop_item_width()
        if changed:
            emit(self.changed(value))


@dataclass(frozen=True, slots=True)
class Slider:
    """Range control bound to one stance value, or to the multiplier when ``field`` is ``None``."""

    widget_id: str
    value: float
    minimum: float
    maximum: float
    display_format: str
    step: float
    field: StanceField | None = None
    wheel: int | None = None
    width: float = 200.0

    def changed(self, value: float) -> Action:
        if self.field is None or self.wheel is None:
            return SetMultiplier(value)
        return SetParameter(self.field, self.wheel, value)

    def draw(self, toolkit: UiToolkit, emit: Emit) -> None:
        toolkit.push_item_width(self.width)
        changed, value = toolkit.slider(
            f"##{self.widget_id}",
            self.value,
            self.minimum,
            self.maximum,
            self.display_format,
            self.step,
        )
        toolkit.pop_item_width()
        if changed:
            emit(self.changed(value))


@dataclass(frozen=True, slots=True)
class TextInput:
    label: str
    value: str
    width: float = 200.0

    def changed(self, text: str) -> Action:
        return EditPresetName(text)

    def draw(self, toolkit: UiToolkit, emit: Emit) -> None:
        toolkit.push_item_width(self.width)
        text = toolkit.input_text(self.label, self.value)
        toolkit.pop_item_width()
        if text != self.value:
            emit(self.changed(text))


@dataclass(frozen=True, slots=True)
class Button:
    label: str
    action: Action
    widget_id: str = ""
    width: float = 100.0

    @property
    def imgui_label(self) -> str:
        return f"{self.label}##{self.widget_id}" if self.widget_id else self.label

    def draw(self, toolkit: UiToolkit, emit: Emit) -> None:
        if toolkit.button(self.imgui_label, (self.width, 0.0)):
            emit(self.action)


@dataclass(frozen=True, slots=True)
class ChildRegion:
    """Scrollable sub-region."""

    widget_id: str
    size: tuple[float, float]
    children: tuple[Widget, ...]

    def draw(self, toolkit: UiToolkit, emit: Emit) -> None:
        def content() -> None:
            for child in self.children:
                child.draw(toolkit, emit)

        toolkit.child_window(self.widget_id, self.size, content)


Widget = Text | TextDisabled | Separator | Spacing | SameLine | Combo | Slider | TextInput | Button | ChildRegion


@dataclass(frozen=True, slots=True)
class RenderCommand:
    """One frame of the panel window."""

    title: str
    position: tuple[float, float]
    size: tuple[float, float]
    widgets: tuple[Widget, ...]

    def walk(self) -> Iterator[Widget]:
        """Yield every widget depth-first, including those inside child regions."""
        stack = list(reversed(self.widgets))
        while stack:
            widget = stack.pop()
            yield widget
            if isinstance(widget, ChildRegion):
                stack.extend(reversed(widget.children))

    def draw(self, toolkit: UiToolkit) -> list[Action]:
        """Replay this frame onto *toolkit* and return the actions it produced."""
        actions: list[Action] = []
        toolkit.begin_window(self.title, self.position, self.size)
        try:
            for widget in self.widgets:
                widget.draw(toolkit, actions.append)
        finally:
            toolkit.end_window()
        return actions
