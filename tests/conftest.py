from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import pytest

from pystance.config import StancerConfig
from pystance.context import StancerContext
from pystance.host import HostCapabilities, Vec3
from pystance.panel.input import Key
from pystance.presets import PresetRepository

_TZ = timezone(timedelta(hours=2))


@dataclass
class FakeCar:
    wheels: list[Any] = field(default_factory=lambda: ["FL", "FR", "RL", "RR"])


@dataclass
class FakeHost:
    """Records every call the applier makes into the host."""

    car: FakeCar | None = field(default_factory=FakeCar)
    build: int = 3000
    held: set[Key] = field(default_factory=set)
    offsets: dict[int, Vec3] = field(default_factory=dict)
    cambers: dict[int, float] = field(default_factory=dict)
    offset_calls: int = 0
    camber_calls: int = 0

    def get_car(self, index: int) -> FakeCar | None:
        return self.car if index == 0 else None

    def set_wheel_visual_offset(self, car_index: int, wheel: int, offset: Vec3) -> None:
        assert car_index == 0
        self.offset_calls += 1
        self.offsets[wheel] = offset

    def set_wheel_visual_camber(self, car_index: int, wheel: int, radians: float) -> None:
        assert car_index == 0
        self.camber_calls += 1
        self.cambers[wheel] = radians

    def key_down(self, key: Key) -> bool:
        return key in self.held

    def capabilities(self, **overrides: Any) -> HostCapabilities:
        slots: dict[str, Any] = {
            "get_car": self.get_car,
            "set_wheel_visual_offset": self.set_wheel_visual_offset,
            "set_wheel_visual_camber": self.set_wheel_visual_camber,
            "key_down": self.key_down,
            "patch_version": lambda: self.build,
        }
        slots.update(overrides)
        return HostCapabilities(**slots)


@dataclass
class FakeToolkit:
    """Immediate-mode toolkit double.

    Interactions are scripted up front by widget id / button label and
    returned the next time that widget is drawn.
    """

    slider_moves: dict[str, float] = field(default_factory=dict)
    combo_moves: dict[str, int] = field(default_factory=dict)
    text_entries: dict[str, str] = field(default_factory=dict)
    clicks: set[str] = field(default_factory=set)
    log: list[tuple[str, Any]] = field(default_factory=list)
    windows_open: int = 0

    def begin_window(self, title: str, position: tuple[float, float], size: tuple[float, float]) -> None:
        self.windows_open += 1
        self.log.append(("begin_window", title))

    def end_window(self) -> None:
        self.windows_open -= 1
        self.log.append(("end_window", None))

    def text(self, text: str) -> None:
        self.log.append(("text", text))

    def text_disabled(self, text: str) -> None:
        self.log.append(("text_disabled", text))

    def separator(self) -> None:
        self.log.append(("separator", None))

    def new_line(self, spacing: float) -> None:
        self.log.append(("new_line", spacing))

    def same_line(self, offset: float, spacing: float) -> None:
        self.log.append(("same_line", spacing))

    def push_item_width(self, width: float) -> None:
        pass

    def pop_item_width(self) -> None:
        pass

    def slider(
        self,
        widget_id: str,
        value: float,
        minimum: float,
        maximum: float,
        display_format: str,
        step: float,
    ) -> tuple[bool, float]:
        self.log.append(("slider", widget_id))
        if widget_id in self.slider_moves:
            return True, self.slider_moves.pop(widget_id)
        return False, value

    def button(self, label: str, size: tuple[float, float]) -> bool:
        self.log.append(("button", label))
        if label in self.clicks:
            self.clicks.discard(label)
            return True
        return False

    def combo(self, widget_id: str, selected: int, options: Sequence[str]) -> tuple[bool, int]:
        self.log.append(("combo", widget_id))
        if widget_id in self.combo_moves:
            return True, self.combo_moves.pop(widget_id)
        return False, selected

    def input_text(self, label: str, value: str) -> str:
        self.log.append(("input_text", label))
        return self.text_entries.pop(label, value)

    def child_window(self, widget_id: str, size: tuple[float, float], content: Callable[[], None]) -> None:
        self.log.append(("child_window", widget_id))
        content()


class FixedClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 3, 14, 9, 26, 53, tzinfo=_TZ)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def preset_path(tmp_path: Path) -> Path:
    return tmp_path / "RealTimeStancer" / "config_presets.json"


@pytest.fixture
def repository(preset_path: Path, clock: FixedClock) -> PresetRepository:
    return PresetRepository(preset_path, clock=clock)


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def toolkit() -> FakeToolkit:
    return FakeToolkit()


@pytest.fixture
def config(preset_path: Path) -> StancerConfig:
    return StancerConfig(preset_file=preset_path)


@pytest.fixture
def context(config: StancerConfig, host: FakeHost, clock: FixedClock) -> StancerContext:
    ctx = StancerContext(config, host.capabilities(), clock=clock)
    ctx.bind_car()
    return ctx
