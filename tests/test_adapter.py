from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from pystance.adapter import HostAdapter
from pystance.config import StancerConfig
from pystance.exceptions import HostVersionError
from pystance.host import HostCapabilities, check_host_compatibility
from pystance.models.stance import StanceField, StanceParameters
from pystance.panel.input import Key

from conftest import FakeCar, FakeHost, FakeToolkit


def _open_panel(adapter: HostAdapter, host: FakeHost) -> None:
    host.held = {Key.CONTROL, Key.SHIFT, Key.S}
    adapter.update(0.016)
    host.held = set()


# ------------------------------------------------------------------
# Host compatibility
# ------------------------------------------------------------------


def test_host_version_accepted() -> None:
    assert check_host_compatibility(HostCapabilities(patch_version=lambda: 2286)) == 2286


def test_host_version_too_old() -> None:
    with pytest.raises(HostVersionError) as excinfo:
        check_host_compatibility(HostCapabilities(patch_version=lambda: 2000))

    assert excinfo.value.found == 2000
    assert excinfo.value.minimum == 2286


def test_host_without_version_query_rejected() -> None:
    with pytest.raises(HostVersionError):
        check_host_compatibility(HostCapabilities())


def test_start_refuses_old_host(config: StancerConfig) -> None:
    host = FakeHost(build=1000)

    with pytest.raises(HostVersionError):
        HostAdapter.start(config, host.capabilities())


def test_capability_has() -> None:
    caps = HostCapabilities(key_down=lambda key: False)

    assert caps.has("key_down")
    assert not caps.has("set_wheel_visual_offset")
    with pytest.raises(AttributeError):
        caps.has("teleport")


# ------------------------------------------------------------------
# Startup
# ------------------------------------------------------------------


def test_start_loads_presets_and_logs_hint(
    config: StancerConfig,
    preset_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    preset_path.parent.mkdir(parents=True)
    preset_path.write_text(
        json.dumps([{"name": "Saved", "data": StanceParameters().to_json_dict(), "timestamp": 5}]),
        encoding="utf-8",
    )
    host = FakeHost()

    with caplog.at_level(logging.INFO, logger="pystance"):
        adapter = HostAdapter.start(config, host.capabilities())

    assert [p.name for p in adapter.context.repository] == ["Saved"]
    assert adapter.context.car is host.car
    assert "RealTimeStancer v1.0 loaded successfully" in caplog.text
    assert "Press Control+Shift+S to open/close the app" in caplog.text


# ------------------------------------------------------------------
# Frame loop
# ------------------------------------------------------------------


def test_hidden_panel_draws_nothing(config: StancerConfig, toolkit: FakeToolkit) -> None:
    host = FakeHost()
    adapter = HostAdapter.start(config, host.capabilities())

    adapter.update(0.016)
    adapter.draw(toolkit)

    assert adapter.frame is None
    assert toolkit.log == []


def test_shortcut_opens_window(config: StancerConfig, toolkit: FakeToolkit) -> None:
    host = FakeHost()
    adapter = HostAdapter.start(config, host.capabilities())

    _open_panel(adapter, host)
    adapter.draw(toolkit)

    assert toolkit.log[0] == ("begin_window", "RealTimeStancer")
    assert toolkit.log[-1] == ("end_window", None)
    assert ("text", "Real Time Stance Adjuster") in toolkit.log
    assert ("text_disabled", "No presets saved") in toolkit.log
    assert toolkit.windows_open == 0


def test_slider_move_reaches_host_next_update(config: StancerConfig, toolkit: FakeToolkit) -> None:
    host = FakeHost()
    adapter = HostAdapter.start(config, host.capabilities())
    _open_panel(adapter, host)

    toolkit.slider_moves["##wheel_offset1"] = 50.0
    toolkit.slider_moves["##track_width1"] = 10.0
    toolkit.slider_moves["##globalMult"] = 2.0
    adapter.draw(toolkit)
    assert host.offset_calls == 0

    adapter.update(0.016)

    assert adapter.context.store.get(StanceField.WHEEL_OFFSET, 1) == 50.0
    assert host.offsets[0].x == pytest.approx(0.12)


def test_save_load_delete_through_ui(config: StancerConfig, toolkit: FakeToolkit, preset_path: Path) -> None:
    host = FakeHost()
    adapter = HostAdapter.start(config, host.capabilities())
    _open_panel(adapter, host)

    toolkit.slider_moves["##ride_height2"] = -40.0
    toolkit.text_entries["Preset Name"] = "Low"
    toolkit.clicks.add("Save Preset")
    adapter.draw(toolkit)
    adapter.update(0.016)

    assert [p.name for p in adapter.context.repository] == ["Low"]
    assert json.loads(preset_path.read_text(encoding="utf-8"))[0]["data"]["rideHeight"][1] == -40.0
    assert adapter.controller.preset_name == ""

    toolkit.clicks.add("Reset All")
    adapter.draw(toolkit)
    adapter.update(0.016)
    assert adapter.context.store.get(StanceField.RIDE_HEIGHT, 2) == 0.0

    toolkit.clicks.add("Load##1")
    adapter.draw(toolkit)
    adapter.update(0.016)
    assert adapter.context.store.get(StanceField.RIDE_HEIGHT, 2) == -40.0
    assert host.offsets[1].y == pytest.approx(-0.04)

    toolkit.clicks.add("Delete##1")
    adapter.draw(toolkit)
    adapter.update(0.016)
    assert len(adapter.context.repository) == 0
    assert json.loads(preset_path.read_text(encoding="utf-8")) == []


def test_wheel_combo_narrows_scope(config: StancerConfig, toolkit: FakeToolkit) -> None:
    host = FakeHost()
    adapter = HostAdapter.start(config, host.capabilities())
    _open_panel(adapter, host)

    toolkit.combo_moves["##wheelSelect"] = 2
    adapter.draw(toolkit)
    adapter.update(0.016)

    assert adapter.controller.selected_wheel == 2
    toolkit.log.clear()
    adapter.draw(toolkit)
    sliders = [entry[1] for entry in toolkit.log if entry[0] == "slider"]
    assert sliders == ["##wheel_offset2", "##track_width2", "##camber2", "##ride_height2", "##globalMult"]


def test_close_button_hides_panel(config: StancerConfig, toolkit: FakeToolkit) -> None:
    host = FakeHost()
    adapter = HostAdapter.start(config, host.capabilities())
    _open_panel(adapter, host)

    toolkit.clicks.add("Close")
    adapter.draw(toolkit)
    adapter.update(0.016)

    assert adapter.frame is None
    assert not adapter.controller.visible


def test_settings_toggle(config: StancerConfig) -> None:
    host = FakeHost()
    adapter = HostAdapter.start(config, host.capabilities())

    adapter.toggle()
    adapter.update(0.016)

    assert adapter.frame is not None


def test_frames_skipped_until_car_bound(config: StancerConfig, toolkit: FakeToolkit) -> None:
    host = FakeHost(car=None)
    adapter = HostAdapter.start(config, host.capabilities())
    assert adapter.context.car is None

    host.held = {Key.CONTROL, Key.SHIFT, Key.S}
    adapter.update(0.016)
    assert adapter.frame is None
    assert not adapter.controller.visible

    host.car = FakeCar()
    adapter.update(0.016)
    assert adapter.context.car is host.car
    assert host.offset_calls == 4
    assert adapter.frame is None

    host.held = set()
    adapter.update(0.016)
    _open_panel(adapter, host)
    assert adapter.frame is not None


def test_missing_visual_setters_do_not_break_loop(config: StancerConfig, toolkit: FakeToolkit) -> None:
    host = FakeHost()
    caps = host.capabilities(set_wheel_visual_offset=None, set_wheel_visual_camber=None)
    adapter = HostAdapter.start(config, caps)
    _open_panel(adapter, host)

    toolkit.clicks.add("Apply")
    adapter.draw(toolkit)
    adapter.update(0.016)

    assert host.offset_calls == 0
    assert adapter.frame is not None
