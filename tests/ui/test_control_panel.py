"""Tests for the control panel's action enabling."""

from __future__ import annotations

from chessclock.core.enums import EnginePhase
from chessclock.ui.panels.control_panel import ControlPanel


class TestControlPanel:
    def test_not_started(self, qapp) -> None:
        panel = ControlPanel()
        panel.sync(EnginePhase.NOT_STARTED)
        assert panel._btn_toggle.text() == "Start"
        assert panel._btn_toggle.isEnabled()
        assert not panel._btn_switch.isEnabled()

    def test_running(self, qapp) -> None:
        panel = ControlPanel()
        panel.sync(EnginePhase.RUNNING)
        assert panel._btn_toggle.text() == "Pause"
        assert panel._btn_switch.isEnabled()
        assert panel._btn_finish.isEnabled()

    def test_paused(self, qapp) -> None:
        panel = ControlPanel()
        panel.sync(EnginePhase.PAUSED)
        assert panel._btn_toggle.text() == "Resume"
        assert not panel._btn_switch.isEnabled()

    def test_finished_disables_play_actions(self, qapp) -> None:
        panel = ControlPanel()
        panel.sync(EnginePhase.FINISHED)
        assert not panel._btn_toggle.isEnabled()
        assert not panel._btn_switch.isEnabled()
        assert not panel._btn_finish.isEnabled()
        assert panel._btn_new.isEnabled()
        assert panel._btn_reset.isEnabled()

    def test_buttons_emit_signals(self, qapp) -> None:
        panel = ControlPanel()
        panel.sync(EnginePhase.RUNNING)
        hits: list[str] = []
        panel.switch_clicked.connect(lambda: hits.append("switch"))
        panel.toggle_clicked.connect(lambda: hits.append("toggle"))
        panel._btn_switch.click()
        panel._btn_toggle.click()
        assert hits == ["switch", "toggle"]
