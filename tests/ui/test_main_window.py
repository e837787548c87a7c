"""Tests for MainWindow wiring between widgets, ticker and engine."""

from __future__ import annotations

from datetime import timedelta
from types import SimpleNamespace

import pytest
from PyQt6.QtCore import QEvent, Qt
from PyQt6.QtGui import QKeyEvent

from chessclock.core.enums import ClockStatus, EnginePhase, FinishReason, Player
from chessclock.game.interfaces import TimeControl
from chessclock.game.settings import ClockSettings
from chessclock.ui.dialogs.new_clock_dialog import NewClockDialog
from chessclock.ui.main_window import MainWindow


def _press(window: MainWindow, key: Qt.Key) -> None:
    event = QKeyEvent(QEvent.Type.KeyPress, key, Qt.KeyboardModifier.NoModifier)
    window.keyPressEvent(event)


@pytest.fixture
def window(qapp, fake_time) -> MainWindow:
    return MainWindow(ClockSettings(base_minutes=5, increment_seconds=3), fake_time)


class TestMainWindowClock:
    def test_initial_state(self, window: MainWindow) -> None:
        assert window.engine.phase == EnginePhase.NOT_STARTED
        assert not window.timer_active
        assert "Ready" in window.status_text()

    def test_enter_starts_and_timer_runs(self, window: MainWindow) -> None:
        _press(window, Qt.Key.Key_Return)
        assert window.engine.phase == EnginePhase.RUNNING
        assert window.timer_active

    def test_timer_feeds_elapsed_time(self, window: MainWindow, fake_time) -> None:
        _press(window, Qt.Key.Key_Return)
        fake_time.advance(seconds=10)
        window._on_timer()
        assert window.engine.remaining(Player.ONE) == timedelta(seconds=290)

    def test_space_switches_with_increment(self, window: MainWindow, fake_time) -> None:
        _press(window, Qt.Key.Key_Return)
        fake_time.advance(seconds=10)
        _press(window, Qt.Key.Key_Space)
        assert window.engine.active_player == Player.TWO
        assert window.engine.remaining(Player.ONE) == timedelta(seconds=293)

    def test_space_before_start_does_nothing(self, window: MainWindow) -> None:
        _press(window, Qt.Key.Key_Space)
        assert window.engine.phase == EnginePhase.NOT_STARTED

    def test_pause_stops_timer_and_charges_no_gap(
        self, window: MainWindow, fake_time
    ) -> None:
        _press(window, Qt.Key.Key_Return)
        fake_time.advance(seconds=4)
        _press(window, Qt.Key.Key_Return)
        assert window.engine.phase == EnginePhase.PAUSED
        assert not window.timer_active

        fake_time.advance(seconds=120)
        _press(window, Qt.Key.Key_Return)
        fake_time.advance(seconds=1)
        window._on_timer()
        assert window.engine.remaining(Player.ONE) == timedelta(seconds=295)

    def test_clicking_own_face_ends_move(self, window: MainWindow) -> None:
        _press(window, Qt.Key.Key_Return)
        window._on_face_clicked(Player.TWO)
        assert window.engine.active_player == Player.ONE
        window._on_face_clicked(Player.ONE)
        assert window.engine.active_player == Player.TWO

    def test_flag_fall_finishes_and_stops_timer(self, qapp, fake_time) -> None:
        window = MainWindow(ClockSettings(base_minutes=0.05), fake_time)
        _press(window, Qt.Key.Key_Return)
        fake_time.advance(seconds=5)
        window._on_timer()

        result = window.engine.result
        assert result is not None and result.reason == FinishReason.TIMEOUT
        assert window.engine.status(Player.ONE) == ClockStatus.EXPIRED
        assert not window.timer_active
        assert "wins on time" in window.status_text()

    def test_switch_after_flag_fall_is_ignored(self, qapp, fake_time) -> None:
        window = MainWindow(ClockSettings(base_minutes=0.05), fake_time)
        _press(window, Qt.Key.Key_Return)
        fake_time.advance(seconds=5)
        _press(window, Qt.Key.Key_Space)
        assert window.engine.phase == EnginePhase.FINISHED
        assert window.engine.active_player == Player.ONE

    def test_backspace_finishes(self, window: MainWindow) -> None:
        _press(window, Qt.Key.Key_Return)
        _press(window, Qt.Key.Key_Backspace)
        assert window.engine.phase == EnginePhase.FINISHED
        assert window.status_text() == "Game finished."

    def test_reset_restores_base_time(self, window: MainWindow, fake_time) -> None:
        _press(window, Qt.Key.Key_Return)
        fake_time.advance(seconds=30)
        window._on_timer()
        window._on_reset()
        assert window.engine.phase == EnginePhase.NOT_STARTED
        assert window.engine.remaining(Player.ONE) == timedelta(minutes=5)
        assert not window.timer_active


class TestMainWindowNewClock:
    def test_new_clock_applies_dialog_choice(
        self, window: MainWindow, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        choice = SimpleNamespace(
            time_control=TimeControl(60, delay=2), starting_player=Player.TWO
        )
        monkeypatch.setattr(NewClockDialog, "ask", lambda *args, **kwargs: choice)

        window._on_new_clock()

        assert window.engine.time_control == TimeControl(60, delay=2)
        assert window.engine.active_player == Player.TWO
        assert window.engine.phase == EnginePhase.NOT_STARTED

    def test_cancelled_dialog_leaves_clock_paused(
        self, window: MainWindow, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(NewClockDialog, "ask", lambda *args, **kwargs: None)
        _press(window, Qt.Key.Key_Return)

        window._on_new_clock()

        assert window.engine.phase == EnginePhase.PAUSED
        assert window.engine.time_control == TimeControl(300, 3)
