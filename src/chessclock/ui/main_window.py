"""MainWindow — top-level window assembling the clock UI."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QAction, QCloseEvent, QKeyEvent
from PyQt6.QtWidgets import (
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from chessclock.core.enums import EnginePhase, FinishReason, Player
from chessclock.game.engine import ClockEngine, ClockResult
from chessclock.game.errors import InvalidStateError
from chessclock.game.interfaces import TimeControl
from chessclock.game.settings import ClockSettings
from chessclock.game.ticker import Ticker
from chessclock.ui.dialogs.new_clock_dialog import NewClockDialog
from chessclock.ui.panels.clock_widget import ClockWidget
from chessclock.ui.panels.control_panel import ControlPanel

_LOGGER = logging.getLogger(__name__)

_PHASE_TEXT = {
    EnginePhase.NOT_STARTED: "Ready, press Enter to start",
    EnginePhase.RUNNING: "Running, Space ends the move",
    EnginePhase.PAUSED: "Paused, press Enter to resume",
}


class MainWindow(QMainWindow):
    """Main application window.

    Owns the single :class:`ClockEngine` of the session and drives it from a
    ``QTimer`` through a :class:`Ticker`.  Every user action polls the ticker
    first so the mover is charged up to the exact moment of the action.
    """

    def __init__(
        self,
        settings: ClockSettings | None = None,
        time_source: Callable[[], int] = time.monotonic_ns,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Chess Clock")
        self.setMinimumSize(560, 320)
        self.resize(820, 420)

        self._settings = settings or ClockSettings()
        self._engine = ClockEngine(
            self._settings.to_time_control(), self._settings.starting_player
        )
        self._ticker = Ticker(self._engine, time_source=time_source)

        self._timer = QTimer(self)
        self._timer.setInterval(self._ticker.interval_ms)
        self._timer.timeout.connect(self._on_timer)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._refresh()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(8)

        self._clock_widget = ClockWidget()
        root.addWidget(self._clock_widget, stretch=1)

        self._control_panel = ControlPanel()
        root.addWidget(self._control_panel)

        self._status_label = QLabel()
        status_bar = QStatusBar()
        status_bar.addWidget(self._status_label, stretch=1)
        self.setStatusBar(status_bar)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        if menu_bar is None:
            return
        clock_menu = menu_bar.addMenu("&Clock")
        if clock_menu is None:
            return

        act_new = QAction("&New clock…", self)
        act_new.setShortcut("Ctrl+N")
        act_new.triggered.connect(self._on_new_clock)
        clock_menu.addAction(act_new)

        act_reset = QAction("&Reset", self)
        act_reset.setShortcut("Ctrl+R")
        act_reset.triggered.connect(self._on_reset)
        clock_menu.addAction(act_reset)

        clock_menu.addSeparator()

        act_quit = QAction("&Quit", self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)
        clock_menu.addAction(act_quit)

    def _connect_signals(self) -> None:
        cp = self._control_panel
        cp.new_clock_clicked.connect(self._on_new_clock)
        cp.reset_clicked.connect(self._on_reset)
        cp.toggle_clicked.connect(self._on_toggle)
        cp.switch_clicked.connect(self._on_switch)
        cp.finish_clicked.connect(self._on_finish)
        self._clock_widget.face_clicked.connect(self._on_face_clicked)

        self._engine.events.on_phase_changed.append(self._on_phase_changed)
        self._engine.events.on_flag_fall.append(self._on_flag_fall)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> ClockEngine:
        return self._engine

    @property
    def ticker(self) -> Ticker:
        return self._ticker

    @property
    def timer_active(self) -> bool:
        return self._timer.isActive()

    # ── User actions ─────────────────────────────────────────────────────

    def _on_toggle(self) -> None:
        if self._engine.phase == EnginePhase.FINISHED:
            return
        self._ticker.poll()
        self._run(self._engine.toggle_pause)

    def _on_switch(self) -> None:
        if self._engine.phase != EnginePhase.RUNNING:
            return
        if self._ticker.poll() == EnginePhase.RUNNING:
            self._run(self._engine.switch_turn)

    def _on_face_clicked(self, player: Player) -> None:
        """Tapping your own running clock ends your move."""
        if player == self._engine.active_player:
            self._on_switch()

    def _on_finish(self) -> None:
        self._ticker.poll()
        self._engine.finish()
        self._refresh()

    def _on_reset(self) -> None:
        self.start_new_clock(self._engine.time_control, self._engine.starting_player)

    def _on_new_clock(self) -> None:
        if self._engine.phase == EnginePhase.RUNNING:
            self._ticker.poll()
            self._engine.pause()
        initial = ClockSettings.from_time_control(
            self._engine.time_control, self._engine.starting_player
        )
        choice = NewClockDialog.ask(initial, self)
        if choice is None:
            self._refresh()
            return
        self.start_new_clock(choice.time_control, choice.starting_player)

    def start_new_clock(self, time_control: TimeControl, starting_player: Player) -> None:
        _LOGGER.info("New clock: %r, %s moves first", time_control, starting_player)
        self._engine.reset(time_control, starting_player)
        self._refresh()

    def _run(self, action: Callable[[], object]) -> None:
        try:
            action()
        except InvalidStateError as exc:
            _LOGGER.debug("Ignored action: %s", exc)
        self._refresh()

    # ── Engine callbacks ─────────────────────────────────────────────────

    def _on_timer(self) -> None:
        self._ticker.poll()
        self._refresh()

    def _on_phase_changed(self, phase: EnginePhase) -> None:
        if phase == EnginePhase.RUNNING:
            self._ticker.mark()
            self._timer.start()
        else:
            self._timer.stop()
        self._control_panel.sync(phase)

    def _on_flag_fall(self, player: Player) -> None:
        _LOGGER.info("Flag fall: %s", player)

    # ── Rendering ────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        snapshot = self._engine.snapshot()
        self._clock_widget.update_display(snapshot)
        self._control_panel.sync(snapshot.phase)
        if snapshot.result is not None:
            self._status_label.setText(self._result_text(snapshot.result))
        else:
            self._status_label.setText(
                f"{self._engine.time_control.describe()} · {_PHASE_TEXT[snapshot.phase]}"
            )

    @staticmethod
    def _result_text(result: ClockResult) -> str:
        if result.reason == FinishReason.TIMEOUT and result.player is not None:
            return f"{result.player} flagged, {result.player.opposite} wins on time."
        return "Game finished."

    def status_text(self) -> str:
        return self._status_label.text()

    # ── Keyboard ─────────────────────────────────────────────────────────

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is None:
            return
        key = event.key()
        if key == Qt.Key.Key_Space:
            self._on_switch()
        elif key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self._on_toggle()
        elif key == Qt.Key.Key_Backspace:
            self._on_finish()
        else:
            super().keyPressEvent(event)

    def closeEvent(self, event: QCloseEvent | None) -> None:
        if self._engine.phase == EnginePhase.RUNNING and self.isVisible():
            reply = QMessageBox.question(
                self,
                "Quit",
                "The clock is running. Quit anyway?",
                QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            )
            if reply != QMessageBox.StandardButton.Yes:
                if event is not None:
                    event.ignore()
                return
        self._timer.stop()
        super().closeEvent(event)
