"""ControlPanel — clock action buttons."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtBoundSignal, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from chessclock.core.enums import EnginePhase

_TOGGLE_TEXT = {
    EnginePhase.NOT_STARTED: "Start",
    EnginePhase.RUNNING: "Pause",
    EnginePhase.PAUSED: "Resume",
    EnginePhase.FINISHED: "Start",
}


class ControlPanel(QWidget):
    """Buttons for clock actions: new clock, start/pause, switch, finish, reset."""

    new_clock_clicked = pyqtSignal()
    toggle_clicked = pyqtSignal()
    switch_clicked = pyqtSignal()
    finish_clicked = pyqtSignal()
    reset_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.sync(EnginePhase.NOT_STARTED)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Adwaita Sans", 10)

        row1 = QHBoxLayout()
        self._btn_new = self._make_button("New clock…", btn_font, self.new_clock_clicked)
        row1.addWidget(self._btn_new)
        self._btn_reset = self._make_button("Reset", btn_font, self.reset_clicked)
        row1.addWidget(self._btn_reset)
        layout.addLayout(row1)

        row2 = QHBoxLayout()
        self._btn_toggle = self._make_button("Start", btn_font, self.toggle_clicked)
        row2.addWidget(self._btn_toggle)
        self._btn_switch = self._make_button("Switch", btn_font, self.switch_clicked)
        row2.addWidget(self._btn_switch)
        self._btn_finish = self._make_button("Finish", btn_font, self.finish_clicked)
        self._btn_finish.setStyleSheet(
            "QPushButton { background-color: #6b2020; }"
            "QPushButton:hover { background-color: #8b2020; }"
        )
        row2.addWidget(self._btn_finish)
        layout.addLayout(row2)

    @staticmethod
    def _make_button(text: str, font: QFont, signal: pyqtBoundSignal) -> QPushButton:
        btn = QPushButton(text)
        btn.setFont(font)
        btn.setMinimumHeight(36)
        btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)  # keys belong to the clock window
        btn.clicked.connect(signal)
        return btn

    def sync(self, phase: EnginePhase) -> None:
        """Enable only the actions the engine accepts in *phase*."""
        self._btn_toggle.setText(_TOGGLE_TEXT[phase])
        self._btn_toggle.setEnabled(phase != EnginePhase.FINISHED)
        self._btn_switch.setEnabled(phase == EnginePhase.RUNNING)
        self._btn_finish.setEnabled(phase != EnginePhase.FINISHED)
