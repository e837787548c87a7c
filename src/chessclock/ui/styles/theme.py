"""Visual theme constants and QSS styles for the clock window."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class ClockTheme:
    """Colour scheme for one clock face, per state."""

    idle_bg: QColor
    idle_fg: QColor
    active_bg: QColor
    paused_bg: QColor
    low_time_bg: QColor
    expired_bg: QColor
    active_fg: QColor

    @classmethod
    def default(cls) -> ClockTheme:
        return cls(
            idle_bg=QColor("#2b2b2b"),
            idle_fg=QColor("#aaaaaa"),
            active_bg=QColor("#3a7d44"),  # green
            paused_bg=QColor("#9a7b1c"),  # amber
            low_time_bg=QColor("#8b2020"),  # red
            expired_bg=QColor("#5a1010"),
            active_fg=QColor("#ffffff"),
        )

    def face_style(self, bg: QColor, fg: QColor) -> str:
        return (
            f"background-color: {bg.name()}; color: {fg.name()}; "
            "padding: 18px 24px; border-radius: 6px;"
        )


# Below this much time the active face turns red.
LOW_TIME_SECONDS = 30.0


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow, QDialog {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}

QDoubleSpinBox, QComboBox {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    padding: 3px 6px;
}

QStatusBar {
    color: #aaaaaa;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
