"""ClockWidget — dual clock display."""

from __future__ import annotations

from datetime import timedelta

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont, QMouseEvent
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QSizePolicy, QVBoxLayout, QWidget

from chessclock.core.durations import ZERO, format_clock
from chessclock.core.enums import ClockStatus, Player
from chessclock.game.engine import ClockSnapshot, PlayerState
from chessclock.ui.styles.theme import LOW_TIME_SECONDS, ClockTheme


class _SingleClock(QLabel):
    """Display for one player's time. Clicking it reports the player."""

    clicked = pyqtSignal(object)  # Player

    def __init__(
        self,
        player: Player,
        theme: ClockTheme | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._player = player
        self._theme = theme or ClockTheme.default()
        self._status = ClockStatus.IDLE
        self._is_low_time = False

        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setFont(QFont("Adwaita Sans", 40, QFont.Weight.Bold))
        self.setMinimumSize(220, 140)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self._set_time_text(ZERO)
        self._apply_style()

    @property
    def status(self) -> ClockStatus:
        return self._status

    @property
    def is_low_time(self) -> bool:
        return self._is_low_time

    def set_status(self, status: ClockStatus) -> None:
        self._status = status
        self._apply_style()

    def update_time(self, remaining: timedelta) -> None:
        self._set_time_text(remaining)
        self._is_low_time = remaining.total_seconds() < LOW_TIME_SECONDS
        self._apply_style()

    def mousePressEvent(self, ev: QMouseEvent | None) -> None:
        if ev is not None and ev.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self._player)
        super().mousePressEvent(ev)

    def _apply_style(self) -> None:
        th = self._theme
        if self._status == ClockStatus.EXPIRED:
            self.setStyleSheet(th.face_style(th.expired_bg, th.active_fg))
        elif self._status == ClockStatus.PAUSED:
            self.setStyleSheet(th.face_style(th.paused_bg, th.active_fg))
        elif self._status != ClockStatus.ACTIVE:
            self.setStyleSheet(th.face_style(th.idle_bg, th.idle_fg))
        elif self._is_low_time:
            self.setStyleSheet(th.face_style(th.low_time_bg, th.active_fg))
        else:
            self.setStyleSheet(th.face_style(th.active_bg, th.active_fg))

    def _set_time_text(self, remaining: timedelta) -> None:
        precise = remaining < timedelta(minutes=1)
        self.setText(format_clock(remaining, precise=precise))


class ClockWidget(QWidget):
    """Combined dual clock widget. Renders a :class:`ClockSnapshot`."""

    face_clicked = pyqtSignal(object)  # Player

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        self._faces: dict[Player, _SingleClock] = {}
        self._names: dict[Player, QLabel] = {}
        self._details: dict[Player, QLabel] = {}

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(12)

        for player in Player:
            box = QVBoxLayout()

            name = QLabel(player.label)
            name.setAlignment(Qt.AlignmentFlag.AlignCenter)
            name.setFont(QFont("Adwaita Sans", 14))
            box.addWidget(name)

            face = _SingleClock(player)
            face.clicked.connect(self.face_clicked)
            box.addWidget(face, stretch=1)

            detail = QLabel()
            detail.setAlignment(Qt.AlignmentFlag.AlignCenter)
            detail.setFont(QFont("Adwaita Sans", 10))
            box.addWidget(detail)

            layout.addLayout(box)
            self._faces[player] = face
            self._names[player] = name
            self._details[player] = detail

    def face(self, player: Player) -> _SingleClock:
        return self._faces[player]

    def detail_text(self, player: Player) -> str:
        return self._details[player].text()

    def update_display(self, snapshot: ClockSnapshot) -> None:
        for player in Player:
            self._update_player(player, snapshot[player])

    def _update_player(self, player: Player, state: PlayerState) -> None:
        face = self._faces[player]
        face.set_status(state.status)
        face.update_time(state.remaining)

        parts = [f"Moves: {state.moves}"]
        if state.delay_remaining > ZERO and state.status in (
            ClockStatus.ACTIVE,
            ClockStatus.PAUSED,
        ):
            parts.append(f"Delay: {format_clock(state.delay_remaining, precise=True)}")
        self._details[player].setText("   ".join(parts))
