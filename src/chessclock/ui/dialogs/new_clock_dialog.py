"""NewClockDialog — time-control setup before starting a new clock."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QButtonGroup,
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QDoubleSpinBox,
    QFormLayout,
    QHBoxLayout,
    QMessageBox,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from chessclock.core.enums import Player, TimingMode
from chessclock.game.errors import ConfigError
from chessclock.game.interfaces import TimeControl
from chessclock.game.settings import TIME_PRESETS, ClockSettings

_LOGGER = logging.getLogger(__name__)
_CUSTOM = "Custom"


class _NewClockResult:
    """Plain data returned by NewClockDialog."""

    __slots__ = ("time_control", "starting_player")

    def __init__(self, time_control: TimeControl, starting_player: Player) -> None:
        self.time_control = time_control
        self.starting_player = starting_player


class NewClockDialog(QDialog):
    """Modal dialog collecting base time, increment, delay, mode and starter."""

    def __init__(
        self,
        initial: ClockSettings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumWidth(360)
        self.setWindowTitle("New clock")
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._result: _NewClockResult | None = None
        self._setup_ui()
        self._load(initial or ClockSettings())

    def _setup_ui(self) -> None:
        main = QVBoxLayout(self)
        form = QFormLayout()
        form.setSpacing(10)

        self._combo_preset = QComboBox()
        self._combo_preset.addItems([_CUSTOM, *TIME_PRESETS])
        self._combo_preset.currentTextChanged.connect(self._on_preset_changed)
        form.addRow("Preset", self._combo_preset)

        self._spin_base = _spin(0.0, 600.0, 1.0, " min")
        form.addRow("Base time", self._spin_base)

        odds_row = QHBoxLayout()
        self._chk_odds = QCheckBox("Player 2 gets")
        self._spin_odds = _spin(0.0, 600.0, 1.0, " min")
        self._spin_odds.setEnabled(False)
        self._chk_odds.toggled.connect(self._spin_odds.setEnabled)
        odds_row.addWidget(self._chk_odds)
        odds_row.addWidget(self._spin_odds)
        form.addRow("Time odds", odds_row)

        self._spin_increment = _spin(0.0, 600.0, 1.0, " s")
        form.addRow("Increment", self._spin_increment)

        self._spin_delay = _spin(0.0, 600.0, 1.0, " s")
        form.addRow("Delay", self._spin_delay)

        self._combo_mode = QComboBox()
        for mode in TimingMode:
            self._combo_mode.addItem(mode.label, mode.value)
        form.addRow("Timing", self._combo_mode)

        starter_row = QHBoxLayout()
        self._grp_starter = QButtonGroup(self)
        self._rb_starter: dict[Player, QRadioButton] = {}
        for player in Player:
            rb = QRadioButton(player.label)
            rb.setFont(QFont("Adwaita Sans", 11))
            self._grp_starter.addButton(rb, player.value)
            starter_row.addWidget(rb)
            self._rb_starter[player] = rb
        form.addRow("First to move", starter_row)

        main.addLayout(form)

        self._buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        self._buttons.accepted.connect(self._on_accept)
        self._buttons.rejected.connect(self.reject)
        main.addWidget(self._buttons)

    def _load(self, settings: ClockSettings) -> None:
        self._spin_base.setValue(settings.base_minutes)
        self._spin_increment.setValue(settings.increment_seconds)
        self._spin_delay.setValue(settings.delay_seconds)
        mode = settings.mode
        if mode is None:
            mode = TimingMode.infer(settings.increment_seconds, settings.delay_seconds)
        self._combo_mode.setCurrentIndex(self._combo_mode.findData(int(mode)))
        self._chk_odds.setChecked(settings.odds_minutes is not None)
        if settings.odds_minutes is not None:
            self._spin_odds.setValue(settings.odds_minutes)
        self._rb_starter[settings.starting_player].setChecked(True)

    def _on_preset_changed(self, label: str) -> None:
        tc = TIME_PRESETS.get(label)
        if tc is None:
            return
        starter = self._checked_starter()
        self._load(ClockSettings.from_time_control(tc, starter))

    def _checked_starter(self) -> Player:
        return Player(max(0, self._grp_starter.checkedId()))

    def current_settings(self) -> ClockSettings:
        """Read the form as-is, without validating it."""
        return ClockSettings(
            base_minutes=self._spin_base.value(),
            increment_seconds=self._spin_increment.value(),
            delay_seconds=self._spin_delay.value(),
            mode=TimingMode(self._combo_mode.currentData()),
            starting_player=self._checked_starter(),
            odds_minutes=self._spin_odds.value() if self._chk_odds.isChecked() else None,
        )

    def _on_accept(self) -> None:
        settings = self.current_settings()
        try:
            tc = settings.to_time_control()
        except ConfigError as exc:
            _LOGGER.info("Rejected clock settings: %s", exc)
            QMessageBox.warning(self, "Invalid time control", str(exc))
            return
        self._result = _NewClockResult(tc, settings.starting_player)
        self.accept()

    @property
    def result_settings(self) -> _NewClockResult | None:
        return self._result

    @staticmethod
    def ask(
        initial: ClockSettings | None = None, parent: QWidget | None = None
    ) -> _NewClockResult | None:
        dlg = NewClockDialog(initial, parent)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.result_settings
        return None


def _spin(minimum: float, maximum: float, step: float, suffix: str) -> QDoubleSpinBox:
    spin = QDoubleSpinBox()
    spin.setRange(minimum, maximum)
    spin.setSingleStep(step)
    spin.setDecimals(1)
    spin.setSuffix(suffix)
    return spin
