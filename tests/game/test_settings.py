"""Tests for ClockSettings and presets."""

from datetime import timedelta

import pytest

from chessclock.core.enums import Player, TimingMode
from chessclock.game.errors import ConfigError
from chessclock.game.interfaces import TimeControl
from chessclock.game.settings import TIME_PRESETS, ClockSettings


class TestClockSettings:
    def test_defaults_build_ten_minutes(self) -> None:
        tc = ClockSettings().to_time_control()
        assert tc == TimeControl(600)

    def test_units(self) -> None:
        settings = ClockSettings(base_minutes=5, increment_seconds=3)
        tc = settings.to_time_control()
        assert tc.base_time == timedelta(minutes=5)
        assert tc.increment == timedelta(seconds=3)
        assert tc.mode == TimingMode.FISCHER

    def test_odds_minutes(self) -> None:
        tc = ClockSettings(base_minutes=5, odds_minutes=2.5).to_time_control()
        assert tc.base_time_for(Player.TWO) == timedelta(minutes=2, seconds=30)

    @pytest.mark.parametrize(
        "settings",
        [
            ClockSettings(base_minutes=0),
            ClockSettings(increment_seconds=-1),
            ClockSettings(delay_seconds=-2),
            ClockSettings(odds_minutes=0),
            ClockSettings(base_minutes=float("nan")),
            ClockSettings(base_minutes="ten"),  # type: ignore[arg-type]
            ClockSettings(base_minutes=1e13),
            ClockSettings(increment_seconds=1e300),
            ClockSettings(increment_seconds=3, mode=TimingMode.SIMPLE_DELAY),
        ],
    )
    def test_invalid_input_rejected(self, settings: ClockSettings) -> None:
        with pytest.raises(ConfigError):
            settings.to_time_control()

    def test_round_trip_from_time_control(self) -> None:
        tc = TimeControl(1500, delay=10, mode=TimingMode.BRONSTEIN, odds_base_time=600)
        settings = ClockSettings.from_time_control(tc, Player.TWO)
        assert settings.starting_player == Player.TWO
        assert settings.to_time_control() == tc


class TestPresets:
    def test_presets_are_time_controls(self) -> None:
        assert TIME_PRESETS
        assert all(isinstance(tc, TimeControl) for tc in TIME_PRESETS.values())

    def test_named_preset(self) -> None:
        assert TIME_PRESETS["Blitz 5+3"] == TimeControl(300, 3)
