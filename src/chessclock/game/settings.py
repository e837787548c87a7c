"""User-facing clock settings and time-control presets."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from chessclock.core.enums import Player, TimingMode
from chessclock.game.errors import ConfigError
from chessclock.game.interfaces import TimeControl

# Labels are shown as-is by the settings dialog and the CLI ``--preset`` flag.
TIME_PRESETS: dict[str, TimeControl] = {
    "Bullet 1+0": TimeControl.bullet_1m(),
    "Bullet 2+1": TimeControl.bullet_2m1s(),
    "Blitz 3+2": TimeControl.blitz_3m2s(),
    "Blitz 5+0": TimeControl.blitz_5m(),
    "Blitz 5+3": TimeControl.blitz_5m3s(),
    "Blitz 5 d3": TimeControl.blitz_5m_delay3s(),
    "Rapid 10+5": TimeControl.rapid_10m5s(),
    "Rapid 15+10": TimeControl.rapid_15m10s(),
    "Rapid 25 Bronstein 10": TimeControl.rapid_25m_bronstein10s(),
    "Classical 90+30": TimeControl.classical_90m30s(),
}


@dataclass
class ClockSettings:
    """Raw values collected by a front-end before a game starts.

    Nothing here is validated until :meth:`to_time_control`, so a settings
    form can hold half-typed input.
    """

    base_minutes: float = 10.0
    increment_seconds: float = 0.0
    delay_seconds: float = 0.0
    mode: TimingMode | None = None
    starting_player: Player = Player.ONE
    odds_minutes: float | None = None  # Player two's base time, if different

    def to_time_control(self) -> TimeControl:
        """Build the TimeControl. Raises ConfigError on invalid input."""
        odds = None
        if self.odds_minutes is not None:
            odds = _minutes(self.odds_minutes, "odds_minutes")
        return TimeControl(
            _minutes(self.base_minutes, "base_minutes"),
            _seconds(self.increment_seconds, "increment_seconds"),
            _seconds(self.delay_seconds, "delay_seconds"),
            self.mode,
            odds_base_time=odds,
        )

    @classmethod
    def from_time_control(
        cls, tc: TimeControl, starting_player: Player = Player.ONE
    ) -> ClockSettings:
        odds = None
        if tc.odds_base_time is not None:
            odds = tc.odds_base_time / timedelta(minutes=1)
        return cls(
            base_minutes=tc.base_time / timedelta(minutes=1),
            increment_seconds=tc.increment.total_seconds(),
            delay_seconds=tc.delay.total_seconds(),
            mode=tc.mode,
            starting_player=starting_player,
            odds_minutes=odds,
        )


def _minutes(value: float, name: str) -> timedelta:
    return _duration(_number(value, name) * 60, name)


def _seconds(value: float, name: str) -> timedelta:
    return _duration(_number(value, name), name)


def _duration(seconds: float, name: str) -> timedelta:
    try:
        return timedelta(seconds=seconds)
    except OverflowError:
        raise ConfigError(f"{name} is too large, got {seconds}s") from None


def _number(value: float, name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be a number, got {value!r}") from None
    if number != number or number in (float("inf"), float("-inf")):
        raise ConfigError(f"{name} must be finite, got {value!r}")
    return number
