"""Time-control definition and the abstract engine interface.

Adapters depend on :class:`IClockEngine`, not on the concrete engine, so a
UI can be exercised against a stub.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import TYPE_CHECKING

from chessclock.core.durations import ZERO, DurationLike, as_duration, format_short
from chessclock.core.enums import ClockStatus, EnginePhase, Player, TimingMode
from chessclock.game.errors import ConfigError

if TYPE_CHECKING:
    from chessclock.game.engine import ClockResult, ClockSnapshot


# ── Time control ────────────────────────────────────────────────────────────


class TimeControl:
    """Immutable time-control definition.

    Args:
        base_time: Starting time per player (seconds or timedelta, > 0).
        increment: Fischer increment added after each move (>= 0).
        delay: Per-move grace period, or the Bronstein refund cap (>= 0).
        mode: Timing mode. When omitted, Fischer if there is an increment,
            otherwise simple delay if there is a delay, otherwise none.
        odds_base_time: Starting time for :attr:`Player.TWO` when the players
            get different times. Defaults to *base_time*.

    Raises:
        ConfigError: if any duration is out of range, or the mode would
            ignore the increment or delay.
    """

    __slots__ = ("base_time", "increment", "delay", "mode", "odds_base_time")

    def __init__(
        self,
        base_time: DurationLike,
        increment: DurationLike = 0,
        delay: DurationLike = 0,
        mode: TimingMode | None = None,
        *,
        odds_base_time: DurationLike | None = None,
    ) -> None:
        base = _checked(base_time, "base_time", allow_zero=False)
        inc = _checked(increment, "increment")
        dly = _checked(delay, "delay")
        odds = (
            None
            if odds_base_time is None
            else _checked(odds_base_time, "odds_base_time", allow_zero=False)
        )
        mode = TimingMode.infer(inc, dly) if mode is None else TimingMode(mode)
        if inc and mode != TimingMode.FISCHER:
            raise ConfigError(f"increment is only used in Fischer mode, not {mode.label}")
        if dly and mode == TimingMode.NONE:
            raise ConfigError("delay is not used when the timing mode is None")

        object.__setattr__(self, "base_time", base)
        object.__setattr__(self, "increment", inc)
        object.__setattr__(self, "delay", dly)
        object.__setattr__(self, "mode", mode)
        object.__setattr__(self, "odds_base_time", odds)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # Common presets
    @classmethod
    def bullet_1m(cls) -> TimeControl:
        return cls(60)

    @classmethod
    def bullet_2m1s(cls) -> TimeControl:
        return cls(120, 1)

    @classmethod
    def blitz_3m2s(cls) -> TimeControl:
        return cls(180, 2)

    @classmethod
    def blitz_5m(cls) -> TimeControl:
        return cls(300)

    @classmethod
    def blitz_5m3s(cls) -> TimeControl:
        return cls(300, 3)

    @classmethod
    def blitz_5m_delay3s(cls) -> TimeControl:
        return cls(300, delay=3)

    @classmethod
    def rapid_10m5s(cls) -> TimeControl:
        return cls(600, 5)

    @classmethod
    def rapid_15m10s(cls) -> TimeControl:
        return cls(900, 10)

    @classmethod
    def rapid_25m_bronstein10s(cls) -> TimeControl:
        return cls(1500, delay=10, mode=TimingMode.BRONSTEIN)

    @classmethod
    def classical_90m30s(cls) -> TimeControl:
        return cls(5400, 30)

    # ── Derived values ──────────────────────────────────────────────────

    def base_time_for(self, player: Player) -> timedelta:
        if player == Player.TWO and self.odds_base_time is not None:
            return self.odds_base_time
        return self.base_time

    @property
    def turn_delay(self) -> timedelta:
        """Grace period granted at the start of every turn.

        Bronstein refunds after the move instead of holding the clock.
        """
        if self.mode == TimingMode.BRONSTEIN:
            return ZERO
        return self.delay

    def describe(self) -> str:
        text = format_short(self.base_time)
        if self.odds_base_time is not None:
            text += f"/{format_short(self.odds_base_time)}"
        if self.increment:
            text += f"+{format_short(self.increment)}"
        if self.mode == TimingMode.BRONSTEIN and self.delay:
            text += f" bronstein {format_short(self.delay)}"
        elif self.delay:
            text += f" d{format_short(self.delay)}"
        return text

    def _key(self) -> tuple[object, ...]:
        return (self.base_time, self.increment, self.delay, self.mode, self.odds_base_time)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeControl):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"TimeControl({self.describe()}, {self.mode.label})"


def _checked(value: DurationLike, name: str, *, allow_zero: bool = True) -> timedelta:
    try:
        duration = as_duration(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ConfigError(f"{name}: {exc}") from exc
    if duration < ZERO or (not allow_zero and duration == ZERO):
        bound = ">= 0" if allow_zero else "> 0"
        raise ConfigError(f"{name} must be {bound}, got {duration}")
    return duration


# ── Abstract interface ──────────────────────────────────────────────────────


class IClockEngine(ABC):
    """Interface for a two-player clock state machine."""

    @property
    @abstractmethod
    def phase(self) -> EnginePhase: ...

    @property
    @abstractmethod
    def active_player(self) -> Player: ...

    @property
    @abstractmethod
    def result(self) -> ClockResult | None: ...

    @abstractmethod
    def start(self) -> None:
        """Start the starting player's clock."""

    @abstractmethod
    def pause(self) -> None:
        """Freeze the running clock."""

    @abstractmethod
    def resume(self) -> None:
        """Continue after :meth:`pause`."""

    @abstractmethod
    def switch_turn(self) -> EnginePhase:
        """End the active player's move and start the opponent's clock."""

    @abstractmethod
    def tick(self, elapsed: DurationLike) -> EnginePhase:
        """Advance the active clock by *elapsed* real time."""

    @abstractmethod
    def finish(self) -> None:
        """End the game manually."""

    @abstractmethod
    def reset(
        self,
        time_control: TimeControl | None = None,
        starting_player: Player | None = None,
    ) -> None:
        """Return to NOT_STARTED with fresh clocks."""

    @abstractmethod
    def remaining(self, player: Player) -> timedelta:
        """Time left on *player*'s clock."""

    @abstractmethod
    def delay_remaining(self, player: Player) -> timedelta:
        """Grace time left in *player*'s current turn."""

    @abstractmethod
    def status(self, player: Player) -> ClockStatus:
        """Status of *player*'s clock."""

    @abstractmethod
    def snapshot(self) -> ClockSnapshot:
        """Immutable copy of the observable state."""
