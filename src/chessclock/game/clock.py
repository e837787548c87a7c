"""Single-player countdown clock with per-move delay support."""

from __future__ import annotations

from datetime import timedelta

from chessclock.core.durations import ZERO, DurationLike, as_duration
from chessclock.core.enums import ClockStatus


class PlayerClock:
    """Countdown state for one side of the clock.

    The clock never reads real time: it only moves when :meth:`tick` is fed an
    elapsed duration.  Delay is consumed before the main time, so a tick that
    fits inside the delay leaves :attr:`remaining` untouched.
    """

    __slots__ = (
        "_remaining",
        "_delay_remaining",
        "_status",
        "_turn_spent",
        "_moves",
    )

    def __init__(self, remaining: timedelta) -> None:
        self._remaining = max(ZERO, remaining)
        self._delay_remaining = ZERO
        self._status = ClockStatus.IDLE if self._remaining > ZERO else ClockStatus.EXPIRED
        self._turn_spent = ZERO
        self._moves = 0

    # ── Read-only state ─────────────────────────────────────────────────

    @property
    def remaining(self) -> timedelta:
        return self._remaining

    @property
    def delay_remaining(self) -> timedelta:
        return self._delay_remaining

    @property
    def status(self) -> ClockStatus:
        return self._status

    @property
    def turn_spent(self) -> timedelta:
        """Main time consumed since the clock last became active."""
        return self._turn_spent

    @property
    def moves(self) -> int:
        """Completed moves (turns handed over to the opponent)."""
        return self._moves

    @property
    def is_expired(self) -> bool:
        return self._status == ClockStatus.EXPIRED

    # ── Mutation ────────────────────────────────────────────────────────

    def tick(self, elapsed: DurationLike) -> bool:
        """Consume *elapsed* time (seconds or timedelta).

        Returns True only on the tick that expires the clock.
        """
        elapsed = as_duration(elapsed)
        if elapsed < ZERO:
            raise ValueError(f"elapsed must be >= 0, got {elapsed}")
        if self._status != ClockStatus.ACTIVE:
            return False

        absorbed = min(elapsed, self._delay_remaining)
        self._delay_remaining -= absorbed
        overflow = elapsed - absorbed
        if not overflow:
            return False

        used = min(overflow, self._remaining)
        self._remaining -= used
        self._turn_spent += used
        if self._remaining == ZERO:
            self._status = ClockStatus.EXPIRED
            return True
        return False

    def apply_increment(self, increment: DurationLike) -> None:
        increment = as_duration(increment)
        if self._status == ClockStatus.EXPIRED:
            return
        self._remaining += increment

    def reset_delay(self, delay: DurationLike) -> None:
        """Start a fresh turn: refill the delay and clear the turn usage."""
        self._delay_remaining = as_duration(delay)
        self._turn_spent = ZERO

    def activate(self) -> None:
        if self._status == ClockStatus.IDLE:
            self._status = ClockStatus.ACTIVE

    def deactivate(self) -> None:
        """Hand the turn over; counts a completed move."""
        if self._status in (ClockStatus.ACTIVE, ClockStatus.PAUSED):
            self._status = ClockStatus.IDLE
            self._moves += 1

    def halt(self) -> None:
        """Stop without counting a move (manual finish)."""
        if self._status in (ClockStatus.ACTIVE, ClockStatus.PAUSED):
            self._status = ClockStatus.IDLE

    def pause(self) -> None:
        if self._status == ClockStatus.ACTIVE:
            self._status = ClockStatus.PAUSED

    def resume(self) -> None:
        if self._status == ClockStatus.PAUSED:
            self._status = ClockStatus.ACTIVE

    def __repr__(self) -> str:
        return (
            f"PlayerClock(remaining={self._remaining}, "
            f"delay_remaining={self._delay_remaining}, status={self._status.name})"
        )
