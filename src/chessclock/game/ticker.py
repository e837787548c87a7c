"""Ticker — feeds measured real time into a clock engine."""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import timedelta

from chessclock.core.enums import EnginePhase
from chessclock.game.interfaces import IClockEngine

DEFAULT_INTERVAL = timedelta(milliseconds=100)

_NS_PER_US = 1_000


class Ticker:
    """Measure elapsed monotonic time and forward it to ``engine.tick``.

    The ticker does not schedule itself: the front-end calls :meth:`poll`
    from its own loop (a ``QTimer``, a terminal loop) roughly every
    :attr:`interval`.  The only state kept is the last timestamp observed.
    Sub-microsecond remainders stay in that timestamp, so the sum of the
    forwarded deltas always equals the real time between observations.
    """

    __slots__ = ("_engine", "_interval", "_now_ns", "_last_ns")

    def __init__(
        self,
        engine: IClockEngine,
        interval: timedelta = DEFAULT_INTERVAL,
        time_source: Callable[[], int] = time.monotonic_ns,
    ) -> None:
        if interval <= timedelta(0):
            raise ValueError(f"interval must be positive, got {interval}")
        self._engine = engine
        self._interval = interval
        self._now_ns = time_source
        self._last_ns = time_source()

    @property
    def engine(self) -> IClockEngine:
        return self._engine

    @property
    def interval(self) -> timedelta:
        return self._interval

    @property
    def interval_ms(self) -> int:
        return max(1, self._interval // timedelta(milliseconds=1))

    def mark(self) -> None:
        """Re-baseline without ticking, e.g. right after start or resume."""
        self._last_ns = self._now_ns()

    def poll(self) -> EnginePhase:
        """Forward the time elapsed since the last observation."""
        now = self._now_ns()
        micros = max(0, now - self._last_ns) // _NS_PER_US
        self._last_ns += micros * _NS_PER_US
        if now < self._last_ns:
            # Source went backwards; never charge negative time.
            self._last_ns = now
        return self._engine.tick(timedelta(microseconds=micros))
