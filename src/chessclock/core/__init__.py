"""Core domain layer — enums and exact duration helpers, no dependencies.

Quick start::

    from chessclock.core import Player, format_clock

    print(Player.ONE.opposite)                    # "Player 2"
    print(format_clock(timedelta(seconds=65)))    # "01:05"
"""

from chessclock.core.durations import (
    ZERO,
    as_duration,
    format_clock,
    format_short,
    total_microseconds,
)
from chessclock.core.enums import (
    ClockStatus,
    EnginePhase,
    FinishReason,
    Player,
    TimingMode,
)

__all__ = [
    # Enums
    "ClockStatus",
    "EnginePhase",
    "FinishReason",
    "Player",
    "TimingMode",
    # Durations
    "ZERO",
    "as_duration",
    "format_clock",
    "format_short",
    "total_microseconds",
]
