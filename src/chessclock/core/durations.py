"""Exact duration helpers and clock-face formatting.

All clock arithmetic uses :class:`datetime.timedelta`, which stores whole
microseconds, so repeated ticks never accumulate floating-point drift.
"""

from __future__ import annotations

from datetime import timedelta

ZERO = timedelta(0)

_US_PER_SECOND = 1_000_000
_US_PER_CENTISECOND = 10_000

DurationLike = timedelta | int | float


def as_duration(value: DurationLike) -> timedelta:
    """Coerce *value* to a timedelta; bare numbers are seconds."""
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected a duration, got {type(value).__name__}")
    return timedelta(seconds=value)


def total_microseconds(value: timedelta) -> int:
    return (value.days * 86_400 + value.seconds) * _US_PER_SECOND + value.microseconds


def format_clock(value: timedelta, *, precise: bool = False) -> str:
    """Render *value* the way a clock face shows it.

    ``MM:SS`` below one hour and ``HH:MM:SS`` above, rounded to the nearest
    second.  With *precise* the seconds carry two decimals (``MM:SS.cc``).
    Negative values render as zero.
    """
    us = max(0, total_microseconds(value))
    if precise:
        ticks = (us + _US_PER_CENTISECOND // 2) // _US_PER_CENTISECOND
        whole, frac = divmod(ticks, 100)
        suffix = f".{frac:02d}"
    else:
        whole = (us + _US_PER_SECOND // 2) // _US_PER_SECOND
        suffix = ""

    mins, secs = divmod(whole, 60)
    if mins >= 60:
        hours, mins = divmod(mins, 60)
        return f"{hours:02d}:{mins:02d}:{secs:02d}{suffix}"
    return f"{mins:02d}:{secs:02d}{suffix}"


def format_short(value: timedelta) -> str:
    """Compact human label: ``5m``, ``90s``, ``1m30s``."""
    secs = total_microseconds(value) / _US_PER_SECOND
    mins, rest = divmod(secs, 60)
    if mins and rest:
        return f"{mins:.0f}m{rest:g}s"
    if mins:
        return f"{mins:.0f}m"
    return f"{rest:g}s"
