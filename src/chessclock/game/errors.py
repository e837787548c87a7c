"""Exceptions raised by the clock layer."""

from __future__ import annotations

from chessclock.core.enums import EnginePhase


class ClockError(Exception):
    """Base class for every error raised by chessclock."""


class ConfigError(ClockError, ValueError):
    """A time control or settings value is out of range."""


class InvalidStateError(ClockError, RuntimeError):
    """An operation was requested in a phase that does not allow it."""

    def __init__(self, operation: str, phase: EnginePhase) -> None:
        super().__init__(f"Cannot {operation} while clock is {phase.name}")
        self.operation = operation
        self.phase = phase
