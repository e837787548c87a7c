"""Core enumerations for the clock domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Player(IntEnum):
    """Side of the clock. The value doubles as an index into clock pairs."""

    ONE = 0
    TWO = 1

    @property
    def opposite(self) -> Player:
        return Player(1 - self.value)

    @property
    def label(self) -> str:
        return f"Player {self.value + 1}"

    def __str__(self) -> str:
        return self.label


class TimingMode(IntEnum):
    """How time is given back to a player after a move."""

    NONE = 0
    FISCHER = 1
    BRONSTEIN = 2
    SIMPLE_DELAY = 3

    @property
    def label(self) -> str:
        return _MODE_LABELS[self]

    @classmethod
    def infer(cls, increment: object, delay: object) -> TimingMode:
        """Mode implied by which bonuses are set. An increment means Fischer."""
        if increment:
            return cls.FISCHER
        if delay:
            return cls.SIMPLE_DELAY
        return cls.NONE

    @classmethod
    def parse(cls, text: str) -> TimingMode:
        """Parse a user-facing name (``"fischer"``, ``"simple-delay"``, ...)."""
        key = text.strip().upper().replace("-", "_").replace(" ", "_")
        if key == "DELAY":
            key = "SIMPLE_DELAY"
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown timing mode: {text!r}") from None


_MODE_LABELS = {
    TimingMode.NONE: "None",
    TimingMode.FISCHER: "Fischer",
    TimingMode.BRONSTEIN: "Bronstein",
    TimingMode.SIMPLE_DELAY: "Simple delay",
}


class ClockStatus(IntEnum):
    """State of a single player's clock."""

    IDLE = auto()
    ACTIVE = auto()
    PAUSED = auto()
    EXPIRED = auto()


class EnginePhase(IntEnum):
    """Finite-state-machine states of the clock engine."""

    NOT_STARTED = auto()
    RUNNING = auto()
    PAUSED = auto()
    FINISHED = auto()


class FinishReason(IntEnum):
    """Why a game on the clock ended."""

    TIMEOUT = auto()
    MANUAL = auto()
