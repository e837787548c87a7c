"""Clock layer — time control, player clocks, engine state machine, ticker.

Quick start::

    from chessclock.game import ClockEngine, TimeControl, Ticker

    engine = ClockEngine(TimeControl.blitz_5m3s())
    ticker = Ticker(engine)
    engine.start()
    ticker.mark()
    ...
    ticker.poll()          # from the front-end loop, every ~100 ms
    engine.switch_turn()   # when the player on move hits the clock
"""

from chessclock.game.clock import PlayerClock
from chessclock.game.engine import (
    ClockEngine,
    ClockEvents,
    ClockResult,
    ClockSnapshot,
    PlayerState,
)
from chessclock.game.errors import ClockError, ConfigError, InvalidStateError
from chessclock.game.interfaces import IClockEngine, TimeControl
from chessclock.game.settings import TIME_PRESETS, ClockSettings
from chessclock.game.ticker import DEFAULT_INTERVAL, Ticker

__all__ = [
    # Interfaces
    "IClockEngine",
    "TimeControl",
    # Errors
    "ClockError",
    "ConfigError",
    "InvalidStateError",
    # Concrete
    "ClockEngine",
    "ClockEvents",
    "ClockResult",
    "ClockSnapshot",
    "ClockSettings",
    "DEFAULT_INTERVAL",
    "PlayerClock",
    "PlayerState",
    "TIME_PRESETS",
    "Ticker",
]
