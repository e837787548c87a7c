"""ClockEngine — the turn state machine of a two-player clock.

Owns both :class:`PlayerClock` instances and the active-player pointer.
Emits events via simple callbacks so the UI / tests can subscribe.

The engine never reads a clock itself; elapsed time only enters through
:meth:`ClockEngine.tick`, usually fed by a :class:`~chessclock.game.ticker.Ticker`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import timedelta

from chessclock.core.durations import ZERO, DurationLike
from chessclock.core.enums import (
    ClockStatus,
    EnginePhase,
    FinishReason,
    Player,
    TimingMode,
)
from chessclock.game.clock import PlayerClock
from chessclock.game.errors import InvalidStateError
from chessclock.game.interfaces import IClockEngine, TimeControl

# ── Result / snapshot values ─────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ClockResult:
    """Terminal outcome. *player* is the side whose flag fell, if any."""

    reason: FinishReason
    player: Player | None = None

    @classmethod
    def timeout(cls, player: Player) -> ClockResult:
        return cls(FinishReason.TIMEOUT, player)

    @classmethod
    def manual(cls) -> ClockResult:
        return cls(FinishReason.MANUAL)

    @property
    def winner(self) -> Player | None:
        if self.reason == FinishReason.TIMEOUT and self.player is not None:
            return self.player.opposite
        return None


@dataclass(frozen=True, slots=True)
class PlayerState:
    remaining: timedelta
    delay_remaining: timedelta
    status: ClockStatus
    moves: int


@dataclass(frozen=True, slots=True)
class ClockSnapshot:
    """Observable engine state captured at one instant, for rendering."""

    phase: EnginePhase
    active_player: Player
    result: ClockResult | None
    players: tuple[PlayerState, PlayerState]

    def __getitem__(self, player: Player) -> PlayerState:
        return self.players[player]


# ── Event definitions ────────────────────────────────────────────────────────

PhaseCallback = Callable[[EnginePhase], None]
TurnCallback = Callable[[Player], None]  # player now on move
FlagFallCallback = Callable[[Player], None]  # player out of time


@dataclass
class ClockEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_turn_switched: list[TurnCallback] = field(default_factory=list)
    on_flag_fall: list[FlagFallCallback] = field(default_factory=list)


# ── Engine ───────────────────────────────────────────────────────────────────


class ClockEngine(IClockEngine):
    """Two clocks, one of which counts down at a time.

    ``NOT_STARTED -> RUNNING <-> PAUSED -> FINISHED``; FINISHED is left only
    through :meth:`reset`.  Rejected operations raise
    :class:`InvalidStateError` and leave the state untouched.

    Thread-safety: none.  One owner (normally the UI thread) drives the engine.
    """

    __slots__ = (
        "_time_control",
        "_starting_player",
        "_clocks",
        "_active",
        "_phase",
        "_result",
        "events",
    )

    def __init__(
        self,
        time_control: TimeControl,
        starting_player: Player = Player.ONE,
    ) -> None:
        self._time_control = time_control
        self._starting_player = Player(starting_player)
        self._clocks: tuple[PlayerClock, PlayerClock] = self._build_clocks()
        self._active = self._starting_player
        self._phase = EnginePhase.NOT_STARTED
        self._result: ClockResult | None = None
        self.events = ClockEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def time_control(self) -> TimeControl:
        return self._time_control

    @property
    def starting_player(self) -> Player:
        return self._starting_player

    @property
    def phase(self) -> EnginePhase:
        return self._phase

    @property
    def active_player(self) -> Player:
        return self._active

    @property
    def result(self) -> ClockResult | None:
        return self._result

    @property
    def is_running(self) -> bool:
        return self._phase == EnginePhase.RUNNING

    @property
    def is_finished(self) -> bool:
        return self._phase == EnginePhase.FINISHED

    def remaining(self, player: Player) -> timedelta:
        return self._clocks[player].remaining

    def delay_remaining(self, player: Player) -> timedelta:
        return self._clocks[player].delay_remaining

    def status(self, player: Player) -> ClockStatus:
        return self._clocks[player].status

    def moves(self, player: Player) -> int:
        return self._clocks[player].moves

    def snapshot(self) -> ClockSnapshot:
        return ClockSnapshot(
            phase=self._phase,
            active_player=self._active,
            result=self._result,
            players=(self._player_state(Player.ONE), self._player_state(Player.TWO)),
        )

    # ── Transitions ──────────────────────────────────────────────────────

    def start(self) -> None:
        self._require(EnginePhase.NOT_STARTED, "start")
        self._active = self._starting_player
        self._begin_turn(self._clocks[self._active])
        self._clocks[self._active.opposite].halt()
        self._set_phase(EnginePhase.RUNNING)

    def pause(self) -> None:
        self._require(EnginePhase.RUNNING, "pause")
        self._clocks[self._active].pause()
        self._set_phase(EnginePhase.PAUSED)

    def resume(self) -> None:
        self._require(EnginePhase.PAUSED, "resume")
        self._clocks[self._active].resume()
        self._set_phase(EnginePhase.RUNNING)

    def toggle_pause(self) -> None:
        """Start, pause or resume, whichever the phase allows."""
        if self._phase == EnginePhase.NOT_STARTED:
            self.start()
        elif self._phase == EnginePhase.RUNNING:
            self.pause()
        elif self._phase == EnginePhase.PAUSED:
            self.resume()
        else:
            raise InvalidStateError("toggle pause", self._phase)

    def switch_turn(self) -> EnginePhase:
        """Hand the move to the opponent.

        The mover's bonus is applied before the active pointer flips:
        Fischer adds the increment, Bronstein refunds the time used this
        turn up to the delay, the delay modes add nothing.
        """
        if self._phase == EnginePhase.FINISHED:
            return self._phase
        self._require(EnginePhase.RUNNING, "switch turn")

        mover = self._clocks[self._active]
        mover.apply_increment(self._move_bonus(mover))
        mover.deactivate()

        self._active = self._active.opposite
        self._begin_turn(self._clocks[self._active])

        for cb in self.events.on_turn_switched:
            cb(self._active)
        return self._phase

    def tick(self, elapsed: DurationLike) -> EnginePhase:
        """Advance the active clock by *elapsed* (seconds or timedelta)."""
        if self._phase != EnginePhase.RUNNING:
            return self._phase
        if self._clocks[self._active].tick(elapsed):
            self._finish(ClockResult.timeout(self._active))
            for cb in self.events.on_flag_fall:
                cb(self._active)
        return self._phase

    def finish(self) -> None:
        if self._phase == EnginePhase.FINISHED:
            return
        for clock in self._clocks:
            clock.halt()
        self._finish(ClockResult.manual())

    def reset(
        self,
        time_control: TimeControl | None = None,
        starting_player: Player | None = None,
    ) -> None:
        if time_control is not None:
            self._time_control = time_control
        if starting_player is not None:
            self._starting_player = Player(starting_player)
        self._clocks = self._build_clocks()
        self._active = self._starting_player
        self._result = None
        self._set_phase(EnginePhase.NOT_STARTED)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _build_clocks(self) -> tuple[PlayerClock, PlayerClock]:
        tc = self._time_control
        return (
            PlayerClock(tc.base_time_for(Player.ONE)),
            PlayerClock(tc.base_time_for(Player.TWO)),
        )

    def _begin_turn(self, clock: PlayerClock) -> None:
        clock.reset_delay(self._time_control.turn_delay)
        clock.activate()

    def _move_bonus(self, mover: PlayerClock) -> timedelta:
        tc = self._time_control
        if tc.mode == TimingMode.FISCHER:
            return tc.increment
        if tc.mode == TimingMode.BRONSTEIN:
            return min(mover.turn_spent, tc.delay)
        return ZERO

    def _player_state(self, player: Player) -> PlayerState:
        clock = self._clocks[player]
        return PlayerState(
            remaining=clock.remaining,
            delay_remaining=clock.delay_remaining,
            status=clock.status,
            moves=clock.moves,
        )

    def _require(self, phase: EnginePhase, operation: str) -> None:
        if self._phase != phase:
            raise InvalidStateError(operation, self._phase)

    def _finish(self, result: ClockResult) -> None:
        self._result = result
        self._set_phase(EnginePhase.FINISHED)

    def _set_phase(self, phase: EnginePhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
