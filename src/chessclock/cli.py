"""Line-oriented terminal front-end for the clock.

Each command line is one action on the clock.  Time is measured between
commands by a :class:`Ticker`, so pressing Enter on an empty line is the
terminal equivalent of hitting the clock button.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections.abc import Callable, Iterable
from typing import TextIO

from chessclock.core.durations import format_clock
from chessclock.core.enums import EnginePhase, FinishReason, Player, TimingMode
from chessclock.game.engine import ClockEngine
from chessclock.game.errors import ConfigError, InvalidStateError
from chessclock.game.settings import TIME_PRESETS, ClockSettings
from chessclock.game.ticker import Ticker

_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG = 2

HELP_TEXT = """\
Commands:
  start            start the clock
  pause / resume   freeze or continue the running clock
  toggle, t        start, pause or resume
  switch, s, <Enter>
                   end the current move and start the opponent's clock
  status           show both clocks
  finish           end the game
  reset            set both clocks back to the start
  help             show this text
  quit, q          leave"""


def _slug(label: str) -> str:
    return label.lower().replace(" ", "-")


PRESETS_BY_SLUG = {_slug(label): tc for label, tc in TIME_PRESETS.items()}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="chessclock-cli", description="Two-player chess clock in the terminal."
    )
    ap.add_argument("--minutes", type=float, default=10.0, help="base time per player")
    ap.add_argument("--increment", type=float, default=0.0, help="seconds per move")
    ap.add_argument("--delay", type=float, default=0.0, help="seconds of delay per move")
    ap.add_argument(
        "--mode",
        type=TimingMode.parse,
        default=None,
        help="fischer, bronstein, simple-delay or none (inferred when omitted)",
    )
    ap.add_argument(
        "--odds-minutes",
        type=float,
        default=None,
        help="base time for player 2 when it differs",
    )
    ap.add_argument("--starter", type=int, choices=[1, 2], default=1)
    ap.add_argument(
        "--preset",
        choices=sorted(PRESETS_BY_SLUG),
        default=None,
        help="use a named time control instead of the time options",
    )
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def settings_from_args(args: argparse.Namespace) -> ClockSettings:
    starter = Player(args.starter - 1)
    if args.preset is not None:
        return ClockSettings.from_time_control(PRESETS_BY_SLUG[args.preset], starter)
    return ClockSettings(
        base_minutes=args.minutes,
        increment_seconds=args.increment,
        delay_seconds=args.delay,
        mode=args.mode,
        starting_player=starter,
        odds_minutes=args.odds_minutes,
    )


def render(engine: ClockEngine) -> str:
    """One-line view of both clocks."""
    parts = []
    for player in Player:
        marker = "*" if player == engine.active_player else " "
        text = f"{marker}{player}: {format_clock(engine.remaining(player), precise=True)}"
        delay = engine.delay_remaining(player)
        if delay and player == engine.active_player:
            text += f" (delay {format_clock(delay, precise=True)})"
        parts.append(text)
    return "  ".join(parts) + f"  [{engine.phase.name}]"


def result_text(engine: ClockEngine) -> str:
    result = engine.result
    if result is None:
        return ""
    if result.reason == FinishReason.TIMEOUT and result.player is not None:
        return f"{result.player} ran out of time. {result.player.opposite} wins."
    return "Game finished."


class ClockSession:
    """Applies terminal commands to one engine."""

    def __init__(self, engine: ClockEngine, ticker: Ticker, out: TextIO) -> None:
        self._engine = engine
        self._ticker = ticker
        self._out = out
        self._commands: dict[str, Callable[[], None]] = {
            "start": self._start,
            "pause": self._pause,
            "resume": self._resume,
            "toggle": self._toggle,
            "t": self._toggle,
            "switch": self._switch,
            "s": self._switch,
            "": self._switch,
            "status": self._status,
            "finish": self._finish,
            "reset": self._reset,
            "help": self._help,
        }
        engine.events.on_flag_fall.append(self._on_flag_fall)

    def _print(self, text: str) -> None:
        print(text, file=self._out)

    def run(self, lines: Iterable[str]) -> int:
        self._print(f"Time control: {self._engine.time_control!r}")
        self._print("Type 'help' for commands.")
        self._status()
        for raw in lines:
            cmd = raw.strip().lower()
            if self._ticker.poll() == EnginePhase.FINISHED:
                break
            if cmd in ("quit", "q", "exit"):
                return EXIT_OK
            handler = self._commands.get(cmd)
            if handler is None:
                _LOGGER.debug("Unknown command %r", cmd)
                self._print(f"Unknown command: {cmd!r} (try 'help')")
                continue
            try:
                handler()
            except InvalidStateError as exc:
                self._print(f"Not now: {exc}")
                continue
            if self._engine.is_finished:
                break
        if self._engine.is_finished:
            self._print(render(self._engine))
            self._print(result_text(self._engine))
        return EXIT_OK

    # ── Commands ─────────────────────────────────────────────────────────

    def _start(self) -> None:
        self._engine.start()
        self._ticker.mark()
        self._status()

    def _pause(self) -> None:
        self._engine.pause()
        self._status()

    def _resume(self) -> None:
        self._engine.resume()
        self._ticker.mark()
        self._status()

    def _toggle(self) -> None:
        self._engine.toggle_pause()
        if self._engine.is_running:
            self._ticker.mark()
        self._status()

    def _switch(self) -> None:
        if self._engine.phase == EnginePhase.NOT_STARTED:
            self._start()
            return
        self._engine.switch_turn()
        self._status()

    def _status(self) -> None:
        self._print(render(self._engine))

    def _finish(self) -> None:
        self._engine.finish()

    def _reset(self) -> None:
        self._engine.reset()
        self._status()

    def _help(self) -> None:
        self._print(HELP_TEXT)

    def _on_flag_fall(self, player: Player) -> None:
        _LOGGER.info("Flag fall: %s", player)


def main(
    argv: list[str] | None = None,
    stdin: Iterable[str] | None = None,
    stdout: TextIO | None = None,
    time_source: Callable[[], int] = time.monotonic_ns,
) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    out = sys.stdout if stdout is None else stdout

    try:
        settings = settings_from_args(args)
        time_control = settings.to_time_control()
    except ConfigError as exc:
        _LOGGER.error("Invalid time control: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG

    engine = ClockEngine(time_control, settings.starting_player)
    ticker = Ticker(engine, time_source=time_source)
    session = ClockSession(engine, ticker, out)
    return session.run(sys.stdin if stdin is None else stdin)


if __name__ == "__main__":
    raise SystemExit(main())
