"""Tests for the terminal front-end."""

from __future__ import annotations

import io
from collections.abc import Iterator

import pytest

from chessclock.cli import EXIT_CONFIG, EXIT_OK, PRESETS_BY_SLUG, build_parser, main
from chessclock.core.enums import Player, TimingMode
from chessclock.game.settings import TIME_PRESETS


def _script(fake_time, *steps: str | float) -> Iterator[str]:
    """Yield command lines; numbers advance the fake clock instead."""
    for step in steps:
        if isinstance(step, str):
            yield step
        else:
            fake_time.advance(seconds=step)


def _run(fake_time, argv: list[str], *steps: str | float) -> tuple[int, str]:
    out = io.StringIO()
    code = main(argv, _script(fake_time, *steps), out, time_source=fake_time)
    return code, out.getvalue()


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.minutes == 10.0
        assert args.mode is None
        assert args.starter == 1

    def test_mode_accepts_hyphenated_names(self) -> None:
        args = build_parser().parse_args(["--mode", "simple-delay"])
        assert args.mode == TimingMode.SIMPLE_DELAY

    def test_unknown_mode_exits(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--mode", "hourglass"])

    def test_every_preset_has_a_slug(self) -> None:
        assert len(PRESETS_BY_SLUG) == len(TIME_PRESETS)
        assert "blitz-5+3" in PRESETS_BY_SLUG


class TestSession:
    def test_invalid_config_returns_exit_code(self, fake_time) -> None:
        code, out = _run(fake_time, ["--minutes", "0"], "start")
        assert code == EXIT_CONFIG
        assert out == ""

    def test_oversized_time_returns_exit_code(self, fake_time) -> None:
        code, out = _run(fake_time, ["--minutes", "1e13"], "start")
        assert code == EXIT_CONFIG
        assert out == ""

    def test_increment_with_delay(self, fake_time) -> None:
        _, out = _run(
            fake_time, ["--minutes", "5", "--increment", "3", "--delay", "2"], "", 10, "", "q"
        )
        assert "TimeControl(5m+3s d2s, Fischer)" in out
        assert " Player 1: 04:55.00  *Player 2: 05:00.00 (delay 00:02.00)  [RUNNING]" in out

    def test_quit_and_eof_exit_cleanly(self, fake_time) -> None:
        assert _run(fake_time, [], "quit")[0] == EXIT_OK
        assert _run(fake_time, [])[0] == EXIT_OK

    def test_header_shows_time_control(self, fake_time) -> None:
        _, out = _run(fake_time, ["--preset", "blitz-5+3"], "q")
        assert "Time control: TimeControl(5m+3s" in out
        assert "Player 1: 05:00.00" in out

    def test_enter_starts_then_switches(self, fake_time) -> None:
        _, out = _run(
            fake_time, ["--minutes", "5", "--increment", "3"], "", 10, "", "q"
        )
        assert " Player 1: 04:53.00  *Player 2: 05:00.00  [RUNNING]" in out

    def test_starter_option(self, fake_time) -> None:
        _, out = _run(fake_time, ["--starter", "2"], "start", "q")
        assert f"*{Player.TWO}: 10:00.00" in out

    def test_pause_before_start_is_rejected(self, fake_time) -> None:
        _, out = _run(fake_time, [], "pause", "q")
        assert "Not now: Cannot pause while clock is NOT_STARTED" in out

    def test_unknown_command(self, fake_time) -> None:
        _, out = _run(fake_time, [], "castle", "q")
        assert "Unknown command: 'castle'" in out

    def test_paused_time_is_not_charged(self, fake_time) -> None:
        _, out = _run(
            fake_time, ["--minutes", "1"], "start", 5, "pause", 60, "resume", 1, "status", "q"
        )
        assert "*Player 1: 00:54.00" in out

    def test_delay_is_shown_for_active_player(self, fake_time) -> None:
        _, out = _run(fake_time, ["--minutes", "1", "--delay", "5"], "start", 2, "status", "q")
        assert "*Player 1: 01:00.00 (delay 00:03.00)" in out

    def test_flag_fall_prints_result(self, fake_time) -> None:
        code, out = _run(fake_time, ["--minutes", "0.05"], "start", 5, "status")
        assert code == EXIT_OK
        assert "[FINISHED]" in out
        assert out.rstrip().endswith("Player 1 ran out of time. Player 2 wins.")

    def test_finish_command(self, fake_time) -> None:
        _, out = _run(fake_time, [], "start", "finish", "status")
        assert out.rstrip().endswith("Game finished.")

    def test_reset_after_moves(self, fake_time) -> None:
        _, out = _run(fake_time, ["--minutes", "1"], "start", 20, "reset", "q")
        assert out.rstrip().endswith("Player 1: 01:00.00   Player 2: 01:00.00  [NOT_STARTED]")
