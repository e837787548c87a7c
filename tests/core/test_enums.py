"""Tests for core enumerations."""

import pytest

from chessclock.core.enums import Player, TimingMode


class TestPlayer:
    def test_opposite(self) -> None:
        assert Player.ONE.opposite == Player.TWO
        assert Player.TWO.opposite == Player.ONE

    def test_index_values(self) -> None:
        assert (Player.ONE.value, Player.TWO.value) == (0, 1)

    def test_label(self) -> None:
        assert str(Player.ONE) == "Player 1"
        assert Player.TWO.label == "Player 2"


class TestTimingModeParse:
    @pytest.mark.parametrize(
        ("text", "mode"),
        [
            ("fischer", TimingMode.FISCHER),
            ("Bronstein", TimingMode.BRONSTEIN),
            ("simple-delay", TimingMode.SIMPLE_DELAY),
            ("delay", TimingMode.SIMPLE_DELAY),
            ("none", TimingMode.NONE),
        ],
    )
    def test_known_names(self, text: str, mode: TimingMode) -> None:
        assert TimingMode.parse(text) == mode

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError):
            TimingMode.parse("hourglass")
