"""
Tests for curses color mapping.
"""

import curses

from bonsai.appearance import BROWN, GREEN, WHITE, Color
from bonsai.terminal import nearest_basic_color


class TestNearestBasicColor:
    """Tests for the fallback color mapping."""

    def test_exact_matches(self) -> None:
        assert nearest_basic_color(GREEN) == curses.COLOR_GREEN
        assert nearest_basic_color(Color(0, 0, 0)) == curses.COLOR_BLACK

    def test_approximations(self) -> None:
        assert nearest_basic_color(BROWN) == curses.COLOR_RED
        assert nearest_basic_color(WHITE) == curses.COLOR_WHITE
