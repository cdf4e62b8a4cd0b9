"""
Curses rendering of draw commands.

Colors are RGB triples; terminals that cannot redefine colors get the
nearest of the eight standard curses colors.
"""

import curses

from bonsai.appearance import Color
from bonsai.tree import DrawCommand

_BASIC_COLORS = (
    (curses.COLOR_BLACK, Color(0, 0, 0)),
    (curses.COLOR_RED, Color(205, 0, 0)),
    (curses.COLOR_GREEN, Color(0, 205, 0)),
    (curses.COLOR_YELLOW, Color(205, 205, 0)),
    (curses.COLOR_BLUE, Color(0, 0, 238)),
    (curses.COLOR_MAGENTA, Color(205, 0, 205)),
    (curses.COLOR_CYAN, Color(0, 205, 205)),
    (curses.COLOR_WHITE, Color(229, 229, 229)),
)


def nearest_basic_color(color: Color) -> int:
    """Curses color number closest to an RGB color."""

    def distance(entry: tuple[int, Color]) -> int:
        rgb = entry[1]
        return sum((a - b) ** 2 for a, b in zip(rgb, color))

    return min(_BASIC_COLORS, key=distance)[0]


class CursesCanvas:
    """Draw sink writing to a curses window."""

    def __init__(self, window: "curses.window"):
        self.window = window
        self._pairs: dict[Color, int] = {}
        self._custom = curses.has_colors() and curses.can_change_color()
        self._next_color = 16

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) of the window in cells."""
        height, width = self.window.getmaxyx()
        return width, height

    def _attr(self, color: Color) -> int:
        if not curses.has_colors():
            return 0
        pair = self._pairs.get(color)
        if pair is None:
            pair = len(self._pairs) + 1
            if pair >= curses.COLOR_PAIRS:
                return 0
            if self._custom and self._next_color < curses.COLORS:
                number = self._next_color
                self._next_color += 1
                curses.init_color(number, *(c * 1000 // 255 for c in color))
            else:
                number = nearest_basic_color(color)
            curses.init_pair(pair, number, -1)
            self._pairs[color] = pair
        return curses.color_pair(pair)

    def draw(self, command: DrawCommand) -> None:
        width, height = self.size
        x, y = command.position
        if not 0 <= y < height or x >= width:
            return
        text = command.glyph
        if x < 0:
            text = text[-x:]
            x = 0
        text = text[: width - x]
        if not text:
            return
        try:
            self.window.addstr(y, x, text, self._attr(command.color))
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen
            pass

    def __call__(self, command: DrawCommand) -> None:
        self.draw(command)

    def clear(self) -> None:
        self.window.erase()

    def refresh(self) -> None:
        self.window.refresh()
