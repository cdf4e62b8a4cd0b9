r"""
ASCII pot the bonsai grows out of.

    LARGE, trunk width 7        SMALL, trunk width 5

     _____       _____           ___     ___
    \                /          (__________)
     \______________/

The rim leaves a gap as wide as the trunk, which starts growing on the
rim row.
"""

from bonsai.appearance import PotStyle
from bonsai.point import Point

POT_MARGINS = {PotStyle.LARGE: 5, PotStyle.SMALL: 3}


def generate_base(pot: PotStyle, trunk_width: int) -> str:
    """Return the pot template, one line per row, top row first."""
    margin = POT_MARGINS[pot]
    w = max(2 * margin + trunk_width, 3)
    rim = " " + "_" * margin + " " * trunk_width + "_" * margin
    if pot is PotStyle.LARGE:
        lines = [
            rim,
            "\\" + " " * (w - 1) + "/",
            " \\" + "_" * (w - 3) + "/",
        ]
    else:
        lines = [
            rim,
            "(" + "_" * (w - 1) + ")",
        ]
    return "\n".join(lines)


def base_layout(pot: PotStyle, trunk_width: int, width: int, height: int) -> list[tuple[Point, str]]:
    """
    Place the pot centered at the bottom of a width x height screen.

    Returns:
        (position, line) pairs, rim first
    """
    lines = [line for line in generate_base(pot, trunk_width).split("\n") if line]
    x = max(width // 2 - len(lines[0]) // 2, 0)
    top = height - len(lines)
    return [(Point(x, top + row), line) for row, line in enumerate(lines)]
