"""
Cosmetic parameters of a bonsai tree.

A TreeAppearance is drawn once per tree from the seeded generator and
never changes afterwards. It decides the leaf glyph family, the leaf
color, how many points near a branch tip carry leaves, how far leaves
scatter around those points, and the pot style.

Colors are RGB triples. RAINBOW is a marker rather than a real color: it
is resolved into a random hue every time something is drawn with it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

import numpy as np

from bonsai.config import (
    LEAF_COUNT_RANGE,
    LEAVES_PER_BONUS,
    LEAVES_PER_CLUSTER,
    RAINBOW_CHANCE,
)
from bonsai.point import Point, round_half_away


class Color(NamedTuple):
    r: int
    g: int
    b: int


# =============================================================================
# PALETTE
# =============================================================================

BROWN = Color(142, 44, 19)
ROSE = Color(252, 212, 251)
GREEN = Color(0, 205, 0)
RED = Color(205, 0, 0)
YELLOW = Color(205, 205, 0)
WHITE = Color(229, 229, 229)
DARK_GREY = Color(118, 118, 118)

RAINBOW = Color(1, 1, 1)
RAINBOW_HUES = (
    Color(20, 0, 62),
    Color(0, 0, 139),
    Color(0, 0, 255),
    GREEN,
    YELLOW,
    Color(100, 38, 16),
    RED,
)

LEAF_COLORS = (GREEN, RED, YELLOW, ROSE)


def resolve_color(color: Color, rng: np.random.Generator) -> Color:
    """Turn the rainbow marker into a concrete hue; other colors pass through."""
    if color == RAINBOW:
        return RAINBOW_HUES[int(rng.integers(len(RAINBOW_HUES)))]
    return color


def jitter_color(color: Color, rng: np.random.Generator, amount: int) -> Color:
    """
    Darken each channel independently by up to `amount`, stopping at 0.

    The rainbow marker is returned unchanged so it still resolves per draw.
    """
    if color == RAINBOW or amount <= 0:
        return color
    r, g, b = (
        max(channel - int(rng.integers(0, amount, endpoint=True)), 0)
        for channel in color
    )
    return Color(r, g, b)


# =============================================================================
# APPEARANCE
# =============================================================================


class LeafType(Enum):
    POINTY = "pointy"
    ROUND = "round"


class PotStyle(Enum):
    LARGE = "large"
    SMALL = "small"


LEAF_GLYPHS: dict[LeafType, tuple[str, ...]] = {
    LeafType.POINTY: ("^", "^^", "/\\", "*", "'"),
    LeafType.ROUND: ("&", "&&", "@", "o", "%"),
}


def _pick(options: tuple, rng: np.random.Generator):
    return options[int(rng.integers(len(options)))]


@dataclass(frozen=True)
class TreeAppearance:
    """
    Cosmetic parameters shared by every branch of one tree.

    Attributes:
        leaf_count: Number of points near a branch tip that carry leaves
        leaf_type: Glyph family used for leaves
        leaf_color: Base leaf color, or RAINBOW
        trunk_width: Starting trunk width
        trunk_width_bonus: round(trunk_width / 5), widens leaf clusters
        leaf_extent_x: Inclusive (min, max) horizontal leaf offset
        leaf_extent_y: Inclusive (min, max) vertical leaf offset
        pot: Style of the pot under the trunk
    """

    leaf_count: int
    leaf_type: LeafType
    leaf_color: Color
    trunk_width: int
    trunk_width_bonus: int
    leaf_extent_x: tuple[int, int]
    leaf_extent_y: tuple[int, int]
    pot: PotStyle

    @classmethod
    def randomize(cls, rng: np.random.Generator, trunk_width: int) -> "TreeAppearance":
        """
        Draw a new appearance.

        The order of the draws is fixed so that a seed always yields the
        same appearance.

        Args:
            rng: Seeded generator of the tree
            trunk_width: Starting width of the trunk

        Returns:
            A frozen TreeAppearance
        """
        bonus = round_half_away(trunk_width / 5.0)

        leaf_type = _pick((LeafType.POINTY, LeafType.ROUND), rng)

        if rng.random() < RAINBOW_CHANCE:
            leaf_color = RAINBOW
        else:
            leaf_color = _pick(LEAF_COLORS, rng)

        low, high = LEAF_COUNT_RANGE
        leaf_count = int(rng.integers(low, high, endpoint=True))

        # Pointy leaves pile up into tall clusters, round ones into wide ones
        if leaf_type is LeafType.POINTY:
            extent_x = (-(2 + bonus), 2 + bonus + int(rng.integers(0, 1, endpoint=True)))
            extent_y = (-(2 + bonus + int(rng.integers(0, 1, endpoint=True))), 1)
        else:
            extent_x = (-(3 + bonus + int(rng.integers(0, 1, endpoint=True))), 4 + bonus)
            extent_y = (-(1 + bonus), 1)

        pot = _pick((PotStyle.LARGE, PotStyle.SMALL), rng)

        return cls(
            leaf_count=leaf_count,
            leaf_type=leaf_type,
            leaf_color=leaf_color,
            trunk_width=trunk_width,
            trunk_width_bonus=bonus,
            leaf_extent_x=extent_x,
            leaf_extent_y=extent_y,
            pot=pot,
        )

    def leaf_glyph(self, rng: np.random.Generator) -> str:
        return _pick(LEAF_GLYPHS[self.leaf_type], rng)

    def leaves_per_cluster(self, rng: np.random.Generator) -> int:
        """Number of scattered leaves around one attachment point."""
        low, high = LEAVES_PER_CLUSTER
        high += LEAVES_PER_BONUS * self.trunk_width_bonus
        return int(rng.integers(low, high, endpoint=True))

    def leaf_offset(self, rng: np.random.Generator) -> Point:
        dx = int(rng.integers(self.leaf_extent_x[0], self.leaf_extent_x[1], endpoint=True))
        dy = int(rng.integers(self.leaf_extent_y[0], self.leaf_extent_y[1], endpoint=True))
        return Point(dx, dy)
