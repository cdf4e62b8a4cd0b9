"""
Leaf placement around the tip of a finished branch.

The last few steps of a branch (tip first) become attachment points.
Each point gets one leaf on the point itself and then a cluster of leaves
scattered within the appearance's extents.
"""

from dataclasses import dataclass

import numpy as np

from bonsai.appearance import Color, TreeAppearance, jitter_color
from bonsai.branch import Branch
from bonsai.config import LEAF_COLOR_JITTER
from bonsai.point import Bounds, Point


@dataclass(frozen=True)
class Leaf:
    position: Point
    anchor: Point
    glyph: str
    color: Color


def leaf_anchors(branch: Branch) -> tuple[Point, ...]:
    """Attachment points of a branch: its last leaf_count positions, tip first."""
    tip_first = [step.pos for step in reversed(branch.steps)]
    return tuple(tip_first[: branch.leaf_count])


def place_leaf(
    anchor: Point,
    appearance: TreeAppearance,
    rng: np.random.Generator,
    bounds: Bounds,
    scatter: bool = True,
) -> Leaf:
    """
    Create one leaf for an attachment point.

    Args:
        anchor: Attachment point on the branch
        appearance: Tree appearance (glyphs, color, scatter extents)
        rng: Seeded generator of the tree
        bounds: Playable area the leaf is clamped to
        scatter: Offset the leaf randomly and jitter its color; the base
            leaf of a cluster sits on the anchor in the base color

    Returns:
        The new leaf
    """
    if scatter:
        position = bounds.clamp(anchor + appearance.leaf_offset(rng))
    else:
        position = bounds.clamp(anchor)
    glyph = appearance.leaf_glyph(rng)
    color = appearance.leaf_color
    if scatter:
        color = jitter_color(color, rng, LEAF_COLOR_JITTER)
    return Leaf(position=position, anchor=anchor, glyph=glyph, color=color)
