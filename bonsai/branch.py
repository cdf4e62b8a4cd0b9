"""
Branches and the per-step growth algorithm.

Every part of the bonsai is a branch with a fixed direction, the trunk
included. A branch is an append-only list of steps; each step records a
position, the delta from the previous step and the branch width there.

One call to Branch.step produces the next step:

1. A branch whose last width is 0 is exhausted and does not grow.
2. The width may drop by one, with a chance taken from the branch shape
   and forced up as the tip nears the screen edge, so every branch has
   tapered to nothing before it runs off the playfield.
3. Sideways branches are cut off after SIDEWAYS_STEP_LIMIT steps.
4. Coherent noise at the tip bends the branch: upward growth wanders left
   and right, sideways growth reaches further out (and further still the
   thicker the branch is) and occasionally drifts upward.
5. The shape decays so that older wood tapers more slowly.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import numpy as np

from bonsai.appearance import BROWN, Color, LeafType
from bonsai.config import (
    SIDEWAYS_DRIFT_AFTER,
    SIDEWAYS_DRIFT_CHANCE,
    SIDEWAYS_STEP_LIMIT,
    BranchShape,
)
from bonsai.point import Bounds, Point, round_half_away


class Noise(Protocol):
    def sample(self, x: float, y: float) -> float: ...


class Direction(Enum):
    UP = "up"
    LEFT = "left"
    RIGHT = "right"
    RANDOM_HORIZONTAL = "random_horizontal"

    def resolve(self, rng: np.random.Generator) -> "Direction":
        """Pick LEFT or RIGHT for RANDOM_HORIZONTAL; other directions are kept."""
        if self is Direction.RANDOM_HORIZONTAL:
            return (Direction.LEFT, Direction.RIGHT)[int(rng.integers(2))]
        return self


@dataclass(frozen=True)
class Step:
    """One grown unit of a branch."""

    pos: Point
    diff: Point
    width: int


def snap_to_quarter(ratio: float) -> float:
    """Snap a ratio to the nearest multiple of 0.25."""
    return round_half_away(ratio / 0.25) * 0.25


@dataclass
class Branch:
    """
    A tapering, directional sequence of steps.

    Attributes:
        steps: Grown steps, the first one being the origin
        direction: Fixed growth direction (never RANDOM_HORIZONTAL)
        shape: Tapering parameters, replaced after every step
        color: Glyph color of the wood
        leaf_type: Glyph family of the leaves grown on this branch
        leaf_count: Number of points near the tip that carry leaves
    """

    steps: list[Step]
    direction: Direction
    shape: BranchShape
    color: Color = BROWN
    leaf_type: LeafType = LeafType.POINTY
    leaf_count: int = 0

    @classmethod
    def new(
        cls,
        start: Point,
        direction: Direction,
        width: int,
        shape: BranchShape,
        **kwargs,
    ) -> "Branch":
        if direction is Direction.RANDOM_HORIZONTAL:
            raise ValueError("Resolve RANDOM_HORIZONTAL before creating a branch")
        if width < 0:
            raise ValueError("Branch width must be nonnegative")
        origin = Step(pos=start, diff=Point(0, 0), width=width)
        return cls(steps=[origin], direction=direction, shape=shape, **kwargs)

    @classmethod
    def trunk(cls, start: Point, width: int, **kwargs) -> "Branch":
        return cls.new(start, Direction.UP, width, BranchShape.trunk(), **kwargs)

    @classmethod
    def limb(
        cls,
        start: Point,
        width: int,
        direction: Direction,
        rng: np.random.Generator,
        **kwargs,
    ) -> "Branch":
        """Create a side branch; RANDOM_HORIZONTAL is resolved here."""
        return cls.new(start, direction.resolve(rng), width, BranchShape.branch(), **kwargs)

    @property
    def tip(self) -> Step:
        return self.steps[-1]

    @property
    def is_alive(self) -> bool:
        return self.tip.width >= 1

    @property
    def positions(self) -> list[Point]:
        return [s.pos for s in self.steps]

    def progress_ratio(self, bounds: Bounds) -> float:
        """
        How far the tip has come toward the screen edge it grows to.

        Returns:
            0 at the far side of the screen, 1 at the edge, clamped to [0, 1]
        """
        pos = self.tip.pos
        if self.direction is Direction.UP:
            ratio = 1.0 - pos.y / (bounds.height - 1)
        elif self.direction is Direction.LEFT:
            ratio = 1.0 - pos.x / (bounds.width - 1)
        else:
            ratio = pos.x / (bounds.width - 1)
        return min(max(ratio, 0.0), 1.0)

    def step(
        self,
        noise: Noise,
        rng: np.random.Generator,
        progress_ratio: float,
        bounds: Bounds,
    ) -> Step | None:
        """
        Grow the branch by one step.

        Args:
            noise: Coherent noise field bending the branch
            rng: Seeded generator of the tree
            progress_ratio: Tip progress toward the edge, see progress_ratio()
            bounds: Playable area new positions are clamped to

        Returns:
            The appended step, or None if the branch is exhausted
        """
        last = self.tip
        if last.width < 1:
            return None

        width = last.width
        loss_chance = self.shape.width_loss_chance

        # Taper hard near the edge so the branch ends on screen
        ratio = snap_to_quarter(progress_ratio)
        if ratio >= 0.75:
            if width >= 2:
                width -= 1
            loss_chance = 1.0
        elif ratio >= 0.5 and width > 4:
            loss_chance = max(loss_chance, 0.75)
        elif ratio >= 0.25 and width > 8:
            loss_chance = max(loss_chance, 0.5)

        if width >= 1 and rng.random() < loss_chance:
            width -= 1

        if len(self.steps) > SIDEWAYS_STEP_LIMIT and self.direction is not Direction.UP:
            width = 0

        bend = round_half_away(noise.sample(last.pos.x, last.pos.y))
        if self.direction is Direction.UP:
            diff = Point(bend, -1)
        else:
            reach = abs(bend) + width
            dx = -reach if self.direction is Direction.LEFT else reach
            dy = 0
            if len(self.steps) > SIDEWAYS_DRIFT_AFTER and rng.random() < SIDEWAYS_DRIFT_CHANCE:
                dy = -1
            diff = Point(dx, dy)

        new_step = Step(pos=bounds.clamp(last.pos + diff), diff=diff, width=width)
        self.steps.append(new_step)
        self.shape = self.shape.decayed()
        return new_step


# =============================================================================
# GLYPHS
# =============================================================================

_GLYPH_SETS: dict[tuple[int, int], str] = {
    (0, -1): "/|\\",
    (0, 0): "/|\\",
    (-1, -1): "\\~",
    (1, 1): "\\~",
    (1, -1): "/~\\",
    (-1, 1): "/~\\",
    (-1, 0): "\\~-_=",
    (1, 0): "/~-_=",
}


def branch_glyph(diff: Point, width: int, rng: np.random.Generator) -> str:
    """
    ASCII string that looks like a branch growing along diff.

    The string starts with the set's leading character followed by
    `width` characters drawn from the set.
    """
    key = (min(max(diff.x, -1), 1), min(max(diff.y, -1), 1))
    chars = _GLYPH_SETS.get(key, "?")
    picks = (chars[int(rng.integers(len(chars)))] for _ in range(width))
    return chars[0] + "".join(picks)
