"""
Growth phases of a bonsai tree.

Growth is a resumable state machine advanced one action per frame by
BonsaiTree.step(). Each phase is its own frozen dataclass carrying only
the data that phase needs:

    GrowingTrunk
        -> GrowingLeaves (trunk)          trunk exhausted
    SearchingSpawnPoint
        -> GrowingBranch                  a trunk step was picked
        -> Finished                       no trunk steps left
    GrowingBranch
        -> GrowingLeaves (branch)         branch exhausted
    GrowingLeaves
        -> SearchingSpawnPoint            every attachment point covered

The search over the trunk is an index cursor into the trunk's steps. It
only moves forward and survives the detours through branch and leaf
growth, so searching resumes where it stopped.
"""

from dataclasses import dataclass, replace
from typing import Union

import numpy as np

from bonsai.branch import Direction
from bonsai.config import MIN_BRANCH_SPACING, MIN_SPAWN_RATIO
from bonsai.point import Point


@dataclass(frozen=True)
class SpawnCursor:
    """
    Position of the spawn-point search along the trunk.

    Attributes:
        index: Next trunk step to examine
        last_branch_y: Row of the most recently spawned branch
        last_branch_side: Side of the most recently spawned branch
            (UP before the first spawn)
    """

    index: int = 0
    last_branch_y: int = 0
    last_branch_side: Direction = Direction.UP

    def advanced(self) -> "SpawnCursor":
        return replace(self, index=self.index + 1)

    def after_spawn(self, y: int, side: Direction) -> "SpawnCursor":
        return SpawnCursor(index=self.index + 1, last_branch_y=y, last_branch_side=side)


@dataclass(frozen=True)
class GrowingTrunk:
    pass


@dataclass(frozen=True)
class SearchingSpawnPoint:
    cursor: SpawnCursor


@dataclass(frozen=True)
class GrowingBranch:
    cursor: SpawnCursor
    branch_index: int


@dataclass(frozen=True)
class GrowingLeaves:
    """
    Leaf growth for one finished branch.

    remaining is None until the base leaf of the current attachment point
    has been placed, then counts the scattered leaves still to place.
    """

    cursor: SpawnCursor
    branch_index: int
    anchors: tuple[Point, ...]
    anchor_index: int = 0
    remaining: int | None = None

    @property
    def done(self) -> bool:
        return self.anchor_index >= len(self.anchors)

    @property
    def anchor(self) -> Point:
        return self.anchors[self.anchor_index]

    def placed(self, remaining: int) -> "GrowingLeaves":
        """State after placing a leaf, moving on once the cluster is full."""
        if remaining <= 0:
            return replace(self, anchor_index=self.anchor_index + 1, remaining=None)
        return replace(self, remaining=remaining)


@dataclass(frozen=True)
class Finished:
    pass


GrowthState = Union[GrowingTrunk, SearchingSpawnPoint, GrowingBranch, GrowingLeaves, Finished]


def should_spawn(
    side: Direction,
    y: int,
    ratio: float,
    cursor: SpawnCursor,
    rng: np.random.Generator,
) -> bool:
    """
    Decide whether a branch grows out of the trunk step at row y.

    A branch on the same side as the previous one needs some vertical
    distance to it. A branch on the other side needs to be high enough on
    the screen and passes a coin flip weighted by its height.
    """
    if side is cursor.last_branch_side:
        return abs(y - cursor.last_branch_y) > MIN_BRANCH_SPACING
    return ratio > MIN_SPAWN_RATIO and rng.random() < ratio


def spawn_width(trunk_width: int) -> int:
    """Starting width of a branch spawned from a trunk step of the given width."""
    if trunk_width <= 2:
        return 1
    return 2
