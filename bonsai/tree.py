"""
The bonsai tree controller.

BonsaiTree owns everything one tree needs: the seeded generator, the
noise field, the appearance, the branches, the leaves and the current
growth phase. Each call to step() performs exactly one action (a branch
step, a spawn decision or a leaf placement) and returns the draw
commands of that frame, so growth can be animated frame by frame.

The tree never touches a device. Draw commands are returned from step()
and, when a sink is given, handed to it as they are produced.
"""

from collections.abc import Callable
from typing import NamedTuple

import numpy as np

from bonsai.appearance import (
    DARK_GREY,
    GREEN,
    WHITE,
    Color,
    TreeAppearance,
    resolve_color,
)
from bonsai.branch import Branch, Direction, Step, branch_glyph
from bonsai.config import MAX_SEED, TRUNK_WIDTH_RANGE, TreeConfig
from bonsai.growth import (
    Finished,
    GrowingBranch,
    GrowingLeaves,
    GrowingTrunk,
    GrowthState,
    SearchingSpawnPoint,
    SpawnCursor,
    should_spawn,
    spawn_width,
)
from bonsai.leaves import Leaf, leaf_anchors, place_leaf
from bonsai.noisefield import NoiseField
from bonsai.point import Point, round_half_away
from bonsai.pot import base_layout


class DrawCommand(NamedTuple):
    """Put `glyph` at `position` in `color`."""

    position: Point
    glyph: str
    color: Color


DrawSink = Callable[[DrawCommand], None]


def resolve_seed(seed: int, entropy: np.random.Generator | None = None) -> int:
    """
    Return seed, or a fresh nonzero seed if seed is 0.

    Args:
        seed: Requested seed, 0 for random
        entropy: Unseeded generator to draw from (defaults to a new one)
    """
    if seed != 0:
        return seed
    if entropy is None:
        entropy = np.random.default_rng()
    return int(entropy.integers(1, MAX_SEED, dtype=np.uint64, endpoint=True))


class BonsaiTree:
    def __init__(
        self,
        config: TreeConfig,
        sink: DrawSink | None = None,
        entropy: np.random.Generator | None = None,
    ):
        self.config = config
        self.bounds = config.bounds
        self.seed = resolve_seed(config.seed, entropy)
        self.rng = np.random.default_rng(self.seed)
        trunk_width = config.trunk_width
        if trunk_width == 0:
            trunk_width = int(self.rng.integers(*TRUNK_WIDTH_RANGE))
        self.noise = NoiseField(self.seed)
        self.appearance = TreeAppearance.randomize(self.rng, trunk_width)
        self.sink = sink

        self.branches: list[Branch] = []
        self.leaves: list[Leaf] = []
        self.state: GrowthState = GrowingTrunk()
        self.frame = 0
        self._commands: list[DrawCommand] = []

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    @property
    def trunk(self) -> Branch | None:
        return self.branches[0] if self.branches else None

    @property
    def is_finished(self) -> bool:
        return isinstance(self.state, Finished)

    # =========================================================================
    # FRAME LOOP
    # =========================================================================

    def step(self) -> list[DrawCommand]:
        """
        Advance growth by one action.

        Returns:
            Draw commands produced during this frame. A finished tree only
            redraws the status line.
        """
        self._commands = []
        state = self.state
        if isinstance(state, GrowingTrunk):
            self._grow_trunk()
        elif isinstance(state, SearchingSpawnPoint):
            self._search_spawn_point(state)
        elif isinstance(state, GrowingBranch):
            self._grow_branch(state)
        elif isinstance(state, GrowingLeaves):
            self._grow_leaves(state)
        self._draw_status()
        self.frame += 1
        return self._commands

    def grow(self, max_frames: int | None = None) -> list[DrawCommand]:
        """
        Step until the tree is finished or max_frames frames have passed.

        Returns:
            Every draw command produced, in order
        """
        commands: list[DrawCommand] = []
        frames = 0
        while not self.is_finished:
            if max_frames is not None and frames >= max_frames:
                break
            commands.extend(self.step())
            frames += 1
        return commands

    def _grow_trunk(self) -> None:
        if not self.branches:
            rim_row = self._draw_base()
            w = self.appearance.trunk_width
            start = self.bounds.clamp(Point(self.width // 2 - round_half_away(w / 2.0), rim_row))
            self.branches.append(
                Branch.trunk(
                    start,
                    w,
                    leaf_type=self.appearance.leaf_type,
                    leaf_count=self.appearance.leaf_count,
                )
            )

        trunk = self.branches[0]
        if self._step_branch(trunk) is None:
            self.state = GrowingLeaves(
                cursor=SpawnCursor(), branch_index=0, anchors=leaf_anchors(trunk)
            )

    def _search_spawn_point(self, state: SearchingSpawnPoint) -> None:
        cursor = state.cursor
        trunk_steps = self.branches[0].steps
        if cursor.index >= len(trunk_steps):
            self.state = Finished()
            return

        candidate = trunk_steps[cursor.index]
        y = candidate.pos.y
        ratio = self.bounds.height_ratio(y)
        side = Direction.RANDOM_HORIZONTAL.resolve(self.rng)
        if not should_spawn(side, y, ratio, cursor, self.rng):
            self.state = SearchingSpawnPoint(cursor.advanced())
            return

        branch = Branch.limb(
            candidate.pos,
            spawn_width(candidate.width),
            side,
            self.rng,
            leaf_type=self.appearance.leaf_type,
            leaf_count=self.appearance.leaf_count,
        )
        self.branches.append(branch)
        self.state = GrowingBranch(
            cursor=cursor.after_spawn(y, side), branch_index=len(self.branches) - 1
        )

    def _grow_branch(self, state: GrowingBranch) -> None:
        branch = self.branches[state.branch_index]
        if self._step_branch(branch) is None:
            self.state = GrowingLeaves(
                cursor=state.cursor,
                branch_index=state.branch_index,
                anchors=leaf_anchors(branch),
            )

    def _grow_leaves(self, state: GrowingLeaves) -> None:
        if state.done:
            self.state = SearchingSpawnPoint(state.cursor)
            return

        if state.remaining is None:
            leaf = place_leaf(state.anchor, self.appearance, self.rng, self.bounds, scatter=False)
            remaining = self.appearance.leaves_per_cluster(self.rng)
        else:
            leaf = place_leaf(state.anchor, self.appearance, self.rng, self.bounds)
            remaining = state.remaining - 1

        self.leaves.append(leaf)
        self._draw(leaf.position, leaf.glyph, leaf.color)
        self.state = state.placed(remaining)

    def _step_branch(self, branch: Branch) -> Step | None:
        ratio = branch.progress_ratio(self.bounds)
        step = branch.step(self.noise, self.rng, ratio, self.bounds)
        if step is not None:
            self._draw_step(branch, step)
        return step

    # =========================================================================
    # DRAWING
    # =========================================================================

    def _draw_step(self, branch: Branch, step: Step) -> None:
        glyph = branch_glyph(step.diff, step.width, self.rng)
        position = step.pos
        # Thin sideways twigs sit just under the row they grew on
        if branch.direction is not Direction.UP and step.width <= 1:
            position = position + (0, 1)
        self._draw(position, glyph, branch.color)

    def _draw_base(self) -> int:
        """Draw the pot and return the row of its rim."""
        layout = base_layout(
            self.appearance.pot, self.appearance.trunk_width, self.width, self.height
        )
        for row, (position, line) in enumerate(layout):
            self._draw(position, line, GREEN if row == 0 else WHITE)
        return layout[0][0].y

    def _draw_status(self) -> None:
        self._draw(Point(1, self.height - 2), f"Seed: {self.seed}", DARK_GREY)

    def _draw(self, position: Point, glyph: str, color: Color) -> None:
        command = DrawCommand(position, glyph, resolve_color(color, self.rng))
        self._commands.append(command)
        if self.sink is not None:
            self.sink(command)

    # =========================================================================
    # REPORTING
    # =========================================================================

    def get_summary(self) -> dict[str, object]:
        """Scalar summary of the tree grown so far."""
        return {
            "Seed": self.seed,
            "TrunkWidth": self.appearance.trunk_width,
            "Frames": self.frame,
            "Branches": len(self.branches),
            "Steps": sum(len(b.steps) for b in self.branches),
            "Leaves": len(self.leaves),
            "LeafType": self.appearance.leaf_type.value,
            "Pot": self.appearance.pot.value,
            "Finished": self.is_finished,
        }

    def print_summary(self) -> None:
        """Print a formatted summary table to stdout."""
        summary = self.get_summary()
        print("\n" + "=" * 40)
        print("BONSAI SUMMARY")
        print("=" * 40)
        for key, value in summary.items():
            print(f"{key:20s}: {str(value):>18s}")
        print("=" * 40)
