"""
Configuration and constants for the bonsai growth engine.

This module defines the tuning constants of the growth algorithm, the
tapering parameters of a branch, and the per-tree configuration.

Tapering:
    Every step a branch may lose one unit of width. The chance to do so
    starts at a type-specific value and decays by a fixed ratio each step
    until it reaches a floor, so older wood tapers more slowly:

        chance' = max(round(chance * ratio, 1), floor)

    The forced tapering near the screen edge (see branch.py) overrides
    this schedule.
"""

from dataclasses import dataclass

from bonsai.point import Bounds, round_to_tenth

# Rows/columns kept free for the terminal's input line
MARGIN = 3

# Minimum vertical distance between two branches on the same side
MIN_BRANCH_SPACING = 2
# Height ratio above which a branch may spawn on the opposite side
MIN_SPAWN_RATIO = 0.35
# Sideways branches are cut off after this many steps
SIDEWAYS_STEP_LIMIT = 10
# Sideways branches only start to drift upward after this many steps
SIDEWAYS_DRIFT_AFTER = 3
SIDEWAYS_DRIFT_CHANCE = 0.3

# Trunk width drawn when none is requested (upper bound exclusive)
TRUNK_WIDTH_RANGE = (5, 15)
MAX_TRUNK_WIDTH = 255

# Coherent noise used to bend branches
NOISE_RANGE = (-2.0, 2.0)
NOISE_SCALE = 4.0

# Leaves
LEAF_COUNT_RANGE = (2, 4)  # attachment points per branch, inclusive
LEAVES_PER_CLUSTER = (5, 10)  # inclusive, upper bound grows with the bonus
LEAVES_PER_BONUS = 3
LEAF_COLOR_JITTER = 40
RAINBOW_CHANCE = 0.05

# Tallest pot template, in rows
MAX_POT_ROWS = 3

MAX_SEED = 2**64 - 1


class ConfigError(ValueError):
    """Raised when a tree cannot be grown with the given configuration."""


@dataclass(frozen=True)
class BranchShape:
    """
    Tapering parameters of a branch.

    width_loss_chance is the current probability of losing one width unit
    on the next step; it decays by width_loss_ratio each step and never
    drops below min_width_loss_chance.
    """

    width_loss_chance: float
    min_width_loss_chance: float
    width_loss_ratio: float

    def __post_init__(self) -> None:
        for name in ("width_loss_chance", "min_width_loss_chance", "width_loss_ratio"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")

    @classmethod
    def trunk(cls) -> "BranchShape":
        """Trunks start certain to taper and settle at a low floor."""
        return cls(
            width_loss_chance=1.0, min_width_loss_chance=0.23, width_loss_ratio=0.8
        )

    @classmethod
    def branch(cls) -> "BranchShape":
        """Side branches taper at a nearly constant rate."""
        return cls(
            width_loss_chance=0.3, min_width_loss_chance=0.28, width_loss_ratio=0.8
        )

    def decayed(self) -> "BranchShape":
        """Return the shape for the next step."""
        chance = self.width_loss_chance
        if chance > self.min_width_loss_chance:
            chance *= self.width_loss_ratio
        chance = max(round_to_tenth(chance), self.min_width_loss_chance)
        return BranchShape(
            width_loss_chance=chance,
            min_width_loss_chance=self.min_width_loss_chance,
            width_loss_ratio=self.width_loss_ratio,
        )


@dataclass(frozen=True)
class TreeConfig:
    """
    Everything needed to grow one tree.

    seed=0 asks for a random seed and trunk_width=0 for a random trunk
    width; both are resolved when the tree is created.
    """

    width: int
    height: int
    seed: int = 0
    trunk_width: int = 0
    margin: int = MARGIN

    def __post_init__(self) -> None:
        if self.margin < 0:
            raise ConfigError("Margin must be nonnegative")
        if self.width <= self.margin + 1:
            raise ConfigError(
                f"Screen width {self.width} leaves no room beside the margin {self.margin}"
            )
        if self.height <= self.margin + MAX_POT_ROWS:
            raise ConfigError(
                f"Screen height {self.height} leaves no room for the pot "
                f"and the margin {self.margin}"
            )
        if not 0 <= self.seed <= MAX_SEED:
            raise ConfigError(f"Seed must be an unsigned 64-bit integer, got {self.seed}")
        if not 0 <= self.trunk_width <= MAX_TRUNK_WIDTH:
            raise ConfigError(
                f"Trunk width must be in [0, {MAX_TRUNK_WIDTH}], got {self.trunk_width}"
            )

    @property
    def bounds(self) -> Bounds:
        return Bounds(margin=self.margin, width=self.width, height=self.height)
