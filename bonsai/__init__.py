"""
Bonsai Growth Module

Procedurally grows an ASCII bonsai tree one animation frame at a time.
The same seed, trunk width and screen size always grow the same tree.

Modules:
    point: Integer coordinates and screen bounds
    config: Constants, branch tapering shapes and tree configuration
    noisefield: Seeded coherent noise bending the branches
    appearance: Colors and per-tree cosmetic parameters
    pot: ASCII pot template
    branch: Branches and the per-step growth algorithm
    leaves: Leaf placement around branch tips
    growth: Growth phases of the state machine
    tree: Tree controller emitting draw commands
    options: Validated options of the terminal driver
    terminal: Curses rendering of draw commands
"""

from bonsai.appearance import (
    RAINBOW,
    Color,
    LeafType,
    PotStyle,
    TreeAppearance,
)
from bonsai.branch import Branch, Direction, Step, branch_glyph
from bonsai.config import MARGIN, BranchShape, ConfigError, TreeConfig
from bonsai.growth import (
    Finished,
    GrowingBranch,
    GrowingLeaves,
    GrowingTrunk,
    GrowthState,
    SearchingSpawnPoint,
    SpawnCursor,
)
from bonsai.leaves import Leaf
from bonsai.noisefield import NoiseField
from bonsai.options import GrowOptions
from bonsai.point import Bounds, Point
from bonsai.pot import generate_base
from bonsai.terminal import CursesCanvas
from bonsai.tree import BonsaiTree, DrawCommand, resolve_seed

__all__ = [
    # Geometry
    "Bounds",
    "Point",
    # Config
    "MARGIN",
    "BranchShape",
    "ConfigError",
    "TreeConfig",
    "GrowOptions",
    # Appearance
    "RAINBOW",
    "Color",
    "LeafType",
    "PotStyle",
    "TreeAppearance",
    "generate_base",
    # Growth
    "Branch",
    "Direction",
    "Step",
    "branch_glyph",
    "Leaf",
    "NoiseField",
    "Finished",
    "GrowingBranch",
    "GrowingLeaves",
    "GrowingTrunk",
    "GrowthState",
    "SearchingSpawnPoint",
    "SpawnCursor",
    # Controller
    "BonsaiTree",
    "DrawCommand",
    "resolve_seed",
    # Rendering
    "CursesCanvas",
]
