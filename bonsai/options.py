"""
Validated options of the terminal driver.
"""

from pydantic import BaseModel, Field

from bonsai.config import MAX_SEED, MAX_TRUNK_WIDTH, TreeConfig


class GrowOptions(BaseModel):
    """Options for growing bonsai trees in the terminal."""

    width: int = Field(
        default=0, ge=0, le=MAX_TRUNK_WIDTH, description="Starting trunk width (0 = random)"
    )
    time_scale: int = Field(
        default=100, ge=1, description="Milliseconds between growth steps"
    )
    seed: int = Field(
        default=0, ge=0, le=MAX_SEED, description="Tree seed (0 = random)"
    )
    max_frames: int | None = Field(
        default=None, ge=1, description="Stop after this many frames (None = until quit)"
    )

    def tree_config(self, screen_width: int, screen_height: int) -> TreeConfig:
        """Configuration for a tree filling a screen of the given size."""
        return TreeConfig(
            width=screen_width,
            height=screen_height,
            seed=self.seed,
            trunk_width=self.width,
        )
