"""
Seeded 2D coherent noise used to bend branches.

The simplex noise from the `noise` package has no seed of its own, so a
seed selects a region of the noise plane instead: two coordinate offsets
are drawn from a generator seeded with the tree seed. Samples are scaled
from the raw [-1, 1] range into NOISE_RANGE.
"""

import numpy as np
from noise import snoise2

from bonsai.config import NOISE_RANGE, NOISE_SCALE

# Offsets are drawn from [-OFFSET_SPAN, OFFSET_SPAN]
OFFSET_SPAN = 4096.0


class NoiseField:
    """Deterministic noise over integer screen coordinates."""

    def __init__(
        self,
        seed: int,
        scale: float = NOISE_SCALE,
        value_range: tuple[float, float] = NOISE_RANGE,
    ):
        if scale <= 0:
            raise ValueError("Noise scale must be positive")
        low, high = value_range
        if low >= high:
            raise ValueError("Noise range must be increasing")
        self.seed = seed
        self.scale = scale
        self.low = low
        self.high = high
        offset_x, offset_y = np.random.default_rng(seed).uniform(
            -OFFSET_SPAN, OFFSET_SPAN, size=2
        )
        self.offset_x = float(offset_x)
        self.offset_y = float(offset_y)

    def sample(self, x: float, y: float) -> float:
        """Noise value at (x, y), always within the configured range."""
        raw = snoise2(x / self.scale + self.offset_x, y / self.scale + self.offset_y)
        mid = (self.low + self.high) / 2.0
        half_span = (self.high - self.low) / 2.0
        return float(np.clip(mid + raw * half_span, self.low, self.high))
