"""
Tests for the seeded noise field.
"""

import pytest

from bonsai.noisefield import NoiseField


class TestNoiseField:
    """Tests for NoiseField.sample."""

    def test_within_range(self) -> None:
        field = NoiseField(seed=42)
        for x in range(0, 80, 3):
            for y in range(0, 24, 2):
                assert -2.0 <= field.sample(x, y) <= 2.0

    def test_same_seed_same_values(self) -> None:
        a = NoiseField(seed=7)
        b = NoiseField(seed=7)
        assert [a.sample(x, 5) for x in range(20)] == [b.sample(x, 5) for x in range(20)]

    def test_seed_selects_region(self) -> None:
        """Different seeds sample different parts of the noise plane."""
        a = NoiseField(seed=1)
        b = NoiseField(seed=2)
        assert (a.offset_x, a.offset_y) != (b.offset_x, b.offset_y)

    def test_varies_across_screen(self) -> None:
        field = NoiseField(seed=3)
        values = {round(field.sample(x, y), 6) for x in range(40) for y in range(10)}
        assert len(values) > 10

    def test_custom_range(self) -> None:
        field = NoiseField(seed=5, value_range=(0.0, 1.0))
        assert all(0.0 <= field.sample(x, 0) <= 1.0 for x in range(50))

    def test_invalid_parameters_raise(self) -> None:
        with pytest.raises(ValueError, match="scale"):
            NoiseField(seed=1, scale=0)
        with pytest.raises(ValueError, match="range"):
            NoiseField(seed=1, value_range=(1.0, 1.0))
