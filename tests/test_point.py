"""
Tests for integer grid helpers.
"""

from bonsai.point import Bounds, Point, round_half_away, round_to_tenth


class TestRounding:
    """Tests for half-away-from-zero rounding."""

    def test_halves_round_away_from_zero(self) -> None:
        """0.5 rounds to 1 and -0.5 to -1, unlike round()."""
        assert round_half_away(0.5) == 1
        assert round_half_away(-0.5) == -1
        assert round_half_away(2.5) == 3
        assert round_half_away(-2.5) == -3

    def test_other_values_round_to_nearest(self) -> None:
        """Non-half values round to the nearest integer."""
        assert round_half_away(1.4) == 1
        assert round_half_away(-1.6) == -2
        assert round_half_away(0.0) == 0

    def test_round_to_tenth(self) -> None:
        """One decimal place is kept."""
        assert round_to_tenth(0.64) == 0.6
        assert round_to_tenth(0.48) == 0.5
        assert round_to_tenth(0.24) == 0.2


class TestPoint:
    """Tests for Point arithmetic."""

    def test_addition_is_componentwise(self) -> None:
        """Adding points adds coordinates instead of concatenating."""
        assert Point(1, 2) + Point(3, -4) == Point(4, -2)

    def test_addition_with_tuple(self) -> None:
        """A plain 2-tuple can be added as a delta."""
        result = Point(5, 5) + (0, 1)
        assert isinstance(result, Point)
        assert result == Point(5, 6)

    def test_str(self) -> None:
        assert str(Point(3, 7)) == "(3,7)"


class TestBounds:
    """Tests for clamping to the playable area."""

    def test_clamp_low_side_to_margin(self) -> None:
        """Coordinates below the margin are raised to it."""
        bounds = Bounds(margin=3, width=20, height=10)
        assert bounds.clamp(Point(-5, 0)) == Point(3, 3)

    def test_clamp_high_side_to_last_cell(self) -> None:
        """Coordinates past the screen are lowered to the last cell."""
        bounds = Bounds(margin=3, width=20, height=10)
        assert bounds.clamp(Point(25, 12)) == Point(19, 9)

    def test_inside_points_unchanged(self) -> None:
        bounds = Bounds(margin=3, width=20, height=10)
        assert bounds.clamp(Point(10, 5)) == Point(10, 5)
        assert bounds.contains(Point(10, 5))
        assert not bounds.contains(Point(2, 5))

    def test_height_ratio(self) -> None:
        """Bottom row is 0, top row is 1, in between is linear."""
        bounds = Bounds(margin=3, width=20, height=11)
        assert bounds.height_ratio(10) == 0.0
        assert bounds.height_ratio(0) == 1.0
        assert abs(bounds.height_ratio(5) - 0.5) < 1e-9
        assert bounds.height_ratio(15) == 0.0
