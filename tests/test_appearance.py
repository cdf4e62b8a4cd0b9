"""
Tests for appearance randomization and colors.

These tests verify that the appearance is a deterministic function of the
seeded generator and that its parameters stay within their ranges.
"""

import numpy as np

from bonsai.appearance import (
    LEAF_COLORS,
    LEAF_GLYPHS,
    RAINBOW,
    RAINBOW_HUES,
    Color,
    LeafType,
    PotStyle,
    TreeAppearance,
    jitter_color,
    resolve_color,
)


class TestRandomize:
    """Tests for TreeAppearance.randomize."""

    def test_same_seed_same_appearance(self) -> None:
        """Two generators with the same seed give equal appearances."""
        a = TreeAppearance.randomize(np.random.default_rng(7), trunk_width=9)
        b = TreeAppearance.randomize(np.random.default_rng(7), trunk_width=9)
        assert a == b

    def test_trunk_width_bonus(self) -> None:
        """Bonus is trunk width / 5, rounded."""
        rng = np.random.default_rng(0)
        assert TreeAppearance.randomize(rng, 7).trunk_width_bonus == 1
        assert TreeAppearance.randomize(rng, 13).trunk_width_bonus == 3
        assert TreeAppearance.randomize(rng, 2).trunk_width_bonus == 0
        assert TreeAppearance.randomize(rng, 7).trunk_width == 7

    def test_values_in_range(self) -> None:
        """Counts, colors and styles are drawn from their fixed sets."""
        for seed in range(200):
            appearance = TreeAppearance.randomize(np.random.default_rng(seed), 10)
            assert 2 <= appearance.leaf_count <= 4
            assert appearance.leaf_color in LEAF_COLORS or appearance.leaf_color == RAINBOW
            assert appearance.leaf_type in (LeafType.POINTY, LeafType.ROUND)
            assert appearance.pot in (PotStyle.LARGE, PotStyle.SMALL)

    def test_extents_depend_on_family(self) -> None:
        """Pointy clusters are taller, round clusters wider."""
        for seed in range(100):
            appearance = TreeAppearance.randomize(np.random.default_rng(seed), 10)
            b = appearance.trunk_width_bonus
            (x_low, x_high) = appearance.leaf_extent_x
            (y_low, y_high) = appearance.leaf_extent_y
            assert x_low < 0 < x_high
            assert y_low < 0 < y_high
            if appearance.leaf_type is LeafType.POINTY:
                assert x_low == -(2 + b)
                assert x_high in (2 + b, 3 + b)
                assert y_low in (-(2 + b), -(3 + b))
            else:
                assert x_low in (-(3 + b), -(4 + b))
                assert x_high == 4 + b
                assert y_low == -(1 + b)
            assert y_high == 1

    def test_both_families_and_pots_occur(self) -> None:
        appearances = [
            TreeAppearance.randomize(np.random.default_rng(seed), 8) for seed in range(100)
        ]
        assert {a.leaf_type for a in appearances} == {LeafType.POINTY, LeafType.ROUND}
        assert {a.pot for a in appearances} == {PotStyle.LARGE, PotStyle.SMALL}

    def test_rainbow_is_rare(self) -> None:
        """Roughly 5% of trees get rainbow leaves."""
        rainbow = sum(
            TreeAppearance.randomize(np.random.default_rng(seed), 8).leaf_color == RAINBOW
            for seed in range(2000)
        )
        assert 40 <= rainbow <= 180


class TestLeafDraws:
    """Tests for per-leaf random draws."""

    def test_glyph_from_family(self) -> None:
        rng = np.random.default_rng(3)
        appearance = TreeAppearance.randomize(rng, 8)
        for _ in range(50):
            assert appearance.leaf_glyph(rng) in LEAF_GLYPHS[appearance.leaf_type]

    def test_cluster_size_grows_with_bonus(self) -> None:
        """Cluster size is within [5, 10 + 3 * bonus]."""
        rng = np.random.default_rng(4)
        appearance = TreeAppearance.randomize(rng, 15)
        sizes = [appearance.leaves_per_cluster(rng) for _ in range(500)]
        assert min(sizes) >= 5
        assert max(sizes) <= 10 + 3 * appearance.trunk_width_bonus
        assert max(sizes) > 10

    def test_offset_within_extents(self) -> None:
        rng = np.random.default_rng(5)
        appearance = TreeAppearance.randomize(rng, 8)
        for _ in range(200):
            offset = appearance.leaf_offset(rng)
            assert appearance.leaf_extent_x[0] <= offset.x <= appearance.leaf_extent_x[1]
            assert appearance.leaf_extent_y[0] <= offset.y <= appearance.leaf_extent_y[1]


class TestColors:
    """Tests for color resolution and jitter."""

    def test_resolve_rainbow(self) -> None:
        """The rainbow marker resolves to one of the rainbow hues."""
        rng = np.random.default_rng(1)
        for _ in range(20):
            assert resolve_color(RAINBOW, rng) in RAINBOW_HUES

    def test_resolve_plain_color(self) -> None:
        rng = np.random.default_rng(1)
        assert resolve_color(Color(1, 2, 3), rng) == Color(1, 2, 3)

    def test_jitter_saturates_at_zero(self) -> None:
        """Each channel is darkened independently and never goes negative."""
        rng = np.random.default_rng(2)
        for _ in range(100):
            color = jitter_color(Color(10, 200, 0), rng, 40)
            assert 0 <= color.r <= 10
            assert 160 <= color.g <= 200
            assert color.b == 0

    def test_jitter_keeps_rainbow(self) -> None:
        rng = np.random.default_rng(2)
        assert jitter_color(RAINBOW, rng, 40) == RAINBOW

    def test_zero_jitter(self) -> None:
        rng = np.random.default_rng(2)
        assert jitter_color(Color(50, 60, 70), rng, 0) == Color(50, 60, 70)
