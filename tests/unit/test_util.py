#
# Copyright (C) 2026 ColorsKit Developers — LGPL-3.0-or-later
#

"""
Unit tests for colorskit.util module.
"""

import math

import pytest

from colorskit.color import ColorType, UnconvertibleColor, colorarg, to_color
from colorskit.colorlib import Color
from colorskit.util import autocast_decorator, clamp, clamp_unit, normalize_degrees


# =============================================================================
# clamp() tests
# =============================================================================
class TestClamp:
    """Tests for the clamp function."""

    @pytest.mark.parametrize(
        "value,min_,max_,expected",
        [
            # Value within range - should return unchanged
            (0.5, 0.0, 1.0, 0.5),
            (0.0, 0.0, 1.0, 0.0),
            (1.0, 0.0, 1.0, 1.0),
            # Value below minimum - should clamp to min
            (-0.1, 0.0, 1.0, 0.0),
            (-100, 0, 10, 0),
            # Value above maximum - should clamp to max
            (1.0000001, 0.0, 1.0, 1.0),
            (15, 0, 10, 10),
            # Edge case: min equals max
            (5, 5, 5, 5),
        ],
    )
    def test_clamp_values(self, value, min_, max_, expected):
        """Test clamp with various values and ranges."""
        assert clamp(value, min_, max_) == expected

    def test_clamp_nan(self):
        """NaN collapses to the minimum."""
        assert clamp(float("nan"), 0.0, 1.0) == 0.0

    def test_clamp_unit(self):
        """clamp_unit clamps every value and returns floats."""
        result = clamp_unit(-1, 0.25, 2, float("inf"))
        assert result == (0.0, 0.25, 1.0, 1.0)
        assert all(isinstance(x, float) for x in result)


# =============================================================================
# normalize_degrees() tests
# =============================================================================
class TestNormalizeDegrees:
    """Tests for the angle wrapper."""

    @pytest.mark.parametrize(
        "angle,expected",
        [
            (0.0, 0.0),
            (359.5, 359.5),
            (360.0, 0.0),
            (720.0, 0.0),
            (-15.0, 345.0),
            (-360.0, 0.0),
            (195.0 + 360.0 * 3, 195.0),
            (-1e-17, 0.0),
            (float("inf"), 0.0),
            (float("nan"), 0.0),
        ],
    )
    def test_normalize(self, angle, expected):
        """Angles wrap into [0, 360)."""
        assert normalize_degrees(angle) == pytest.approx(expected)

    def test_always_below_360(self):
        """The result never reaches 360."""
        for angle in (-1e-12, -1e-15, -1e-300, 359.99999999999994):
            result = normalize_degrees(angle)
            assert 0.0 <= result < 360.0
            assert not math.isnan(result)


# =============================================================================
# autocast_decorator() tests
# =============================================================================
class TestAutocast:
    """Tests for argument conversion by type hint."""

    def test_colorarg_positional_and_keyword(self):
        """Hinted arguments are converted positionally and by keyword."""

        @colorarg
        def pair(first: ColorType, second: ColorType = None, label: str = ""):
            return first, second, label

        first, second, label = pair("#ff0000", second=(0, 0, 255), label="#00ff00")
        assert first == Color(1.0, 0.0, 0.0)
        assert second == Color(0.0, 0.0, 1.0)
        assert label == "#00ff00"

    def test_missing_optional_stays_none(self):
        """Unpassed optional arguments are left alone."""

        @colorarg
        def single(first: ColorType, second: ColorType = None):
            return second

        assert single("#ffffff") is None

    @pytest.mark.parametrize("empty", [None, ""])
    def test_passed_empty_color_raises(self, empty):
        """A passed argument that resolves to no color is rejected."""

        @colorarg
        def single(first: ColorType, second: ColorType = None):
            return second

        with pytest.raises(UnconvertibleColor):
            single(empty)
        with pytest.raises(UnconvertibleColor):
            single("#ffffff", second=empty)

    def test_without_missing_policy_none_passes(self):
        """Without a missing policy a None conversion is passed through."""

        @autocast_decorator(ColorType, to_color)
        def single(first: ColorType):
            return first

        assert single("") is None

    def test_bound_method(self):
        """Arguments of methods are matched without self."""

        class Holder:
            @colorarg
            def pick(self, color: ColorType):
                return color

        assert Holder().pick((255, 0, 0)) == Color(1.0, 0.0, 0.0)
        assert Holder().pick(color="#0000ff") == Color(0.0, 0.0, 1.0)

    def test_no_hinted_arguments(self):
        """Decorating a function without hinted arguments fails."""

        def plain(value):
            return value

        with pytest.raises(ValueError):
            autocast_decorator(ColorType, str)(plain)
