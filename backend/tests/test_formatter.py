"""Tests for rounding, fraction helpers and display formatting."""

import math

import pytest
from cabinet_dims.core.format.rounding import (
    Rounding,
    floor_to_half_mm,
    floor_to_sixteenth,
    quantize,
    round_to_half_mm,
    round_to_sixteenth,
)
from cabinet_dims.core.format.fractions import mixed_fraction_text, simplify_fraction
from cabinet_dims.core.format.formatter import (
    DisplayStyle,
    format_feet,
    format_for_display,
    format_in_mm_pair,
    format_inches_decimal,
    format_inches_decimal_floor,
    format_inches_fraction,
    format_inches_fraction_floor,
    format_inches_from_mm,
    format_mm,
    format_mm_floor,
    format_mm_value,
    normalize_inches_text,
)
from cabinet_dims.core.parser.dimension_parser import parse_dimension
from cabinet_dims.utils.units import Units, inches_to_mm, mm_to_inches


class TestRounding:
    def test_nearest_rounds_half_away_from_zero(self):
        assert quantize(2.5, 1) == 3
        assert quantize(-2.5, 1) == -3
        assert quantize(2.49, 1) == 2

    def test_nearest_just_below_half_rounds_down(self):
        assert quantize(0.49999999999999994, 1) == 0
        assert quantize(-0.49999999999999994, 1) == 0
        assert quantize(0.5, 1) == 1

    def test_floor_truncates_magnitude(self):
        assert quantize(2.99, 1, Rounding.FLOOR) == 2
        assert quantize(-2.99, 1, Rounding.FLOOR) == -2

    def test_floor_absorbs_float_noise(self):
        # 609.6 mm is exactly 24 in, but the division lands a hair either side.
        assert floor_to_sixteenth(mm_to_inches(609.6)) == 24.0

    def test_sixteenths(self):
        assert round_to_sixteenth(1.03) == 1.0
        assert round_to_sixteenth(1.04) == 1.0625
        assert floor_to_sixteenth(1.12) == 1.0625

    def test_half_mm(self):
        assert round_to_half_mm(24.25) == 24.5
        assert round_to_half_mm(24.2) == 24.0
        assert floor_to_half_mm(24.49) == 24.0

    def test_no_negative_zero(self):
        result = round_to_sixteenth(-0.01)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0


class TestFractions:
    def test_simplify(self):
        assert simplify_fraction(8, 16) == (1, 2)
        assert simplify_fraction(6, 16) == (3, 8)
        assert simplify_fraction(0, 16) == (0, 1)

    def test_zero_denominator(self):
        with pytest.raises(ZeroDivisionError):
            simplify_fraction(1, 0)

    def test_mixed_text(self):
        assert mixed_fraction_text(24) == "1 1/2"
        assert mixed_fraction_text(6) == "3/8"
        assert mixed_fraction_text(32) == "2"
        assert mixed_fraction_text(0) == "0"
        assert mixed_fraction_text(-24) == "-1 1/2"


class TestMillimeters:
    def test_half_mm_resolution(self):
        assert format_mm(mm_to_inches(24)) == "24"
        assert format_mm(mm_to_inches(24.5)) == "24.5"
        assert format_mm(1.0) == "25.5"

    def test_twenty_four_inches(self):
        # 609.6 mm shown at 0.5 mm resolution
        assert format_mm(24.0) == "609.5"

    def test_floor(self):
        assert format_mm_floor(1.0) == "25"
        assert format_mm_floor(mm_to_inches(609.6)) == "609.5"

    def test_missing(self):
        assert format_mm(None) == ""
        assert format_mm(float("nan")) == ""
        assert format_mm_floor(float("inf")) == ""

    def test_zero_and_negative(self):
        assert format_mm(0) == "0"
        assert format_mm(-1.0) == "-25.5"


class TestInchesFraction:
    def test_whole(self):
        assert format_inches_fraction(1.0) == "1"
        assert format_inches_fraction(24) == "24"

    def test_pure_fraction(self):
        assert format_inches_fraction(0.5) == "1/2"
        assert format_inches_fraction(0.375) == "3/8"

    def test_mixed(self):
        assert format_inches_fraction(12.75) == "12 3/4"

    def test_reduces_after_rounding(self):
        assert format_inches_fraction(1.4999) == "1 1/2"

    def test_carry_to_next_whole(self):
        assert format_inches_fraction(1.99) == "2"

    def test_zero(self):
        assert format_inches_fraction(0) == "0"
        assert format_inches_fraction(0.01) == "0"

    def test_negative(self):
        assert format_inches_fraction(-1.5) == "-1 1/2"
        assert format_inches_fraction(-0.375) == "-3/8"

    def test_floor(self):
        assert format_inches_fraction_floor(1.99) == "1 15/16"
        assert format_inches_fraction_floor(0.124) == "1/16"

    def test_missing(self):
        assert format_inches_fraction(None) == ""


class TestInchesDecimal:
    def test_strips_trailing_zeros(self):
        assert format_inches_decimal(24.0) == "24"
        assert format_inches_decimal(24.5) == "24.5"
        assert format_inches_decimal(0.0625) == "0.0625"

    def test_rounds_to_sixteenth(self):
        assert format_inches_decimal(1.03) == "1"
        assert format_inches_decimal(1.04) == "1.0625"

    def test_floor(self):
        assert format_inches_decimal_floor(1.99) == "1.9375"

    def test_zero_and_negative(self):
        assert format_inches_decimal(0) == "0"
        assert format_inches_decimal(-2.3125) == "-2.3125"

    def test_missing(self):
        assert format_inches_decimal(float("nan")) == ""


class TestFormatForDisplay:
    def test_inches_styles(self):
        assert format_for_display(1.0, Units.INCHES, DisplayStyle.FRACTION) == "1"
        assert format_for_display(0.5, "in", "fraction") == "1/2"
        assert format_for_display(0.5, "in", "decimal") == "0.5"

    def test_mm_ignores_style(self):
        assert format_for_display(24.0, "mm", "decimal") == "609.5"
        assert format_for_display(24.0, "mm", "fraction") == "609.5"

    def test_rounding_policy_is_explicit(self):
        assert format_for_display(1.99, "in", "fraction", Rounding.NEAREST) == "2"
        assert format_for_display(1.99, "in", "fraction", "floor") == "1 15/16"
        assert format_for_display(1.0, "mm", rounding=Rounding.FLOOR) == "25"

    def test_missing(self):
        assert format_for_display(None, "mm") == ""
        assert format_for_display(None, "in", "decimal") == ""

    def test_unknown_units(self):
        with pytest.raises(ValueError):
            format_for_display(1.0, "cm")

    def test_deterministic(self):
        assert format_for_display(3.3, "in") == format_for_display(3.3, "in")


class TestRoundTrip:
    @pytest.mark.parametrize("x", [0.0, 0.3, 1.4999, 23.97, 100.123, -2.3])
    def test_decimal_inches(self, x):
        text = format_for_display(x, "in", "decimal")
        assert parse_dimension(text, "in") == round_to_sixteenth(x)

    @pytest.mark.parametrize("x", [0.3, 12.7, 24.0, -5.55])
    def test_fraction_inches(self, x):
        text = format_for_display(x, "in", "fraction")
        assert parse_dimension(text, "in") == round_to_sixteenth(x)

    @pytest.mark.parametrize("x", [0.3, 24.0, 35.4321, -10.0])
    def test_millimeters_within_resolution(self, x):
        text = format_for_display(x, "mm")
        parsed = parse_dimension(text, "mm")
        assert abs(inches_to_mm(parsed) - inches_to_mm(x)) <= 0.25 + 1e-9

    def test_negative_sign_preserved(self):
        for style in ("fraction", "decimal"):
            text = format_for_display(-1.5, "in", style)
            assert text.startswith("-")
            again = parse_dimension(text, "in")
            assert again == -1.5
            assert format_for_display(again, "in", style) == text


class TestReadouts:
    def test_feet(self):
        assert format_feet(126) == "10.50 ft"
        assert format_feet(None) == ""

    def test_stored_mm(self):
        assert format_mm_value(24.49) == "24"
        assert format_mm_value(24.49, Rounding.NEAREST) == "24.5"
        assert format_mm_value(None) == ""

    def test_inches_from_stored_mm(self):
        assert format_inches_from_mm(609.6) == "24"
        assert format_inches_from_mm(19.05) == "3/4"
        assert format_inches_from_mm(None) == ""

    def test_in_mm_pair(self):
        assert format_in_mm_pair(1.0) == "1 | 25"
        assert format_in_mm_pair(1.0, Rounding.NEAREST) == "1 | 25.5"
        assert format_in_mm_pair(None) == "-"

    def test_normalize_inches_text(self):
        assert normalize_inches_text("1 3/4") == "1 3/4"
        assert normalize_inches_text("1.99") == "1 15/16"
        assert normalize_inches_text(" 0.5 ") == "1/2"
        assert normalize_inches_text(" abc ") == "abc"
