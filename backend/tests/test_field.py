"""Tests for the editable dimension field commit step."""

import pytest
from cabinet_dims.core.field.dimension_field import DimensionField, clamp
from cabinet_dims.utils.units import Units


class TestClamp:
    def test_bounds(self):
        assert clamp(5, 0, 10) == 5
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10

    def test_open_bounds(self):
        assert clamp(-1) == -1
        assert clamp(100, minimum=0) == 100


class TestDisplay:
    def test_inches_display_is_decimal(self):
        field = DimensionField(value=24.5)
        assert field.display() == "24.5"

    def test_mm_display(self):
        field = DimensionField(value=1.0, units=Units.MILLIMETERS)
        assert field.display() == "25.5"

    def test_empty(self):
        assert DimensionField().display() == ""

    def test_set_units_keeps_value(self):
        field = DimensionField(value=24.0)
        assert field.set_units("mm") == "609.5"
        assert field.value == 24.0
        assert field.set_units(Units.INCHES) == "24"


class TestCommit:
    def test_accepts_valid_text(self):
        field = DimensionField()
        result = field.commit("24")
        assert result.ok
        assert result.value == 24.0
        assert result.text == "24"
        assert result.changed
        assert field.value == 24.0

    def test_fraction_text_renders_as_decimal(self):
        field = DimensionField()
        result = field.commit("1 1/2")
        assert result.value == 1.5
        assert result.text == "1.5"

    def test_failed_parse_keeps_previous_value(self):
        field = DimensionField(value=24.0)
        result = field.commit("abc")
        assert not result.ok
        assert result.error
        assert result.value == 24.0
        assert result.text == "24"
        assert not result.changed
        assert field.value == 24.0

    def test_oversized_fraction_keeps_previous_value(self):
        field = DimensionField(value=24.0)
        result = field.commit("1" * 5000 + "/2")
        assert not result.ok
        assert result.value == 24.0
        assert result.text == "24"

    def test_failed_parse_on_empty_field(self):
        field = DimensionField()
        result = field.commit("")
        assert result.value is None
        assert result.text == ""

    def test_mm_field_reads_bare_numbers_as_mm(self):
        field = DimensionField(units="mm")
        result = field.commit("600")
        assert result.value == pytest.approx(600 / 25.4)
        assert result.text == "600"

    def test_explicit_suffix_in_inches_field(self):
        field = DimensionField()
        result = field.commit("10mm")
        assert result.value == pytest.approx(10 / 25.4)
        assert result.text == "0.375"

    def test_clamps_to_bounds(self):
        field = DimensionField(min_inches=0, max_inches=48)
        high = field.commit("60")
        assert high.value == 48
        assert high.text == "48"
        low = field.commit("-5")
        assert low.value == 0
        assert low.text == "0"

    def test_same_value_is_not_a_change(self):
        field = DimensionField(value=24.0)
        assert not field.commit("24").changed

    def test_min_greater_than_max(self):
        with pytest.raises(ValueError):
            DimensionField(min_inches=10, max_inches=1)
