"""Tests for inline number parsing and table formatting."""
import pytest

from pahvapor.model.formatting import (
    parse_bound, format_pressure, format_boiling_point, format_bound, format_hover_value
)


class TestParseBound:

    @pytest.mark.parametrize("text, expected", [
        ("12.5", 12.5),
        (" -80 ", -80.0),
        ("1,5", 1.5),
        ("1e-3", 0.001),
    ])
    def test_numbers(self, text, expected):
        assert parse_bound(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "abc", "12abc", "nan", "inf", "-inf"])
    def test_non_numeric_is_ignored(self, text):
        assert parse_bound(text) is None


class TestFormatting:

    def test_tiny_pressure_uses_scientific_notation(self):
        assert format_pressure(5e-5) == "5.000e-05"

    def test_sub_unit_pressure(self):
        assert format_pressure(0.5) == "0.50000"

    def test_large_pressure(self):
        assert format_pressure(760) == "760.000"

    def test_missing_values(self):
        assert format_pressure(None) == "—"
        assert format_boiling_point(None) == "—"

    def test_boiling_point(self):
        assert format_boiling_point(217.06) == "217.1"

    def test_bounds(self):
        assert format_bound(None) == "auto"
        assert format_bound(0.05) == "0.05"
        assert format_bound(600.0) == "600"

    @pytest.mark.parametrize("value, expected", [
        (0.000123, "1.23e-04"),
        (0.001, "0.0010"),
        (12.345678, "12.3457"),
    ])
    def test_hover_value(self, value, expected):
        assert format_hover_value(value) == expected
