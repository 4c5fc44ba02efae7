"""Unit tests for bank value formatters."""

import pytest

from bank_value.tui.formatters import (
    format_quantity,
    format_total,
    format_value,
    quantity_to_stack_size,
)


class TestQuantityToStackSize:
    """Tests for the stack-size abbreviation."""

    @pytest.mark.parametrize(
        "quantity, expected",
        [
            (0, "0"),
            (40, "40"),
            (9_999, "9,999"),
            (10_000, "10K"),
            (10_500, "10.5K"),
            (12_345, "12.3K"),
            (100_000, "100K"),
            (999_999, "999K"),
            (1_500_000, "1.5M"),
            (1_234_567, "1.23M"),
            (2_000_000_000, "2B"),
        ],
    )
    def test_abbreviates(self, quantity: int, expected: str) -> None:
        assert quantity_to_stack_size(quantity) == expected

    def test_rounds_down(self) -> None:
        """Fraction digits are truncated, never rounded up."""
        assert quantity_to_stack_size(19_999) == "19.9K"
        assert quantity_to_stack_size(1_999_999) == "1.99M"

    def test_negative(self) -> None:
        assert quantity_to_stack_size(-12_345) == "-12.3K"
        assert quantity_to_stack_size(-40) == "-40"


class TestCellFormats:
    """Tests for table cell and total formats."""

    def test_quantity_is_comma_grouped(self) -> None:
        assert format_quantity(12_000) == "12,000"
        assert format_quantity(1) == "1"

    def test_value_uses_stack_size(self) -> None:
        assert format_value(1_520_000) == "1.52M"

    def test_total_not_loaded_when_zero(self) -> None:
        assert format_total(0) == "Not loaded"

    def test_total_not_loaded_when_negative(self) -> None:
        assert format_total(-5) == "Not loaded"

    def test_total_formatted(self) -> None:
        assert format_total(40) == "40"
        assert format_total(6_031_400) == "6.03M"
