# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""Tests for quantity string parsing."""

import pytest

from pyiggy.exceptions import DecodingError, MalformedQuantityError
from pyiggy.quantity import UNIT_SCALES, format_quantity, parse_quantity


class TestParseQuantity:
    """Tests for parse_quantity."""

    @pytest.mark.parametrize(
        ("unit", "scale"),
        [("B", 1), ("KB", 1_000), ("MB", 1_000_000), ("GB", 1_000_000_000), ("TB", 1_000_000_000_000)],
    )
    def test_decimal_units(self, unit: str, scale: int) -> None:
        """Test every unit uses a decimal multiplier."""
        assert parse_quantity(f"7 {unit}") == 7 * scale
        assert UNIT_SCALES[unit] == scale

    def test_absent(self) -> None:
        """Test an absent value is zero bytes."""
        assert parse_quantity(None) == 0

    def test_zero(self) -> None:
        """Test zero with a unit."""
        assert parse_quantity("0 GB") == 0

    def test_not_binary(self) -> None:
        """Test KB is 1000 bytes, not 1024."""
        assert parse_quantity("1 KB") == 1000

    def test_large_value(self) -> None:
        """Test the largest 64-bit byte count is accepted."""
        assert parse_quantity("18446744073709551615 B") == 2**64 - 1

    @pytest.mark.parametrize("value", ["18446744073709551616 B", "18446744073709551615 TB", "18446745 TB"])
    def test_beyond_64_bits(self, value: str) -> None:
        """Test byte counts that do not fit in 64 bits are rejected."""
        with pytest.raises(MalformedQuantityError):
            parse_quantity(value)

    def test_unknown_unit(self) -> None:
        """Test an unknown unit is rejected."""
        with pytest.raises(MalformedQuantityError) as exc_info:
            parse_quantity("5 XB")
        assert exc_info.value.value == "5 XB"

    @pytest.mark.parametrize(
        "value",
        [
            "10MB", "", "MB", "ten MB", "-5 MB", "1.5 MB", " 10 MB", "10 mb",
            "10 MB extra", "١٠ MB", "10  MB", "10\tMB", "10\nMB",
        ],
    )
    def test_malformed(self, value: str) -> None:
        """Test malformed quantities are rejected."""
        with pytest.raises(MalformedQuantityError):
            parse_quantity(value)

    def test_field_in_message(self) -> None:
        """Test the field name appears in the error."""
        with pytest.raises(MalformedQuantityError, match="in field size") as exc_info:
            parse_quantity("5 XB", "size")
        assert exc_info.value.field == "size"
        assert isinstance(exc_info.value, DecodingError)


class TestFormatQuantity:
    """Tests for format_quantity."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 B"),
            (1, "1 B"),
            (1500, "1500 B"),
            (10_000_000, "10 MB"),
            (3_000_000_000_000, "3 TB"),
            (2_500_000, "2500 KB"),
        ],
    )
    def test_largest_exact_unit(self, size: int, expected: str) -> None:
        """Test the largest exactly dividing unit is chosen."""
        assert format_quantity(size) == expected
        assert parse_quantity(format_quantity(size)) == size

    def test_negative(self) -> None:
        """Test negative sizes are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            format_quantity(-1)
