# Copyright (c) 2026 Firefly Software Solutions Inc.
# Licensed under the Apache License, Version 2.0

"""
Human-readable byte quantities ("10 MB").

Units are decimal (SI): 1 KB is 1000 bytes, not 1024.
"""

from __future__ import annotations

from .exceptions import MalformedQuantityError

UNIT_SCALES: dict[str, int] = {
    "B": 1,
    "KB": 10**3,
    "MB": 10**6,
    "GB": 10**9,
    "TB": 10**12,
}

U64_MAX = 2**64 - 1


def parse_quantity(value: str | None, field: str | None = None) -> int:
    """
    Parse a quantity string into a byte count.

    Args:
        value: String such as "10 MB", or None when the field is absent
        field: Wire field name, used in the error message

    Returns:
        Number of bytes (0 when value is None)

    Raises:
        MalformedQuantityError: If the string is not "<digits> <unit>" with
            exactly one space, or the byte count does not fit in 64 bits
    """
    if value is None:
        return 0

    number, separator, unit = value.partition(" ")
    if not separator:
        raise MalformedQuantityError(value, field)

    if not (number.isascii() and number.isdigit()):
        raise MalformedQuantityError(value, field)

    scale = UNIT_SCALES.get(unit)
    if scale is None:
        raise MalformedQuantityError(value, field)

    size = int(number) * scale
    if size > U64_MAX:
        raise MalformedQuantityError(value, field)
    return size


def format_quantity(size: int) -> str:
    """Format a byte count using the largest unit that divides it exactly."""
    if size < 0:
        raise ValueError(f"Quantity must be non-negative, got {size}")
    for unit, scale in sorted(UNIT_SCALES.items(), key=lambda item: item[1], reverse=True):
        if size and size % scale == 0:
            return f"{size // scale} {unit}"
    return f"{size} B"
