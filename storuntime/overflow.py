"""Overflow detection and checked arithmetic for signed 64-bit integers."""

from __future__ import annotations

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Int64OverflowError(OverflowError):
    """Raised when a checked operation does not fit in a signed 64-bit integer."""


def _fits(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def _require_int64(*values: int) -> None:
    for value in values:
        if not _fits(value):
            raise ValueError(f"{value} is outside the int64 range")


def add_will_overflow(a: int, b: int) -> bool:
    """Return True if a + b does not fit in int64."""
    _require_int64(a, b)
    return not _fits(a + b)


def sub_will_overflow(a: int, b: int) -> bool:
    """Return True if a - b does not fit in int64."""
    _require_int64(a, b)
    return not _fits(a - b)


def mul_will_overflow(a: int, b: int) -> bool:
    """Return True if a * b does not fit in int64."""
    _require_int64(a, b)
    return not _fits(a * b)


def safe_add(a: int, b: int) -> int:
    """Return a + b, raising Int64OverflowError if it overflows int64."""
    if add_will_overflow(a, b):
        raise Int64OverflowError(f"{a} + {b} overflows int64")
    return a + b


def safe_sub(a: int, b: int) -> int:
    """Return a - b, raising Int64OverflowError if it overflows int64."""
    if sub_will_overflow(a, b):
        raise Int64OverflowError(f"{a} - {b} overflows int64")
    return a - b


def safe_mul(a: int, b: int) -> int:
    """Return a * b, raising Int64OverflowError if it overflows int64."""
    if mul_will_overflow(a, b):
        raise Int64OverflowError(f"{a} * {b} overflows int64")
    return a * b