"""Choosing internal types for literals, and printing runtime values."""

from __future__ import annotations

from .overflow import INT64_MAX, INT64_MIN
from .types import InternalType

_INT64_DIGITS = len(str(INT64_MAX))
_INLINE_CAPACITY = 23
_ASCII_DIGITS = frozenset("0123456789")


def infer_numeric_type(literal: str) -> InternalType:
    """INT64 if the digits of the literal fit in int64, otherwise BIGDECIMAL."""
    digits = "".join(ch for ch in literal if ch in _ASCII_DIGITS)
    if len(digits) > _INT64_DIGITS:
        return InternalType.BIGDECIMAL
    if len(digits) == _INT64_DIGITS and int(digits) > INT64_MAX:
        return InternalType.BIGDECIMAL
    return InternalType.INT64


def infer_string_type(literal: str) -> InternalType:
    """SSO_STRING for literals of at most 23 bytes, otherwise HEAP_STRING."""
    if len(literal.encode("utf-8")) > _INLINE_CAPACITY:
        return InternalType.HEAP_STRING
    return InternalType.SSO_STRING


def format_double(value: float) -> str:
    """Shortest general form with six significant digits."""
    return format(float(value), "g")


def print_int64(value: int) -> None:
    """Write a signed 64-bit integer and a newline to standard output."""
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"{value} is outside the int64 range")
    print(value)


def print_double(value: float) -> None:
    """Write a float in general form and a newline to standard output."""
    print(format_double(value))