"""Arbitrary precision signed numbers stored as a sign and a string of digits."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from functools import total_ordering

from .overflow import INT64_MAX, INT64_MIN

_DIGITS = re.compile(r"[0-9]+")
_LEADING_DIGITS = re.compile(r"[0-9]*")


@total_ordering
@dataclass(frozen=True, eq=False)
class BigDecimal:
    """A signed number: a magnitude as decimal text and a sign flag."""

    digits: str
    negative: bool = False

    @classmethod
    def from_int(cls, value: int) -> BigDecimal:
        """Build from an integer."""
        return cls(str(abs(value)), value < 0)

    @classmethod
    def from_string(cls, text: str) -> BigDecimal:
        """Build from text made of an optional '-' and decimal digits."""
        negative = text.startswith("-")
        digits = text[1:] if negative else text
        if not _DIGITS.fullmatch(digits):
            raise ValueError(f"invalid number: {text!r}")
        return cls(digits, negative)

    @classmethod
    def from_float(cls, value: float) -> BigDecimal:
        """Build from a float, keeping 15 significant digits."""
        negative = value < 0
        return cls(format(abs(value), ".15g"), negative)

    def __str__(self) -> str:
        return f"-{self.digits}" if self.negative else self.digits

    def __repr__(self) -> str:
        return f"BigDecimal({str(self)!r})"

    def _magnitude(self) -> int:
        if not _DIGITS.fullmatch(self.digits):
            raise ValueError(f"{self} is not an integer value")
        return int(self.digits)

    def __neg__(self) -> BigDecimal:
        return BigDecimal(self.digits, not self.negative)

    def __add__(self, other: BigDecimal | int) -> BigDecimal:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        ma, mb = self._magnitude(), other._magnitude()
        if self.negative == other.negative:
            return BigDecimal(str(ma + mb), self.negative)
        if ma == mb:
            return BigDecimal("0")
        if ma > mb:
            return BigDecimal(str(ma - mb), self.negative)
        return BigDecimal(str(mb - ma), other.negative)

    def __sub__(self, other: BigDecimal | int) -> BigDecimal:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: BigDecimal | int) -> BigDecimal:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        product = self._magnitude() * other._magnitude()
        return BigDecimal(str(product), product != 0 and self.negative != other.negative)

    def divide(self, other: BigDecimal | int) -> BigDecimal:
        """Integer division truncating toward zero."""
        divisor = _coerce(other)
        if divisor is None:
            raise TypeError(f"cannot divide BigDecimal by {type(other).__name__}")
        mb = divisor._magnitude()
        if mb == 0:
            raise ZeroDivisionError("division by zero")
        quotient = self._magnitude() // mb
        return BigDecimal(str(quotient), quotient != 0 and self.negative != divisor.negative)

    def compare(self, other: BigDecimal | int) -> int:
        """Return -1, 0 or 1 as self is less than, equal to or greater than other."""
        operand = _coerce(other)
        if operand is None:
            raise TypeError(f"cannot compare BigDecimal with {type(other).__name__}")
        if self.negative != operand.negative:
            return -1 if self.negative else 1
        ma, mb = Decimal(self.digits), Decimal(operand.digits)
        order = (ma > mb) - (ma < mb)
        return -order if self.negative else order

    def __eq__(self, other: object) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash((self.negative, Decimal(self.digits)))

    def to_int(self) -> int:
        """Integer part of the value, clamped to the int64 range."""
        leading = _LEADING_DIGITS.match(self.digits).group()
        magnitude = int(leading) if leading else 0
        value = -magnitude if self.negative else magnitude
        return max(INT64_MIN, min(INT64_MAX, value))

    def to_float(self) -> float:
        """Nearest float to the value."""
        value = float(self.digits)
        return -value if self.negative else value


def _coerce(value: object) -> BigDecimal | None:
    if isinstance(value, BigDecimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigDecimal.from_int(value)
    return None