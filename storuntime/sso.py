"""Strings that keep short contents inline and move long contents to the heap."""

from __future__ import annotations

import re
from functools import total_ordering

from .overflow import INT64_MAX, INT64_MIN

#: Largest encoded size, in bytes, that is kept in inline storage.
INLINE_CAPACITY = 23

_ATOLL = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


@total_ordering
class SSOString:
    """An immutable string with small string optimisation.

    Contents of up to 23 bytes (UTF-8) are stored inline; longer contents
    are stored on the heap. The storage kind is visible through ``is_heap``
    and ``flags``.
    """

    __slots__ = ("_text", "_heap")

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        self._text = text
        self._heap = _byte_length(text) > INLINE_CAPACITY

    @classmethod
    def from_int(cls, value: int) -> SSOString:
        """Decimal text of a signed 64-bit integer."""
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f"{value} is outside the int64 range")
        return cls(str(value))

    @property
    def is_heap(self) -> bool:
        """True if the contents live on the heap rather than inline."""
        return self._heap

    @property
    def flags(self) -> int:
        """Storage flag byte: bit 0 set for heap, else inline byte length in bits 1-7."""
        if self._heap:
            return 1
        return _byte_length(self._text) << 1

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SSOString({self._text!r})"

    def __len__(self) -> int:
        return len(self._text)

    def __add__(self, other: SSOString | str) -> SSOString:
        if isinstance(other, SSOString):
            return SSOString(self._text + other._text)
        if isinstance(other, str):
            return SSOString(self._text + other)
        return NotImplemented

    def compare(self, other: SSOString | str) -> int:
        """Return -1, 0 or 1 as self sorts before, equal to or after other."""
        text = _text_of(other)
        if text is None:
            raise TypeError(f"cannot compare SSOString with {type(other).__name__}")
        return (self._text > text) - (self._text < text)

    def __eq__(self, other: object) -> bool:
        text = _text_of(other)
        if text is None:
            return NotImplemented
        return self._text == text

    def __lt__(self, other: object) -> bool:
        text = _text_of(other)
        if text is None:
            return NotImplemented
        return self._text < text

    def __hash__(self) -> int:
        return hash(self._text)

    def substring(self, start: int, length: int) -> SSOString:
        """Up to ``length`` characters from ``start``, clamped at the end."""
        if start < 0 or length < 0:
            raise ValueError("start and length must not be negative")
        if start >= len(self._text):
            raise IndexError(f"start {start} is past the end of a string of length {len(self._text)}")
        return SSOString(self._text[start:start + length])

    def to_int(self) -> int:
        """Leading decimal integer of the contents, or 0 if there is none."""
        match = _ATOLL.match(self._text)
        if match is None:
            return 0
        return max(INT64_MIN, min(INT64_MAX, int(match.group(1))))

    def find(self, needle: str) -> int:
        """Index of the first occurrence of needle, or -1."""
        return self._text.find(needle)

    def copy(self) -> SSOString:
        """A new, independent string with the same contents."""
        return SSOString(self._text)

    def starts_with(self, prefix: str) -> bool:
        """True if the contents begin with prefix."""
        return self._text.startswith(prefix)

    def ends_with(self, suffix: str) -> bool:
        """True if the contents end with suffix."""
        return self._text.endswith(suffix)


def _text_of(value: object) -> str | None:
    if isinstance(value, SSOString):
        return value._text
    if isinstance(value, str):
        return value
    return None