"""Internal type tags and analysis results shared by the compiler and the runtime."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class InternalType(IntEnum):
    """Internal representation chosen for a value the user sees as numeric or text."""

    UNKNOWN = 0
    # Numeric types (user sees: numeric)
    INT64 = 1
    DOUBLE = 2
    BIGDECIMAL = 3
    # Text types (user sees: string)
    SSO_STRING = 4
    HEAP_STRING = 5
    RODATA_STRING = 6
    # Other types
    BOOLEAN = 7
    ARRAY = 8
    STRUCT = 9
    FUNCTION = 10


class MemLocation(IntEnum):
    """Where a value is expected to live at run time."""

    REGISTER = 0
    STACK = 1
    HEAP = 2
    RODATA = 3


@dataclass
class TypeInfo:
    """Result of analysing one value: its internal type and storage hints."""

    type: InternalType = InternalType.UNKNOWN
    is_constant: bool = False
    needs_promotion: bool = False
    const_value: int | float | str | None = None
    mem_location: MemLocation = MemLocation.REGISTER