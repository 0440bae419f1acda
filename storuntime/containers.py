"""Runtime arrays, lists and tuples, with allocation statistics."""

from __future__ import annotations

from dataclasses import dataclass, field

from .overflow import INT64_MAX, INT64_MIN

#: Capacity given to a list created with a capacity of zero.
DEFAULT_LIST_CAPACITY = 4

Scalar = int | float


@dataclass(frozen=True)
class MemStats:
    """Snapshot of the runtime's memory counters."""

    bigdecimal_count: int = 0
    bigdecimal_bytes: int = 0
    heap_string_count: int = 0
    heap_string_bytes: int = 0
    total_allocations: int = 0


def _check_index(index: int, count: int, kind: str) -> None:
    if not 0 <= index < count:
        raise IndexError(f"{kind} index out of bounds: {index} >= {count}")


def _check_type(type_tag: int) -> int:
    tag = int(type_tag)
    if not 0 <= tag <= 0xFF:
        raise ValueError(f"type tag {tag} does not fit in one byte")
    return tag


def _check_scalar(value: Scalar) -> Scalar:
    if isinstance(value, float):
        return value
    if isinstance(value, int):
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f"{value} is outside the int64 range")
        return value
    raise TypeError(f"expected int or float, got {type(value).__name__}")


class Array:
    """Fixed number of fixed-size elements, zero-filled on creation."""

    __slots__ = ("_buffer", "_count", "elem_size")

    def __init__(self, count: int, elem_size: int) -> None:
        if count <= 0 or elem_size <= 0:
            raise ValueError("count and element size must both be positive")
        self._count = count
        self.elem_size = elem_size
        self._buffer = bytearray(count * elem_size)

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, index: int) -> bytes:
        _check_index(index, self._count, "Array")
        offset = index * self.elem_size
        return bytes(self._buffer[offset:offset + self.elem_size])

    def __setitem__(self, index: int, value: bytes) -> None:
        _check_index(index, self._count, "Array")
        data = bytes(value)
        if len(data) != self.elem_size:
            raise ValueError(f"element must be exactly {self.elem_size} bytes, got {len(data)}")
        offset = index * self.elem_size
        self._buffer[offset:offset + self.elem_size] = data

    def __repr__(self) -> str:
        return f"Array(count={self._count}, elem_size={self.elem_size})"


class List:
    """Growable list of scalar values, each tagged with a type byte."""

    __slots__ = ("_values", "_types", "_count", "capacity")

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity or DEFAULT_LIST_CAPACITY
        self._values: list[Scalar | None] = [None] * self.capacity
        self._types: list[int] = [0] * self.capacity
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def set(self, index: int, value: Scalar, type: int) -> None:
        """Store value at index, growing the list if index is past its capacity."""
        if index < 0:
            raise IndexError(f"List index must not be negative: {index}")
        value = _check_scalar(value)
        tag = _check_type(type)
        if index >= self.capacity:
            new_capacity = (index + 1) * 2
            extra = new_capacity - self.capacity
            self._values.extend([None] * extra)
            self._types.extend([0] * extra)
            self.capacity = new_capacity
        self._values[index] = value
        self._types[index] = tag
        self._count = max(self._count, index + 1)

    def get(self, index: int) -> Scalar | None:
        """Value at index; None for a slot that was skipped over."""
        _check_index(index, self._count, "List")
        return self._values[index]

    def type_of(self, index: int) -> int:
        """Type byte of the element at index; 0 for a skipped slot."""
        _check_index(index, self._count, "List")
        return self._types[index]

    def append(self, value: Scalar, type: int) -> None:
        """Store value after the last element."""
        self.set(self._count, value, type)

    def __iter__(self):
        return iter(self._values[:self._count])

    def __repr__(self) -> str:
        return f"List({self._values[:self._count]!r})"


class Tuple:
    """Fixed number of scalar slots, each tagged with a type byte."""

    __slots__ = ("_values", "_types")

    def __init__(self, count: int) -> None:
        if count <= 0:
            raise ValueError("tuple count must be positive")
        self._values: list[Scalar | None] = [None] * count
        self._types: list[int] = [0] * count

    def __len__(self) -> int:
        return len(self._values)

    def set(self, index: int, value: Scalar, type: int) -> None:
        """Initialise the slot at index."""
        _check_index(index, len(self._values), "Tuple")
        self._values[index] = _check_scalar(value)
        self._types[index] = _check_type(type)

    def get(self, index: int) -> Scalar | None:
        """Value at index; None for a slot not yet initialised."""
        _check_index(index, len(self._values), "Tuple")
        return self._values[index]

    def type_of(self, index: int) -> int:
        """Type byte of the slot at index; 0 if not yet initialised."""
        _check_index(index, len(self._values), "Tuple")
        return self._types[index]

    def __iter__(self):
        return iter(self._values)

    def __repr__(self) -> str:
        return f"Tuple({tuple(self._values)!r})"


@dataclass
class Runtime:
    """Allocator for runtime containers that keeps memory statistics."""

    _stats: MemStats = field(default_factory=MemStats, init=False)

    def __init__(self) -> None:
        self._stats = MemStats()

    def reset(self) -> None:
        """Clear all counters."""
        self._stats = MemStats()

    def stats(self) -> MemStats:
        """Current counters."""
        return self._stats

    def _count_allocation(self) -> None:
        self._stats = MemStats(
            bigdecimal_count=self._stats.bigdecimal_count,
            bigdecimal_bytes=self._stats.bigdecimal_bytes,
            heap_string_count=self._stats.heap_string_count,
            heap_string_bytes=self._stats.heap_string_bytes,
            total_allocations=self._stats.total_allocations + 1,
        )

    def array(self, count: int, elem_size: int) -> Array:
        """Allocate a zero-filled array."""
        result = Array(count, elem_size)
        self._count_allocation()
        return result

    def list(self, capacity: int = 0) -> List:
        """Allocate an empty list."""
        result = List(capacity)
        self._count_allocation()
        return result

    def tuple(self, count: int) -> Tuple:
        """Allocate a tuple with uninitialised slots."""
        result = Tuple(count)
        self._count_allocation()
        return result