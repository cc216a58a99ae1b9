"""A fixed-capacity ring buffer that overwrites its oldest items when full."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

BLANK = "\0"


class CircularBuffer:
    """Ring buffer with a fixed capacity.

    Indexing wraps around: negative indices count back from the size and
    large indices wrap modulo the capacity.  Only :meth:`at` checks bounds.
    """

    def __init__(self, capacity: int = 0, fill: Any = None) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._start = 0
        if fill is None:
            self._buffer = [BLANK] * capacity
            self._size = 0
        else:
            self._buffer = [fill] * capacity
            self._size = capacity

    def _slot(self, index: int) -> int:
        if self._capacity == 0:
            raise IndexError("buffer has no capacity")
        if index < 0:
            if self._size == 0:
                raise IndexError("negative index into an empty buffer")
            index %= self._size
        return (self._start + index) % self._capacity

    def _rebuild(self, items: list, capacity: int | None = None) -> None:
        if capacity is not None:
            self._capacity = capacity
        self._size = len(items)
        self._start = 0
        self._buffer = list(items) + [BLANK] * (self._capacity - len(items))

    def __getitem__(self, index: int) -> Any:
        return self._buffer[self._slot(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._buffer[self._slot(index)] = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (self[i] for i in range(self._size))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CircularBuffer):
            return NotImplemented
        return (
            self._capacity == other._capacity
            and self._size == other._size
            and list(self) == list(other)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CircularBuffer(capacity={self._capacity}, items={list(self)!r})"

    def at(self, index: int) -> Any:
        """Return the item at ``index``, raising IndexError when out of range."""
        if not 0 <= index < self._size:
            raise IndexError("index out of range")
        return self[index]

    def front(self) -> Any:
        if self._size == 0:
            raise IndexError("front of an empty buffer")
        return self[0]

    def back(self) -> Any:
        if self._size == 0:
            raise IndexError("back of an empty buffer")
        return self[self._size - 1]

    def linearize(self) -> list:
        """Move the first item to the start of storage and return the items."""
        if not self.is_linearized():
            self._rebuild(list(self))
        return self._buffer[: self._size]

    def is_linearized(self) -> bool:
        return self._start == 0

    def rotate(self, new_begin: int) -> None:
        """Shift the contents so that the item at ``new_begin`` becomes first."""
        if new_begin >= self._size or self._size == 0:
            raise ValueError("new_begin >= size")
        new_begin %= self._size
        items = list(self)
        self._rebuild(items[new_begin:] + items[:new_begin])

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    def reserve(self) -> int:
        """Number of free slots."""
        return self._capacity - self._size

    def capacity(self) -> int:
        return self._capacity

    def set_capacity(self, new_capacity: int) -> None:
        """Change the capacity, keeping as many leading items as fit."""
        if new_capacity <= 0:
            raise ValueError("capacity <= 0")
        self._rebuild(list(self)[:new_capacity], new_capacity)

    def resize(self, new_size: int, item: Any = BLANK) -> None:
        """Change the size, padding with ``item`` or dropping trailing items."""
        if new_size < 0:
            raise ValueError("size < 0")
        capacity = max(self._capacity, new_size)
        items = list(self)[:new_size]
        items.extend([item] * (new_size - len(items)))
        self._rebuild(items, capacity)

    def copy(self) -> CircularBuffer:
        clone = CircularBuffer()
        clone._capacity = self._capacity
        clone._start = self._start
        clone._size = self._size
        clone._buffer = list(self._buffer)
        return clone

    def swap(self, other: CircularBuffer) -> None:
        self.__dict__, other.__dict__ = other.__dict__, self.__dict__

    def push_back(self, item: Any = BLANK) -> None:
        """Append an item, overwriting the first one when the buffer is full."""
        if self._capacity == 0:
            raise IndexError("buffer has no capacity")
        self._buffer[(self._start + self._size) % self._capacity] = item
        if self.is_full():
            self._start = (self._start + 1) % self._capacity
        else:
            self._size += 1

    def push_front(self, item: Any = BLANK) -> None:
        """Prepend an item, overwriting the last one when the buffer is full."""
        if self._capacity == 0:
            raise IndexError("buffer has no capacity")
        self._start = (self._start - 1) % self._capacity
        if not self.is_full():
            self._size += 1
        self._buffer[self._start] = item

    def pop_back(self) -> None:
        if self._size == 0:
            raise IndexError("pop from an empty buffer")
        self[self._size - 1] = BLANK
        self._size -= 1

    def pop_front(self) -> None:
        if self._size == 0:
            raise IndexError("pop from an empty buffer")
        self[0] = BLANK
        self._start = (self._start + 1) % self._capacity
        self._size -= 1

    def insert(self, pos: int, item: Any = BLANK) -> None:
        """Store ``item`` at ``pos``; the capacity stays the same."""
        if not 0 <= pos < self._capacity:
            raise IndexError("position out of range")
        self[pos] = item

    def erase(self, first: int, last: int) -> None:
        """Remove the items in ``[first, last)``; negative bounds wrap by capacity."""
        if first < 0:
            first += self._capacity
        if last < 0:
            last += self._capacity
        if not (0 <= first < self._capacity and 0 <= last < self._capacity):
            raise IndexError("bounds out of range")
        if first > last:
            raise ValueError("first > last")
        items = list(self)
        self._rebuild(items[:first] + items[last:])

    def clear(self) -> None:
        self._buffer = [BLANK] * self._capacity
        self._size = 0
        self._start = 0