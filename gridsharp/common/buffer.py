"""
This module contains the CircularBuffer class, a fixed-capacity history that
overwrites its oldest entry once full.

>>> buffer = CircularBuffer(3)
>>> for value in range(5):
...     buffer.add(value)
>>> buffer.size
3
>>> list(buffer)
[4, 3, 2]
"""

from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class CircularBuffer(Generic[T]):
    """
    A ring buffer that yields its items most-recently-added first.
    """

    def __init__(self, capacity: int):
        """
        Initialize an empty buffer.

        :param capacity: Maximum number of retained items.
        :raises ValueError: If capacity is less than 1.
        """
        if capacity < 1:
            raise ValueError("capacity must be > 0")
        self._capacity = capacity
        self._items: List[Optional[T]] = [None] * capacity
        self._insert_at = 0
        self._overflow = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def overflowed(self) -> bool:
        """Whether the write position has wrapped at least once."""
        return self._overflow

    @property
    def size(self) -> int:
        """
        Return the number of items currently held.

        >>> buffer = CircularBuffer(2)
        >>> buffer.add("a")
        >>> buffer.size
        1
        """
        return self._capacity if self._overflow else self._insert_at

    def add(self, item: T) -> None:
        """Store an item, overwriting the oldest one when the buffer is full."""
        self._items[self._insert_at] = item
        self._insert_at += 1
        if self._insert_at == self._capacity:
            self._insert_at = 0
            self._overflow = True

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[T]:
        # Walk backwards from the last written slot; stop after `size` items so
        # the slot about to be overwritten is never emitted twice.
        index = self._insert_at
        for _ in range(self.size):
            index = (index - 1) % self._capacity
            yield self._items[index]

    def __repr__(self) -> str:
        return f"CircularBuffer({self._capacity}, {list(self)!r})"
