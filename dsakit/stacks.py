"""Bounded array-backed and unbounded linked stacks."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Tuple


class StackOverflowError(Exception):
    """Raised when pushing onto a stack that is full."""


class StackUnderflowError(Exception):
    """Raised when reading from or popping an empty stack."""


class ArrayStack:
    """A stack with a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: List[Any] = []

    def _nonempty(self) -> List[Any]:
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items

    def is_empty(self) -> bool:
        """Return True when the stack holds no elements."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when no more elements can be pushed."""
        return len(self._items) == self.capacity

    def push(self, value: Any) -> None:
        """Push ``value`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError(f"stack overflow: {value!r} cannot be pushed")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        return self._nonempty().pop()

    def peek(self, position: int) -> Any:
        """Return the element at ``position``, counting the top as 1."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"not a valid position for the stack: {position}")
        return self._items[-position]

    def top(self) -> Any:
        """Return the top element without removing it."""
        return self._nonempty()[-1]

    def bottom(self) -> Any:
        """Return the bottom element without removing it."""
        return self._nonempty()[0]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack(capacity={self.capacity}, items={self._items!r})"


_Cell = Optional[Tuple[Any, "_Cell"]]


class LinkedStack:
    """An unbounded stack built from linked cells."""

    def __init__(self) -> None:
        self._top: _Cell = None
        self._size = 0

    def is_empty(self) -> bool:
        """Return True when the stack holds no elements."""
        return self._top is None

    def push(self, value: Any) -> None:
        """Push ``value`` on top of the stack."""
        self._top = (value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        value, self._top = self._top
        self._size -= 1
        return value

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements from top to bottom."""
        cell = self._top
        while cell is not None:
            value, cell = cell
            yield value

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"