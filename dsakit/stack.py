"""A last-in, first-out stack with an optional fixed capacity."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(Exception):
    """Raised when popping or peeking an empty stack."""


class Stack(Generic[T]):
    """A stack that holds at most ``capacity`` items, or any number when ``None``."""

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[T] = []

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackOverflow("stack is full")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self._capacity is not None and len(self._items) >= self._capacity

    def items(self) -> list[T]:
        """Return the contents from top to bottom."""
        return self._items[::-1]

    def __len__(self) -> int:
        return len(self._items)