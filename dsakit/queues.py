"""Bounded queues: linear, circular and double-ended."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueFull(Exception):
    """Raised when adding to a full queue."""


class QueueEmpty(Exception):
    """Raised when removing from an empty queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")


class LinearQueue(Generic[T]):
    """A queue whose slots are used once until it has been emptied completely."""

    def __init__(self, capacity: int = 5) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._items: deque[T] = deque()
        self._used = 0

    def enqueue(self, value: T) -> None:
        if self.is_full():
            raise QueueFull("queue is full")
        self._items.append(value)
        self._used += 1

    def dequeue(self) -> T:
        if not self._items:
            raise QueueEmpty("queue is empty")
        value = self._items.popleft()
        if not self._items:
            self._used = 0
        return value

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return self._used >= self._capacity

    def items(self) -> list[T]:
        """Return the contents from front to rear."""
        return list(self._items)


class CircularQueue(Generic[T]):
    """A queue that reuses freed slots and holds at most ``capacity`` items."""

    def __init__(self, capacity: int = 5) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._items: deque[T] = deque()

    def enqueue(self, value: T) -> None:
        if self.is_full():
            raise QueueFull("queue is full")
        self._items.append(value)

    def dequeue(self) -> T:
        if not self._items:
            raise QueueEmpty("queue is empty")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def items(self) -> list[T]:
        """Return the contents from front to rear."""
        return list(self._items)


class Deque(Generic[T]):
    """A bounded double-ended queue."""

    def __init__(self, capacity: int = 5) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._items: deque[T] = deque()

    def insert_front(self, value: T) -> None:
        if self.is_full():
            raise QueueFull("double ended queue is full")
        self._items.appendleft(value)

    def insert_rear(self, value: T) -> None:
        if self.is_full():
            raise QueueFull("double ended queue is full")
        self._items.append(value)

    def delete_front(self) -> T:
        if not self._items:
            raise QueueEmpty("double ended queue is empty")
        return self._items.popleft()

    def delete_rear(self) -> T:
        if not self._items:
            raise QueueEmpty("double ended queue is empty")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def items(self) -> list[T]:
        """Return the contents from front to rear."""
        return list(self._items)