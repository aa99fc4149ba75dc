"""A bounded priority queue kept in ascending order of priority."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from dsakit.queues import QueueEmpty, QueueFull

T = TypeVar("T")


@dataclass(frozen=True)
class Item(Generic[T]):
    """A value with its priority; lower numbers are served first."""

    value: T
    priority: int


class PriorityQueue(Generic[T]):
    """Serves the lowest priority number first; equal priorities in arrival order."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[Item[T]] = []

    def insert(self, value: T, priority: int) -> None:
        if self.is_full():
            raise QueueFull("priority queue is full")
        position = len(self._items)
        while position > 0 and self._items[position - 1].priority > priority:
            position -= 1
        self._items.insert(position, Item(value, priority))

    def remove(self) -> T:
        """Remove and return the value at the front."""
        if not self._items:
            raise QueueEmpty("priority queue is empty")
        return self._items.pop(0).value

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def items(self) -> list[Item[T]]:
        """Return the queued items from front to rear."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)