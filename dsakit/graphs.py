"""Depth-first and breadth-first traversal over an adjacency matrix."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Traversal:
    """The vertices reached from a start vertex, in the order they were reached."""

    start: int
    order: tuple[int, ...]
    vertex_count: int

    def all_reached(self) -> bool:
        """Tell whether every vertex of the graph was reached."""
        return len(self.order) == self.vertex_count


def _validate(adjacency: Sequence[Sequence[int]], start: int) -> int:
    count = len(adjacency)
    if any(len(row) != count for row in adjacency):
        raise ValueError("the adjacency matrix must be square")
    if not 0 <= start < count:
        raise IndexError("start vertex out of range")
    return count


def _neighbours(adjacency: Sequence[Sequence[int]], vertex: int) -> Iterator[int]:
    return (target for target, edge in enumerate(adjacency[vertex]) if edge)


def dfs(adjacency: Sequence[Sequence[int]], start: int) -> Traversal:
    """Depth-first traversal; neighbours are tried in increasing vertex order."""
    count = _validate(adjacency, start)
    visited = {start}
    order = [start]
    pending = [_neighbours(adjacency, start)]
    while pending:
        for target in pending[-1]:
            if target not in visited:
                visited.add(target)
                order.append(target)
                pending.append(_neighbours(adjacency, target))
                break
        else:
            pending.pop()
    return Traversal(start, tuple(order), count)


def bfs(adjacency: Sequence[Sequence[int]], start: int) -> Traversal:
    """Breadth-first traversal; neighbours are queued in increasing vertex order."""
    count = _validate(adjacency, start)
    visited = {start}
    order = [start]
    waiting = deque([start])
    while waiting:
        vertex = waiting.popleft()
        for target in _neighbours(adjacency, vertex):
            if target not in visited:
                visited.add(target)
                order.append(target)
                waiting.append(target)
    return Traversal(start, tuple(order), count)