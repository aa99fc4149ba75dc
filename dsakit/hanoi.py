"""Towers of Hanoi solver."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """One disk moved from one peg to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from {self.source} to {self.target}"


def _solve(n: int, source: str, target: str, via: str) -> Iterator[Move]:
    if n == 1:
        yield Move(1, source, target)
        return
    yield from _solve(n - 1, source, via, target)
    yield Move(n, source, target)
    yield from _solve(n - 1, via, target, source)


def hanoi_moves(n: int, source: str = "A", target: str = "B", via: str = "C") -> list[Move]:
    """Return the moves that carry ``n`` disks from ``source`` to ``target``."""
    if n < 1:
        raise ValueError("at least one disk is required")
    return list(_solve(n, source, target, via))