"""Array exercises: sorting, matrix diagonals and resizing lists."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new list holding ``values`` in ascending order."""
    result = list(values)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def _square(matrix: Iterable[Iterable[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("the given order is not a square matrix")
    return rows


def principal_diagonal_sum(matrix: Iterable[Iterable[int]]) -> int:
    """Sum of the main diagonal of a square matrix."""
    return sum(row[i] for i, row in enumerate(_square(matrix)))


def off_diagonal_sum(matrix: Iterable[Iterable[int]]) -> int:
    """Sum of the anti-diagonal of a square matrix."""
    return sum(row[-1 - i] for i, row in enumerate(_square(matrix)))


def extend(values: Iterable[int], extra: Iterable[int]) -> list[int]:
    """Return ``values`` grown by the elements of ``extra``."""
    return [*values, *extra]


def shrink(values: Sequence[int], removed: int) -> list[int]:
    """Return ``values`` with its last ``removed`` elements cut off."""
    if removed < 0:
        raise ValueError("the number of removed elements cannot be negative")
    if removed > len(values):
        raise ValueError("cannot remove more elements than there are")
    return list(values[: len(values) - removed])


def remove_and_shrink(values: Sequence[int], removed: int, index: int) -> list[int]:
    """Drop the element at ``index`` and keep ``len(values) - removed`` elements."""
    if not 0 <= removed <= len(values):
        raise ValueError("the number of removed elements is out of range")
    if not 0 <= index < len(values):
        raise IndexError("index out of range")
    remaining = [*values[:index], *values[index + 1 :]]
    return remaining[: len(values) - removed]


def insert_at(values: Sequence[int], index: int, key: int) -> list[int]:
    """Return a copy of ``values`` with ``key`` placed at ``index``."""
    if not 0 <= index <= len(values):
        raise IndexError("index out of range")
    return [*values[:index], key, *values[index:]]