"""Integer puzzles, descriptive statistics and small recursive functions."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass


def digit_count(n: int) -> int:
    """Return the number of decimal digits of ``n``; zero has none."""
    return len(str(abs(n))) if n else 0


def _signed_digits(n: int) -> list[int]:
    """Decimal digits of ``n``, each carrying the sign of ``n``."""
    if not n:
        return []
    sign = -1 if n < 0 else 1
    return [sign * int(ch) for ch in str(abs(n))]


def armstrong_sum(n: int) -> int:
    """Sum of the digits of ``n``, each raised to the number of digits."""
    count = digit_count(n)
    return sum(digit**count for digit in _signed_digits(n))


def is_armstrong(n: int) -> bool:
    """Tell whether ``n`` equals its own Armstrong sum."""
    return armstrong_sum(n) == n


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial is defined for non-negative numbers only")
    return math.prod(range(2, n + 1))


@dataclass(frozen=True)
class Statistics:
    """Sum, mean, population variance and standard deviation of a sample."""

    total: float
    mean: float
    variance: float
    stddev: float


def statistics(values: Iterable[float]) -> Statistics:
    """Compute the sum, mean, population variance and standard deviation."""
    data = list(values)
    if not data:
        raise ValueError("at least one value is required")
    total = sum(data)
    mean = total / len(data)
    variance = sum((value - mean) ** 2 for value in data) / len(data)
    return Statistics(total, mean, variance, math.sqrt(variance))


def odd_even_sums(values: Iterable[int]) -> tuple[int, int]:
    """Return ``(sum of odd values, sum of even values)``."""
    odd_sum = even_sum = 0
    for value in values:
        if value % 2 == 0:
            even_sum += value
        else:
            odd_sum += value
    return odd_sum, even_sum


def ncr(n: int, r: int) -> int:
    """Number of ways to choose ``r`` items out of ``n``."""
    if n < 0 or r < 0:
        raise ValueError("n and r must be non-negative")
    if n < r:
        raise ValueError("n should be greater than or equal to r")
    return factorial(n) // (factorial(r) * factorial(n - r))


def ackermann(m: int, n: int) -> int:
    """Evaluate the Ackermann function A(m, n)."""
    if m < 0 or n < 0:
        raise ValueError("Ackermann's function takes non-negative arguments")
    pending = [m]
    while pending:
        m = pending.pop()
        if m == 0:
            n += 1
        elif n == 0:
            n = 1
            pending.append(m - 1)
        else:
            pending.append(m - 1)
            pending.append(m)
            n -= 1
    return n


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting 0 as the first."""
    if n < 1:
        raise ValueError("position must be at least 1")
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return previous


def _truncated_remainder(x: int, y: int) -> int:
    """Remainder whose sign follows the dividend."""
    remainder = abs(x) % abs(y)
    return -remainder if x < 0 else remainder


def gcd(x: int, y: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while y:
        x, y = y, _truncated_remainder(x, y)
    return x