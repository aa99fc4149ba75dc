import math

import pytest

from dsakit.numbers import (
    Statistics,
    ackermann,
    armstrong_sum,
    digit_count,
    factorial,
    fibonacci,
    gcd,
    is_armstrong,
    ncr,
    odd_even_sums,
    statistics,
)


@pytest.mark.parametrize("n", [7, 42, 153, 9474, 123456789])
def test_digit_count_matches_decimal_length(n):
    assert digit_count(n) == len(str(n))


def test_digit_count_ignores_sign():
    assert digit_count(-9474) == digit_count(9474)


def test_digit_count_of_zero():
    assert digit_count(0) == 0


@pytest.mark.parametrize("n", [153, 370, 371, 407, 1634, 9474])
def test_known_armstrong_numbers(n):
    assert armstrong_sum(n) == n
    assert is_armstrong(n)


@pytest.mark.parametrize("n", range(1, 10))
def test_single_digits_are_armstrong(n):
    assert is_armstrong(n)


def test_non_armstrong_number():
    assert armstrong_sum(10) == 1
    assert is_armstrong(10) is False


def test_armstrong_sum_of_negative_odd_length_mirrors_positive():
    assert armstrong_sum(-153) == -armstrong_sum(153)


@pytest.mark.parametrize("n", range(2, 12))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_of_one():
    assert factorial(1) == 1


def test_factorial_rejects_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_statistics_of_constant_sample():
    result = statistics([4, 4, 4, 4])
    assert result.mean == 4
    assert result.variance == 0
    assert result.stddev == 0


def test_statistics_invariants():
    values = [2, 4, 4, 4, 5, 5, 7, 9]
    result = statistics(values)
    assert isinstance(result, Statistics)
    assert result.total == sum(values)
    assert result.mean * len(values) == pytest.approx(result.total)
    assert result.stddev**2 == pytest.approx(result.variance)


def test_statistics_variance_is_shift_invariant():
    values = [1, 3, 8, 10]
    shifted = [value + 100 for value in values]
    assert statistics(shifted).variance == pytest.approx(statistics(values).variance)
    assert statistics(shifted).mean == pytest.approx(statistics(values).mean + 100)


def test_statistics_requires_values():
    with pytest.raises(ValueError):
        statistics([])


def test_odd_even_sums_partition_total():
    values = [1, 2, 3, 4, 5, -7, -8]
    odd_sum, even_sum = odd_even_sums(values)
    assert odd_sum + even_sum == sum(values)


def test_odd_even_sums_only_odd_values():
    values = [1, 3, 5]
    assert odd_even_sums(values) == (sum(values), 0)


@pytest.mark.parametrize("n", range(1, 12))
def test_ncr_choose_one(n):
    assert ncr(n, 1) == n


@pytest.mark.parametrize("n, r", [(5, 2), (10, 3), (12, 7), (6, 6)])
def test_ncr_symmetry(n, r):
    assert ncr(n, r) == ncr(n, n - r)


@pytest.mark.parametrize("n, r", [(5, 2), (10, 3), (12, 7)])
def test_ncr_pascal_rule(n, r):
    assert ncr(n, r) == ncr(n - 1, r - 1) + ncr(n - 1, r)


@pytest.mark.parametrize("n, r", [(-1, 0), (3, -1), (2, 5)])
def test_ncr_rejects_bad_arguments(n, r):
    with pytest.raises(ValueError):
        ncr(n, r)


@pytest.mark.parametrize("n", range(6))
def test_ackermann_small_rows(n):
    assert ackermann(0, n) == n + 1
    assert ackermann(1, n) == n + 2
    assert ackermann(2, n) == 2 * n + 3


@pytest.mark.parametrize("m", range(1, 4))
def test_ackermann_zero_column(m):
    assert ackermann(m, 0) == ackermann(m - 1, 1)


def test_ackermann_rejects_negative():
    with pytest.raises(ValueError):
        ackermann(-1, 2)


def test_fibonacci_first_positions():
    assert fibonacci(1) == 0
    assert fibonacci(2) == 1


@pytest.mark.parametrize("n", range(3, 25))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_rejects_position_zero():
    with pytest.raises(ValueError):
        fibonacci(0)


@pytest.mark.parametrize("x", [1, 17, 240])
def test_gcd_with_zero(x):
    assert gcd(x, 0) == x


@pytest.mark.parametrize("x, y", [(12, 18), (35, 64), (1071, 462), (100, 75)])
def test_gcd_divides_both(x, y):
    divisor = gcd(x, y)
    assert x % divisor == 0
    assert y % divisor == 0
    assert math.gcd(x // divisor, y // divisor) == 1


@pytest.mark.parametrize("x, y, k", [(12, 18, 5), (7, 3, 4)])
def test_gcd_scales(x, y, k):
    assert gcd(x * k, y * k) == k * gcd(x, y)


def test_gcd_is_symmetric():
    assert gcd(1071, 462) == gcd(462, 1071)