"""Small number-theory and numeric routines."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise

MOD = 1_000_000_007
HASH_BASE = 107
DEFAULT_MAX_ERROR = 1e-7


def bell_number(n: int) -> int:
    """Return the n-th Bell number, the count of partitions of an n-element set."""
    if n < 0:
        raise ValueError("n must be non-negative")
    row = [1]
    for _ in range(n):
        new_row = [row[-1]]
        for value in row:
            new_row.append(new_row[-1] + value)
        row = new_row
    return row[0]


def count_coin_change(coins: Iterable[int], amount: int) -> int:
    """Return the number of ways to make ``amount`` from unlimited ``coins``.

    The order in which coins are used does not matter.
    """
    denominations = list(coins)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coin values must be positive")
    if amount < 0:
        return 0
    ways = [1] + [0] * amount
    for coin in denominations:
        for value in range(coin, amount + 1):
            ways[value] += ways[value - coin]
    return ways[amount]


def counting_towers(n: int) -> int:
    """Return the number of ways to build a 2 x n tower, modulo 1e9+7."""
    if n < 1:
        raise ValueError("tower height must be at least 1")
    if n == 1:
        return 2
    joined, split = 1, 1
    for _ in range(n - 2):
        joined, split = (4 * joined + split) % MOD, (joined + 2 * split) % MOD
    return (5 * joined + 3 * split) % MOD


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers, always at least ``[0, 1]``."""
    terms = [0, 1]
    while len(terms) < n:
        terms.append(terms[-1] + terms[-2])
    return terms


def reverse_number(n: int) -> int:
    """Return ``n`` with its decimal digits reversed, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def is_palindrome_number(num: int) -> bool:
    """Return True if ``num`` reads the same with its digits reversed."""
    return reverse_number(num) == num


def square_root(x: float, max_error: float = DEFAULT_MAX_ERROR) -> float:
    """Approximate the square root of ``x`` by Newton's method.

    Iterates until ``|r*r - x|`` is at most ``max_error``.
    """
    if x < 0:
        raise ValueError("cannot take the square root of a negative number")
    if max_error <= 0:
        raise ValueError("max_error must be positive")
    root = 1.0
    while abs(root * root - x) > max_error:
        root = (root + x / root) / 2
    return root


def quadratic_roots(a: float, b: float, c: float) -> tuple[complex, complex] | tuple[float, float]:
    """Return both roots of ``a*x**2 + b*x + c``.

    Real roots are floats; when the discriminant is negative the roots are
    complex conjugates.
    """
    if a == 0:
        raise ValueError("coefficient a must be non-zero")
    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        spread = math.sqrt(discriminant)
        return (-b + spread) / (2 * a), (-b - spread) / (2 * a)
    if discriminant == 0:
        root = -b / (2 * a)
        return root, root
    real = -b / (2 * a)
    imag = math.sqrt(-discriminant) / (2 * a)
    return complex(real, imag), complex(real, -imag)


def fast_power(base: int, exponent: int) -> int:
    """Return ``base ** exponent`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    while exponent > 0:
        if exponent % 2 == 1:
            result *= base
        base *= base
        exponent //= 2
    return result


def range_add_hash(values: Sequence[int], updates: Iterable[tuple[int, int, int]]) -> int:
    """Apply range additions and return a polynomial hash of the result.

    Each update ``(left, right, amount)`` adds ``amount`` to every position
    from ``left`` to ``right`` inclusive. The hash is
    ``sum(v[i] * 107**i) mod 1e9+7``.
    """
    if not values:
        raise ValueError("values must not be empty")
    size = len(values)
    diffs = [values[0]] + [b - a for a, b in pairwise(values)] + [0]
    for left, right, amount in updates:
        if not (0 <= left < size and 0 <= right < size):
            raise ValueError(f"update range ({left}, {right}) is out of bounds")
        diffs[left] += amount
        diffs[right + 1] -= amount
    updated = accumulate(diffs[:size])
    return sum(value * pow(HASH_BASE, i, MOD) for i, value in enumerate(updated)) % MOD


def multiplication_table(n: int) -> list[str]:
    """Return the lines ``n * i = n*i`` for i from 1 to 10."""
    return [f"{n} * {i} = {n * i}" for i in range(1, 11)]