"""Classic array and string puzzles."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import reduce
from itertools import count
from operator import xor


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` is a rearrangement of the characters of ``s``."""
    return sorted(s) == sorted(t)


def first_missing_positive(values: Sequence[int]) -> int:
    """Return the smallest positive integer that does not occur in ``values``."""
    present = set(values)
    return next(k for k in count(1) if k not in present)


def gas_station_start(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Return the lowest station index from which the circuit can be completed.

    ``gas[i]`` is the fuel available at station ``i`` and ``cost[i]`` the fuel
    needed to reach station ``i + 1``. Returns -1 when no start works.
    """
    if len(gas) != len(cost):
        raise ValueError("gas and cost must have the same length")
    n = len(gas)
    diffs = [g - c for g, c in zip(gas, cost)]
    start = 0
    while start < n:
        tank = diffs[start]
        position = start
        while tank >= 0 and position - start < n:
            position += 1
            tank += diffs[position % n]
        if tank >= 0:
            return start
        start = position + 1
    return -1


def can_jump(jumps: Sequence[int]) -> bool:
    """Return True if the last index is reachable from the first.

    Each value is the maximum jump length from its position.
    """
    reachable = 0
    for position, length in enumerate(jumps):
        if position > reachable:
            return False
        reachable = max(reachable, position + length)
    return True


def single_number(nums: Sequence[int]) -> int:
    """Return the element that appears once when every other appears twice."""
    return reduce(xor, nums, 0)


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return ``[later_index, earlier_index]`` of two values summing to ``target``.

    Returns an empty list if no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = target - value
        if partner in seen:
            return [index, seen[partner]]
        seen[value] = index
    return []


def restore_string(s: str, indices: Sequence[int]) -> str:
    """Place ``s[i]`` at position ``indices[i]`` and return the result."""
    if sorted(indices) != list(range(len(s))):
        raise ValueError("indices must be a permutation of the positions of s")
    chars = [""] * len(s)
    for ch, target in zip(s, indices):
        chars[target] = ch
    return "".join(chars)


def _sum_of_extremes(nums: Sequence[int], beats: Callable[[int, int], bool]) -> int:
    """Sum, over all subarrays, of the element that ``beats`` every other."""
    n = len(nums)
    left = [-1] * n
    right = [n] * n

    stack: list[int] = []
    for i, value in enumerate(nums):
        while stack and beats(value, nums[stack[-1]]):
            right[stack.pop()] = i
        stack.append(i)

    stack = []
    for i in reversed(range(n)):
        value = nums[i]
        while stack and not beats(nums[stack[-1]], value):
            left[stack.pop()] = i
        stack.append(i)

    return sum(
        value * (i - lo) * (hi - i)
        for i, (value, lo, hi) in enumerate(zip(nums, left, right))
    )


def sub_array_ranges(nums: Sequence[int]) -> int:
    """Return the sum of ``max - min`` over every contiguous subarray."""
    largest = _sum_of_extremes(nums, lambda a, b: a > b)
    smallest = _sum_of_extremes(nums, lambda a, b: a < b)
    return largest - smallest


def fizz_buzz(n: int) -> list[str]:
    """Return the FizzBuzz sequence for 1..n."""
    result = []
    for i in range(1, n + 1):
        if i % 15 == 0:
            result.append("FizzBuzz")
        elif i % 3 == 0:
            result.append("Fizz")
        elif i % 5 == 0:
            result.append("Buzz")
        else:
            result.append(str(i))
    return result