"""Textbook sorting algorithms that return new lists."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def bubble_sort(values: Iterable[int]) -> tuple[list[int], int]:
    """Sort with early-exit bubble sort.

    Returns the sorted list and the number of comparisons made.
    """
    items = list(values)
    comparisons = 0
    n = len(items)
    for passes in range(n):
        swapped = False
        for j in range(n - 1 - passes):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
            comparisons += 1
        if not swapped:
            break
    return items, comparisons


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, times in enumerate(counts) for _ in range(times)]


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Sort by recursive top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Sequence[int] | Iterable[int]) -> list[int]:
    """Sort by quicksort with last-element (Lomuto) partitioning."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))
    return items