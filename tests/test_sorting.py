import pytest

from codebits.sorting import bubble_sort, counting_sort, merge_sort, quick_sort

SAMPLES = [
    [],
    [1],
    [81, 27, 38, 99, 51, 5],
    [4, 2, 2, 8, 3, 3, 1],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [7, 7, 7],
    [-3, 10, 0, -3, 2],
]


@pytest.mark.parametrize("values", SAMPLES)
def test_bubble_sort_sorts(values):
    result, comparisons = bubble_sort(values)
    assert result == sorted(values)
    assert comparisons >= 0


@pytest.mark.parametrize("values", SAMPLES)
def test_merge_sort_sorts(values):
    assert merge_sort(values) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_quick_sort_sorts(values):
    assert quick_sort(values) == sorted(values)


@pytest.mark.parametrize("values", [s for s in SAMPLES if all(v >= 0 for v in s)])
def test_counting_sort_sorts(values):
    assert counting_sort(values) == sorted(values)


def test_bubble_sort_sorted_input_stops_after_one_pass():
    values = list(range(12))
    _, comparisons = bubble_sort(values)
    assert comparisons == len(values) - 1


def test_bubble_sort_reversed_input_compares_every_pair():
    values = list(range(9, 0, -1))
    result, comparisons = bubble_sort(values)
    n = len(values)
    assert result == sorted(values)
    assert comparisons == n * (n - 1) // 2


def test_bubble_sort_empty():
    assert bubble_sort([]) == ([], 0)


def test_counting_sort_rejects_negative():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


@pytest.mark.parametrize("sort", [merge_sort, quick_sort, counting_sort])
def test_input_not_mutated(sort):
    values = [4, 2, 2, 8, 3, 3, 1]
    original = list(values)
    sort(values)
    assert values == original


def test_bubble_sort_input_not_mutated():
    values = [3, 1, 2]
    bubble_sort(values)
    assert values == [3, 1, 2]


def test_quick_sort_large_sorted_input():
    values = list(range(3000))
    assert quick_sort(values) == values


def test_sorts_agree():
    values = [9, -4, 0, 15, 15, 3, -4, 8]
    assert merge_sort(values) == quick_sort(values) == bubble_sort(values)[0]