import pytest

from codebits.paths import matrix_sum, max_edge_removal, min_cost_path, subset_sums

GRID = [[1, 2, 3], [4, 8, 2], [1, 5, 3]]


def test_min_cost_path_source_example():
    assert min_cost_path(GRID, 2, 2) == 8


def test_min_cost_path_origin():
    assert min_cost_path(GRID, 0, 0) == GRID[0][0]


def test_min_cost_path_single_row_is_prefix_sum():
    row = [[4, 1, 7, 3]]
    assert min_cost_path(row, 0, 3) == sum(row[0])


def test_min_cost_path_at_least_endpoints():
    assert min_cost_path(GRID, 2, 2) >= GRID[0][0] + GRID[2][2]


def test_min_cost_path_outside_grid():
    with pytest.raises(ValueError):
        min_cost_path(GRID, -1, 0)
    with pytest.raises(ValueError):
        min_cost_path(GRID, 3, 0)


def test_subset_sums_source_example():
    weights = [10, 7, 5, 18, 12, 20, 15]
    assert subset_sums(weights, 35) == [(10, 7, 18), (10, 5, 20), (5, 18, 12), (20, 15)]


def test_subset_sums_each_hits_target_in_order():
    weights = [3, 34, 4, 12, 5, 2]
    found = subset_sums(weights, 9)
    assert found
    for subset in found:
        assert sum(subset) == 9
        positions = [weights.index(x) for x in subset]
        assert positions == sorted(positions)
    assert len(set(found)) == len(found)


def test_subset_sums_unreachable():
    assert subset_sums([2, 4, 6], 5) == []


def test_max_edge_removal_source_example():
    assert max_edge_removal(5, [[1, 2], [1, 3], [1, 4], [2, 5]]) == 1


def test_max_edge_removal_bounded_by_edges():
    edges = [(1, 2), (2, 3), (3, 4), (4, 5), (5, 6)]
    assert 0 <= max_edge_removal(6, edges) < len(edges) + 1


def test_max_edge_removal_star_cannot_cut():
    edges = [(1, k) for k in range(2, 6)]
    assert max_edge_removal(5, edges) == max_edge_removal(1, [])


def test_max_edge_removal_unknown_node():
    with pytest.raises(ValueError):
        max_edge_removal(3, [(1, 4)])


def test_matrix_sum_zero_identity():
    a = [[1, 2], [3, 4]]
    zeros = [[0, 0], [0, 0]]
    assert matrix_sum(a, zeros) == a


def test_matrix_sum_commutative():
    a = [[1, -2, 3], [4, 5, 6]]
    b = [[7, 8, 9], [-1, 0, 2]]
    assert matrix_sum(a, b) == matrix_sum(b, a)


def test_matrix_sum_shape_mismatch():
    with pytest.raises(ValueError):
        matrix_sum([[1, 2]], [[1, 2, 3]])