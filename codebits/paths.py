"""Grid, subset and tree search problems."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence


def min_cost_path(cost: Sequence[Sequence[int]], m: int, n: int) -> int:
    """Return the cheapest path cost from (0, 0) to (m, n).

    Moves go right, down or diagonally down-right; the cost of every cell
    visited, both ends included, is summed.
    """
    if not (0 <= m < len(cost)) or not (0 <= n < len(cost[m])):
        raise ValueError(f"target cell ({m}, {n}) is outside the grid")
    previous = [math.inf] * (n + 1)
    for i in range(m + 1):
        row: list[float] = []
        for j in range(n + 1):
            if i == 0 and j == 0:
                row.append(cost[0][0])
                continue
            left = row[j - 1] if j else math.inf
            diagonal = previous[j - 1] if j else math.inf
            row.append(cost[i][j] + min(left, previous[j], diagonal))
        previous = row
    return int(previous[n])


def subset_sums(weights: Sequence[int], target: int) -> list[tuple[int, ...]]:
    """Return every subset of ``weights`` that sums to ``target``.

    Subsets keep the original order of their elements and are listed in
    depth-first order; a subset that reaches the target is not extended.
    """

    def search(start: int, chosen: list[int], total: int) -> Iterator[tuple[int, ...]]:
        if total == target:
            yield tuple(chosen)
            return
        for index in range(start, len(weights)):
            chosen.append(weights[index])
            yield from search(index + 1, chosen, total + weights[index])
            chosen.pop()

    return list(search(0, [], 0))


def max_edge_removal(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Return how many tree edges can be cut so every component has even size.

    Nodes are numbered 1..n and the tree is rooted at node 1.
    """
    if n < 1:
        raise ValueError("the tree needs at least one node")
    neighbours: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for u, v in edges:
        if u not in neighbours or v not in neighbours:
            raise ValueError(f"edge ({u}, {v}) refers to an unknown node")
        neighbours[u].append(v)
        neighbours[v].append(u)

    parent: dict[int, int | None] = {1: None}
    order: list[int] = []
    stack = [1]
    while stack:
        node = stack.pop()
        order.append(node)
        for neighbour in neighbours[node]:
            if neighbour not in parent:
                parent[neighbour] = node
                stack.append(neighbour)

    sizes = dict.fromkeys(order, 1)
    cuts = 0
    for node in reversed(order):
        up = parent[node]
        if up is None:
            continue
        if sizes[node] % 2 == 0:
            cuts += 1
        else:
            sizes[up] += sizes[node]
    return cuts


def matrix_sum(first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the element-wise sum of two matrices of the same shape."""
    if len(first) != len(second) or any(len(a) != len(b) for a, b in zip(first, second)):
        raise ValueError("matrices must have the same shape")
    return [[a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]