"""Dynamic programming over grids, stairs and triangles."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def _check_grid(grid: Sequence[Sequence[int]]) -> None:
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must have equal length")


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths across an ``m`` by ``n`` grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be at least 1")
    ways = [1] * n
    for _ in range(m - 1):
        ways = list(accumulate(ways))
    return ways[-1]


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Count right/down paths across a grid where truthy cells are blocked."""
    _check_grid(grid)
    ways = [0] * len(grid[0])
    ways[0] = 1
    for row in grid:
        for j, cell in enumerate(row):
            if cell:
                ways[j] = 0
            elif j:
                ways[j] += ways[j - 1]
    return ways[-1]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum along a right/down path from corner to corner."""
    _check_grid(grid)
    previous = list(accumulate(grid[0]))
    for row in grid[1:]:
        current: list[int] = []
        for j, value in enumerate(row):
            best = previous[j] if j == 0 else min(current[-1], previous[j])
            current.append(best + value)
        previous = current
    return previous[-1]


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps taking one or two at a time.

    Values below 3 are returned unchanged.
    """
    if n < 3:
        return n
    before, last = 1, 2
    for _ in range(n - 2):
        before, last = last, before + last
    return last


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Return the smallest top-to-bottom path sum through a number triangle.

    Row ``i`` holds ``i + 1`` values; each step moves to one of the two
    values below.
    """
    if not triangle:
        raise ValueError("triangle must not be empty")
    if any(len(row) != i + 1 for i, row in enumerate(triangle)):
        raise ValueError("row i of the triangle must hold i + 1 values")
    best = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        best = [value + min(a, b) for value, a, b in zip(row, best, best[1:])]
    return best[0]