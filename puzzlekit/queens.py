"""The n-queens puzzle."""

from __future__ import annotations

from collections.abc import Iterator


def _placements(n: int) -> Iterator[tuple[int, ...]]:
    if n < 0:
        raise ValueError("n must not be negative")

    def place(columns: tuple[int, ...]) -> Iterator[tuple[int, ...]]:
        row = len(columns)
        if row == n:
            yield columns
            return
        for col in range(n):
            if all(
                other != col and abs(other - col) != row - other_row
                for other_row, other in enumerate(columns)
            ):
                yield from place(columns + (col,))

    return place(())


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens on an n by n board.

    Each board is a list of rows drawn with ``Q`` and ``.``; boards come in
    order of their queens' columns, row by row.
    """
    return [
        ["." * col + "Q" + "." * (n - col - 1) for col in columns]
        for columns in _placements(n)
    ]


def total_n_queens(n: int) -> int:
    """Return the number of ways to place ``n`` non-attacking queens."""
    return sum(1 for _ in _placements(n))