"""The n-queens puzzle."""

from __future__ import annotations

from typing import Iterator


def _placements(n: int) -> Iterator[tuple[int, ...]]:
    """Queen columns row by row, for every solution, columns tried in increasing order."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    columns: list[int] = []
    used_columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> Iterator[tuple[int, ...]]:
        if row == n:
            yield tuple(columns)
            return
        for col in range(n):
            if col in used_columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            columns.append(col)
            used_columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            yield from place(row + 1)
            columns.pop()
            used_columns.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    return place(0)


def solve_n_queens(n: int) -> list[list[str]]:
    """Every board placing n non-attacking queens, rows drawn with ``Q`` and ``.``."""
    return [
        ["." * col + "Q" + "." * (n - col - 1) for col in placement]
        for placement in _placements(n)
    ]


def total_n_queens(n: int) -> int:
    """Number of ways to place n non-attacking queens on an n x n board."""
    return sum(1 for _ in _placements(n))