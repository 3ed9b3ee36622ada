"""Matrix traversal, rotation and reshaping."""

from __future__ import annotations

from typing import Iterator, MutableSequence, Sequence


def _spiral_cells(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    """Coordinates of a rows x cols grid in clockwise spiral order."""
    top, left, bottom, right = 0, 0, rows - 1, cols - 1
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            yield top, col
        for row in range(top + 1, bottom + 1):
            yield row, right
        if top < bottom:
            for col in range(right - 1, left - 1, -1):
                yield bottom, col
        if left < right:
            for row in range(bottom - 1, top, -1):
                yield row, left
        top += 1
        left += 1
        bottom -= 1
        right -= 1


def diagonal_sum(mat: Sequence[Sequence[int]]) -> int:
    """Sum of both diagonals of a square matrix, the centre counted once."""
    n = len(mat)
    return sum(
        row[i] + (row[n - 1 - i] if i != n - 1 - i else 0)
        for i, row in enumerate(mat)
    )


def construct_2d_array(original: Sequence[int], m: int, n: int) -> list[list[int]]:
    """Lay ``original`` out row by row as an m x n matrix, or ``[]`` if sizes differ."""
    if len(original) != m * n:
        return []
    return [list(original[i * n:(i + 1) * n]) for i in range(m)]


def rotate_image(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    transposed = list(zip(*matrix))
    for row, column in zip(matrix, transposed):
        row[:] = column[::-1]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Elements of a matrix in clockwise spiral order from the top left."""
    if not matrix:
        return []
    return [matrix[r][c] for r, c in _spiral_cells(len(matrix), len(matrix[0]))]


def reshape(mat: list[list[int]], r: int, c: int) -> list[list[int]]:
    """Row-major reshape to r x c; ``mat`` itself comes back if the sizes differ."""
    rows = len(mat)
    cols = len(mat[0]) if mat else 0
    if rows * cols != r * c:
        return mat
    flat = [value for row in mat for value in row]
    return [flat[i * c:(i + 1) * c] for i in range(r)]


def generate_spiral(n: int) -> list[list[int]]:
    """An n x n matrix filled with 1 through n*n in clockwise spiral order."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    grid = [[0] * n for _ in range(n)]
    for number, (r, c) in enumerate(_spiral_cells(n, n), start=1):
        grid[r][c] = number
    return grid