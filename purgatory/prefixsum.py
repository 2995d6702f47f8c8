"""Range-sum queries answered from precomputed prefix sums."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections.abc import Sequence
from itertools import accumulate


class NumArray:
    """Answers sums over index ranges of a fixed list in constant time."""

    def __init__(self, nums: Sequence[int]) -> None:
        self._prefix = [0, *accumulate(nums)]

    def sum_range(self, left: int, right: int) -> int:
        """Return the sum of items ``left`` through ``right``, both included."""
        return self._prefix[right + 1] - self._prefix[left]


class NumMatrix:
    """Answers sums over rectangles of a fixed matrix in constant time."""

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        cols = len(matrix[0]) if matrix else 0
        prefix = [[0] * (cols + 1)]
        for row in matrix:
            above = prefix[-1]
            current = [0]
            for j, value in enumerate(row, start=1):
                current.append(value + above[j] + current[j - 1] - above[j - 1])
            prefix.append(current)
        self._prefix = prefix

    def sum_region(self, row1: int, col1: int, row2: int, col2: int) -> int:
        """Return the sum of the rectangle with corners (row1, col1) and (row2, col2), inclusive."""
        p = self._prefix
        return (
            p[row2 + 1][col2 + 1]
            - p[row1][col2 + 1]
            - p[row2 + 1][col1]
            + p[row1][col1]
        )


def max_sum_submatrix(matrix: Sequence[Sequence[int]], k: int) -> int:
    """Return the largest sum of a rectangle of ``matrix`` that is at most ``k``.

    Raises ValueError if the matrix is empty or no rectangle sums to at most ``k``.
    """
    if not matrix or not matrix[0]:
        raise ValueError("matrix must not be empty")
    cols = len(matrix[0])
    best: int | None = None

    for top in range(len(matrix)):
        col_sums = [0] * cols
        for row in matrix[top:]:
            col_sums = [total + value for total, value in zip(col_sums, row)]
            seen = [0]
            running = 0
            for value in col_sums:
                running += value
                pos = bisect_left(seen, running - k)
                if pos < len(seen):
                    candidate = running - seen[pos]
                    if best is None or candidate > best:
                        best = candidate
                insort(seen, running)

    if best is None:
        raise ValueError(f"no submatrix sums to at most {k}")
    return best