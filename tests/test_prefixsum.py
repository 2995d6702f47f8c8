import pytest

from purgatory.prefixsum import NumArray, NumMatrix, max_sum_submatrix

MATRIX = [
    [3, 0, 1, 4, 2],
    [5, 6, 3, 2, 1],
    [1, 2, 0, 1, 5],
    [4, 1, 0, 1, 7],
    [1, 0, 3, 0, 5],
]


def test_num_array_basic():
    assert NumArray([-2, 0, 3, -5, 2, -1]).sum_range(0, 2) == 1


def test_num_array_whole_range():
    assert NumArray([-2, 0, 3, -5, 2, -1]).sum_range(0, 5) == -3


def test_num_array_single_item():
    nums = [4, 7, 1]
    array = NumArray(nums)
    assert [array.sum_range(i, i) for i in range(3)] == nums


def test_num_matrix_basic():
    assert NumMatrix(MATRIX).sum_region(2, 1, 4, 3) == 8


def test_num_matrix_edge():
    assert NumMatrix(MATRIX).sum_region(1, 2, 2, 4) == 12


def test_num_matrix_whole_matches_total():
    total = sum(sum(row) for row in MATRIX)
    assert NumMatrix(MATRIX).sum_region(0, 0, 4, 4) == total


def test_num_matrix_single_cell():
    matrix = NumMatrix(MATRIX)
    assert matrix.sum_region(3, 4, 3, 4) == MATRIX[3][4]


def test_max_sum_submatrix_basic():
    assert max_sum_submatrix([[1, 0, 1], [0, -2, 3]], 2) == 2


def test_max_sum_submatrix_single_row():
    assert max_sum_submatrix([[2, 2, -1]], 3) == 3


def test_max_sum_submatrix_none_fits():
    with pytest.raises(ValueError):
        max_sum_submatrix([[5, 6]], 1)


def test_max_sum_submatrix_empty():
    with pytest.raises(ValueError):
        max_sum_submatrix([], 1)