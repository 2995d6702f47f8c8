import pytest

from purgatory.twopointers import is_palindrome, max_area, trap, two_sum


@pytest.mark.parametrize(
    "text, expected",
    [
        ("A man, a plan, a canal: Panama", True),
        ("", True),
        ("race a car", False),
        (" ", True),
    ],
)
def test_is_palindrome(text, expected):
    assert is_palindrome(text) is expected


@pytest.mark.parametrize(
    "numbers, target, expected",
    [
        ([2, 7, 11, 15], 9, [1, 2]),
        ([2, 3, 4], 6, [1, 3]),
        ([1, 2], 10, []),
    ],
)
def test_two_sum(numbers, target, expected):
    assert two_sum(numbers, target) == expected


@pytest.mark.parametrize(
    "height, expected",
    [([1, 8, 6, 2, 5, 4, 8, 3, 7], 49), ([1, 1], 1), ([], 0)],
)
def test_max_area(height, expected):
    assert max_area(height) == expected


@pytest.mark.parametrize(
    "height, expected",
    [
        ([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1], 6),
        ([], 0),
        ([4, 2, 0, 3, 2, 5], 9),
    ],
)
def test_trap(height, expected):
    assert trap(height) == expected