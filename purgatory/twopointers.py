"""Problems solved by moving two indices towards each other."""

from __future__ import annotations

from collections.abc import Sequence


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def is_palindrome(s: str) -> bool:
    """Return True if ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    letters = [char.lower() for char in s if _is_alnum(char)]
    return letters == letters[::-1]


def two_sum(numbers: Sequence[int], target: int) -> list[int]:
    """Return the 1-based positions of two items of sorted ``numbers`` adding to ``target``.

    Returns an empty list when there is no such pair.
    """
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return [left + 1, right + 1]
        if total < target:
            left += 1
        else:
            right -= 1
    return []


def max_area(height: Sequence[int]) -> int:
    """Return the most water a container formed by two of the lines can hold."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map ``height`` traps."""
    left, right = 0, len(height) - 1
    left_max = right_max = 0
    water = 0
    while left < right:
        if height[left] < height[right]:
            if height[left] > left_max:
                left_max = height[left]
            else:
                water += left_max - height[left]
            left += 1
        else:
            if height[right] > right_max:
                right_max = height[right]
            else:
                water += right_max - height[right]
            right -= 1
    return water