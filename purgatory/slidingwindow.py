"""Problems solved with a window sliding over a sequence."""

from __future__ import annotations

from collections.abc import Sequence


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Return True if two equal items sit at most ``k`` positions apart."""
    last_index: dict[int, int] = {}
    for i, num in enumerate(nums):
        if num in last_index and i - last_index[num] <= k:
            return True
        last_index[num] = i
    return False


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest run of positive ``nums`` summing to at least ``target``.

    Returns 0 when no run reaches ``target``.
    """
    left = 0
    total = 0
    best = None
    for right, num in enumerate(nums):
        total += num
        while left <= right and total >= target:
            length = right - left + 1
            best = length if best is None else min(best, length)
            total -= nums[left]
            left += 1
    return best or 0


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring of ``s`` without repeated characters."""
    last_seen: dict[str, int] = {}
    left = 0
    longest = 0
    for right, char in enumerate(s):
        if last_seen.get(char, -1) >= left:
            left = last_seen[char] + 1
        last_seen[char] = right
        longest = max(longest, right - left + 1)
    return longest