"""Array and string problems: in-place edits, greedy scans and text justification."""

from __future__ import annotations

import heapq
from collections.abc import Iterator, Sequence


def increasing_triplet(nums: Sequence[int]) -> bool:
    """Return True if some indices i < j < k have nums[i] < nums[j] < nums[k]."""
    first = second = float("inf")
    for num in nums:
        if num <= first:
            first = num
        elif num <= second:
            second = num
        else:
            return True
    return False


def merge(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` items of sorted ``nums2`` into ``nums1`` in place.

    ``nums1`` holds ``m`` sorted items followed by room for ``n`` more.
    """
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def remove_duplicates(nums: list[int]) -> int:
    """Keep at most two copies of each value of sorted ``nums`` at its front.

    Returns how many items are kept; items past that count are left as they were.
    """
    if len(nums) < 2:
        return len(nums)
    write = 2
    for value in nums[2:]:
        if value != nums[write - 2]:
            nums[write] = value
            write += 1
    return write


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` steps, in place."""
    if not nums:
        raise ValueError("cannot rotate an empty list")
    split = len(nums) - k % len(nums)
    nums[:] = nums[split:] + nums[:split]


def candy(ratings: Sequence[int]) -> int:
    """Return the fewest candies so every child gets one and beats lower-rated neighbours."""
    candies = [1] * len(ratings)
    for i in range(1, len(ratings)):
        if ratings[i] > ratings[i - 1]:
            candies[i] = candies[i - 1] + 1
    for i in range(len(ratings) - 2, -1, -1):
        if ratings[i] > ratings[i + 1]:
            candies[i] = max(candies[i], candies[i + 1] + 1)
    return sum(candies)


def remove_element(nums: list[int], val: int) -> int:
    """Move every item not equal to ``val`` to the front of ``nums``, keeping order.

    Returns how many items are kept; items past that count are left as they were.
    """
    kept = [num for num in nums if num != val]
    nums[: len(kept)] = kept
    return len(kept)


def can_jump(nums: Sequence[int]) -> bool:
    """Return True if the last index is reachable, each item giving the longest jump."""
    max_reach = 0
    for i, step in enumerate(nums):
        if i > max_reach:
            return False
        max_reach = max(max_reach, i + step)
    return True


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other item."""
    answer = [1] * len(nums)
    for i in range(1, len(nums)):
        answer[i] = answer[i - 1] * nums[i - 1]
    right = 1
    for i in range(len(nums) - 1, -1, -1):
        answer[i] *= right
        right *= nums[i]
    return answer


def _pack_lines(words: Sequence[str], max_width: int) -> Iterator[list[str]]:
    current: list[str] = []
    length = 0
    for word in words:
        if current and length + 1 + len(word) > max_width:
            yield current
            current = []
        length = length + 1 + len(word) if current else len(word)
        current.append(word)
    if current:
        yield current


def _justify(line: list[str], max_width: int) -> str:
    gaps = len(line) - 1
    base, extra = divmod(max_width - sum(map(len, line)), gaps)
    parts = []
    for index, word in enumerate(line[:-1]):
        parts.append(word)
        parts.append(" " * (base + (1 if index < extra else 0)))
    parts.append(line[-1])
    return "".join(parts)


def full_justify(words: Sequence[str], max_width: int) -> list[str]:
    """Lay ``words`` out in lines of exactly ``max_width`` characters.

    Inner lines spread spaces evenly, extra spaces going to the left gaps;
    the last line and single-word lines are left-justified.
    Raises ValueError if a word is longer than ``max_width``.
    """
    lines = list(_pack_lines(words, max_width))
    result = []
    for index, line in enumerate(lines):
        if index == len(lines) - 1 or len(line) == 1:
            text = " ".join(line)
            if len(text) > max_width:
                raise ValueError(f"word {text!r} is longer than {max_width}")
            result.append(text.ljust(max_width))
        else:
            result.append(_justify(line, max_width))
    return result