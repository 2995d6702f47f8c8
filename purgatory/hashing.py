"""Problems solved with counting and hash lookups."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Return True if ``ransom_note`` can be spelt from the letters of ``magazine``."""
    available = Counter(magazine)
    for char in ransom_note:
        available[char] -= 1
        if available[char] < 0:
            return False
    return True


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group strings that are anagrams of each other.

    Groups come in the order their first member appears; members keep input order.
    """
    groups: dict[str, list[str]] = defaultdict(list)
    for text in strs:
        groups["".join(sorted(text))].append(text)
    return list(groups.values())


def longest_consecutive(nums: Iterable[int]) -> int:
    """Return the length of the longest run of consecutive integers in ``nums``."""
    values = set(nums)
    longest = 0
    for num in values:
        if num - 1 in values:
            continue
        current = num
        while current + 1 in values:
            current += 1
        longest = max(longest, current - num + 1)
    return longest


def find_substring(s: str, words: Sequence[str]) -> list[int]:
    """Return start indices of windows in ``s`` made of all ``words`` concatenated.

    All words share one length. A word ending exactly at the end of ``s`` is
    not taken into account. Raises ValueError if ``words`` is empty.
    """
    if not words:
        raise ValueError("words must not be empty")
    word_len = len(words[0])
    num_words = len(words)
    wanted = Counter(words)
    result = []

    for offset in range(word_len):
        left = offset
        count = 0
        seen: Counter[str] = Counter()
        for j in range(offset, len(s), word_len):
            if j + word_len >= len(s):
                break
            word = s[j : j + word_len]
            if word in wanted:
                seen[word] += 1
                count += 1
                while seen[word] > wanted[word]:
                    seen[s[left : left + word_len]] -= 1
                    count -= 1
                    left += word_len
                if count == num_words:
                    result.append(left)
            else:
                seen.clear()
                count = 0
                left = j + word_len
    return result