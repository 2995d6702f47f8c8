"""Classic array, string, hashing, window, prefix-sum, tree and stack algorithms."""

__version__ = "0.0.0"

__all__ = [
    "arrays",
    "binarytree",
    "cli",
    "hashing",
    "prefixsum",
    "slidingwindow",
    "stacks",
    "twopointers",
]