"""Command entry point: runs a sample problem and prints its answer."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from purgatory.arrays import increasing_triplet

_DEFAULT_NUMS = (1, 2, 3, 4, 5)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="purgatory",
        description="Report whether a sequence holds an increasing triplet.",
    )
    parser.add_argument(
        "nums",
        nargs="*",
        type=int,
        help="integers to check (default: 1 2 3 4 5)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Print 1 if the numbers hold an increasing triplet, otherwise 0."""
    args = _parser().parse_args(argv)
    nums = args.nums if args.nums else list(_DEFAULT_NUMS)
    print(int(increasing_triplet(nums)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())