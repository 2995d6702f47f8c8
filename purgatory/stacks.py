"""Problems solved with a stack: brackets, paths and arithmetic."""

from __future__ import annotations

import operator
from collections.abc import Iterable

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


def is_valid(s: str) -> bool:
    """Return True if every bracket in ``s`` is closed in the right order."""
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif not stack or stack.pop() != _PAIRS.get(char):
            return False
    return not stack


def simplify_path(path: str) -> str:
    """Return the canonical form of a Unix-style absolute ``path``."""
    parts: list[str] = []
    for token in path.split("/"):
        if token in ("", "."):
            continue
        if token == "..":
            if parts:
                parts.pop()
        else:
            parts.append(token)
    return "/" + "/".join(parts)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer arithmetic in reverse Polish notation.

    Division truncates towards zero. Raises ValueError on a malformed expression.
    """
    stack: list[int] = []
    for token in tokens:
        op = _OPERATORS.get(token)
        if op is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} lacks operands")
        b = stack.pop()
        a = stack.pop()
        stack.append(op(a, b))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def calculate(s: str) -> int:
    """Evaluate an expression of integers, ``+``, ``-`` and parentheses.

    Raises ValueError on an unmatched closing parenthesis.
    """
    saved: list[tuple[int, int]] = []
    result = 0
    sign = 1
    number = None
    for char in s:
        if char.isdigit() and char.isascii():
            number = (number or 0) * 10 + int(char)
            continue
        if number is not None:
            result += sign * number
            number = None
        if char == "+":
            sign = 1
        elif char == "-":
            sign = -1
        elif char == "(":
            saved.append((result, sign))
            result, sign = 0, 1
        elif char == ")":
            if not saved:
                raise ValueError("unmatched ')'")
            previous, previous_sign = saved.pop()
            result = previous + previous_sign * result
    if number is not None:
        result += sign * number
    return result