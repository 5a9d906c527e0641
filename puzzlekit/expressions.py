"""Bracket matching and reverse Polish evaluation."""

from __future__ import annotations

from collections.abc import Iterable

_OPENERS = "([{"
_MATCHING = {")": "(", "]": "[", "}": "{"}


def is_valid_parentheses(s: str) -> bool:
    """Return whether the brackets in ``s`` are balanced and properly nested.

    Every character that is not an opening bracket closes the innermost open
    one; closing brackets must also match its kind.
    """
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
            continue
        if not stack:
            return False
        top = stack.pop()
        expected = _MATCHING.get(ch)
        if expected is not None and top != expected:
            return False
    return not stack


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATORS = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _truncating_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer reverse Polish notation; division truncates toward zero."""
    stack: list[int] = []

    def pop() -> int:
        if not stack:
            raise ValueError("not enough operands")
        return stack.pop()

    for token in tokens:
        operator = _OPERATORS.get(token)
        if operator is None:
            stack.append(int(token))
        else:
            right = pop()
            left = pop()
            stack.append(operator(left, right))
    return pop()