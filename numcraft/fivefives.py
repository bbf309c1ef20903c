"""Find every expression over a list of numbers that evaluates to a target.

Numbers are combined pairwise with +, -, *, exact /, and bounded ^ until one
value is left; the text of each expression uses only the parentheses needed.
"""

from __future__ import annotations

import argparse
from itertools import combinations
from typing import Iterable, Iterator, Optional, Sequence

_POWER_LIMIT = 10**15
_MAX_EXPONENT = 100

# Operators that force the operand to be wrapped, for each joining operator:
# (left operand, right operand).
_WRAP_ON = {
    "+": ("", ""),
    "-": ("", "+-"),
    "*": ("+-/", "+-/"),
    "/": ("+-/*", "+-/*"),
    "^": ("+-/*^", "+-/*^"),
}

Item = tuple[int, str]


def _has_top_level(text: str, operators: str) -> bool:
    """True if text holds one of operators outside every parenthesis."""
    if not operators:
        return False
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char in operators and depth == 0:
            return True
    return False


def bracket(x: str, y: str, op: str) -> str:
    """Join two expression texts with op, parenthesising where needed."""
    if op not in _WRAP_ON:
        raise ValueError(f"incorrect op {op!r}")
    wrap_left, wrap_right = _WRAP_ON[op]
    if _has_top_level(x, wrap_left):
        x = f"({x})"
    if _has_top_level(y, wrap_right):
        y = f"({y})"
    return f"{x} {op} {y}"


def _bounded_power(base: int, exponent: int) -> Optional[int]:
    """base ** exponent, or None if the exponent is out of range or it grows too large."""
    if not 0 <= exponent <= _MAX_EXPONENT:
        return None
    result = 1
    for _ in range(exponent):
        if result * base > _POWER_LIMIT:
            return None
        result *= base
    return result


def _joins(xp: Item, yp: Item) -> Iterator[tuple[int, str, str, str]]:
    """Every (value, left text, right text, op) that combines the two items."""
    x, x_text = xp
    y, y_text = yp
    yield x + y, x_text, y_text, "+"
    yield x - y, x_text, y_text, "-"
    yield y - x, y_text, x_text, "-"
    yield x * y, x_text, y_text, "*"
    if y != 0 and x % y == 0:
        yield x // y, x_text, y_text, "/"
    if x != 0 and y % x == 0:
        yield y // x, y_text, x_text, "/"
    power = _bounded_power(x, y)
    if power is not None:
        yield power, x_text, y_text, "^"
    power = _bounded_power(y, x)
    if power is not None:
        yield power, y_text, x_text, "^"


def _search(items: list[Item], target: int, found: set[str]) -> None:
    if not items:
        return
    if len(items) == 1:
        value, text = items[0]
        if value == target:
            found.add(text)
        return
    last_step = len(items) == 2
    for (i, xp), (j, yp) in combinations(enumerate(items), 2):
        rest = [item for k, item in enumerate(items) if k not in (i, j)]
        for value, left, right, op in _joins(xp, yp):
            if last_step:
                if value == target:
                    found.add(bracket(left, right, op))
            else:
                _search(rest + [(value, bracket(left, right, op))], target, found)


def expressions(values: Iterable[Item], target: int = 100) -> list[str]:
    """Sorted distinct expressions using every (value, text) item once that equal target."""
    found: set[str] = set()
    _search(list(values), target, found)
    return sorted(found)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="List every expression of repeated digits that reaches a target."
    )
    parser.add_argument("--digit", type=int, default=5)
    parser.add_argument("--count", type=int, default=5)
    parser.add_argument("--target", type=int, default=100)
    args = parser.parse_args(argv)
    values = [(args.digit, str(args.digit))] * args.count
    for text in expressions(values, args.target):
        print(f"{text} = {args.target}")
    return 0