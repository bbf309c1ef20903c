"""Express integers as formulas that use one digit a fixed number of times.

Every intermediate value is kept within signed 64-bit range; an operation
whose result would leave that range, or is not an integer, is not applied.
"""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from enum import IntEnum
from functools import partial
from typing import Callable, Iterable, Optional, Sequence

INT_MIN = -(1 << 63)
INT_MAX = (1 << 63) - 1


def _fits(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def can_add(a: int, b: int) -> bool:
    """True if a + b fits in a signed 64-bit integer."""
    return _fits(a + b)


def can_sub(a: int, b: int) -> bool:
    """True if a - b fits in a signed 64-bit integer."""
    return _fits(a - b)


def can_mul(a: int, b: int) -> bool:
    """True if a * b can be formed without overflow.

    A product whose magnitude exceeds INT_MAX is refused, including INT_MIN
    itself unless one factor is 0 or 1.
    """
    if a == 0 or b == 0 or a == 1 or b == 1:
        return True
    if a == -1:
        return b != INT_MIN
    if b == -1:
        return a != INT_MIN
    if a in (INT_MAX, INT_MIN) or b in (INT_MAX, INT_MIN):
        return False
    return abs(a * b) <= INT_MAX


def can_mod(a: int, b: int) -> bool:
    """True if a % b is defined."""
    return b != 0


def can_div(a: int, b: int) -> bool:
    """True if a / b is defined and exact."""
    return can_mod(a, b) and a % b == 0


def can_sqrt(a: int) -> bool:
    """True if a is a perfect square."""
    if a < 0:
        return False
    root = math.isqrt(a)
    return root * root == a


def can_factorial(n: int, k: int) -> bool:
    """True if the k-fold factorial of n fits in 64 bits."""
    if n < 0 or k < 1:
        return False
    product = 1
    while n > 0:
        if not can_mul(product, n):
            return False
        product *= n
        n -= k
    return True


def can_power(a: int, n: int) -> bool:
    """True if a ** n is an integer that fits in 64 bits."""
    if a == 0 and n == 0:
        return False
    if a in (0, 1) or n == 0 or a == -1:
        return True
    if n < 0:
        return False
    if n == 1:
        return True
    if n >= 64:
        return False
    product = 1
    for _ in range(n):
        if not can_mul(product, a):
            return False
        product *= a
    return True


def int_power(x: int, n: int) -> int:
    """Integer power; raises ValueError where can_power refuses."""
    if not can_power(x, n):
        raise ValueError(f"cannot compute {x} ^ {n}")
    if x == 0:
        return 0
    if x == 1 or n == 0:
        return 1
    if x == -1:
        return -1 if n % 2 != 0 else 1
    return x**n


def int_sqrt(n: int) -> int:
    """Exact square root of a perfect square; raises ValueError otherwise."""
    if not can_sqrt(n):
        raise ValueError(f"{n} is not a perfect square")
    return math.isqrt(n)


def multifactorial(n: int, k: int) -> int:
    """n * (n - k) * (n - 2k) * ...; raises ValueError on overflow."""
    if not can_factorial(n, k):
        raise ValueError(f"cannot compute factorial({n}, {k})")
    return math.prod(range(n, 0, -k))


def _c_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _c_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


class Kind(IntEnum):
    """How a Number was produced."""

    RAW = 0
    PLUS = 1
    MINUS = 2
    MUL = 3
    DIV = 4
    MOD = 5
    SQRT = 6
    FACTORIAL = 7
    FACTORIAL_2 = 8
    FACTORIAL_3 = 9
    FACTORIAL_4 = 10
    FACTORIAL_5 = 11
    POWER = 12
    GCD = 13
    UNKNOWN = 99


_SYMBOLS = {
    Kind.PLUS: "+",
    Kind.MINUS: "-",
    Kind.MUL: "*",
    Kind.DIV: "/",
    Kind.MOD: "%",
    Kind.POWER: "^",
}


@dataclass(frozen=True)
class Number:
    """A value with the expression tree that produced it."""

    value: int
    used_count: int
    kind: Kind
    left: Optional["Number"] = None
    right: Optional["Number"] = None

    @property
    def key(self) -> tuple[int, int]:
        """Identity of a number in a search: its value and digit count."""
        return (self.value, self.used_count)

    def __lt__(self, other: "Number") -> bool:
        return self.key < other.key


def raw_number(value: int) -> Number:
    """A leaf holding one use of the digit."""
    return Number(value, 1, Kind.RAW)


def render_number(number: Number) -> str:
    """Format a number's expression tree."""
    kind = number.kind
    if kind is Kind.RAW:
        return str(number.value)
    if kind in _SYMBOLS:
        left, right = number.left, number.right
        wrap_left = left.kind is not Kind.RAW and kind not in (Kind.PLUS, Kind.MINUS)
        wrap_right = right.kind is not Kind.RAW and kind is not Kind.PLUS
        text_left = render_number(left)
        text_right = render_number(right)
        if wrap_left:
            text_left = f"({text_left})"
        if wrap_right:
            text_right = f"({text_right})"
        return f"{text_left} {_SYMBOLS[kind]} {text_right}"
    if kind is Kind.SQRT:
        return f"sqrt({render_number(number.left)})"
    if Kind.FACTORIAL <= kind <= Kind.FACTORIAL_5:
        inner = render_number(number.left)
        if number.left.kind is not Kind.RAW:
            inner = f"({inner})"
        return inner + "!" * (kind - Kind.FACTORIAL + 1)
    if kind is Kind.GCD:
        return f"gcd({render_number(number.left)}, {render_number(number.right)})"
    raise ValueError("cannot render a number of unknown kind")


def _unary(a: Number, check: Callable, op: Callable, kind: Kind) -> Optional[Number]:
    if not check(a.value):
        return None
    return Number(op(a.value), a.used_count, kind, a)


def _binary(a: Number, b: Number, check: Callable, op: Callable, kind: Kind) -> Optional[Number]:
    if not check(a.value, b.value):
        return None
    return Number(op(a.value, b.value), a.used_count + b.used_count, kind, a, b)


def add(a: Number, b: Number) -> Optional[Number]:
    return _binary(a, b, can_add, lambda x, y: x + y, Kind.PLUS)


def subtract(a: Number, b: Number) -> Optional[Number]:
    return _binary(a, b, can_sub, lambda x, y: x - y, Kind.MINUS)


def multiply(a: Number, b: Number) -> Optional[Number]:
    return _binary(a, b, can_mul, lambda x, y: x * y, Kind.MUL)


def divide(a: Number, b: Number) -> Optional[Number]:
    return _binary(a, b, can_div, _c_div, Kind.DIV)


def modulo(a: Number, b: Number) -> Optional[Number]:
    return _binary(a, b, can_mod, _c_mod, Kind.MOD)


def sqrt_of(a: Number) -> Optional[Number]:
    return _unary(a, can_sqrt, int_sqrt, Kind.SQRT)


def power_of(a: Number, n: Number) -> Optional[Number]:
    return _binary(a, n, can_power, int_power, Kind.POWER)


def factorial_of(a: Number, k: int = 1) -> Optional[Number]:
    kind = Kind(Kind.FACTORIAL + k - 1)
    return _unary(
        a,
        lambda v: can_factorial(v, k),
        lambda v: multifactorial(v, k),
        kind,
    )


def gcd_of(a: Number, b: Number) -> Optional[Number]:
    return _binary(a, b, lambda x, y: True, math.gcd, Kind.GCD)


Operation = Callable[..., Optional[Number]]


def _required_params(func: Callable) -> tuple[str, ...]:
    code = getattr(func, "__code__", None)
    if code is None:
        raise TypeError(f"cannot tell how many operands {func!r} takes")
    names = code.co_varnames[: code.co_argcount]
    defaults = getattr(func, "__defaults__", None) or ()
    return names[: len(names) - len(defaults)]


def _arity(op: Operation) -> int:
    if isinstance(op, partial):
        remaining = _required_params(op.func)[len(op.args):]
        return sum(1 for name in remaining if name not in op.keywords)
    bound_to = getattr(op, "__self__", None)
    func = getattr(op, "__func__", None)
    if bound_to is not None and func is not None:
        return len(_required_params(func)) - 1
    return len(_required_params(op))


def _split(ops: Sequence[Operation]) -> tuple[list[Operation], list[Operation]]:
    unary = [op for op in ops if _arity(op) == 1]
    binary = [op for op in ops if _arity(op) == 2]
    return unary, binary


def _expand(
    pool: list[Number],
    fresh: set[tuple[int, int]],
    max_used: int,
    unary: list[Operation],
    binary: list[Operation],
    known: dict,
) -> dict[tuple[int, int], Number]:
    """New numbers from pool, skipping combinations of two old numbers."""
    memory: dict[tuple[int, int], Number] = {}

    def keep(result: Optional[Number]) -> None:
        if result is None or result.used_count > max_used:
            return
        key = result.key
        if key not in known and key not in memory:
            memory[key] = result

    every_by_limit = [[y for y in pool if y.used_count <= limit] for limit in range(max_used + 1)]
    fresh_by_limit = [[y for y in group if y.key in fresh] for group in every_by_limit]

    for x in pool:
        x_fresh = x.key in fresh
        if x_fresh:
            for op in unary:
                keep(op(x))
        limit = max_used - x.used_count
        if limit < 0:
            continue
        partners = every_by_limit[limit] if x_fresh else fresh_by_limit[limit]
        for y in partners:
            for op in binary:
                keep(op(x, y))
    return memory


def _index(numbers: Iterable[Number]) -> dict[tuple[int, int], Number]:
    index: dict[tuple[int, int], Number] = {}
    for number in sorted(numbers):
        index.setdefault(number.key, number)
    return index


def find_new(
    numbers: Iterable[Number], max_used: int, ops: Sequence[Operation]
) -> dict[tuple[int, int], Number]:
    """Numbers reachable in one step from numbers that are not already among them."""
    index = _index(numbers)
    pool = sorted(index.values())
    unary, binary = _split(ops)
    return _expand(pool, set(index), max_used, unary, binary, index)


def solve_with(result: int, a: int, n: int, ops: Sequence[Operation]) -> Optional[Number]:
    """Find an expression with exactly n uses of a equal to result, or None."""
    target = (result, n)
    cache = {raw_number(a).key: raw_number(a)}
    fresh = set(cache)
    unary, binary = _split(ops)
    while True:
        pool = sorted(cache.values())
        memory = _expand(pool, fresh, n, unary, binary, cache)
        if not memory:
            break
        cache.update(memory)
        fresh = set(memory)
        if target in cache:
            break
    return cache.get(target)


def _default_ops() -> list[Operation]:
    return [
        add,
        subtract,
        multiply,
        divide,
        modulo,
        power_of,
        sqrt_of,
        partial(factorial_of, k=1),
        gcd_of,
        partial(factorial_of, k=2),
        partial(factorial_of, k=3),
        partial(factorial_of, k=4),
        partial(factorial_of, k=5),
    ]


def solve(result: int, a: int, n: int) -> Optional[Number]:
    """Solve with the shortest working prefix of the operation list."""
    ops = _default_ops()
    size = len(ops)
    final: Optional[Number] = None
    for i in range(16, -1, -1):
        prefix = size - (1 << i)
        if prefix <= 0:
            continue
        found = solve_with(result, a, n, ops[:prefix])
        if found is not None:
            final = found
            size = prefix
    return final


def describe(result: int, a: int, n: int) -> str:
    """One report line for the given target."""
    number = solve(result, a, n)
    if number is None:
        return f"result = {result}, a = {a}  n = {n}   - CAN'T REPRESENT"
    return f"{result:4d} = {render_number(number)}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Write integers using one digit n times.")
    parser.add_argument("--a", type=int, default=4, help="the digit to use")
    parser.add_argument("--n", type=int, default=4, help="how many times to use it")
    parser.add_argument("--start", type=int, default=0)
    parser.add_argument("--stop", type=int, default=40)
    args = parser.parse_args(argv)
    for value in range(args.start, args.stop + 1):
        print(describe(value, args.a, args.n), flush=True)
    return 0