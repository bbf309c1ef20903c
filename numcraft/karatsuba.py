"""Arbitrary-size non-negative integers as little-endian base-10**9 limbs."""

from __future__ import annotations

import argparse
import time
from contextlib import contextmanager
from itertools import zip_longest
from typing import Iterable, Iterator, Optional, Sequence

BASE = 10**9
BASE_DIGITS = 9
_SCHOOLBOOK_BELOW = 32
_MIN_SPLIT = 4

Limbs = list[int]


def _trim(limbs: Limbs) -> Limbs:
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    return limbs


def _checked(limbs: Iterable[int]) -> Limbs:
    result = list(limbs)
    if not result:
        raise ValueError("a number needs at least one limb")
    for limb in result:
        if not 0 <= limb < BASE:
            raise ValueError(f"limb {limb} is outside [0, {BASE})")
    return _trim(result)


def to_limbs(value: int) -> Limbs:
    """Split a non-negative integer into limbs, least significant first."""
    if value < 0:
        raise ValueError("only non-negative integers are supported")
    limbs = []
    while True:
        value, limb = divmod(value, BASE)
        limbs.append(limb)
        if value == 0:
            return limbs


def from_limbs(limbs: Iterable[int]) -> int:
    """The integer that the limbs represent."""
    value = 0
    for limb in reversed(_checked(limbs)):
        value = value * BASE + limb
    return value


def _add(a: Limbs, b: Limbs) -> Limbs:
    out = []
    carry = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        total = x + y + carry
        if total >= BASE:
            out.append(total - BASE)
            carry = 1
        else:
            out.append(total)
            carry = 0
    if carry:
        out.append(carry)
    return _trim(out)


def _sub(a: Limbs, b: Limbs) -> Limbs:
    if len(b) > len(a):
        raise ValueError("subtrahend exceeds minuend")
    out = []
    borrow = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        diff = x - y - borrow
        if diff < 0:
            out.append(diff + BASE)
            borrow = 1
        else:
            out.append(diff)
            borrow = 0
    if borrow:
        raise ValueError("subtrahend exceeds minuend")
    return _trim(out)


def _mul_small(x: int, a: Limbs) -> Limbs:
    if x == 0 or a == [0]:
        return [0]
    if x == 1:
        return list(a)
    out = []
    carry = 0
    for limb in a:
        carry += x * limb
        carry, digit = divmod(carry, BASE)
        out.append(digit)
    if carry:
        out.append(carry)
    return out


def _schoolbook(a: Limbs, b: Limbs) -> Limbs:
    if len(a) == 1:
        return _mul_small(a[0], b)
    if len(b) == 1:
        return _mul_small(b[0], a)
    c = [0] * (len(a) + len(b))
    for i, ai in enumerate(a):
        carry = 0
        for k, bj in enumerate(b, i):
            carry += ai * bj + c[k]
            carry, c[k] = divmod(carry, BASE)
        k = i + len(b)
        while carry:
            carry += c[k]
            carry, c[k] = divmod(carry, BASE)
            k += 1
    return _trim(c)


def _karatsuba(a: Limbs, b: Limbs) -> Limbs:
    n, m = len(a), len(b)
    if (n < _SCHOOLBOOK_BELOW and m < _SCHOOLBOOK_BELOW) or n < _MIN_SPLIT or m < _MIN_SPLIT:
        return _schoolbook(a, b)
    t = min(n, m) // 2
    a_low, a_high = _trim(a[:t]), a[t:]
    b_low, b_high = _trim(b[:t]), b[t:]
    both = _karatsuba(_add(a_low, a_high), _add(b_low, b_high))
    high = _karatsuba(a_high, b_high)
    low = _karatsuba(a_low, b_low)
    middle = _sub(_sub(both, high), low)
    combined = low + [0] * (2 * t - len(low)) + high
    return _trim(combined[:t] + _add(middle, combined[t:]))


def add_limbs(a: Iterable[int], b: Iterable[int]) -> Limbs:
    """a + b."""
    return _add(_checked(a), _checked(b))


def sub_limbs(a: Iterable[int], b: Iterable[int]) -> Limbs:
    """a - b; raises ValueError if b is larger than a."""
    return _sub(_checked(a), _checked(b))


def mul_small(x: int, a: Iterable[int]) -> Limbs:
    """x * a for a single limb x."""
    if not 0 <= x < BASE:
        raise ValueError(f"multiplier {x} is outside [0, {BASE})")
    return _mul_small(x, _checked(a))


def mul_schoolbook(a: Iterable[int], b: Iterable[int]) -> Limbs:
    """a * b by long multiplication."""
    return _schoolbook(_checked(a), _checked(b))


def mul_karatsuba(a: Iterable[int], b: Iterable[int]) -> Limbs:
    """a * b, splitting large operands by Karatsuba's method."""
    return _karatsuba(_checked(a), _checked(b))


def pow2_karatsuba(n: int) -> Limbs:
    """2 ** n by repeated squaring."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    result: Limbs = [1]
    base: Limbs = [2]
    remaining = n
    while remaining > 1:
        if remaining & 1:
            result = _karatsuba(base, result)
        base = _karatsuba(base, base)
        remaining //= 2
    if remaining == 1:
        result = _karatsuba(base, result)
    return result


def pow2_schoolbook(n: int) -> Limbs:
    """2 ** n by doubling n times."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    digits: Limbs = [1]
    for _ in range(n):
        carry = 0
        doubled = []
        for limb in digits:
            carry += limb << 1
            carry, digit = divmod(carry, BASE)
            doubled.append(digit)
        if carry:
            doubled.append(carry)
        digits = doubled
    return digits


def format_limbs(limbs: Iterable[int]) -> str:
    """Decimal text of the number."""
    checked = _checked(limbs)
    top, *rest = reversed(checked)
    return str(top) + "".join(f"{limb:0{BASE_DIGITS}d}" for limb in rest)


@contextmanager
def _timed() -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        millis = int((time.perf_counter() - start) * 1000)
        print(f"\nelapsed time: {millis} milliseconds")


def _report(compute, n: int, show: bool) -> None:
    with _timed():
        limbs = compute(n)
        text = f"2^{n}"
        if show:
            text += f" = {format_limbs(limbs)}"
        print(text, end="")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Time two ways of computing powers of two.")
    parser.add_argument("--old", type=int, default=1000, help="exponent for repeated doubling")
    parser.add_argument("--power", type=int, default=1000000, help="exponent for Karatsuba")
    parser.add_argument("--show", action="store_true", help="print the digits too")
    args = parser.parse_args(argv)
    _report(pow2_schoolbook, args.old, args.show)
    _report(pow2_karatsuba, args.power, args.show)
    return 0