"""Read and write whitespace-separated 32-bit integers in bulk."""

from __future__ import annotations

import argparse
import random
import re
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Union

_SPACE = re.compile(rb"[\x00-\x20]*")
_NUMBER = re.compile(rb"([+-]?)([0-9]+)")
_WORD = 1 << 32
_RAND_MAX = (1 << 31) - 1


def _to_int32(sign: bytes, digits: bytes) -> int:
    unsigned = int(digits) % _WORD
    if sign == b"-":
        unsigned = (-unsigned) % _WORD
    return unsigned - _WORD if unsigned >= _WORD // 2 else unsigned


def read_ints(data: Union[str, bytes]) -> Iterator[int]:
    """Yield the integers in data, wrapped to signed 32-bit values."""
    if isinstance(data, str):
        data = data.encode()
    pos = 0
    while True:
        pos = _SPACE.match(data, pos).end()
        if pos >= len(data):
            return
        match = _NUMBER.match(data, pos)
        if match is None:
            raise ValueError(f"expected an integer at offset {pos}")
        yield _to_int32(match.group(1), match.group(2))
        pos = match.end()


def format_ints(values: Iterable[int], sep: str = " ") -> str:
    """Each value followed by sep."""
    return "".join(f"{value}{sep}" for value in values)


@contextmanager
def _elapsed(stream=None):
    start = time.perf_counter()
    try:
        yield
    finally:
        millis = int((time.perf_counter() - start) * 1000)
        print(f"\nelapsed time: {millis} ms.", file=stream or sys.stderr)


def _write_random(path: Path, count: int) -> None:
    numbers = (random.randint(0, _RAND_MAX) for _ in range(count))
    path.write_text(f"{count}\n" + format_ints(numbers))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Copy a list of integers, timing the work.")
    parser.add_argument("--input", default="input.txt")
    parser.add_argument("--output", default="output.txt")
    parser.add_argument("--count", type=int, default=1000 * 1000)
    parser.add_argument("--no-generate", action="store_true", help="use the existing input file")
    args = parser.parse_args(argv)
    source = Path(args.input)
    if not args.no_generate:
        _write_random(source, args.count)
    with _elapsed():
        numbers = read_ints(source.read_bytes())
        count = next(numbers, 0)
        values = [value for _, value in zip(range(count), numbers)]
        Path(args.output).write_text(format_ints(values))
    return 0