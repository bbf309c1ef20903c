"""Sort dotted version strings numerically."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Optional, Sequence

_MASK = (1 << 64) - 1
_FIRST_SHIFT = 56


def version_key(version: str) -> int:
    """Pack up to eight dot-separated components (each 0..255) into 64 bits."""
    shift = _FIRST_SHIFT
    packed = 0
    for char in version:
        if char == ".":
            if shift < 8:
                raise ValueError(f"too many components in {version!r}")
            shift -= 8
            packed = (packed << 8) & _MASK
        elif "0" <= char <= "9":
            component = (packed & 0xFF) * 10 + (ord(char) - ord("0"))
            if component >= 256:
                raise ValueError(f"component too large in {version!r}")
            packed = (packed & ~0xFF) + component
        else:
            raise ValueError(f"invalid character {char!r} in {version!r}")
    return (packed << shift) & _MASK


def sort_versions(versions: Iterable[str]) -> list[str]:
    """Versions in ascending numeric order."""
    return sorted(versions, key=version_key)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Sort version numbers.")
    parser.add_argument("input", nargs="?", default="version.txt")
    parser.add_argument("output", nargs="?", default="sorted_version.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except FileNotFoundError:
        text = ""
    ordered = sort_versions(text.split())
    Path(args.output).write_text("".join(f"{v}\n" for v in ordered))
    return 0