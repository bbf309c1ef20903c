"""Integer puzzles and tools: digit puzzles, five fives, Karatsuba limb arithmetic, version sorting and integer streams."""

__version__ = "0.1.0"
__all__ = ["numpuzzle", "fivefives", "karatsuba", "versions", "fastio"]