# numcraft

A handful of small integer tools and number puzzles.

- **numcraft.numpuzzle** writes a target integer using exactly `n` copies of one digit `a`, for example 0 to 40 with four 4s. The operations are `+ - * / %`, `^`, square roots, `gcd` and factorials from `!` up to `!!!!!`. Division must be exact. Any step whose result would leave the signed 64-bit range is skipped. `solve` tries ever shorter prefixes of the operation list and keeps the shortest one that still finds an answer.
- **numcraft.fivefives** lists every distinct expression that uses each given number once and equals a target. The operations are `+ - * /` and `^`. Division must be exact, and powers need an exponent from 0 to 100 and stay at or below 10¹⁵. Each expression carries only the parentheses it needs.
- **numcraft.karatsuba** does arithmetic on non-negative integers stored as little-endian lists of base-10⁹ limbs. It has addition, subtraction, long and Karatsuba multiplication, powers of two, and conversion to and from `int` and decimal text.
- **numcraft.versions** sorts dotted version strings such as `1.10.2` numerically. A version has up to eight components, each from 0 to 255. Anything else raises `ValueError`.
- **numcraft.fastio** reads whitespace-separated integers, wrapped to signed 32-bit values, and writes them back out.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Commands

```
numcraft-puzzle       # write 0..40 using four 4s (--a, --n, --start, --stop)
numcraft-fivefives    # expressions of five 5s equal to 100 (--digit, --count, --target)
numcraft-karatsuba    # time 2^1000 by doubling and 2^1000000 by Karatsuba (--old, --power, --show)
numcraft-versions     # sort version.txt into sorted_version.txt (positional input and output paths)
numcraft-fastio       # copy a count-prefixed integer list from input.txt to output.txt, timing the work
```

`numcraft-versions` treats a missing input file as empty.

By default `numcraft-fastio` first overwrites the input file with `--count` random integers, one million unless told otherwise. Pass `--no-generate` to use the existing file instead. The elapsed time goes to standard error.

## Library use

```python
from numcraft.numpuzzle import solve, render_number, describe
from numcraft.fivefives import expressions
from numcraft.karatsuba import to_limbs, from_limbs, mul_karatsuba, pow2_karatsuba, format_limbs
from numcraft.versions import sort_versions
from numcraft.fastio import read_ints, format_ints

print(describe(17, 4, 4))
number = solve(10, 4, 4)
if number is not None:
    print(render_number(number))

for expr in expressions([(5, "5")] * 5, 100):
    print(expr, "= 100")

product = mul_karatsuba(to_limbs(12345678901234567890), to_limbs(98765432109876543210))
print(from_limbs(product) == 12345678901234567890 * 98765432109876543210)
print(format_limbs(pow2_karatsuba(100)))

print(sort_versions(["1.10", "1.2", "1.2.1"]))

print(format_ints(read_ints("3 -1 +2 4294967296")))
```

`solve` returns `None` when no expression is found.

`describe` returns a line that reports the value as not representable in that case.