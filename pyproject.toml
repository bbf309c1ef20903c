[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numcraft"
version = "0.1.0"
description = "Small number puzzles and integer tools: digit puzzles, five fives, Karatsuba powers, version sorting and integer streams"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "arithmetic", "karatsuba", "bigint", "version-sort", "four-fours"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numcraft-puzzle = "numcraft.numpuzzle:main"
numcraft-fivefives = "numcraft.fivefives:main"
numcraft-karatsuba = "numcraft.karatsuba:main"
numcraft-versions = "numcraft.versions:main"
numcraft-fastio = "numcraft.fastio:main"

[tool.hatch.build.targets.wheel]
packages = ["numcraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
