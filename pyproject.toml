[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolve"
version = "0.1.0"
description = "Solvers for the Advent of Code 2025 puzzles, days 1 to 6, with a helper to download puzzle input"
requires-python = ">=3.10"
keywords = ["advent-of-code", "puzzles", "aoc", "2025"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "requests>=2.28",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
aocsolve-fetch = "aocsolve.fetch:main"
aocsolve-day01 = "aocsolve.day01:main"
aocsolve-day02 = "aocsolve.day02:main"
aocsolve-day03 = "aocsolve.day03:main"
aocsolve-day04 = "aocsolve.day04:main"
aocsolve-day05 = "aocsolve.day05:main"
aocsolve-day06 = "aocsolve.day06:main"

[tool.hatch.build.targets.wheel]
packages = ["aocsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
