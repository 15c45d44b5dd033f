"""Paper roll grid: find rolls that a forklift can reach and remove."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

ROLL = "@"
NEIGHBORS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)
CROWDED = 4


def parse_grid(text: str) -> list[list[int]]:
    """Parse the map into rows of 1 (a roll, ``@``) and 0 (anything else)."""
    return [[1 if ch == ROLL else 0 for ch in line] for line in text.splitlines()]


def count_neighbors(grid: Sequence[Sequence[int]], x: int, y: int) -> int:
    """Count the rolls in the eight cells around ``(x, y)``."""
    height = len(grid)
    width = len(grid[0])
    total = 0
    for dx, dy in NEIGHBORS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height:
            total += grid[ny][nx]
    return total


def count_accessible(grid: Sequence[Sequence[int]]) -> int:
    """Count rolls with fewer than four neighbouring rolls."""
    return sum(
        1
        for y, row in enumerate(grid)
        for x, cell in enumerate(row)
        if cell == 1 and count_neighbors(grid, x, y) < CROWDED
    )


def count_removable(grid: Sequence[Sequence[int]]) -> int:
    """Repeatedly remove accessible rolls and return how many were removed.

    The given grid is left untouched.
    """
    work = [list(row) for row in grid]
    total = 0
    while True:
        removed = 0
        snapshot = [list(row) for row in work]
        for y, row in enumerate(snapshot):
            for x, cell in enumerate(row):
                if cell == 1 and count_neighbors(work, x, y) < CROWDED:
                    work[y][x] = 0
                    removed += 1
        if removed == 0:
            return total
        total += removed


def main(argv: list[str] | None = None) -> int:
    """Print the answers for both parts."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", default="src/input.txt")
    args = parser.parse_args(argv)
    grid = parse_grid(Path(args.input).read_text())
    print(count_accessible(grid))
    print(count_removable(grid))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())