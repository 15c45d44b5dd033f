"""Safe dial rotations: count how often the dial points at zero."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from pathlib import Path

START = 50
DIAL_SIZE = 100


def parse_rotations(text: str) -> list[tuple[str, int]]:
    """Parse lines such as ``L68`` into ``(direction, amount)`` pairs."""
    rotations = []
    for line in text.splitlines():
        if not line:
            raise ValueError("empty rotation line")
        direction, amount = line[0], line[1:]
        try:
            rotations.append((direction, int(amount)))
        except ValueError:
            raise ValueError(f"invalid rotation: {line!r}") from None
    return rotations


def count_zero_landings(rotations: Iterable[tuple[str, int]]) -> int:
    """Count rotations that leave the dial at zero."""
    position = START
    count = 0
    for direction, amount in rotations:
        if direction == "L":
            position = (position - amount) % DIAL_SIZE
        elif direction == "R":
            position = (position + amount) % DIAL_SIZE
        if position == 0:
            count += 1
    return count


def count_zero_clicks(rotations: Iterable[tuple[str, int]]) -> int:
    """Count every click, during or at the end of a rotation, that reaches zero."""
    position = START
    count = 0
    for direction, amount in rotations:
        if amount <= 0:
            continue
        if direction == "R":
            count += (position + amount) // DIAL_SIZE
            position = (position + amount) % DIAL_SIZE
        elif direction == "L":
            distance_to_zero = (DIAL_SIZE - position) % DIAL_SIZE
            count += (distance_to_zero + amount) // DIAL_SIZE
            position = (position - amount) % DIAL_SIZE
    return count


def main(argv: list[str] | None = None) -> int:
    """Print the answers for both parts."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", default="src/input.txt")
    args = parser.parse_args(argv)
    rotations = parse_rotations(Path(args.input).read_text())
    print(count_zero_landings(rotations))
    print(count_zero_clicks(rotations))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())