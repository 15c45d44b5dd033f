"""Gift shop product IDs: find IDs made of a repeated block of digits."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from pathlib import Path


def parse_ranges(text: str) -> list[tuple[int, int]]:
    """Parse comma separated ``low-high`` ranges, possibly over several lines."""
    ranges = []
    for line in text.splitlines():
        for item in line.split(","):
            parts = item.split("-")
            if len(parts) < 2:
                raise ValueError(f"invalid range: {item!r}")
            try:
                ranges.append((int(parts[0]), int(parts[1])))
            except ValueError:
                raise ValueError(f"invalid range: {item!r}") from None
    return ranges


def proper_divisors(n: int) -> list[int]:
    """Return the divisors of ``n`` that are smaller than ``n``, ascending."""
    return [i for i in range(1, n) if n % i == 0]


def _repeated_block_ids(low: int, high: int, length: int, block: int) -> Iterator[int]:
    """Yield IDs of ``length`` digits formed by repeating a ``block``-digit number."""
    multiplier = (10**length - 1) // (10**block - 1)
    first = max(10 ** (block - 1), -(-low // multiplier))
    last = min(10**block - 1, high // multiplier)
    for part in range(first, last + 1):
        yield part * multiplier


def _digit_lengths(low: int, high: int) -> range:
    return range(len(str(low)), len(str(high)) + 1)


def invalid_ids_doubled(ranges: Iterable[tuple[int, int]]) -> set[int]:
    """Collect IDs in the ranges that are some number written twice in a row."""
    found: set[int] = set()
    for low, high in ranges:
        for length in _digit_lengths(low, high):
            if length % 2 == 0:
                found.update(_repeated_block_ids(low, high, length, length // 2))
    return found


def invalid_ids_repeated(ranges: Iterable[tuple[int, int]]) -> set[int]:
    """Collect IDs in the ranges that are some number repeated at least twice."""
    found: set[int] = set()
    for low, high in ranges:
        for length in _digit_lengths(low, high):
            for block in proper_divisors(length):
                found.update(_repeated_block_ids(low, high, length, block))
    return found


def main(argv: list[str] | None = None) -> int:
    """Print the answers for both parts."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", default="src/input.txt")
    args = parser.parse_args(argv)
    ranges = parse_ranges(Path(args.input).read_text())
    print(sum(invalid_ids_doubled(ranges)))
    print(sum(invalid_ids_repeated(ranges)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())