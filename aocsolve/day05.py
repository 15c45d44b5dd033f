"""Ingredient database: fresh ID ranges and the IDs available."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable
from pathlib import Path

_U64 = re.compile(r"\+?[0-9]+")
_U64_LIMIT = 2**64


def _parse_u64(text: str) -> int:
    if not _U64.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    value = int(text)
    if value >= _U64_LIMIT:
        raise ValueError(f"number too large: {text!r}")
    return value


def parse_database(text: str) -> tuple[list[tuple[int, int]], list[int]]:
    """Parse ``start-end`` ranges, then, after a blank line, one ID per line."""
    ranges: list[tuple[int, int]] = []
    ids: list[int] = []
    doing_ranges = True
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            doing_ranges = False
            continue
        if doing_ranges:
            parts = line.split("-")
            if len(parts) < 2:
                raise ValueError(f"invalid range: {line!r}")
            ranges.append((_parse_u64(parts[0]), _parse_u64(parts[1])))
        else:
            ids.append(_parse_u64(line))
    return ranges, ids


def overlaps(a: tuple[int, int], b: tuple[int, int]) -> bool:
    """Tell whether two inclusive ranges share at least one value."""
    return a[0] <= b[1] and b[0] <= a[1]


def merge_ranges(ranges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Combine overlapping inclusive ranges into disjoint ones."""
    merged: list[tuple[int, int]] = []
    for start, end in ranges:
        kept: list[tuple[int, int]] = []
        for existing in merged:
            if overlaps((start, end), existing):
                start = min(start, existing[0])
                end = max(end, existing[1])
            else:
                kept.append(existing)
        kept.append((start, end))
        merged = kept
    return merged


def count_fresh(ranges: Iterable[tuple[int, int]], ids: Iterable[int]) -> int:
    """Count the IDs that fall inside any of the ranges."""
    merged = merge_ranges(ranges)
    return sum(1 for ident in ids for start, end in merged if start <= ident <= end)


def count_fresh_ids(ranges: Iterable[tuple[int, int]]) -> int:
    """Count the distinct IDs covered by the ranges."""
    total = 0
    for start, end in merge_ranges(ranges):
        if end < start:
            raise ValueError(f"range ends before it starts: {start}-{end}")
        total += end - start + 1
    return total


def main(argv: list[str] | None = None) -> int:
    """Print the answers for both parts."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", default="src/input.txt")
    args = parser.parse_args(argv)
    ranges, ids = parse_database(Path(args.input).read_text())
    print(count_fresh(ranges, ids))
    print(count_fresh_ids(ranges))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())