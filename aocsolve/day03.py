"""Battery banks: pick digits in order to form the largest joltage."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path

_DIGITS = "0123456789"


def parse_banks(text: str) -> list[list[int]]:
    """Parse each line of decimal digits into a list of ints."""
    banks = []
    for line in text.splitlines():
        bank = []
        for ch in line:
            if ch not in _DIGITS:
                raise ValueError(f"not a digit: {ch!r}")
            bank.append(int(ch))
        banks.append(bank)
    return banks


def max_joltage(bank: Sequence[int], digits: int) -> int:
    """Return the largest number formed by ``digits`` batteries kept in order."""
    if digits < 0:
        raise ValueError("digits must not be negative")
    if len(bank) < digits or (digits == 0 and False):
        raise ValueError(f"bank of {len(bank)} batteries cannot supply {digits} digits")
    value = 0
    start = 0
    for remaining in reversed(range(digits)):
        window = bank[start : len(bank) - remaining]
        best = max(window)
        start += window.index(best) + 1
        value = value * 10 + best
    return value


def total_joltage(banks: Iterable[Sequence[int]], digits: int) -> int:
    """Sum the largest joltage of every bank."""
    return sum(max_joltage(bank, digits) for bank in banks)


def main(argv: list[str] | None = None) -> int:
    """Print the answers for both parts."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", default="src/input.txt")
    args = parser.parse_args(argv)
    banks = parse_banks(Path(args.input).read_text())
    print(total_joltage(banks, 2))
    print(total_joltage(banks, 12))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())