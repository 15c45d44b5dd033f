"""Cephalopod math worksheet: columns of numbers combined by + or *."""

from __future__ import annotations

import argparse
import math
import re
from collections.abc import Sequence
from pathlib import Path

_U64 = re.compile(r"\+?[0-9]+")
_U64_LIMIT = 2**64
OPERATORS = "+*"


def _lines(text: str) -> list[str]:
    """Split on newlines, dropping a final empty line and trailing carriage returns."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _try_u64(text: str) -> int | None:
    if not _U64.fullmatch(text):
        return None
    value = int(text)
    return value if value < _U64_LIMIT else None


def _split_lines(text: str) -> list[str]:
    lines = _lines(text)
    if not lines:
        raise ValueError("worksheet is empty")
    return lines


def parse_worksheet(text: str) -> tuple[list[list[int]], list[str]]:
    """Read rows of whitespace separated numbers and a last line of operators.

    Tokens that are not numbers, or not single characters on the operator
    line, are skipped.
    """
    lines = _split_lines(text)
    matrix = []
    for line in lines[:-1]:
        values = (_try_u64(token) for token in line.split())
        matrix.append([value for value in values if value is not None])
    operations = [token for token in lines[-1].split() if len(token) == 1]
    return matrix, operations


def parse_worksheet_columns(text: str) -> tuple[list[list[str]], list[str]]:
    """Cut every number row into fixed-width fields aligned with the operators.

    The field widths come from the spacing of the operator line; each field
    keeps its padding spaces.
    """
    lines = _split_lines(text)
    operations: list[str] = []
    widths: list[int] = []
    in_gap = False
    gap = 0
    for ch in lines[-1]:
        if ch in OPERATORS:
            operations.append(ch)
            if in_gap:
                widths.append(gap)
                gap = 0
                in_gap = False
        elif ch == " ":
            in_gap = True
            gap += 1
    widths.append(gap + 1)

    matrix = []
    for line in lines[:-1]:
        fields = []
        start = 0
        for width in widths:
            if start > len(line):
                raise ValueError(f"line too short for operator layout: {line!r}")
            fields.append(line[start : start + width])
            start += width + 1
        matrix.append(fields)
    return matrix, operations


def _apply(op: str, values: list[int]) -> int:
    if op == "*":
        return math.prod(values)
    if op == "+":
        return sum(values)
    return 0


def solve_rows(matrix: Sequence[Sequence[int]], operations: Sequence[str]) -> int:
    """Combine each column of numbers with its operator and add up the results."""
    return sum(
        _apply(op, [row[i] for row in matrix]) for i, op in enumerate(operations)
    )


def _digits_value(digits: str) -> int:
    if digits.isascii():
        value = _try_u64(digits)
        if value is not None:
            return value
    return 0


def solve_columns(matrix: Sequence[Sequence[str]], operations: Sequence[str]) -> int:
    """Read numbers top to bottom, right to left within each field, and total them."""
    total = 0
    for i, op in enumerate(operations):
        column = [row[i] for row in matrix]
        numbers = []
        for k in reversed(range(len(column[0]))):
            digits = "".join(ch for ch in (field[k] for field in column) if ch.isnumeric())
            numbers.append(_digits_value(digits))
        if op == "*":
            total += math.prod(numbers)
        elif op == "+":
            total += sum(numbers)
    return total


def main(argv: list[str] | None = None) -> int:
    """Print the answers for both parts."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", default="src/input.txt")
    args = parser.parse_args(argv)
    text = Path(args.input).read_text()
    print(solve_rows(*parse_worksheet(text)))
    print(solve_columns(*parse_worksheet_columns(text)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())