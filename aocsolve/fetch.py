"""Download a day's puzzle input and store it next to that day's solution."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import requests
from dotenv import find_dotenv, load_dotenv

INPUT_URL = "https://adventofcode.com/2025/day/{day}/input"
USAGE = "Usage: get_input <day>"


def parse_day(argv: list[str]) -> int:
    """Return the day number given as the first command-line argument."""
    if not argv:
        raise ValueError(USAGE)
    text = argv[0]
    try:
        day = int(text)
    except ValueError:
        raise ValueError(f"invalid day number: {text!r}") from None
    if day < 0:
        raise ValueError(f"invalid day number: {text!r}")
    return day


def get_session() -> str:
    """Return the session cookie value from the SESSION environment variable."""
    try:
        return os.environ["SESSION"]
    except KeyError:
        raise RuntimeError("environment variable SESSION is not set") from None


def fetch_input(day: int, session: str) -> str:
    """Fetch the puzzle input for ``day`` using the given session cookie."""
    url = INPUT_URL.format(day=day)
    print(f"Fetching input from `{url}`")
    response = requests.get(url, headers={"Cookie": f"session={session}"}, timeout=30)
    return response.text


def prepare_file_path(day: int, root: str | os.PathLike[str] | None = None) -> Path:
    """Create ``<root>/<day>/src`` and return the input file path inside it."""
    base = Path.cwd() if root is None else Path(root)
    directory = base / str(day) / "src"
    directory.mkdir(parents=True, exist_ok=True)
    return directory / "input.txt"


def save_input(path: str | os.PathLike[str], text: str) -> None:
    """Write ``text`` to ``path``, replacing any previous content."""
    Path(path).write_bytes(text.encode("utf-8"))


def main(argv: list[str] | None = None) -> int:
    """Fetch and save the input for the day named on the command line."""
    load_dotenv(find_dotenv(usecwd=True))
    args = sys.argv[1:] if argv is None else argv
    try:
        day = parse_day(args)
        session = get_session()
        text = fetch_input(day, session)
        path = prepare_file_path(day)
        save_input(path, text)
    except (ValueError, RuntimeError, OSError, requests.RequestException) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Saved input to {str(path)!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())