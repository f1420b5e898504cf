"""Finding the first line at which two files differ."""

from __future__ import annotations

import sys
from typing import Iterable, NamedTuple, Sequence


class Difference(NamedTuple):
    """The first pair of lines that differ, with their 1-based line number."""

    line: int
    first: str
    second: str


def first_difference(lines1: Iterable[str], lines2: Iterable[str]) -> Difference | None:
    """Return the first differing pair of lines, or None.

    Comparison stops when either input runs out of lines.
    """
    for number, (first, second) in enumerate(zip(lines1, lines2), 1):
        if first != second:
            return Difference(number, first, second)
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: compare two files and print their first difference."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("error: too few arguments")
        return 1
    try:
        with open(args[0]) as file1, open(args[1]) as file2:
            diff = first_difference(file1, file2)
    except OSError as exc:
        print(f"error: can't open: {exc.filename}")
        return 1
    if diff is not None:
        print(f"\t{diff.line}\ts: {diff.first}\t{diff.line}\ts2: {diff.second}", end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())