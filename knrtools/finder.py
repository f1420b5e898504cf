"""Printing the lines of input that contain a pattern."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Sequence

_FIND_USAGE = "error: usage 'found -x -n pattern'"
_GREP_USAGE = "error: wrong usage of find(grep) program"


class UsageError(ValueError):
    """Raised when command-line arguments cannot be understood.

    ``illegal`` holds the option characters that were not recognised.
    """

    def __init__(self, message: str, illegal: str = "") -> None:
        super().__init__(message)
        self.illegal = illegal


def find_lines(lines: Iterable[str], pattern: str, invert: bool = False,
               number: bool = False) -> Iterator[str]:
    """Yield the lines that contain ``pattern``, or those that do not if ``invert``.

    With ``number`` each line is prefixed by its line number and a colon.
    """
    for lineno, line in enumerate(lines, 1):
        if (pattern in line) != invert:
            yield f"{lineno}:{line}" if number else line


def _parse_find_args(args: Sequence[str]) -> tuple[bool, bool, str]:
    invert = number = False
    rest = list(args)
    illegal = ""
    while rest and rest[0].startswith("-"):
        for option in rest.pop(0)[1:]:
            if option == "x":
                invert = True
            elif option == "n":
                number = True
            else:
                illegal += option
        if illegal:
            raise UsageError(f"illegal option {illegal!r}", illegal)
    if len(rest) != 1:
        raise UsageError("expected exactly one pattern")
    return invert, number, rest[0]


def grep_main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: print the lines of standard input holding a pattern."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(_GREP_USAGE)
        return 1
    for line in find_lines(sys.stdin, args[0]):
        print(line)
    return 0


def find_main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``[-x] [-n] pattern``; returns the number of lines printed.

    ``-x`` prints the lines that do not match, ``-n`` numbers them.
    An illegal option gives -1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        invert, number, pattern = _parse_find_args(args)
    except UsageError as exc:
        for _ in exc.illegal:
            print("Illegal option")
        print(_FIND_USAGE)
        return -1 if exc.illegal else 0
    found = 0
    for line in find_lines(sys.stdin, pattern, invert, number):
        sys.stdout.write(line)
        found += 1
    return found


if __name__ == "__main__":
    sys.exit(find_main())