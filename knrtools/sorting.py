"""Quicksort variants and sorting lines of text."""

from __future__ import annotations

import random
import sys
from typing import Any, Callable, Iterable, Sequence, TextIO

MAXLINES = 1000
_MAXLEN = 1000


class TooManyLinesError(ValueError):
    """Raised when more lines are read than the limit allows."""


def _partition_sort(items: Iterable[Any],
                    choose_pivot: Callable[[int, int], int]) -> list[Any]:
    data = list(items)
    pending = [(0, len(data) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        pivot = choose_pivot(left, right)
        data[left], data[pivot] = data[pivot], data[left]
        last = left
        for i in range(left + 1, right + 1):
            if data[i] < data[left]:
                last += 1
                data[last], data[i] = data[i], data[last]
        data[left], data[last] = data[last], data[left]
        pending.append((left, last - 1))
        pending.append((last + 1, right))
    return data


def quicksort(items: Iterable[Any], rng: random.Random | None = None) -> list[Any]:
    """Return the items in ascending order, using a randomly chosen pivot."""
    source = rng if rng is not None else random
    return _partition_sort(items, source.randint)


def midpoint_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, using the middle element as pivot."""
    return _partition_sort(items, lambda left, right: (left + right) // 2)


def read_lines(stream: TextIO, limit: int = MAXLINES) -> list[str]:
    """Read at most ``limit`` lines from ``stream``, keeping their newlines.

    Lines longer than the line buffer are split into several pieces.
    Raises :class:`TooManyLinesError` when the stream holds more lines.
    """
    width = _MAXLEN - 1
    lines: list[str] = []
    for raw in stream:
        body, newline = (raw[:-1], "\n") if raw.endswith("\n") else (raw, "")
        pieces = [body[start:start + width] for start in range(0, len(body), width)]
        if pieces:
            pieces[-1] += newline
        else:
            pieces = [newline]
        for piece in pieces:
            if len(lines) >= limit:
                raise TooManyLinesError(f"more than {limit} lines")
            lines.append(piece)
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: sort the lines of standard input."""
    try:
        lines = read_lines(sys.stdin)
    except TooManyLinesError:
        print("error: too many lines")
        return 1
    sys.stdout.write("".join(midpoint_sort(lines)))
    return 0


if __name__ == "__main__":
    sys.exit(main())