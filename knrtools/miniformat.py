"""A minimal printf-style formatter and an echo command."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Sequence

_UNSIGNED = 1 << 32


def _next_arg(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def minprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Supported conversions are ``%d``, ``%ld``, ``%ud``, ``%f`` and ``%s``.
    After ``%l`` or ``%u`` a character other than ``d`` is dropped; any
    other character after ``%`` is written as it is.
    """
    values = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, "")
        if spec == "d":
            out.append(str(operator.index(_next_arg(values))))
        elif spec in ("l", "u"):
            if next(chars, "") == "d":
                value = operator.index(_next_arg(values))
                if spec == "u":
                    value %= _UNSIGNED
                out.append(str(value))
        elif spec == "f":
            out.append(f"{float(_next_arg(values)):f}")
        elif spec == "s":
            out.append(str(_next_arg(values)))
        else:
            out.append(spec)
    return "".join(out)


def echo(args: Sequence[str]) -> str:
    """Return the arguments joined by single spaces."""
    return " ".join(args)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: print the arguments on one line."""
    args = list(sys.argv[1:] if argv is None else argv)
    print(echo(args))
    return 0


if __name__ == "__main__":
    sys.exit(main())