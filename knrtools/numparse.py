"""Conversions between text and numbers."""

from __future__ import annotations

import re
import sys
from fractions import Fraction
from typing import Callable, Iterator, Sequence, TypeVar

_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_HEX = "0123456789abcdef"

_FLOAT = re.compile(r"([+-]?)([0-9]*)\.?([0-9]*)")
_INT = re.compile(r"([+-]?)([0-9]*)")

T = TypeVar("T")


def atof(s: str) -> float:
    """Parse a leading decimal number with optional fraction and exponent.

    Leading white space is skipped; parsing stops at the first character
    that cannot continue the number. Text with no digits gives zero.
    """
    text = s.lstrip(_SPACE)
    match = _FLOAT.match(text)
    sign, whole, frac = match.groups()
    exponent = 0
    rest = text[match.end():]
    if rest[:1] in ("e", "E") and rest:
        exponent = int(atof(rest[1:]))
    mantissa = int(whole + frac or "0")
    value = Fraction(mantissa) * Fraction(10) ** (exponent - len(frac))
    try:
        result = float(value)
    except OverflowError:
        result = float("inf")
    return -result if sign == "-" else result


def atoi(s: str) -> int:
    """Parse a leading number as :func:`atof` does and truncate it to an integer."""
    return int(atof(s))


def printd(n: int) -> str:
    """Return the decimal digits of ``n``, built most significant digit first."""
    if n < 0:
        return "-" + printd(-n)
    head = printd(n // 10) if n // 10 else ""
    return head + _DIGITS[n % 10]


def itoa(value: int) -> str:
    """Return the decimal representation of an integer."""
    if not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return printd(value)


def htoi(s: str) -> int:
    """Convert a hexadecimal string carrying a ``0x`` or ``0X`` prefix to an integer."""
    lowered = s.lower()
    if "0x" not in lowered:
        raise ValueError(f"not a hexadecimal number: {s!r}")
    digits = lowered[lowered.rindex("x") + 1:]
    value = 0
    for ch in digits:
        if ch not in _HEX:
            raise ValueError(f"invalid hexadecimal digit {ch!r} in {s!r}")
        value = value * 16 + _HEX.index(ch)
    return value


def _scan(text: str, limit: int, pattern: re.Pattern[str],
          convert: Callable[[str], T]) -> Iterator[T]:
    pos = 0
    count = 0
    while count < limit:
        while pos < len(text) and text[pos] in _SPACE:
            pos += 1
        if pos >= len(text):
            return
        if text[pos] not in _DIGITS and text[pos] not in "+-":
            return
        match = pattern.match(text, pos)
        yield convert(match.group(0))
        count += 1
        pos = match.end()


def _to_int(token: str) -> int:
    sign, digits = _INT.fullmatch(token).groups()
    value = int(digits or "0")
    return -value if sign == "-" else value


def read_ints(text: str, limit: int = 10) -> list[int]:
    """Read up to ``limit`` integers from ``text``, stopping at anything else."""
    return list(_scan(text, limit, _INT, _to_int))


def read_floats(text: str, limit: int = 10) -> list[float]:
    """Read up to ``limit`` decimal numbers from ``text``, stopping at anything else."""
    return list(_scan(text, limit, _FLOAT, atof))


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: convert a hexadecimal argument to decimal."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("ERROR: too few arguments")
        return 1
    print(f"input : {args[0]}")
    try:
        value = htoi(args[0])
    except ValueError as exc:
        print(f"error: {exc}")
        return 1
    print(f"output : {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())