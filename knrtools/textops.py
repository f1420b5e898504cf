"""Small string utilities: concatenation, comparison, searching and case mapping."""

from __future__ import annotations

import sys
from itertools import islice, zip_longest
from typing import Iterable, Sequence

_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")


def _code(ch: str) -> int:
    return ord(ch) if ch else 0


def _compare(pairs: Iterable[tuple[str, str]]) -> int:
    for a, b in pairs:
        if a != b:
            return _code(a) - _code(b)
    return 0


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"character count must not be negative, got {n}")


def strcat(s: str, t: str) -> str:
    """Return ``t`` appended to ``s``."""
    return s + t


def strend(s: str, t: str) -> bool:
    """Return True if ``t`` occurs at the end of ``s``."""
    if len(s) < len(t):
        return False
    return s.endswith(t)


def strncpy(src: str, n: int) -> str:
    """Return at most the first ``n`` characters of ``src``."""
    _check_count(n)
    return src[:n]


def strncat(dst: str, src: str, n: int) -> str:
    """Return ``dst`` followed by at most ``n`` characters of ``src``."""
    _check_count(n)
    return dst + src[:n]


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; the result is the code difference at the first mismatch."""
    return _compare(zip_longest(s1, s2, fillvalue=""))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings, like :func:`strcmp`."""
    _check_count(n)
    return _compare(islice(zip_longest(s1, s2, fillvalue=""), n))


def reverse(s: str) -> str:
    """Return ``s`` with its characters in reverse order."""
    return s[::-1]


def squeeze(s1: str, s2: str) -> str:
    """Return ``s1`` without any character that appears in ``s2``."""
    banned = set(s2)
    return "".join(ch for ch in s1 if ch not in banned)


def strrindex(s: str, t: str) -> int:
    """Return the position of the rightmost occurrence of ``t`` in ``s``, or -1."""
    if not t:
        return -1
    return s.rfind(t)


def to_lower(c: str) -> str:
    """Map an ASCII upper-case letter to lower case; other characters are unchanged."""
    return chr(ord(c) | 0x20) if c in _UPPER else c


def to_upper(c: str) -> str:
    """Map an ASCII lower-case letter to upper case; other characters are unchanged."""
    return chr(ord(c) & ~0x20) if c in _LOWER else c


def lookup(word: str, words: Sequence[str]) -> int:
    """Return the index of ``word`` in ``words``, or -1 when it is absent."""
    for index, candidate in enumerate(words):
        if strcmp(word, candidate) == 0:
            return index
    return -1


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``len STRING`` prints the length of STRING."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("ERROR: too few arguments")
        return 1
    option, text = args[0], args[1]
    if strcmp("len", option) == 0:
        print(f"the string length is: {len(text)}")
    else:
        print("the option is incorrect")
    return 0


if __name__ == "__main__":
    sys.exit(main())