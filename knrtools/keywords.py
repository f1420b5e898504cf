"""Counting the C keywords that appear in the input, one word per line."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Sequence

from knrtools.searching import binsearch

KEYWORDS = (
    "auto", "break", "case", "char", "const", "continue", "default", "do",
    "double", "else", "enum", "extern", "float", "for", "goto", "if", "int",
    "long", "register", "return", "short", "signed", "sizeof", "static",
    "struct", "switch", "typedef", "union", "unsigned", "void", "volatile",
    "while",
)


def _words(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        word = line.split("\n", 1)[0]
        if not word:
            return
        yield word


def _keyword(word: str) -> str | None:
    first = word[0]
    if first.isascii() and first.isalpha() and binsearch(word, KEYWORDS) >= 0:
        return word
    return None


def count_keywords(lines: Iterable[str]) -> dict[str, int]:
    """Count keywords, each line being one word; stop at the first empty line.

    Only keywords seen at least once appear, in alphabetical order.
    """
    counts = dict.fromkeys(KEYWORDS, 0)
    for word in _words(lines):
        key = _keyword(word)
        if key is not None:
            counts[key] += 1
    return {key: n for key, n in counts.items() if n}


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: after each word read, print the running keyword counts."""
    counts = dict.fromkeys(KEYWORDS, 0)
    for word in _words(sys.stdin):
        key = _keyword(word)
        if key is not None:
            counts[key] += 1
        for name, n in counts.items():
            if n:
                print(f"{n:8d} {name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())