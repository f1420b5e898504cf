"""Character and word-length histograms, and a small text picture of a fir tree."""

from __future__ import annotations

import string
from typing import Mapping, Sequence

MAX_WORD_SIZE = 10
_LETTERS = string.ascii_uppercase + string.ascii_lowercase
_WORD_SEPARATORS = " \t\n"


def letter_histogram(text: str) -> dict[str, int]:
    """Count each ASCII letter in ``text``; keys run from ``A`` to ``Z`` then ``a`` to ``z``."""
    counts = dict.fromkeys(_LETTERS, 0)
    for ch in text:
        if ch in counts:
            counts[ch] += 1
    return counts


def render_letter_histogram(counts: Mapping[str, int]) -> str:
    """Draw one line per letter: the letter, its count and a bar of stars."""
    return "".join(f"\n{letter} {n}" + "*" * n for letter, n in counts.items())


def word_length_histogram(text: str) -> list[int]:
    """Count the words of each length, a word ending at a blank, tab or newline.

    Adjacent separators count as words of length zero; a word not followed
    by a separator is not counted. Raises ValueError for a word of
    :data:`MAX_WORD_SIZE` or more characters.
    """
    counts = [0] * MAX_WORD_SIZE
    length = 0
    for ch in text:
        if ch in _WORD_SEPARATORS:
            if length >= MAX_WORD_SIZE:
                raise ValueError(
                    f"word of length {length} is too long, the limit is {MAX_WORD_SIZE - 1}"
                )
            counts[length] += 1
            length = 0
        else:
            length += 1
    return counts


def render_word_length_histogram(counts: Sequence[int]) -> str:
    """Draw one bar of dashes per word length, framed by star lines."""
    return "*" + "".join("\n" + "-" * n for n in counts) + "\n*\n"


def draw_tree(size: int = 30) -> str:
    """Return a picture of a fir tree ``size`` characters wide."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    half = size // 2
    lines = ["*".rjust(half)]
    lines.extend("/".rjust(half - i) + "\\".rjust(2 * i) for i in range(1, half))
    lines.append("-" * size)
    lines.extend("|".rjust(half - 1) + "|" for _ in range(half // 2 // 2))
    return "\n".join(lines) + "\n"