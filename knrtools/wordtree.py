"""Counting distinct words with a binary search tree."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence


@dataclass
class _Node:
    word: str
    count: int = 1
    left: _Node | None = None
    right: _Node | None = None


class WordTree:
    """An unbalanced binary search tree of words and their counts."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def add(self, word: str) -> None:
        """Count one more occurrence of ``word``."""
        if self._root is None:
            self._root = _Node(word)
            self._size = 1
            return
        node = self._root
        while True:
            if word == node.word:
                node.count += 1
                return
            if word < node.word:
                if node.left is None:
                    node.left = _Node(word)
                    self._size += 1
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(word)
                    self._size += 1
                    return
                node = node.right

    def items(self) -> Iterator[tuple[str, int]]:
        """Yield ``(word, count)`` pairs in ascending order of word."""
        pending: list[_Node] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.word, node.count
            node = node.right

    def __len__(self) -> int:
        return self._size


def count_words(lines: Iterable[str]) -> WordTree:
    """Count each line as one word, stopping at the first empty line.

    Lines that do not begin with an ASCII letter are ignored.
    """
    tree = WordTree()
    for line in lines:
        word = line.split("\n", 1)[0]
        if not word:
            break
        first = word[0]
        if first.isascii() and first.isalpha():
            tree.add(word)
    return tree


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: count the words of standard input."""
    for word, count in count_words(sys.stdin).items():
        print(f"{count:4d} {word}")
    return 0


if __name__ == "__main__":
    sys.exit(main())