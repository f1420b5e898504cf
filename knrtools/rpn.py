"""A reverse Polish calculator and its operand stack."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Iterator, Sequence

from knrtools.numparse import atof

NUMBER = "number"
MAXVAL = 100
_EXPR_MAXVAL = 1000

_NUMBER_RE = re.compile(r"[0-9]*(?:\.[0-9]*)?")
_BLANKS = " \t"


class StackError(IndexError):
    """Raised when popping an empty stack or pushing onto a full one."""


class Stack:
    """A bounded last-in, first-out stack of floats."""

    def __init__(self, capacity: int = MAXVAL) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._values: list[float] = []

    def push(self, value: float) -> None:
        """Put ``value`` on top of the stack."""
        if len(self._values) >= self.capacity:
            raise StackError(f"the stack is full, can't push {value:f}")
        self._values.append(value)

    def pop(self) -> float:
        """Remove and return the value on top of the stack."""
        if not self._values:
            raise StackError("the stack is empty")
        return self._values.pop()

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._values))


@dataclass(frozen=True)
class Token:
    """A lexical unit: ``kind`` is :data:`NUMBER` or the operator character itself."""

    kind: str
    text: str


def tokenize(text: str) -> Iterator[Token]:
    """Split calculator input into numbers and single-character operators.

    Blanks and tabs separate tokens; every other character, newlines
    included, that does not start a number is an operator token.
    """
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch in _BLANKS:
            pos += 1
            continue
        if ch.isascii() and (ch.isdigit() or ch == "."):
            match = _NUMBER_RE.match(text, pos)
            yield Token(NUMBER, match.group(0))
            pos = match.end()
        else:
            yield Token(ch, ch)
            pos += 1


class Calculator:
    """Evaluates reverse Polish input; a newline prints the top of the stack."""

    def __init__(self, capacity: int = MAXVAL) -> None:
        self.stack = Stack(capacity)

    def feed(self, text: str) -> list[float]:
        """Process ``text`` and return the values popped at each newline.

        Raises :class:`StackError` on stack underflow or overflow,
        :class:`ZeroDivisionError` on division by zero and
        :class:`ValueError` on an unknown command.
        """
        stack = self.stack
        results: list[float] = []
        for token in tokenize(text):
            if token.kind == NUMBER:
                stack.push(atof(token.text))
            elif token.kind == "+":
                stack.push(stack.pop() + stack.pop())
            elif token.kind == "*":
                stack.push(stack.pop() * stack.pop())
            elif token.kind == "-":
                right = stack.pop()
                stack.push(stack.pop() - right)
            elif token.kind == "/":
                right = stack.pop()
                if right == 0:
                    raise ZeroDivisionError("division by zero")
                stack.push(stack.pop() / right)
            elif token.kind == "\n":
                results.append(stack.pop())
            else:
                raise ValueError(f"unknown command {token.text}")
        return results


def evaluate_args(args: Sequence[str]) -> float:
    """Evaluate a reverse Polish expression given one token per argument.

    An argument whose first character is ``+``, ``*``, ``-`` or ``/`` is
    an operator; anything else is read as a number. The value at the
    bottom of the stack is returned.
    """
    stack = Stack(_EXPR_MAXVAL)
    for arg in args:
        op = arg[:1]
        if op == "+":
            stack.push(stack.pop() + stack.pop())
        elif op == "*":
            stack.push(stack.pop() * stack.pop())
        elif op == "-":
            right = stack.pop()
            stack.push(stack.pop() - right)
        elif op == "/":
            right = stack.pop()
            if right == 0:
                raise ZeroDivisionError("division by zero")
            stack.push(stack.pop() / right)
        else:
            stack.push(atof(arg))
    for bottom in stack:
        return bottom
    raise StackError("the stack is empty")


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: an interactive calculator reading standard input."""
    calculator = Calculator()
    for line in sys.stdin:
        try:
            for value in calculator.feed(line):
                print(f"\t{value:.8f}")
        except (StackError, ZeroDivisionError, ValueError) as exc:
            print(f"error: {exc}")
    return 0


def expr_main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: evaluate the expression given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        value = evaluate_args(args)
    except (StackError, ZeroDivisionError) as exc:
        print(f"error: {exc}")
        return 1
    print(f"{value:f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())