"""Binary search over sorted sequences."""

from __future__ import annotations

from typing import Any, Sequence


def binsearch(x: Any, items: Sequence[Any]) -> int:
    """Return an index of ``x`` in the ascending sequence ``items``, or -1.

    Items may be numbers or strings; strings compare by character code,
    so ``"B"`` sorts before ``"a"``.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        candidate = items[mid]
        if x > candidate:
            low = mid + 1
        elif x < candidate:
            high = mid - 1
        else:
            return mid
    return -1