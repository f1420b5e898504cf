"""A stack-like allocator handing out offsets into a fixed-size arena."""

from __future__ import annotations

ALLOCSIZE = 4096


class Arena:
    """Allocates contiguous regions from a fixed pool, freed in reverse order."""

    def __init__(self, size: int = ALLOCSIZE) -> None:
        if size < 0:
            raise ValueError(f"arena size must not be negative, got {size}")
        self._size = size
        self._next = 0

    @property
    def size(self) -> int:
        """Total number of units in the arena."""
        return self._size

    @property
    def available(self) -> int:
        """Number of units that can still be allocated."""
        return self._size - self._next

    def alloc(self, n: int) -> int:
        """Reserve ``n`` units and return the offset of the first one.

        Raises :class:`MemoryError` when fewer than ``n`` units are left.
        """
        if n < 0:
            raise ValueError(f"allocation size must not be negative, got {n}")
        if self.available < n:
            raise MemoryError(f"cannot allocate {n} units, {self.available} left")
        start = self._next
        self._next += n
        return start

    def free(self, offset: int) -> None:
        """Release everything allocated at or after ``offset``."""
        if not 0 <= offset < self._size:
            raise ValueError(f"offset outside the arena: {offset}")
        self._next = offset