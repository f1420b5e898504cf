"""A hashed symbol table mapping names to definitions."""

from __future__ import annotations

from dataclasses import dataclass

HASHSIZE = 1000
_MASK = 0xFFFFFFFF


def hash_name(s: str) -> int:
    """Return the bucket index of ``s`` in a table of :data:`HASHSIZE` buckets."""
    value = 0
    for byte in s.encode("utf-8"):
        signed = byte - 256 if byte > 127 else byte
        value = (signed + 31 * value) & _MASK
    return value % HASHSIZE


@dataclass
class Entry:
    """A name together with its current definition."""

    name: str
    defn: str


class SymbolTable:
    """Names and definitions stored in chained hash buckets."""

    def __init__(self) -> None:
        self._buckets: list[list[Entry]] = [[] for _ in range(HASHSIZE)]

    def lookup(self, name: str) -> Entry | None:
        """Return the entry for ``name``, or None when it is not defined."""
        for entry in self._buckets[hash_name(name)]:
            if entry.name == name:
                return entry
        return None

    def insert(self, name: str, defn: str) -> Entry:
        """Define ``name`` as ``defn``, replacing any earlier definition."""
        entry = self.lookup(name)
        if entry is None:
            entry = Entry(name, defn)
            self._buckets[hash_name(name)].insert(0, entry)
        else:
            entry.defn = defn
        return entry

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)