"""An in-memory string store built on separate chaining and the djb2 hash."""

from __future__ import annotations

from collections.abc import Iterator

_MASK = (1 << 64) - 1
DEFAULT_SIZE = 128


def djb2_hash(text: str) -> int:
    """Return the 64-bit djb2 hash of ``text``, taken over its UTF-8 bytes.

    Bytes above 0x7F count as signed chars, as they do on common platforms.
    """
    value = 5381
    for byte in text.encode("utf-8"):
        char = byte - 256 if byte > 0x7F else byte
        value = (value * 33 + char) & _MASK
    return value


class HashTable:
    """A fixed number of buckets, each a chain of ``[key, value]`` pairs."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"table size must be positive, got {size}")
        self.size = size
        self._buckets: list[list[list[str]]] = [[] for _ in range(size)]

    def bucket_index(self, key: str) -> int:
        """Return the bucket that ``key`` falls into."""
        return djb2_hash(key) % self.size

    def _chain(self, key: str) -> list[list[str]]:
        return self._buckets[self.bucket_index(key)]

    def put(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        chain = self._chain(key)
        for entry in chain:
            if entry[0] == key:
                entry[1] = value
                return
        chain.insert(0, [key, value])

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None if there is none."""
        for entry_key, entry_value in self._chain(key):
            if entry_key == key:
                return entry_value
        return None

    def delete(self, key: str) -> None:
        """Remove ``key`` if present; a missing key is ignored."""
        chain = self._chain(key)
        for position, (entry_key, _) in enumerate(chain):
            if entry_key == key:
                del chain[position]
                return

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._buckets)

    def __iter__(self) -> Iterator[str]:
        for chain in self._buckets:
            for entry_key, _ in chain:
                yield entry_key