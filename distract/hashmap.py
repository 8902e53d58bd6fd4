"""A string-keyed hash map with separate chaining and automatic growth."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterator

_SIZE_MASK = (1 << 64) - 1
_MIN_CAPACITY = 2


class DuplicateKeyError(KeyError):
    """Raised when setting a key that is already present."""


def djb2_hash(key: str) -> int:
    """The djb2 string hash, wrapped to 64 bits."""
    value = 5381
    for byte in key.encode("utf-8"):
        value = (value * 33 + byte) & _SIZE_MASK
    return value


class HashMap:
    """Hash map whose buckets are chains; new entries go to the chain front.

    The map doubles its capacity whenever a chain holds more than three
    entries, or more than two while the map is at least half full.
    """

    def __init__(
        self,
        capacity: int = _MIN_CAPACITY,
        hasher: Callable[[Hashable], int] | None = None,
    ) -> None:
        capacity = max(capacity, _MIN_CAPACITY)
        self._hasher = hasher if hasher is not None else hash
        self._buckets: list[list[tuple[Any, Any]]] = [[] for _ in range(capacity)]
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._buckets)

    @property
    def hasher(self) -> Callable[[Hashable], int]:
        return self._hasher

    def _bucket(self, key: Hashable) -> list[tuple[Any, Any]]:
        return self._buckets[self._hasher(key) % len(self._buckets)]

    def set(self, key: Hashable, value: Any) -> None:
        """Insert a new key; raise DuplicateKeyError if it already exists."""
        if key in self:
            raise DuplicateKeyError(key)
        self._bucket(key).insert(0, (key, value))
        self._size += 1
        self._grow_while_needed()

    def get(self, key: Hashable) -> Any:
        """Value stored under ``key``, or None if absent."""
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        return None

    def unset(self, key: Hashable) -> None:
        """Remove ``key`` if present."""
        bucket = self._bucket(key)
        for position, (stored_key, _) in enumerate(bucket):
            if stored_key == key:
                del bucket[position]
                self._size -= 1
                return

    def resize(self) -> None:
        """Double the capacity and rehash, growing further if still needed."""
        self._double()
        self._grow_while_needed()

    def _needs_resize(self) -> bool:
        half = len(self._buckets) // 2
        return any(
            len(bucket) > 3 or (len(bucket) > 2 and self._size >= half)
            for bucket in self._buckets
        )

    def _grow_while_needed(self) -> None:
        while self._needs_resize():
            self._double()

    def _double(self) -> None:
        old_buckets = self._buckets
        new_capacity = len(old_buckets) * 2
        self._buckets = [[] for _ in range(new_capacity)]
        for bucket in old_buckets:
            for key, value in bucket:
                index = self._hasher(key) % new_capacity
                self._buckets[index].insert(0, (key, value))

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs bucket by bucket."""
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for key, _ in self.items():
            yield key

    def __contains__(self, key: object) -> bool:
        return any(stored_key == key for stored_key, _ in self._bucket(key))