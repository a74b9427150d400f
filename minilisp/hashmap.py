"""Open-addressing hash map from string keys to unsigned 32-bit values."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

_FNV_OFFSET_BASIS = 2166136261
_FNV_PRIME = 16777619
_U32_MASK = 0xFFFFFFFF
_MAX_LOAD = 0.7


def hash_fnv1a_32(text: str | bytes) -> int:
    """Compute the 32-bit FNV-1a hash of a string (UTF-8) or bytes."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    value = _FNV_OFFSET_BASIS
    for byte in data:
        value = ((value ^ byte) * _FNV_PRIME) & _U32_MASK
    return value


class BucketStatus(enum.Enum):
    """State of a slot in the table."""

    EMPTY = 0
    FILLED = 1
    DELETED = 2


@dataclass
class _Bucket:
    key: str
    val: int
    status: BucketStatus = BucketStatus.FILLED


class U32HashMap:
    """Hash map with linear probing that doubles when 70% full."""

    def __init__(self, capacity: int = 16) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._count = 0
        self._entries: list[_Bucket | None] = [None] * capacity

    def _probe(self, key: str) -> Iterator[int]:
        start = hash_fnv1a_32(key) % self.capacity
        for step in range(self.capacity):
            yield (start + step) % self.capacity

    def _find(self, key: str) -> int | None:
        for idx in self._probe(key):
            bucket = self._entries[idx]
            if bucket is None:
                return None
            if bucket.status is BucketStatus.FILLED and bucket.key == key:
                return idx
        return None

    def _put(self, key: str, val: int) -> None:
        free_slot = None
        for idx in self._probe(key):
            bucket = self._entries[idx]
            if bucket is None:
                if free_slot is None:
                    free_slot = idx
                break
            if bucket.status is BucketStatus.FILLED:
                if bucket.key == key:
                    bucket.val = val
                    return
            elif free_slot is None:
                free_slot = idx
        if free_slot is None:
            raise RuntimeError("hash map has no free slot")
        self._entries[free_slot] = _Bucket(key, val)
        self._count += 1

    def insert(self, key: str, val: int) -> None:
        """Insert ``key`` with ``val``, overwriting any existing value."""
        if not isinstance(key, str):
            raise TypeError("key must be a str")
        if not isinstance(val, int) or isinstance(val, bool):
            raise TypeError("value must be an int")
        if not 0 <= val <= _U32_MASK:
            raise ValueError("value does not fit in 32 unsigned bits")
        if self._count / self.capacity >= _MAX_LOAD:
            self.resize()
        self._put(key, val)

    def delete(self, key: str) -> None:
        """Remove ``key``; raise KeyError if it is absent."""
        idx = self._find(key) if isinstance(key, str) else None
        if idx is None:
            raise KeyError(key)
        bucket = self._entries[idx]
        assert bucket is not None
        bucket.status = BucketStatus.DELETED
        self._count -= 1

    def resize(self) -> None:
        """Double the capacity and rehash all live entries."""
        old_entries = self._entries
        self.capacity *= 2
        self._entries = [None] * self.capacity
        self._count = 0
        for bucket in old_entries:
            if bucket is not None and bucket.status is BucketStatus.FILLED:
                self._put(bucket.key, bucket.val)

    def __getitem__(self, key: str) -> int:
        idx = self._find(key) if isinstance(key, str) else None
        if idx is None:
            raise KeyError(key)
        bucket = self._entries[idx]
        assert bucket is not None
        return bucket.val

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __len__(self) -> int:
        return self._count