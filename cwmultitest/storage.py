"""Key-value storage interface and an in-memory implementation."""

from __future__ import annotations

import bisect
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator, Optional, Tuple

Record = Tuple[bytes, bytes]


class Order(Enum):
    """Direction of iteration over a key range."""

    ASCENDING = 1
    DESCENDING = 2


class Storage(ABC):
    """A byte-keyed, byte-valued store with ordered range iteration."""

    @abstractmethod
    def get(self, key: bytes) -> Optional[bytes]:
        """Return the value stored under ``key``, or ``None``."""

    @abstractmethod
    def set(self, key: bytes, value: bytes) -> None:
        """Store ``value`` under ``key``."""

    @abstractmethod
    def remove(self, key: bytes) -> None:
        """Delete ``key`` if present."""

    @abstractmethod
    def range(
        self,
        start: Optional[bytes],
        end: Optional[bytes],
        order: Order,
    ) -> Iterator[Record]:
        """Iterate over records with ``start <= key < end`` in the given order."""


class MemoryStorage(Storage):
    """Storage kept in memory, with keys held in sorted order."""

    def __init__(self) -> None:
        self._data: dict[bytes, bytes] = {}
        self._keys: list[bytes] = []

    def get(self, key: bytes) -> Optional[bytes]:
        return self._data.get(bytes(key))

    def set(self, key: bytes, value: bytes) -> None:
        key = bytes(key)
        if key not in self._data:
            bisect.insort(self._keys, key)
        self._data[key] = bytes(value)

    def remove(self, key: bytes) -> None:
        key = bytes(key)
        if self._data.pop(key, None) is not None:
            del self._keys[bisect.bisect_left(self._keys, key)]

    def range(
        self,
        start: Optional[bytes],
        end: Optional[bytes],
        order: Order,
    ) -> Iterator[Record]:
        low = 0 if start is None else bisect.bisect_left(self._keys, bytes(start))
        high = len(self._keys) if end is None else bisect.bisect_left(self._keys, bytes(end))
        selected = self._keys[low:high] if low < high else []
        if order is Order.DESCENDING:
            selected.reverse()
        records = [(key, self._data[key]) for key in selected]
        return iter(records)

    def __len__(self) -> int:
        return len(self._data)