"""Storage views that confine every key to a length-prefixed namespace."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from cwmultitest.length_prefixed import to_length_prefixed, to_length_prefixed_nested
from cwmultitest.namespace_helpers import (
    get_with_prefix,
    range_with_prefix,
    remove_with_prefix,
    set_with_prefix,
)
from cwmultitest.storage import Order, Record, Storage


class ReadOnlyStorageError(NotImplementedError):
    """Raised when a read-only storage view is asked to change data."""


class PrefixedStorage(Storage):
    """A writable view of ``storage`` restricted to one namespace."""

    def __init__(self, storage: Storage, namespace: bytes) -> None:
        self._storage = storage
        self._prefix = to_length_prefixed(namespace)

    @classmethod
    def multilevel(cls, storage: Storage, namespaces: Iterable[bytes]) -> "PrefixedStorage":
        """Create a view for a sequence of nested namespaces."""
        view = cls.__new__(cls)
        view._storage = storage
        view._prefix = to_length_prefixed_nested(namespaces)
        return view

    @property
    def prefix(self) -> bytes:
        """The raw key prefix applied to every key."""
        return self._prefix

    def get(self, key: bytes) -> Optional[bytes]:
        return get_with_prefix(self._storage, self._prefix, key)

    def set(self, key: bytes, value: bytes) -> None:
        set_with_prefix(self._storage, self._prefix, key, value)

    def remove(self, key: bytes) -> None:
        remove_with_prefix(self._storage, self._prefix, key)

    def range(
        self,
        start: Optional[bytes],
        end: Optional[bytes],
        order: Order,
    ) -> Iterator[Record]:
        return range_with_prefix(self._storage, self._prefix, start, end, order)


class ReadonlyPrefixedStorage(Storage):
    """A read-only view of ``storage`` restricted to one namespace."""

    def __init__(self, storage: Storage, namespace: bytes) -> None:
        self._storage = storage
        self._prefix = to_length_prefixed(namespace)

    @classmethod
    def multilevel(
        cls, storage: Storage, namespaces: Iterable[bytes]
    ) -> "ReadonlyPrefixedStorage":
        """Create a read-only view for a sequence of nested namespaces."""
        view = cls.__new__(cls)
        view._storage = storage
        view._prefix = to_length_prefixed_nested(namespaces)
        return view

    @property
    def prefix(self) -> bytes:
        """The raw key prefix applied to every key."""
        return self._prefix

    def get(self, key: bytes) -> Optional[bytes]:
        return get_with_prefix(self._storage, self._prefix, key)

    def set(self, key: bytes, value: bytes) -> None:
        raise ReadOnlyStorageError("not implemented: storage view is read-only")

    def remove(self, key: bytes) -> None:
        raise ReadOnlyStorageError("not implemented: storage view is read-only")

    def range(
        self,
        start: Optional[bytes],
        end: Optional[bytes],
        order: Order,
    ) -> Iterator[Record]:
        return range_with_prefix(self._storage, self._prefix, start, end, order)


def prefixed(storage: Storage, namespace: bytes) -> PrefixedStorage:
    """Shorthand for ``PrefixedStorage(storage, namespace)``."""
    return PrefixedStorage(storage, namespace)


def prefixed_read(storage: Storage, namespace: bytes) -> ReadonlyPrefixedStorage:
    """Shorthand for ``ReadonlyPrefixedStorage(storage, namespace)``."""
    return ReadonlyPrefixedStorage(storage, namespace)