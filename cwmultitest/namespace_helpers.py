"""Helpers for reading and writing storage keys under a namespace prefix."""

from __future__ import annotations

from typing import Iterator, Optional

from cwmultitest.storage import Order, Record, Storage


def get_with_prefix(storage: Storage, namespace: bytes, key: bytes) -> Optional[bytes]:
    """Read ``key`` inside ``namespace``."""
    return storage.get(bytes(namespace) + bytes(key))


def set_with_prefix(storage: Storage, namespace: bytes, key: bytes, value: bytes) -> None:
    """Write ``value`` under ``key`` inside ``namespace``."""
    storage.set(bytes(namespace) + bytes(key), value)


def remove_with_prefix(storage: Storage, namespace: bytes, key: bytes) -> None:
    """Delete ``key`` inside ``namespace``."""
    storage.remove(bytes(namespace) + bytes(key))


def range_with_prefix(
    storage: Storage,
    namespace: bytes,
    start: Optional[bytes],
    end: Optional[bytes],
    order: Order,
) -> Iterator[Record]:
    """Iterate over records inside ``namespace`` with the prefix stripped from keys."""
    namespace = bytes(namespace)
    low = namespace if start is None else namespace + bytes(start)
    high = namespace_upper_bound(namespace) if end is None else namespace + bytes(end)
    cut = len(namespace)
    return ((key[cut:], value) for key, value in storage.range(low, high, order))


def namespace_upper_bound(namespace: bytes) -> bytes:
    """Return the key just past every key starting with ``namespace``.

    Trailing 0xff bytes roll over to zero and carry into the byte before them.
    """
    namespace = bytes(namespace)
    head = namespace.rstrip(b"\xff")
    carried = len(namespace) - len(head)
    if not head:
        return bytes(carried)
    return head[:-1] + bytes([head[-1] + 1]) + bytes(carried)