"""Length-prefixed key namespacing.

Each namespace is preceded by its length as a 2-byte big-endian integer.
"""

from __future__ import annotations

from typing import Iterable

_MAX_LENGTH = 0xFFFF


def encode_length(namespace: bytes) -> bytes:
    """Encode the length of ``namespace`` as 2 big-endian bytes."""
    if len(namespace) > _MAX_LENGTH:
        raise ValueError("only supports namespaces up to length 0xFFFF")
    return len(namespace).to_bytes(2, "big")


def to_length_prefixed(namespace: bytes) -> bytes:
    """Return the raw key prefix for a single namespace."""
    return encode_length(namespace) + bytes(namespace)


def to_length_prefixed_nested(namespaces: Iterable[bytes]) -> bytes:
    """Return the raw key prefix for a sequence of nested namespaces."""
    return b"".join(to_length_prefixed(namespace) for namespace in namespaces)