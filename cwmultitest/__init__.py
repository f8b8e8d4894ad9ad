"""Storage namespacing and module building blocks for multi-contract test environments."""

__version__ = "0.20.0"

__all__ = [
    "length_prefixed",
    "module",
    "namespace_helpers",
    "prefixed_storage",
    "storage",
]