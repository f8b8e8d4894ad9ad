# cwmultitest

Building blocks for simulating a blockchain application's storage and
message-handling modules in plain Python tests. The package has no
dependencies outside the standard library.

## What it provides

- `cwmultitest.storage`: the abstract `Storage` interface (`get`, `set`,
  `remove`, `range`), the `Order` enum (`ASCENDING`, `DESCENDING`) for
  range iteration, and `MemoryStorage`, an in-memory store that keeps its
  keys sorted. `range(start, end, order)` yields `(key, value)` pairs with
  `start <= key < end`; either bound may be `None` for an open end.
  `len()` of a `MemoryStorage` is the number of stored keys.
- `cwmultitest.length_prefixed`: `encode_length`, `to_length_prefixed` and
  `to_length_prefixed_nested`, which build length-prefixed key namespaces:
  two big-endian length bytes followed by the namespace. A namespace longer
  than 0xFFFF bytes raises `ValueError`; the limit applies to each
  namespace of a nested sequence, not to their total.
- `cwmultitest.namespace_helpers`: `get_with_prefix`, `set_with_prefix`,
  `remove_with_prefix` and `range_with_prefix`, which do storage work under
  a raw key prefix (`range_with_prefix` strips the prefix from the keys it
  yields), and `namespace_upper_bound`, which returns the key just past
  every key that starts with a prefix, carrying over trailing `0xff` bytes.
- `cwmultitest.prefixed_storage`: `PrefixedStorage` and
  `ReadonlyPrefixedStorage`, storage views confined to one namespace, or to
  a nested chain of namespaces through the `multilevel` class method. Each
  view exposes its raw key prefix as `prefix`. The shorthands `prefixed`
  and `prefixed_read` build the two views. Calling `set` or `remove` on a
  read-only view raises `ReadOnlyStorageError` (a `NotImplementedError`).
- `cwmultitest.module`: the abstract `Module` interface with `execute`,
  `query` and `sudo`; `FailingModule`, which rejects every call by raising
  `ModuleError` (for example `Unexpected custom query ...`); and
  `AcceptingModule`, which returns an empty `AppResponse` from `execute`
  and `sudo` and empty bytes from `query`. `AppResponse` is a dataclass
  holding `events` (a list) and `data` (bytes or `None`).

## Installation

```
pip install cwmultitest
```

## Example

```python
from cwmultitest.storage import MemoryStorage, Order
from cwmultitest.prefixed_storage import PrefixedStorage, ReadonlyPrefixedStorage

storage = MemoryStorage()

foo = PrefixedStorage(storage, b"foo")
foo.set(b"a", b"A")
foo.set(b"z", b"Z")

assert storage.get(b"\x00\x03fooa") == b"A"
assert [value for _, value in foo.range(None, None, Order.DESCENDING)] == [b"Z", b"A"]

nested = PrefixedStorage.multilevel(storage, [b"foo", b"bar"])
nested.set(b"baz", b"winner")
assert storage.get(b"\x00\x03foo\x00\x03barbaz") == b"winner"

view = ReadonlyPrefixedStorage(storage, b"foo")
assert view.get(b"a") == b"A"
```

```python
from cwmultitest.module import AcceptingModule, FailingModule, ModuleError

assert AcceptingModule().query(None, None, None, None, "request") == b""

try:
    FailingModule().sudo(None, None, None, None, "msg")
except ModuleError as error:
    assert str(error) == "Unexpected sudo msg 'msg'"
```

## What it does not do

The package holds only storage and module building blocks. It has no
application object, no message router, no contract registry or execution,
no bank, staking, governance or other concrete modules, and no address or
signature handling. The `api`, `router`, `querier` and `block` arguments
of `Module` methods are passed through untouched; supplying them is up to
the caller.

## Running the tests

Install the test extra and run pytest:

```
pip install -e ".[test]"
pytest
```