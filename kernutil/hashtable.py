"""A self-expanding hash table of items that know their own keys.

The table maps keys to items using two caller-supplied functions: one that
extracts the key from an item and one that hashes a key to a non-negative
integer. Collisions are resolved by chaining; the table grows when the
average chain becomes too long.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, TypeVar

K = TypeVar("K")
T = TypeVar("T")

INITIAL_BUCKETS = 4
RESIZE_RATIO = 3
INCREASE_SIZE_BY = 4


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise AssertionError(message)


class HashTable(Generic[K, T]):
    """Items stored by the key that ``get_key`` extracts from them.

    Keys are compared with ``==`` and each key may be in the table once.
    """

    def __init__(self, get_key: Callable[[T], K], hash_func: Callable[[K], int]) -> None:
        self.get_key = get_key
        self.hash_func = hash_func
        self._buckets: list[list[T]] = self._new_buckets(INITIAL_BUCKETS)
        self._num_items = 0

    @staticmethod
    def _new_buckets(size: int) -> list[list[T]]:
        return [[] for _ in range(size)]

    @property
    def num_buckets(self) -> int:
        """How many chains the table currently has."""
        return len(self._buckets)

    def __len__(self) -> int:
        return self._num_items

    def __contains__(self, key: object) -> bool:
        return self.is_in_table(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        """Yield every item, bucket by bucket."""
        snapshot = [item for bucket in self._buckets for item in bucket]
        return iter(snapshot)

    def _hash_value(self, key: K) -> int:
        return self.hash_func(key) % len(self._buckets)

    def _index_in_bucket(self, bucket: list[T], key: K) -> int | None:
        for index, item in enumerate(bucket):
            if key == self.get_key(item):
                return index
        return None

    def _rehash(self) -> None:
        self.sanity_check()
        old = self._buckets
        self._buckets = self._new_buckets(len(old) * INCREASE_SIZE_BY)
        for bucket in old:
            for item in bucket:
                self._buckets[self._hash_value(self.get_key(item))].append(item)
        self.sanity_check()

    def insert(self, item: T) -> None:
        """Put ``item`` into the table; its key must not already be present."""
        key = self.get_key(item)
        if self.is_in_table(key):
            raise ValueError(f"key {key!r} is already in the table")
        if self._num_items // len(self._buckets) >= RESIZE_RATIO:
            self._rehash()
        self._buckets[self._hash_value(key)].append(item)
        self._num_items += 1

    def remove(self, key: K) -> T:
        """Remove and return the item stored under ``key``, which must be present."""
        bucket = self._buckets[self._hash_value(key)]
        index = self._index_in_bucket(bucket, key)
        if index is None:
            raise KeyError(key)
        self._num_items -= 1
        return bucket.pop(index)

    def find(self, key: K) -> T | None:
        """Return the item stored under ``key``, or None if there is none."""
        bucket = self._buckets[self._hash_value(key)]
        index = self._index_in_bucket(bucket, key)
        return None if index is None else bucket[index]

    def is_in_table(self, key: K) -> bool:
        """Return True if an item with ``key`` is in the table."""
        bucket = self._buckets[self._hash_value(key)]
        return self._index_in_bucket(bucket, key) is not None

    def is_empty(self) -> bool:
        """Return True if the table holds no items."""
        return self._num_items == 0

    def apply(self, func: Callable[[T], object]) -> None:
        """Call ``func`` on every item in the table."""
        for item in self:
            func(item)

    def sanity_check(self) -> None:
        """Raise AssertionError if the table is no longer consistent."""
        found = 0
        for index, bucket in enumerate(self._buckets):
            keys = [self.get_key(item) for item in bucket]
            for position, key in enumerate(keys):
                _check(
                    not any(key == other for other in keys[position + 1 :]),
                    f"key {key!r} stored more than once",
                )
                _check(
                    self._hash_value(key) == index,
                    f"key {key!r} is stored in the wrong bucket",
                )
            found += len(bucket)
        _check(found == self._num_items, "item count does not match contents")

    def self_test(self, items: Iterable[T]) -> None:
        """Exercise the table with ``items``; the table must start empty."""
        entries = list(items)
        self.sanity_check()
        _check(self.is_empty(), "table must start empty")
        for _ in self:
            raise AssertionError("iteration over an empty table yielded an item")

        for item in entries:
            self.insert(item)
            _check(self.is_in_table(self.get_key(item)), f"{item!r} missing after insert")
            _check(not self.is_empty(), "table empty after insert")

        for item in entries:
            _check(self.remove(self.get_key(item)) == item, f"{item!r} did not come back out")

        _check(self.is_empty(), "table must be empty after removing everything")
        self.sanity_check()