"""Store-by combinator

Lazy grouping. One shared traversal of the source feeds a buffer per key;
reading a group pulls the source until the group has a new element, storing
the elements of the other keys on the way."""

from __future__ import annotations

import logging
import typing
from collections.abc import Iterator
from dataclasses import dataclass, field

from .._helpers import dispose
from .._types import LengthHint, Selector
from ..sequence import Seq
from ..source import SourceSeq

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StoreRecord[T, K]:
    """Mutable state shared by a StoreBySeq and its groups."""

    buckets: dict[typing.Any, list[T]] = field(default_factory=dict)
    keys: list[K] = field(default_factory=list)
    iterator: Iterator[T] | None = None
    exhausted: bool = False
    # Failure of the shared traversal, raised again to every later reader
    error: Exception | None = None


@dataclass(frozen=True, slots=True, eq=False)
class StoredGroup[K, T](Seq[T]):
    """The elements of `store` whose key is `key`."""

    store: StoreBySeq[T, K]
    key: K

    def __iter__(self) -> Iterator[T]:
        bucket = self.store.bucket(self.key)
        i = 0
        while i < len(bucket) or self.store.advance():
            if i < len(bucket):
                yield bucket[i]
                i += 1

    @property
    def length_hint(self) -> LengthHint:
        if self.store.record.exhausted:
            return len(self.store.bucket(self.key))
        return None

    def __repr__(self) -> str:
        return f"StoredGroup(key={self.key!r})"


@dataclass(frozen=True, slots=True, eq=False)
class StoreBySeq[T, K](SourceSeq[T, StoredGroup[K, T]]):
    """
    Output of store_by().

    Iterating it yields a StoredGroup the first time each key shows up.

    Example:
        store = seq(range(10)).store_by(lambda x: x % 3)
        store.group(1).take(2).to_list()  # [1, 4]; 0, 2 and 3 are stored
    """

    key: Selector[T, K]
    record: StoreRecord[T, K] = field(default_factory=StoreRecord)

    def bucket(self, key: K) -> list[T]:
        """Buffer of `key`, created empty if the key has not been seen yet."""
        return self.record.buckets.setdefault(key, [])

    def advance(self) -> bool:
        """Store one more element. False once the source is over."""
        record = self.record
        if record.exhausted:
            return False
        if record.error is not None:
            raise record.error
        if record.iterator is None:
            record.iterator = iter(self.source)
        try:
            value = next(record.iterator)
            k = self.key(value)
        except StopIteration:
            record.exhausted = True
            record.iterator = None
            logger.debug("Store exhausted with %d keys", len(record.keys))
            return False
        except Exception as exc:
            record.error = exc
            dispose(record.iterator)
            record.iterator = None
            logger.debug("Store source failed with %d keys: %r", len(record.keys), exc)
            raise
        bucket = record.buckets.get(k)
        if bucket is None:
            record.buckets[k] = bucket = []
        if not bucket and k not in record.keys:
            record.keys.append(k)
        bucket.append(value)
        return True

    def group(self, key: K) -> StoredGroup[K, T]:
        return StoredGroup(self, key)

    def __iter__(self) -> Iterator[StoredGroup[K, T]]:
        keys = self.record.keys
        i = 0
        while i < len(keys) or self.advance():
            if i < len(keys):
                yield StoredGroup(self, keys[i])
                i += 1

    def close(self) -> None:
        """Release the shared traversal; stored elements stay readable."""
        record = self.record
        if record.iterator is not None:
            dispose(record.iterator)
            record.iterator = None
        record.exhausted = True

    def __enter__(self) -> typing.Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ("StoreBySeq", "StoreRecord", "StoredGroup")
