"""
Cache combinator
================

One shared traversal of the source, memoised in an append-only buffer.

Every reader keeps its own position. When a reader reaches the end of the
buffer it pulls the next element from the shared traversal, appends it and
yields it, so interleaved readers see the elements in the same order and the
source produces each element exactly once.

Readers are cooperative: there is no locking, so a cache must not be shared
between threads.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Iterator
from dataclasses import dataclass, field

from .._errors import IndexOutOfRangeError
from .._helpers import dispose, hint_of
from .._types import LengthHint, Predicate
from ..sequence import Seq
from ..source import OnceSeq, SourceSeq

if typing.TYPE_CHECKING:
    from .buffer import BufferCursor

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CacheRecord[T]:
    """Mutable state shared by every reader of a CacheSeq."""

    buffer: list[T] = field(default_factory=list)
    iterator: Iterator[T] | None = None
    exhausted: bool = False
    # Failure of the shared traversal, raised again to every later reader
    error: Exception | None = None


@dataclass(frozen=True, slots=True, eq=False)
class CacheSeq[T](SourceSeq[T, T]):
    """
    Output of cache().

    Usage:
        with source.cache() as cached:
            cached.first()
            cached.to_list()  # replays the first element, then pulls the rest
    """

    record: CacheRecord[T] = field(default_factory=CacheRecord)

    def _advance(self) -> bool:
        """Pull one more element into the buffer. False once the source is over."""
        record = self.record
        if record.exhausted:
            return False
        if record.error is not None:
            raise record.error
        if record.iterator is None:
            record.iterator = iter(self.source)
        try:
            value = next(record.iterator)
        except StopIteration:
            record.exhausted = True
            record.iterator = None
            logger.debug("Cache exhausted after %d elements", len(record.buffer))
            return False
        except Exception as exc:
            record.error = exc
            record.iterator = None
            logger.debug("Cache source failed after %d elements: %r", len(record.buffer), exc)
            raise
        record.buffer.append(value)
        return True

    def _read(self, start: int) -> Iterator[T]:
        buffer = self.record.buffer
        i = start
        while i < len(buffer) or self._advance():
            yield buffer[i]
            i += 1

    def __iter__(self) -> Iterator[T]:
        yield from self._read(0)

    def rest(self) -> OnceSeq[T]:
        """The elements that were not buffered yet when rest() was called."""
        return OnceSeq(self._read(len(self.record.buffer)))

    @property
    def buffered(self) -> tuple[T, ...]:
        """Snapshot of the elements computed so far."""
        return tuple(self.record.buffer)

    @property
    def exhausted(self) -> bool:
        return self.record.exhausted

    @property
    def length_hint(self) -> LengthHint:
        if self.record.exhausted:
            return len(self.record.buffer)
        return hint_of(self.source)

    def cache(self) -> CacheSeq[T]:
        return self

    def at(self, index: int) -> T:
        """Read from the buffer, advancing the shared traversal only as needed."""
        buffer = self.record.buffer
        if index < 0:
            while self._advance():
                pass
            if index + len(buffer) < 0:
                raise IndexOutOfRangeError.before_begin(index)
            return buffer[index]
        while len(buffer) <= index and self._advance():
            pass
        if index < len(buffer):
            return buffer[index]
        raise IndexOutOfRangeError.after_end(index)

    def in_bound(self, index: int, load: bool = True) -> bool:
        """
        Whether the element at `index` (>= 0) exists.

        With `load`, the shared traversal is advanced until it is buffered.
        """
        buffer = self.record.buffer
        while load and len(buffer) <= index and self._advance():
            pass
        return 0 <= index < len(buffer)

    def iterator(self) -> BufferCursor[T]:
        """Positional cursor over the shared buffer, before the first element."""
        from .buffer import BufferCursor
        return BufferCursor(self)

    def count(self, predicate: Predicate[T] | None = None) -> int:
        if predicate is None and self.record.exhausted:
            return len(self.record.buffer)
        return Seq.count(self, predicate)

    def close(self) -> None:
        """
        Release the shared traversal.

        What was buffered stays readable; nothing more is pulled.
        """
        record = self.record
        if record.iterator is not None:
            dispose(record.iterator)
            record.iterator = None
            logger.debug("Cache closed after %d elements", len(record.buffer))
        record.exhausted = True

    def __enter__(self) -> typing.Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ("CacheRecord", "CacheSeq")
