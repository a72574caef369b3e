"""
Cursor - explicit pull interface
================================

A cursor advances a traversal one element at a time and reports each step as
an Option, so callers never have to catch StopIteration.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator

from kungfu import Nothing, Option, Some

from ._helpers import dispose


class Cursor[T]:
    """
    Pull-based handle over a single traversal.

    Usage:
        with seq([1, 2]).cursor() as cur:
            cur.next_value()  # Some(1)
            cur.next_value()  # Some(2)
            cur.next_value()  # Nothing()

    Leaving the block (or calling close()) disposes of the traversal even when
    it was not consumed to the end.
    """

    __slots__ = ("_iterator", "_done", "_index", "_peeked")

    def __init__(self, source: Iterable[T]) -> None:
        self._iterator: Iterator[T] = iter(source)
        self._done = False
        self._index = 0
        self._peeked: Option[T] | None = None

    @property
    def done(self) -> bool:
        """True once the traversal has reported its end."""
        return self._done

    @property
    def index(self) -> int:
        """Number of elements delivered so far."""
        return self._index

    def _pull(self) -> Option[T]:
        if self._done:
            return Nothing()
        try:
            value = next(self._iterator)
        except StopIteration:
            self._done = True
            return Nothing()
        return Some(value)

    def next_value(self) -> Option[T]:
        """Advance by one element. Nothing() means the traversal is over."""
        if self._peeked is not None:
            step, self._peeked = self._peeked, None
        else:
            step = self._pull()
        if isinstance(step, Some):
            self._index += 1
        return step

    def peek(self) -> Option[T]:
        """Look at the next element without consuming it."""
        if self._peeked is None:
            self._peeked = self._pull()
        return self._peeked

    def close(self) -> None:
        self._done = True
        self._peeked = None
        dispose(self._iterator)

    def __enter__(self) -> typing.Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        match self.next_value():
            case Some(value):
                return value
            case _:
                raise StopIteration


__all__ = ("Cursor",)
