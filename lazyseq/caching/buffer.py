"""Chunked random access

BufferSeq holds a single chunk of data at a time. Indexing outside the chunk
asks the loader for a new one, starting `offset` elements before the index so
that small steps backwards don't reload."""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field

from kungfu import Nothing, Option, Some

from .._errors import IndexOutOfRangeError
from ..sequence import Seq

if typing.TYPE_CHECKING:
    from .cache import CacheSeq

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Window[T]:
    """The chunk currently loaded and the index of its first element."""

    start: int = 0
    chunk: Sequence[T] = ()


@dataclass(frozen=True, slots=True, eq=False)
class BufferSeq[T](Seq[T]):
    """
    Random access over data loaded in chunks.

    `loader(start)` returns the chunk beginning at `start`; an empty chunk
    means `start` is past the end.

    Example:
        pages = BufferSeq(lambda start: api.fetch(offset=start, limit=100))
        pages.at(250)  # loads the chunk starting at 250
    """

    loader: Callable[[int], Sequence[T]]
    offset: int = 0
    window: Window[T] = field(default_factory=Window)

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("BufferSeq.offset must be >= 0")

    @classmethod
    def from_items(cls, items: Sequence[T]) -> BufferSeq[T]:
        """A buffer over data that is already in memory."""
        return cls(lambda start: items[start:])

    def in_bound(self, index: int, load: bool = True) -> bool:
        """
        Whether an element exists at `index` (>= 0).

        With `load`, a missing index triggers a reload around it first.
        """
        window = self.window
        if 0 <= index - window.start < len(window.chunk):
            return True
        if not load:
            return False
        window.start = max(0, index - self.offset)
        window.chunk = self.loader(window.start)
        logger.debug("Loaded %d elements at %d", len(window.chunk), window.start)
        return self.in_bound(index, False)

    def __iter__(self) -> Iterator[T]:
        i = 0
        while self.in_bound(i):
            yield self.window.chunk[i - self.window.start]
            i += 1

    def at(self, index: int) -> T:
        """O(1) inside the loaded chunk."""
        if index < 0:
            return Seq.at(self, index)
        if self.in_bound(index):
            return self.window.chunk[index - self.window.start]
        raise IndexOutOfRangeError.after_end(index)

    def iterator(self) -> BufferCursor[T]:
        """Positional cursor over this buffer, before the first element."""
        return BufferCursor(self)


@dataclass(slots=True)
class Position:
    """Index of the element a BufferCursor stands on (-1 before the first)."""

    index: int = -1


@dataclass(frozen=True, slots=True, eq=False)
class BufferCursor[T](Seq[T]):
    """
    A movable position over random-access data.

    Iterating continues from the element after the current one and leaves the
    cursor past the end; moving the cursor while iterating changes what the
    iteration reads next. Clones share the data and keep their own position.

    Example:
        cur = BufferSeq.from_items("abcd").iterator()
        cur.next_value(2)   # Some("b")
        cur.peek()          # Some("c"), the cursor stays on "b"
        cur.to_list()       # ["c", "d"]
    """

    data: BufferSeq[T] | CacheSeq[T]
    position: Position = field(default_factory=Position)

    def __iter__(self) -> Iterator[T]:
        position = self.position
        position.index += 1
        while position.index >= 0 and self.data.in_bound(position.index):
            yield self.data.at(position.index)
            position.index += 1

    @property
    def current_index(self) -> int:
        return self.position.index

    @property
    def current(self) -> Option[T]:
        """The element under the cursor, Nothing() outside the data."""
        index = self.position.index
        if index < 0 or not self.data.in_bound(index):
            return Nothing()
        return Some(self.data.at(index))

    def in_bound(self, index: int, load: bool = True) -> bool:
        return index >= 0 and self.data.in_bound(index, load)

    def move(self, steps: int = -1, absolute: bool = False) -> typing.Self:
        """Move by `steps`, or to index `steps` when `absolute`."""
        self.position.index = steps if absolute else self.position.index + steps
        return self

    def next_value(self, steps: int = 1) -> Option[T]:
        """Move forward by `steps` and return the new current element."""
        return self.move(steps).current

    def peek(self, steps: int = 1) -> Option[T]:
        """The element `steps` away from the current one, without moving."""
        return self.clone().next_value(steps)

    def reach(self, target: BufferCursor[T]) -> Option[T]:
        """Jump to the position of `target`."""
        return self.move(target.current_index, True).current

    def clone(self) -> BufferCursor[T]:
        return BufferCursor(self.data, Position(self.position.index))


__all__ = ("BufferCursor", "BufferSeq", "Position", "Window")
