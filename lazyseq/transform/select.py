"""Projection nodes

One output element per input element (select, enumerate), zero or more
(select_many), zero or one (select_where)."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from kungfu import Some

from .._helpers import hint_of, opened
from .._types import FilterMap, LengthHint, Selector
from ..source import SourceSeq


@dataclass(frozen=True, slots=True, eq=False)
class SelectSeq[I, O](SourceSeq[I, O]):
    """Output of select()."""

    fn: Selector[I, O]

    def __iter__(self) -> Iterator[O]:
        with opened(self.source) as it:
            for x in it:
                yield self.fn(x)

    @property
    def length_hint(self) -> LengthHint:
        return hint_of(self.source)


@dataclass(frozen=True, slots=True, eq=False)
class EnumerateSeq[T](SourceSeq[T, tuple[int, T]]):
    """Output of enumerate()."""

    start: int = 0

    def __iter__(self) -> Iterator[tuple[int, T]]:
        with opened(self.source) as it:
            yield from enumerate(it, self.start)

    @property
    def length_hint(self) -> LengthHint:
        return hint_of(self.source)


@dataclass(frozen=True, slots=True, eq=False)
class SelectManySeq[I, O](SourceSeq[I, O]):
    """Output of select_many(). Without `fn` every element must be iterable."""

    fn: Selector[I, Iterable[O]] | None = None

    def __iter__(self) -> Iterator[O]:
        with opened(self.source) as it:
            for x in it:
                yield from (self.fn(x) if self.fn is not None else x)  # type: ignore[misc]


@dataclass(frozen=True, slots=True, eq=False)
class SelectWhereSeq[I, O](SourceSeq[I, O]):
    """Output of select_where(): keeps the payload of every Some."""

    fn: FilterMap[I, O]

    def __iter__(self) -> Iterator[O]:
        with opened(self.source) as it:
            for x in it:
                match self.fn(x):
                    case Some(value):
                        yield value
                    case _:
                        pass


__all__ = ("EnumerateSeq", "SelectManySeq", "SelectSeq", "SelectWhereSeq")
