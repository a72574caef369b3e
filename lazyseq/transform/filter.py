"""Filter nodes

Drop elements by predicate, by membership or by repetition."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from .._helpers import identity, opened
from .._types import Predicate, Selector
from ..source import SourceSeq


@dataclass(frozen=True, slots=True, eq=False)
class WhereSeq[T](SourceSeq[T, T]):
    """Output of where(). Without a predicate, falsy elements are dropped."""

    predicate: Predicate[T] | None = None

    def __iter__(self) -> Iterator[T]:
        p = self.predicate or bool
        with opened(self.source) as it:
            for x in it:
                if p(x):
                    yield x

    def or_(self, predicate: Predicate[T]) -> WhereSeq[T]:
        """
        Split an OR condition over several calls.

        Example:
            seq(range(10)).where(lambda x: x < 2).or_(lambda x: x > 8)  # [0, 1, 9]
        """
        first = self.predicate or bool

        def either(x: T) -> bool:
            return bool(first(x)) or bool(predicate(x))

        return WhereSeq(self.source, either)


@dataclass(frozen=True, slots=True, eq=False)
class CaseSeq[T](SourceSeq[T, T]):
    """Output of case(): matching elements go to `action` instead of the output."""

    predicate: Predicate[T]
    action: Callable[[T], None]

    def __iter__(self) -> Iterator[T]:
        with opened(self.source) as it:
            for x in it:
                if self.predicate(x):
                    self.action(x)
                else:
                    yield x


@dataclass(frozen=True, slots=True, eq=False)
class DistinctSeq[T, K](SourceSeq[T, T]):
    """Output of distinct(). Keys must be hashable."""

    key: Selector[T, K] | None = None

    def __iter__(self) -> Iterator[T]:
        key = self.key or identity
        seen: set[typing.Any] = set()
        with opened(self.source) as it:
            for x in it:
                k = key(x)
                if k not in seen:
                    seen.add(k)
                    yield x


@dataclass(frozen=True, slots=True, eq=False)
class IntersectSeq[T, K](SourceSeq[T, T]):
    """
    Output of intersect() and exclude().

    `other` is computed completely at the start of every traversal.
    """

    other: Iterable[K]
    key: Selector[T, K] | None = None
    invert: bool = False

    def __iter__(self) -> Iterator[T]:
        key = self.key or identity
        members = set(self.other)
        with opened(self.source) as it:
            for x in it:
                if (key(x) in members) != self.invert:
                    yield x


__all__ = ("CaseSeq", "DistinctSeq", "IntersectSeq", "WhereSeq")
