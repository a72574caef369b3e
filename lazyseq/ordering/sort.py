"""Sort combinator

Multiset selection sort. The source is counted into buckets of equal values
(original objects, original order), then the smallest bucket under the
comparer is emitted and dropped until none is left. The work depends on the
number of distinct values, and ties go to the value seen first, so the sort
is stable."""

from __future__ import annotations

import logging
import typing
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .._helpers import by, compare, directed, hint_of
from .._types import Comparer, LengthHint, Selector
from ..source import SourceSeq

logger = logging.getLogger(__name__)


def buckets_of[T](source: Iterable[T]) -> list[list[T]]:
    """
    Occurrences of every distinct value, in first-seen order.

    Hashable values are found through a dict, the others by equality.
    """
    out: list[list[T]] = []
    hashed: dict[typing.Any, list[T]] = {}
    unhashed: list[list[T]] = []
    for x in source:
        try:
            bucket = hashed.get(x)
        except TypeError:
            bucket = next((b for b in unhashed if b[0] == x), None)
            if bucket is None:
                bucket = [x]
                unhashed.append(bucket)
                out.append(bucket)
            else:
                bucket.append(x)
            continue
        if bucket is None:
            hashed[x] = bucket = [x]
            out.append(bucket)
        else:
            bucket.append(x)
    return out


def multiset_sort[T](source: Iterable[T], comparer: Comparer[T]) -> Iterator[T]:
    buckets = buckets_of(source)
    logger.debug("Sorting %d distinct values", len(buckets))
    while buckets:
        best = 0
        for k in range(1, len(buckets)):
            if comparer(buckets[k][0], buckets[best][0]) < 0:
                best = k
        yield from buckets.pop(best)


@dataclass(frozen=True, slots=True, eq=False)
class SortSeq[T](SourceSeq[T, T]):
    """
    Output of sort() and sort_by().

    `comparer` already carries the direction. Sorting again replaces the
    primary ordering and keeps this one as a tie-breaker; then() does the
    opposite.

    Example:
        people.sort_by(lambda p: p.age).sort_by(lambda p: p.name)
        # by name, then by age
        people.sort_by(lambda p: p.age).then_by(lambda p: p.name)
        # by age, then by name
    """

    comparer: Comparer[T]

    def __iter__(self) -> Iterator[T]:
        yield from multiset_sort(self.source, self.comparer)

    @property
    def length_hint(self) -> LengthHint:
        return hint_of(self.source)

    def _chain(self, primary: Comparer[T], secondary: Comparer[T]) -> SortSeq[T]:
        def chained(a: T, b: T) -> int:
            return primary(a, b) or secondary(a, b)

        return SortSeq(self.source, chained)

    def sort(self, comparer: Comparer[T] | None = None, desc: bool = False) -> SortSeq[T]:
        return self._chain(directed(comparer or compare, desc), self.comparer)

    def sort_by[K](self, key: Selector[T, K], comparer: Comparer[K] | None = None, desc: bool = False) -> SortSeq[T]:
        return self.sort(by(key, comparer), desc)

    def then(self, comparer: Comparer[T] | None = None, desc: bool = False) -> SortSeq[T]:
        """Break the ties of this ordering with another comparer."""
        return self._chain(self.comparer, directed(comparer or compare, desc))

    def then_by[K](self, key: Selector[T, K], comparer: Comparer[K] | None = None, desc: bool = False) -> SortSeq[T]:
        return self.then(by(key, comparer), desc)


__all__ = ("SortSeq", "buckets_of", "multiset_sort")
