"""Grouping combinators"""

from __future__ import annotations

import typing
from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass

from .._helpers import identity
from .._types import Selector
from ..source import FixedSeq, SourceSeq


@dataclass(frozen=True, slots=True, eq=False)
class Grouping[K, T](FixedSeq[T]):
    """
    Element of the output of group_by().

    A re-traversable sequence of the elements sharing `key`.
    """

    key: K

    def pipe[R](self, fn: Callable[[typing.Self], Iterable[R]]) -> Grouping[K, R]:  # type: ignore[override]
        """Same as Seq.pipe(), but the result keeps the group key."""
        return Grouping(fn(self), self.key)

    def __repr__(self) -> str:
        return f"Grouping(key={self.key!r}, {list(self.source)!r})"


def lookup[T, K](
    source: Iterable[T],
    key: Selector[T, K],
    group_key: Selector[K, Hashable] | None = None,
) -> dict[typing.Any, Grouping[K, T]]:
    """
    Bucket `source` in a single pass.

    The dict keeps the first-seen order of the buckets; each Grouping carries
    the key of its first element.

    Example:
        lookup(range(1, 5), lambda x: x, lambda k: k % 3)
        # {1: Grouping(key=1, [1, 4]), 2: Grouping(key=2, [2]), 0: Grouping(key=3, [3])}
    """
    bucket_of = group_key or identity
    out: dict[typing.Any, Grouping[K, T]] = {}
    for x in source:
        k = key(x)
        h = bucket_of(k)
        group = out.get(h)
        if group is None:
            out[h] = Grouping([x], k)
        else:
            typing.cast("list[T]", group.source).append(x)
    return out


@dataclass(frozen=True, slots=True, eq=False)
class GroupBySeq[T, K](SourceSeq[T, Grouping[K, T]]):
    """Output of group_by(). Every traversal regroups the source."""

    key: Selector[T, K]
    group_key: Selector[K, Hashable] | None = None

    def __iter__(self) -> Iterator[Grouping[K, T]]:
        yield from lookup(self.source, self.key, self.group_key).values()


__all__ = ("GroupBySeq", "Grouping", "lookup")
