"""Recursive expansion

flatten() descends into nested iterables; traverse() walks a tree whose
shape is given by a children function. Both are depth-first and lazy."""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .._helpers import always_true, opened
from .._types import Children, IndexedPredicate
from ..source import SourceSeq

LEAF_TYPES: typing.Final = (str, bytes, bytearray)


def flat(source: Iterable[typing.Any]) -> Iterator[typing.Any]:
    """Yield the leaves of `source`; strings and bytes are leaves."""
    with opened(source) as it:
        for x in it:
            if isinstance(x, Iterable) and not isinstance(x, LEAF_TYPES):
                yield from flat(x)
            else:
                yield x


@dataclass(frozen=True, slots=True, eq=False)
class FlattenSeq[T](SourceSeq[T, typing.Any]):
    """
    Output of flatten().

    Example:
        seq([1, [2, [3, "ab"]], []]).flatten()  # [1, 2, 3, "ab"]
    """

    def __iter__(self) -> Iterator[typing.Any]:
        yield from flat(self.source)


@dataclass(frozen=True, slots=True, eq=False)
class TraverseSeq[T](SourceSeq[T, T]):
    """
    Output of traverse().

    `children(x, i)` and `predicate(x, i)` get the index of `x` among its
    siblings. A rejected node is dropped with its whole subtree. Parents come
    before their children unless `children_first` is set.

    Example:
        tree.traverse(lambda node, _: node.children)
    """

    children: Children[T]
    predicate: IndexedPredicate[T] | None = None
    children_first: bool = False

    def _walk(self, nodes: Iterable[T]) -> Iterator[T]:
        accept = self.predicate or always_true
        with opened(nodes) as it:
            for i, x in enumerate(it):
                if not accept(x, i):
                    continue
                if not self.children_first:
                    yield x
                yield from self._walk(self.children(x, i))
                if self.children_first:
                    yield x

    def __iter__(self) -> Iterator[T]:
        yield from self._walk(self.source)


__all__ = ("FlattenSeq", "LEAF_TYPES", "TraverseSeq", "flat")
