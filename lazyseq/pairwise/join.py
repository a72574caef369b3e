"""Join combinator

Cartesian combination of two sequences filtered by a predicate. The right
side is traversed only once per join traversal: its elements are cached as
they are first needed and replayed for every following left element."""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from .._helpers import MISSING, always_true, hint_of, opened, pair
from .._types import Combiner, JoinMode, LengthHint
from ..source import SourceSeq

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class JoinEntry[T]:
    """A cached element and whether the predicate ever accepted it."""

    value: T
    matched: bool = False


@dataclass(frozen=True, slots=True, eq=False)
class JoinSeq[A, B, R](SourceSeq[A, R]):
    """
    Output of join().

    Order of the output:
    1. every accepted (left, right) pair, left-major
    2. with LEFT, the left elements that matched nothing, paired with `fill`
    3. with RIGHT, the right elements that matched nothing, after `fill`

    Example:
        seq([1, 2]).join(["a", "b"]).to_list()
        # [(1, "a"), (1, "b"), (2, "a"), (2, "b")]
    """

    other: Iterable[B]
    predicate: Callable[[A, B], bool] | None = None
    combiner: Combiner[A, B, R] | None = None
    mode: JoinMode = JoinMode.INNER
    absent: typing.Any = None

    def __iter__(self) -> Iterator[R]:
        predicate = self.predicate or always_true
        combine = self.combiner or pair
        right: list[JoinEntry[B]] = []
        unmatched_left: list[A] = []
        with opened(self.other) as right_it, opened(self.source) as left_it:
            for a in left_it:
                matched = False
                i = 0
                while True:
                    if i < len(right):
                        entry = right[i]
                    else:
                        b = next(right_it, MISSING)
                        if b is MISSING:
                            break
                        entry = JoinEntry(b)
                        right.append(entry)
                    i += 1
                    if predicate(a, entry.value):
                        matched = entry.matched = True
                        yield combine(a, entry.value)
                if not matched and self.mode & JoinMode.LEFT:
                    unmatched_left.append(a)

            if self.mode & JoinMode.RIGHT:
                right.extend(JoinEntry(b) for b in right_it)
        logger.debug("Join replayed %d cached right elements", len(right))

        for a in unmatched_left:
            yield combine(a, self.absent)
        if self.mode & JoinMode.RIGHT:
            for entry in right:
                if not entry.matched:
                    yield combine(self.absent, entry.value)

    @property
    def length_hint(self) -> LengthHint:
        if self.predicate is not None:
            return None
        left, right = hint_of(self.source), hint_of(self.other)
        if left is None or right is None:
            return None
        total = left * right
        if not right and self.mode & JoinMode.LEFT:
            total += left
        if not left and self.mode & JoinMode.RIGHT:
            total += right
        return total


__all__ = ("JoinEntry", "JoinSeq")
