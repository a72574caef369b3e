"""Zip combinator

Lockstep combination of two sequences. The join mode decides which side
governs the length of the output:

    INNER  stop at the end of the shorter side
    LEFT   stop at the end of the left side
    RIGHT  stop at the end of the right side
    OUTER  stop at the end of the longer side

The side that ran out is passed to the combiner as `fill`."""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .._helpers import MISSING, dispose, hint_of, pair
from .._types import Combiner, JoinMode, LengthHint
from ..source import SourceSeq


def zip_hint(left: LengthHint, right: LengthHint, mode: JoinMode) -> LengthHint:
    """Output length of a zip from the input lengths."""
    if mode == JoinMode.LEFT:
        return left
    if mode == JoinMode.RIGHT:
        return right
    if left is None or right is None:
        return None
    return max(left, right) if mode == JoinMode.OUTER else min(left, right)


@dataclass(frozen=True, slots=True, eq=False)
class ZipSeq[A, B, R](SourceSeq[A, R]):
    """
    Output of zip().

    Example:
        seq([1, 2, 3]).zip([4, 5])  # [(1, 4), (2, 5)]
        seq([1, 2, 3]).zip([4, 5], operator.add, JoinMode.LEFT, fill=0)  # [5, 7, 3]
    """

    other: Iterable[B]
    combiner: Combiner[A, B, R] | None = None
    mode: JoinMode = JoinMode.INNER
    absent: typing.Any = None

    def __iter__(self) -> Iterator[R]:
        combine = self.combiner or pair
        left = iter(self.source)
        right = iter(self.other)
        try:
            while True:
                a = next(left, MISSING)
                if a is MISSING and not self.mode & JoinMode.RIGHT:
                    return
                b = next(right, MISSING)
                if b is MISSING and (a is MISSING or not self.mode & JoinMode.LEFT):
                    return
                yield combine(
                    self.absent if a is MISSING else a,
                    self.absent if b is MISSING else b,
                )
        finally:
            dispose(left)
            dispose(right)

    @property
    def length_hint(self) -> LengthHint:
        return zip_hint(hint_of(self.source), hint_of(self.other), self.mode)


__all__ = ("ZipSeq", "zip_hint")
