"""Take combinators

Prefix windows: the first n elements, the last n, or while a predicate holds."""

from __future__ import annotations

import itertools
import typing
from collections.abc import Generator, Iterator
from dataclasses import dataclass

from .._helpers import calc_length, hint_of, opened
from .._types import LengthHint, WindowPredicate
from ..source import SourceSeq
from .skip import skip_from

if typing.TYPE_CHECKING:
    from ..sequence import Seq


def take_from[T](
    it: Iterator[T],
    n: int,
    pad: bool = False,
    fill: typing.Any = None,
) -> Generator[T, None, int]:
    """
    Yield up to `n` elements of `it` without pulling the one after them.

    With `pad` the missing elements are replaced by `fill`.
    Returns the number of elements actually taken from `it`.
    """
    taken = 0
    for x in itertools.islice(it, max(0, n)):
        taken += 1
        yield x
    if pad:
        for _ in range(taken, n):
            yield fill
    return taken


def take_while[T](it: Iterator[T], predicate: WindowPredicate[T], window: Seq[T]) -> Iterator[T]:
    for i, x in enumerate(it):
        if not predicate(x, i, window):
            return
        yield x


@dataclass(frozen=True, slots=True, eq=False)
class TakeSeq[T](SourceSeq[T, T]):
    """
    Output of take().

    Example:
        seq([1, 2, 3]).take(5, pad=True, fill=0)  # [1, 2, 3, 0, 0]
        seq([1, 2, 3]).take(-2)                   # [2, 3]
        seq([1, 2, 3]).take(-2, left_on_negative=True)  # [1]
    """

    n: int | WindowPredicate[T]
    pad: bool = False
    pad_value: T | None = None
    left_on_negative: bool = False

    def __iter__(self) -> Iterator[T]:
        n = self.n
        if not isinstance(n, int):
            with opened(self.source) as it:
                yield from take_while(it, n, self)
            return

        if n >= 0:
            with opened(self.source) as it:
                yield from take_from(it, n, self.pad, self.pad_value)
            return

        source, length = calc_length(self.source)
        with opened(source) as it:
            if self.left_on_negative:
                yield from take_from(it, length + n)
                return
            skip_from(it, length + n)
            yield from it
        if self.pad:
            for _ in range(length, -n):
                yield typing.cast("T", self.pad_value)

    @property
    def length_hint(self) -> LengthHint:
        if not isinstance(self.n, int):
            return None
        n = abs(self.n)
        # Padding is meaningless when the negative count drops from the end
        if self.pad and not (self.n < 0 and self.left_on_negative):
            return n
        hint = hint_of(self.source)
        if hint is None:
            return None
        if self.n >= 0 or not self.left_on_negative:
            return min(hint, n)
        return max(0, hint - n)


__all__ = ("TakeSeq", "take_from", "take_while")
