"""Skip combinators"""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from dataclasses import dataclass

from .._helpers import calc_length, hint_of, opened
from .._types import LengthHint, WindowPredicate
from ..source import SourceSeq


def skip_from(it: Iterator[object], n: int) -> None:
    """Advance `it` by `n` elements (or to its end)."""
    if n > 0:
        next(itertools.islice(it, n, n), None)


@dataclass(frozen=True, slots=True, eq=False)
class SkipSeq[T](SourceSeq[T, T]):
    """
    Output of skip().

    Example:
        seq([1, 2, 3, 4]).skip(1)                          # [2, 3, 4]
        seq([1, 2, 3, 4]).skip(-1)                         # [1, 2, 3]
        seq([1, 2, 3, 4]).skip(-1, left_on_negative=True)  # [4]
    """

    n: int | WindowPredicate[T]
    left_on_negative: bool = False

    def __iter__(self) -> Iterator[T]:
        from .take import take_from

        n = self.n
        if not isinstance(n, int):
            with opened(self.source) as it:
                for i, x in enumerate(it):
                    if not n(x, i, self):
                        yield x
                        break
                yield from it
            return

        if n >= 0:
            with opened(self.source) as it:
                skip_from(it, n)
                yield from it
            return

        source, length = calc_length(self.source)
        with opened(source) as it:
            if self.left_on_negative:
                skip_from(it, length + n)
                yield from it
            else:
                yield from take_from(it, length + n)

    @property
    def length_hint(self) -> LengthHint:
        if not isinstance(self.n, int):
            return None
        hint = hint_of(self.source)
        if hint is None:
            return None
        if self.n < 0 and self.left_on_negative:
            return min(hint, -self.n)
        return max(0, hint - abs(self.n))


__all__ = ("SkipSeq", "skip_from")
