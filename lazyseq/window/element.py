"""Single element edits

Insert or remove one element by position. Negative positions count from the
end, which means the source length has to be known first."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .._errors import IndexOutOfRangeError
from .._helpers import MISSING, calc_index, hint_of, opened
from .._types import LengthHint
from ..source import SourceSeq
from .take import take_from


@dataclass(frozen=True, slots=True, eq=False)
class InsertSeq[T](SourceSeq[T, T]):
    """Output of insert(), prepend() and append(). `index` None appends."""

    value: T
    index: int | None = None

    def __iter__(self) -> Iterator[T]:
        if self.index is None:
            yield from self.source
            yield self.value
            return

        source, i = calc_index(self.source, self.index)
        if i < 0:
            raise IndexOutOfRangeError.before_begin(self.index)
        with opened(source) as it:
            taken = yield from take_from(it, i)
            if taken != i:
                raise IndexOutOfRangeError(
                    self.index, "Can't insert an element more than 1 place after the end"
                )
            yield self.value
            yield from it

    @property
    def length_hint(self) -> LengthHint:
        hint = hint_of(self.source)
        if hint is None:
            return None
        if self.index is None:
            return hint + 1
        valid = hint + self.index >= 0 if self.index < 0 else self.index <= hint
        return hint + 1 if valid else None


@dataclass(frozen=True, slots=True, eq=False)
class RemoveAtSeq[T](SourceSeq[T, T]):
    """Output of remove_at()."""

    index: int

    def __iter__(self) -> Iterator[T]:
        source, i = calc_index(self.source, self.index)
        if i < 0:
            raise IndexOutOfRangeError.before_begin(self.index)
        with opened(source) as it:
            taken = yield from take_from(it, i)
            if taken != i or next(it, MISSING) is MISSING:
                raise IndexOutOfRangeError.after_end(self.index)
            yield from it

    @property
    def length_hint(self) -> LengthHint:
        hint = hint_of(self.source)
        if hint is None:
            return None
        valid = hint + self.index >= 0 if self.index < 0 else self.index < hint
        return hint - 1 if valid else None


__all__ = ("InsertSeq", "RemoveAtSeq")
