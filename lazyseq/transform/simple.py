"""Simple wrapper nodes

Reordering, concatenation and traversal hooks."""

from __future__ import annotations

import random
import typing
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from .._helpers import MISSING, add_hints, hint_of, opened
from .._types import LengthHint
from ..source import SourceSeq

if typing.TYPE_CHECKING:
    from ..sequence import Seq


@dataclass(frozen=True, slots=True, eq=False)
class ReverseSeq[T](SourceSeq[T, T]):
    """Output of reverse(). Every traversal materialises the source."""

    def __iter__(self) -> Iterator[T]:
        yield from reversed(list(self.source))

    @property
    def length_hint(self) -> LengthHint:
        return hint_of(self.source)


@dataclass(frozen=True, slots=True, eq=False)
class ShuffleSeq[T](SourceSeq[T, T]):
    """Output of shuffle(). A new permutation per traversal."""

    rng: random.Random | None = None

    def __iter__(self) -> Iterator[T]:
        items = list(self.source)
        (self.rng or random).shuffle(items)
        yield from items

    @property
    def length_hint(self) -> LengthHint:
        return hint_of(self.source)


@dataclass(frozen=True, slots=True, eq=False)
class MergeSeq[T](SourceSeq[T, T]):
    """Output of merge(): `source` then `other` (the opposite with `flip`)."""

    other: Iterable[T]
    flip: bool = False

    def __iter__(self) -> Iterator[T]:
        first, second = (self.other, self.source) if self.flip else (self.source, self.other)
        yield from first
        yield from second

    @property
    def length_hint(self) -> LengthHint:
        return add_hints(hint_of(self.source), hint_of(self.other))


@dataclass(frozen=True, slots=True, eq=False)
class WrapSeq[T](SourceSeq[typing.Any, T]):
    """Output of wrap(): the only element is `source` itself."""

    def __iter__(self) -> Iterator[T]:
        yield typing.cast("T", self.source)

    @property
    def length_hint(self) -> LengthHint:
        return 1


@dataclass(frozen=True, slots=True, eq=False)
class DefaultSeq[T](SourceSeq[T, T]):
    """Output of default()."""

    value: T | None = None

    def __iter__(self) -> Iterator[T]:
        empty = True
        with opened(self.source) as it:
            for x in it:
                empty = False
                yield x
        if empty:
            yield typing.cast("T", self.value)

    @property
    def length_hint(self) -> LengthHint:
        hint = hint_of(self.source)
        return None if hint is None else hint or 1


@dataclass(frozen=True, slots=True, eq=False)
class RepeatSeq[T](SourceSeq[T, T]):
    """Output of repeat(). The source is traversed again for every round."""

    n: int

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError("RepeatSeq.n must be >= 0")

    def __iter__(self) -> Iterator[T]:
        for _ in range(self.n):
            yield from self.source

    @property
    def length_hint(self) -> LengthHint:
        hint = hint_of(self.source)
        return None if hint is None else hint * self.n


@dataclass(frozen=True, slots=True, eq=False)
class OnFirstSeq[T](SourceSeq[T, T]):
    """Output of on_first()."""

    fn: Callable[[T], None]

    def __iter__(self) -> Iterator[T]:
        first = MISSING
        with opened(self.source) as it:
            for x in it:
                if first is MISSING:
                    first = x
                    self.fn(x)
                yield x

    @property
    def length_hint(self) -> LengthHint:
        return hint_of(self.source)


@dataclass(frozen=True, slots=True, eq=False)
class OnFinishSeq[T](SourceSeq[T, T]):
    """
    Output of on_finish().

    `fn` receives this node once the traversal is over, whether it ran to
    the end, raised or was abandoned by the consumer.
    """

    fn: Callable[[Seq[T]], None]

    def __iter__(self) -> Iterator[T]:
        try:
            with opened(self.source) as it:
                yield from it
        finally:
            self.fn(self)

    @property
    def length_hint(self) -> LengthHint:
        return hint_of(self.source)


__all__ = (
    "DefaultSeq",
    "MergeSeq",
    "OnFinishSeq",
    "OnFirstSeq",
    "RepeatSeq",
    "ReverseSeq",
    "ShuffleSeq",
    "WrapSeq",
)
