"""
Source wrappers
===============

Bind the sequence contract to concrete backing data. seq() is the entry point:
it accepts any iterable, a bare iterator or a zero-argument factory.
"""

from __future__ import annotations

import logging
import random
import typing
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from ._errors import IndexOutOfRangeError, ReuseError
from ._helpers import hint_of
from ._types import LengthHint, UNKNOWN
from .sequence import Seq

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class SourceSeq[I, O](Seq[O]):
    """
    Node built on top of another iterable.

    By default it yields the elements of `source` unchanged.
    """

    source: Iterable[I]

    def __iter__(self) -> Iterator[O]:
        yield from typing.cast("Iterable[O]", self.source)


@dataclass(frozen=True, slots=True, eq=False)
class FixedSeq[T](SourceSeq[T, T]):
    """
    Output of seq(): a sequence with the same elements as `source`.

    Its length hint is the cheap count of the source.
    """

    @property
    def length_hint(self) -> LengthHint:
        return hint_of(self.source)

    def at(self, index: int) -> T:
        """O(1) on indexable sources."""
        if isinstance(self.source, Sequence):
            try:
                return self.source[index]
            except IndexError:
                if index < 0:
                    raise IndexOutOfRangeError.before_begin(index) from None
                raise IndexOutOfRangeError.after_end(index) from None
        return Seq.at(self, index)


@dataclass(frozen=True, slots=True, eq=False)
class FactorySeq[T](Seq[T]):
    """A traversal factory: `factory` is called once per traversal."""

    factory: Callable[[], Iterable[T]]

    def __iter__(self) -> Iterator[T]:
        yield from self.factory()


@dataclass(slots=True)
class RunState:
    """Mutable bookkeeping of a run-once node."""

    used: bool = False


@dataclass(frozen=True, slots=True, eq=False)
class OnceSeq[T](SourceSeq[T, T]):
    """
    Output of once() and of seq() on a bare iterator.

    The second traversal raises ReuseError.
    """

    state: RunState = field(default_factory=RunState)

    def __iter__(self) -> Iterator[T]:
        if self.state.used:
            raise ReuseError()
        self.state.used = True
        yield from self.source

    @property
    def length_hint(self) -> LengthHint:
        return UNKNOWN if self.state.used else hint_of(self.source)


class EmptySeq(Seq[typing.Any]):
    """A sequence with no elements."""

    __slots__ = ()

    def __iter__(self) -> Iterator[typing.Any]:
        return iter(())

    @property
    def length_hint(self) -> LengthHint:
        return 0

    def at(self, index: int) -> typing.Any:
        raise IndexOutOfRangeError(index, "There is no element in an empty sequence")

    def __repr__(self) -> str:
        return "EmptySeq()"


_EMPTY = EmptySeq()


@dataclass(frozen=True, slots=True, eq=False)
class RangeSeq(Seq[int | float]):
    """
    Arithmetic progression: `length` numbers from `start` by `step`.

    An unbounded range (length None) is infinite.
    """

    length: int | None = None
    start: int | float = 0
    step: int | float = 1

    def __post_init__(self) -> None:
        if self.length is not None and self.length < 0:
            raise ValueError("RangeSeq.length must be >= 0")

    def __iter__(self) -> Iterator[int | float]:
        i = 0
        while self.length is None or i < self.length:
            yield self.start + i * self.step
            i += 1

    @property
    def length_hint(self) -> LengthHint:
        return self.length

    def at(self, index: int) -> int | float:
        """O(1) arithmetic lookup."""
        i = index
        if i < 0:
            if self.length is None:
                raise IndexOutOfRangeError(index, "Can't index an infinite sequence from the end")
            i += self.length
            if i < 0:
                raise IndexOutOfRangeError.before_begin(index)
        if self.length is not None and i >= self.length:
            raise IndexOutOfRangeError.after_end(index)
        return self.start + i * self.step

    def reverse(self) -> RangeSeq:  # type: ignore[override]
        """Reversed lazily by arithmetic."""
        if self.length is None:
            raise ValueError("An infinite sequence can't be reversed")
        if not self.length:
            return self
        return RangeSeq(self.length, self.start + (self.length - 1) * self.step, -self.step)


@dataclass(frozen=True, slots=True, eq=False)
class RandSeq(Seq[int | float]):
    """
    Infinite random numbers.

    With `top`, integers between `bottom` and `top` (both included);
    otherwise floats in [0, 1).
    """

    top: int | None = None
    bottom: int = 0
    rng: random.Random | None = None

    def __iter__(self) -> Iterator[int | float]:
        rng = self.rng or random.Random()
        while True:
            yield rng.randint(self.bottom, self.top) if self.top is not None else rng.random()


def empty() -> EmptySeq:
    """The shared sequence with no elements."""
    return _EMPTY


def range_seq(length: int | None = None, start: int | float = 0, step: int | float = 1) -> RangeSeq:
    """`length` numbers from `start` by `step` (infinite when length is None)."""
    return RangeSeq(length, start, step)


def rand_seq(top: int | None = None, bottom: int = 0, rng: random.Random | None = None) -> RandSeq:
    """Infinite random numbers; see RandSeq."""
    return RandSeq(top, bottom, rng)


@typing.overload
def seq[T](source: Seq[T], *, force: bool = ...) -> Seq[T]: ...
@typing.overload
def seq[T](source: Iterator[T], *, force: bool = ...) -> OnceSeq[T]: ...
@typing.overload
def seq[T](source: Iterable[T], *, force: bool = ...) -> Seq[T]: ...
@typing.overload
def seq[T](source: Callable[[], Iterable[T]], *, force: bool = ...) -> FactorySeq[T]: ...
@typing.overload
def seq(source: None = ..., *, force: bool = ...) -> EmptySeq: ...


def seq(source: typing.Any = None, *, force: bool = False) -> Seq[typing.Any]:
    """
    Wrap any source in a Seq.

    - None: the empty sequence
    - a Seq: returned as is, unless `force` re-wraps it
    - a bare iterator (e.g. a generator): traversable exactly once
    - any other iterable: traversable as many times as it allows
    - a zero-argument callable: called once per traversal

    Example:
        seq([3, 1, 2]).sort().to_list()          # [1, 2, 3]
        seq(lambda: (x * x for x in range(3)))   # restartable
    """
    if source is None:
        return _EMPTY
    if isinstance(source, Seq):
        return FixedSeq(source) if force else source
    if isinstance(source, Iterator):
        logger.debug("Wrapping %s as a run-once sequence", type(source).__name__)
        return OnceSeq(source)
    if isinstance(source, Iterable):
        return FixedSeq(source)
    if callable(source):
        return FactorySeq(source)
    raise TypeError(f"Can't make a sequence out of {type(source).__name__}")


__all__ = (
    "EmptySeq",
    "FactorySeq",
    "FixedSeq",
    "OnceSeq",
    "RandSeq",
    "RangeSeq",
    "RunState",
    "SourceSeq",
    "empty",
    "rand_seq",
    "range_seq",
    "seq",
)
