"""Internal helpers for lazyseq.

Common functions used across multiple combinator modules.
These are not part of the public API but can be used for writing custom nodes."""

from __future__ import annotations

import contextlib
import logging
import operator
import typing
from collections.abc import Iterable, Iterator, Sequence, Sized

from ._types import Comparer, LengthHint, Selector

logger = logging.getLogger(__name__)


class _Missing:
    """Marker for "argument not given" where None is a legal value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: typing.Final = _Missing()


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def always_true(*_: typing.Any) -> bool:
    return True


def pair[A, B](a: A, b: B) -> tuple[A, B]:
    """Default combiner: put both values in a tuple."""
    return (a, b)


def compare(a: typing.Any, b: typing.Any) -> int:
    """Natural three-way comparison using `<` and `>`."""
    return 1 if a > b else -1 if a < b else 0


def by[T, K](key: Selector[T, K], comparer: Comparer[K] | None = None) -> Comparer[T]:
    """
    Lift a key selector into a comparer over the whole element.

    Example:
        by(len)("abc", "de")  # 1
    """
    comp = comparer or compare

    def compare_keys(a: T, b: T) -> int:
        return comp(key(a), key(b))

    return compare_keys


def directed[T](comparer: Comparer[T], desc: bool) -> Comparer[T]:
    """Bake the sort direction into the comparer."""
    if not desc:
        return comparer

    def descending(a: T, b: T) -> int:
        return -comparer(a, b)

    return descending


# Length helpers
def hint_of(source: Iterable[typing.Any] | None) -> LengthHint:
    """
    Cheap element count of any iterable, None if it needs a traversal.

    Sized collections report len(); sequences report their length hint.
    """
    if source is None:
        return 0
    if isinstance(source, Sized):
        return len(source)
    hint = operator.length_hint(source, -1)
    return None if hint < 0 else hint


def calc_length[T](source: Iterable[T]) -> tuple[Iterable[T], int]:
    """
    Return an iterable with the same elements of `source` and its length.

    If the length is not cheap, `source` is materialised and the materialised
    copy is returned so that it is not computed twice.
    """
    hint = hint_of(source)
    if hint is not None:
        return source, hint
    items = source if isinstance(source, Sequence) else list(source)
    logger.debug("Materialised %d elements to compute the length", len(items))
    return items, len(items)


def calc_index[T](source: Iterable[T], index: int) -> tuple[Iterable[T], int]:
    """Make a possibly negative index absolute (may materialise `source`)."""
    if index >= 0:
        return source, index
    items, length = calc_length(source)
    return items, length + index


def add_hints(*hints: LengthHint) -> LengthHint:
    """Sum of hints, unknown if any of them is."""
    total = 0
    for h in hints:
        if h is None:
            return None
        total += h
    return total


# Resource helpers
def dispose(iterator: Iterator[typing.Any]) -> None:
    """Release the traversal if it holds resources (e.g. an open generator)."""
    close = getattr(iterator, "close", None)
    if close is not None:
        close()


@contextlib.contextmanager
def opened[T](source: Iterable[T]) -> Iterator[Iterator[T]]:
    """
    Start a traversal of `source` and dispose of it on exit.

    Usage:
        with opened(self.source) as it:
            for x in it:
                yield x
    """
    it = iter(source)
    try:
        yield it
    finally:
        dispose(it)


__all__ = (
    # Sentinels
    "MISSING",
    # Functions
    "identity",
    "always_true",
    "pair",
    "compare",
    "by",
    "directed",
    # Length helpers
    "hint_of",
    "calc_length",
    "calc_index",
    "add_hints",
    # Resources
    "dispose",
    "opened",
)
