"""
Core type definitions for lazyseq.

Types and aliases used across the library.
"""

from __future__ import annotations

import enum
import typing
from collections.abc import Callable, Iterable, Iterator

from kungfu import Option

if typing.TYPE_CHECKING:
    from .sequence import Seq

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# IndexedPredicate = predicate that also gets the element position
type IndexedPredicate[T] = Callable[[T, int], bool]

# WindowPredicate = take/skip predicate: value, position and the window being read
type WindowPredicate[T] = Callable[[T, int, Seq[T]], bool]

# Selector = function that extracts a key for comparison/sorting
type Selector[T, K] = Callable[[T], K]

# Combiner = function that merges a pair of values into one
type Combiner[A, B, R] = Callable[[A, B], R]

# Comparer = three-way comparison: >0 when a > b, 0 when equal, <0 otherwise
# NOTE: no index argument. Sorting merges duplicates, so an index would be meaningless.
type Comparer[T] = Callable[[T, T], int]

# Children = function that expands a tree node (with its sibling index)
type Children[T] = Callable[[T, int], Iterable[T]]

# FilterMap = conversion that may drop the element
type FilterMap[T, R] = Callable[[T], Option[R]]

# Source = anything that can be turned into a Seq
type Source[T] = Iterable[T] | Iterator[T] | Callable[[], Iterable[T]]

# LengthHint = cheap element count, None when it needs a full traversal
type LengthHint = int | None

UNKNOWN: typing.Final[LengthHint] = None


class JoinMode(enum.Flag):
    """How two sequences of different lengths are combined."""

    # The shorter sequence governs
    INNER = 0
    # The left (base) sequence governs
    LEFT = 1
    # The right (other) sequence governs
    RIGHT = 2
    # The longer sequence governs
    OUTER = LEFT | RIGHT


__all__ = (
    # Type aliases
    "Predicate",
    "IndexedPredicate",
    "WindowPredicate",
    "Selector",
    "Combiner",
    "Comparer",
    "Children",
    "FilterMap",
    "Source",
    "LengthHint",
    # Constants
    "UNKNOWN",
    # Enums
    "JoinMode",
)
