"""
Sequence contract.

Architecture:
- Seq[T] - abstract lazy sequence; the only primitive is __iter__
- Every combinator is a frozen dataclass node that subclasses Seq and holds
  its upstream sequence(s) plus its configuration
- Fluent methods below build nodes; reductions consume the traversal

Nodes never mutate their upstream. A node can be traversed any number of
times unless it says otherwise (see OnceSeq).
"""

from __future__ import annotations

import operator
import typing
from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence

from kungfu import Nothing, Option, Some

from ._errors import (
    CardinalityError,
    DuplicateError,
    EmptySequenceError,
    IndexOutOfRangeError,
)
from ._helpers import MISSING, by, calc_index, compare, directed, identity, opened
from ._types import (
    Children,
    Combiner,
    Comparer,
    FilterMap,
    IndexedPredicate,
    JoinMode,
    LengthHint,
    Predicate,
    Selector,
    UNKNOWN,
    WindowPredicate,
)

if typing.TYPE_CHECKING:
    import random

    from .caching.cache import CacheSeq
    from .caching.store import StoreBySeq
    from .cursor import Cursor
    from .expansion.tree import FlattenSeq, TraverseSeq
    from .ordering.group import GroupBySeq, Grouping
    from .ordering.sort import SortSeq
    from .pairwise.join import JoinSeq
    from .pairwise.zip import ZipSeq
    from .source import FixedSeq, OnceSeq
    from .transform.filter import CaseSeq, DistinctSeq, IntersectSeq, WhereSeq
    from .transform.select import EnumerateSeq, SelectManySeq, SelectSeq, SelectWhereSeq
    from .transform.simple import (
        DefaultSeq,
        MergeSeq,
        OnFinishSeq,
        OnFirstSeq,
        RepeatSeq,
        ReverseSeq,
        ShuffleSeq,
        WrapSeq,
    )
    from .window.chunk import ChunkSeq
    from .window.element import InsertSeq, RemoveAtSeq
    from .window.skip import SkipSeq
    from .window.take import TakeSeq


class Seq[T]:
    """
    Lazy sequence with combinators.

    Subclasses implement __iter__ and, when it is cheap, length_hint.
    """

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        raise NotImplementedError

    @property
    def length_hint(self) -> LengthHint:
        """Element count if it is known without a traversal, otherwise None."""
        return UNKNOWN

    def __length_hint__(self) -> int:
        hint = self.length_hint
        return NotImplemented if hint is None else hint

    def cursor(self) -> Cursor[T]:
        """Start an explicit pull-based traversal."""
        from .cursor import Cursor
        return Cursor(self)

    # ========================================================================
    # Projection
    # ========================================================================

    def select[R](self, fn: Selector[T, R]) -> SelectSeq[T, R]:
        """Convert every element with `fn`."""
        from .transform.select import SelectSeq
        return SelectSeq(self, fn)

    def select_many[R](self, fn: Selector[T, Iterable[R]] | None = None) -> SelectManySeq[T, R]:
        """Convert every element into an iterable and concatenate them."""
        from .transform.select import SelectManySeq
        return SelectManySeq(self, fn)

    def select_where[R](self, fn: FilterMap[T, R]) -> SelectWhereSeq[T, R]:
        """
        Convert and filter at the same time.

        Example:
            seq([1, 2, 3]).select_where(lambda x: Some(x + 2) if x % 2 else Nothing())
            # [3, 5]
        """
        from .transform.select import SelectWhereSeq
        return SelectWhereSeq(self, fn)

    def enumerate(self, start: int = 0) -> EnumerateSeq[T]:
        """Pair every element with its position."""
        from .transform.select import EnumerateSeq
        return EnumerateSeq(self, start)

    def fill[R](self, value: R) -> SelectSeq[T, R]:
        """Replace every element with the same value."""
        return self.select(lambda _: value)

    def tap(self, effect: Callable[[T], None]) -> SelectSeq[T, T]:
        """Run `effect` on every element before yielding it."""

        def run(x: T) -> T:
            effect(x)
            return x

        return self.select(run)

    # ========================================================================
    # Filtering
    # ========================================================================

    def where(self, predicate: Predicate[T] | None = None) -> WhereSeq[T]:
        """Keep the elements that satisfy `predicate` (truthy ones by default)."""
        from .transform.filter import WhereSeq
        return WhereSeq(self, predicate)

    def of_type[R](self, cls: type[R]) -> WhereSeq[R]:
        """Keep the instances of `cls`."""
        return typing.cast("WhereSeq[R]", self.where(lambda x: isinstance(x, cls)))

    def case(self, predicate: Predicate[T], action: Callable[[T], None]) -> CaseSeq[T]:
        """Divert the matching elements into `action`, yield the others."""
        from .transform.filter import CaseSeq
        return CaseSeq(self, predicate, action)

    def distinct[K](self, key: Selector[T, K] | None = None) -> DistinctSeq[T, K]:
        """Yield every element (or key) only once."""
        from .transform.filter import DistinctSeq
        return DistinctSeq(self, key)

    def intersect[K](self, other: Iterable[K], key: Selector[T, K] | None = None) -> IntersectSeq[T, K]:
        """Keep only the elements (or keys) found in `other`."""
        from .transform.filter import IntersectSeq
        return IntersectSeq(self, other, key)

    def exclude[K](self, other: Iterable[K], key: Selector[T, K] | None = None) -> IntersectSeq[T, K]:
        """Drop the elements (or keys) found in `other`."""
        from .transform.filter import IntersectSeq
        return IntersectSeq(self, other, key, invert=True)

    # ========================================================================
    # Windowing
    # ========================================================================

    def take(
        self,
        n: int | WindowPredicate[T],
        pad: bool = False,
        fill: T | None = None,
        left_on_negative: bool = False,
    ) -> TakeSeq[T]:
        """
        Take the first `n` elements.

        A negative `n` takes the last -n elements (all but the last -n with
        `left_on_negative`). A predicate takes elements while it holds.
        With `pad`, a short sequence is completed with `fill` up to -n/n.
        """
        from .window.take import TakeSeq
        return TakeSeq(self, n, pad, fill, left_on_negative)

    def skip(self, n: int | WindowPredicate[T], left_on_negative: bool = False) -> SkipSeq[T]:
        """
        Skip the first `n` elements.

        A negative `n` skips the last -n elements (keeps only the last -n with
        `left_on_negative`). A predicate skips elements while it holds.
        """
        from .window.skip import SkipSeq
        return SkipSeq(self, n, left_on_negative)

    def slice(
        self,
        start: int | WindowPredicate[T],
        length: int | WindowPredicate[T],
        pad: bool = False,
        fill: T | None = None,
        left_on_negative: bool = False,
    ) -> TakeSeq[T]:
        """
        Section of `length` elements starting at `start`.

        Both arguments accept what skip() and take() accept. A negative numeric
        `length` drops the last -length elements, or with `left_on_negative`
        takes the -length elements before `start`.
        """
        if isinstance(start, int) and isinstance(length, int) and length < 0 and left_on_negative:
            back = -length
            # Can't go back further than the beginning
            length = min(back, start) if start >= 0 else back
            start -= length
        return self.skip(start, True).take(length, pad, fill, True)

    def chunk(self, size: int, pad: bool = False, fill: T | None = None) -> ChunkSeq[T]:
        """Group consecutive elements `size` at a time."""
        from .window.chunk import ChunkSeq
        return ChunkSeq(self, size, pad, fill)

    def insert(self, index: int | None, value: T) -> InsertSeq[T]:
        """
        Insert `value` at `index` (from the end if negative, after the end if None).
        """
        from .window.element import InsertSeq
        return InsertSeq(self, value, index)

    def prepend(self, value: T) -> InsertSeq[T]:
        return self.insert(0, value)

    def append(self, value: T) -> InsertSeq[T]:
        return self.insert(None, value)

    def remove_at(self, index: int) -> RemoveAtSeq[T]:
        """Drop the element at `index` (from the end if negative)."""
        from .window.element import RemoveAtSeq
        return RemoveAtSeq(self, index)

    # ========================================================================
    # Pairwise combination
    # ========================================================================

    def zip[O, R](
        self,
        other: Iterable[O],
        combiner: Combiner[T, O, R] | None = None,
        mode: JoinMode = JoinMode.INNER,
        fill: typing.Any = None,
    ) -> ZipSeq[T, O, R]:
        """
        Combine with `other` element by element.

        `mode` decides which side governs the length; the missing side is
        passed to `combiner` as `fill`. Pairs become tuples by default.
        """
        from .pairwise.zip import ZipSeq
        return ZipSeq(self, other, combiner, mode, fill)

    def join[O, R](
        self,
        other: Iterable[O],
        predicate: Callable[[T, O], bool] | None = None,
        combiner: Combiner[T, O, R] | None = None,
        mode: JoinMode = JoinMode.INNER,
        fill: typing.Any = None,
    ) -> JoinSeq[T, O, R]:
        """
        Cartesian combination with `other`, filtered by `predicate`.

        LEFT/RIGHT modes also yield the unmatched elements of that side,
        paired with `fill`.
        """
        from .pairwise.join import JoinSeq
        return JoinSeq(self, other, predicate, combiner, mode, fill)

    def merge(self, other: Iterable[T], flip: bool = False) -> MergeSeq[T]:
        """Yield `other` after this sequence (before it with `flip`)."""
        from .transform.simple import MergeSeq
        return MergeSeq(self, other, flip)

    def concat(self, *others: Iterable[T]) -> Seq[T]:
        out: Seq[T] = self
        for other in others:
            out = out.merge(other)
        return out

    # ========================================================================
    # Grouping & ordering
    # ========================================================================

    def group_by[K](self, key: Selector[T, K], group_key: Selector[K, Hashable] | None = None) -> GroupBySeq[T, K]:
        """
        Bucket the elements by key, in first-seen order. Not lazy.

        `group_key` maps the key to the value actually used for bucketing.
        """
        from .ordering.group import GroupBySeq
        return GroupBySeq(self, key, group_key)

    def lookup[K](self, key: Selector[T, K], group_key: Selector[K, Hashable] | None = None) -> dict[typing.Any, Grouping[K, T]]:
        """Like group_by(), but returns the groups by bucketing value."""
        from .ordering.group import lookup
        return lookup(self, key, group_key)

    def sort(self, comparer: Comparer[T] | None = None, desc: bool = False) -> SortSeq[T]:
        """
        Stable sort. Not lazy.

        Elements are counted first, so many duplicates make it faster.
        Sorting a sorted sequence merges both orderings in a single pass,
        the newest being the primary one.
        """
        from .ordering.sort import SortSeq
        return SortSeq(self, directed(comparer or compare, desc))

    def sort_by[K](self, key: Selector[T, K], comparer: Comparer[K] | None = None, desc: bool = False) -> SortSeq[T]:
        """Sort by the value `key` returns for every element."""
        return self.sort(by(key, comparer), desc)

    def reverse(self) -> ReverseSeq[T]:
        """Reverse the order. Not lazy."""
        from .transform.simple import ReverseSeq
        return ReverseSeq(self)

    def shuffle(self, rng: random.Random | None = None) -> ShuffleSeq[T]:
        """Random permutation. Not lazy."""
        from .transform.simple import ShuffleSeq
        return ShuffleSeq(self, rng)

    # ========================================================================
    # Caching
    # ========================================================================

    def cache(self) -> CacheSeq[T]:
        """Memoise the elements as they are produced; readers share one traversal."""
        from .caching.cache import CacheSeq
        return CacheSeq(self)

    def store_by[K](self, key: Selector[T, K]) -> StoreBySeq[T, K]:
        """Lazy group_by(): one shared traversal feeds a cache per key."""
        from .caching.store import StoreBySeq
        return StoreBySeq(self, key)

    def once(self) -> OnceSeq[T]:
        """Raise ReuseError if traversed more than once."""
        from .source import OnceSeq
        return OnceSeq(self)

    def calc(self) -> FixedSeq[T]:
        """Compute every element now and wrap them in a new sequence."""
        from .source import FixedSeq
        return FixedSeq(self.to_list())

    def pipe[R](self, fn: Callable[[typing.Self], Iterable[R]]) -> FixedSeq[R]:
        """Pass the whole sequence to `fn` and wrap its result."""
        from .source import FixedSeq
        return FixedSeq(fn(self))

    # ========================================================================
    # Recursive expansion
    # ========================================================================

    def flatten(self) -> FlattenSeq[T]:
        """Recursively yield the leaves of every iterable element."""
        from .expansion.tree import FlattenSeq
        return FlattenSeq(self)

    def traverse(
        self,
        children: Children[T],
        predicate: IndexedPredicate[T] | None = None,
        children_first: bool = False,
    ) -> TraverseSeq[T]:
        """
        Depth-first walk over each element and its descendants.

        A rejected element is dropped together with its subtree.
        """
        from .expansion.tree import TraverseSeq
        return TraverseSeq(self, children, predicate, children_first)

    # ========================================================================
    # Simple wrappers
    # ========================================================================

    def wrap(self) -> WrapSeq[typing.Self]:
        """A sequence whose only element is this one."""
        from .transform.simple import WrapSeq
        return WrapSeq(self)

    def default(self, value: T | None = None) -> DefaultSeq[T]:
        """Yield `value` if the sequence is empty."""
        from .transform.simple import DefaultSeq
        return DefaultSeq(self, value)

    def repeat(self, n: int) -> RepeatSeq[T]:
        """Yield the elements `n` times, recomputing them each time."""
        from .transform.simple import RepeatSeq
        return RepeatSeq(self, n)

    def on_first(self, fn: Callable[[T], None]) -> OnFirstSeq[T]:
        """Run `fn` on the first element of every traversal."""
        from .transform.simple import OnFirstSeq
        return OnFirstSeq(self, fn)

    def on_finish(self, fn: Callable[[Seq[T]], None]) -> OnFinishSeq[T]:
        """Run `fn` when a traversal ends, even if it was abandoned."""
        from .transform.simple import OnFinishSeq
        return OnFinishSeq(self, fn)

    # ========================================================================
    # Reductions
    # ========================================================================

    def _aggregate(self, fn: Callable[[typing.Any, T], typing.Any], initial: typing.Any, operation: str) -> typing.Any:
        with opened(self) as it:
            acc = next(it, MISSING) if initial is MISSING else initial
            if acc is MISSING:
                raise EmptySequenceError(operation)
            for x in it:
                acc = fn(acc, x)
        return acc

    @typing.overload
    def aggregate(self, fn: Combiner[T, T, T]) -> T: ...
    @typing.overload
    def aggregate[R](self, fn: Combiner[R, T, R], initial: R) -> R: ...

    def aggregate(self, fn: typing.Any, initial: typing.Any = MISSING) -> typing.Any:
        """
        Left fold. Without `initial` the first element is the seed.

        Raises EmptySequenceError on an empty sequence without `initial`.
        """
        return self._aggregate(fn, initial, "aggregate")

    def for_each(self, fn: Callable[[T], None] | None = None) -> None:
        """Compute the whole sequence, calling `fn` on each element."""
        with opened(self) as it:
            for x in it:
                if fn is not None:
                    fn(x)

    def count(self, predicate: Predicate[T] | None = None) -> int:
        total = 0
        with opened(self) as it:
            for x in it:
                if predicate is None or predicate(x):
                    total += 1
        return total

    def sum(self, start: typing.Any = MISSING) -> typing.Any:
        """Aggregate with `+` (adds numbers, concatenates strings)."""
        return self._aggregate(operator.add, start, "sum")

    def avg(self) -> float:
        total, n = 0, 0
        with opened(self) as it:
            for x in it:
                total += x  # type: ignore[operator]
                n += 1
        if not n:
            raise EmptySequenceError("average")
        return total / n

    def max(self, comparer: Comparer[T] | None = None) -> T:
        """Biggest element; the last one wins ties."""
        comp = comparer or compare
        return self._aggregate(lambda a, b: a if comp(a, b) > 0 else b, MISSING, "max")

    def min(self, comparer: Comparer[T] | None = None) -> T:
        """Smallest element; the last one wins ties."""
        comp = comparer or compare
        return self._aggregate(lambda a, b: a if comp(a, b) < 0 else b, MISSING, "min")

    def max_by[K](self, key: Selector[T, K], comparer: Comparer[K] | None = None) -> T:
        return self.max(by(key, comparer))

    def min_by[K](self, key: Selector[T, K], comparer: Comparer[K] | None = None) -> T:
        return self.min(by(key, comparer))

    def at(self, index: int) -> T:
        """
        Element at `index`; negative indexes count from the end.

        Raises IndexOutOfRangeError outside the bounds.
        """
        source, i = calc_index(self, index)
        if i < 0:
            raise IndexOutOfRangeError.before_begin(index)
        if isinstance(source, Sequence):
            if i < len(source):
                return source[i]
            raise IndexOutOfRangeError.after_end(index)
        with opened(source) as it:
            for x in it:
                if not i:
                    return x
                i -= 1
        raise IndexOutOfRangeError.after_end(index)

    def first(self, default: typing.Any = MISSING) -> T:
        """First element, or `default` if given and the sequence is empty."""
        with opened(self) as it:
            for x in it:
                return x
        if default is MISSING:
            raise IndexOutOfRangeError.after_end(0)
        return default

    def last(self, default: typing.Any = MISSING) -> T:
        """Last element, or `default` if given and the sequence is empty."""
        out = MISSING
        for x in self:
            out = x
        if out is not MISSING:
            return out
        if default is MISSING:
            raise IndexOutOfRangeError.after_end(-1)
        return default

    def single(self, predicate: Predicate[T] | None = None) -> T:
        """The only (matching) element. Raises CardinalityError otherwise."""
        found = MISSING
        with opened(self) as it:
            for x in it:
                if predicate is not None and not predicate(x):
                    continue
                if found is not MISSING:
                    raise CardinalityError("exactly 1")
                found = x
        if found is MISSING:
            raise CardinalityError("exactly 1", 0)
        return found

    def exactly(self, n: int) -> list[T]:
        """Materialise the sequence, asserting it has `n` elements."""
        out: list[T] = []
        with opened(self) as it:
            for x in it:
                out.append(x)
                if len(out) > n:
                    raise CardinalityError(str(n))
        if len(out) != n:
            raise CardinalityError(str(n), len(out))
        return out

    def any(self, predicate: Predicate[T] | None = None) -> bool:
        with opened(self) as it:
            for x in it:
                if (predicate(x) if predicate is not None else x):
                    return True
        return False

    def all(self, predicate: Predicate[T] | None = None) -> bool:
        with opened(self) as it:
            for x in it:
                if not (predicate(x) if predicate is not None else x):
                    return False
        return True

    def contains(self, value: T, eq: Callable[[T, T], bool] = operator.eq) -> bool:
        return self.any(lambda x: eq(x, value))

    def same(self, eq: Callable[[T, T], bool] = operator.eq) -> bool:
        """True if every element equals the first one (or the sequence is empty)."""
        with opened(self) as it:
            first = next(it, MISSING)
            if first is MISSING:
                return True
            for x in it:
                if not eq(x, first):
                    return False
        return True

    def multi_count(self, *predicates: Predicate[T]) -> tuple[int, ...]:
        """For each predicate, how many elements satisfy it. One traversal."""
        out = [0] * len(predicates)
        with opened(self) as it:
            for x in it:
                for k, p in enumerate(predicates):
                    if p(x):
                        out[k] += 1
        return tuple(out)

    def find(self, predicate: Predicate[T]) -> Option[tuple[int, T]]:
        """Position and value of the first matching element."""
        with opened(self) as it:
            for i, x in enumerate(it):
                if predicate(x):
                    return Some((i, x))
        return Nothing()

    def concat_str(self, sep: str = "") -> str:
        """Join the string form of the elements with `sep`."""
        with opened(self) as it:
            return sep.join(str(x) for x in it)

    # ========================================================================
    # Conversions
    # ========================================================================

    def to_list(self) -> list[T]:
        return list(self)

    def to_set(self, strict: bool = False) -> set[T]:
        """Collect into a set. With `strict`, duplicates raise DuplicateError."""
        out: set[T] = set()
        with opened(self) as it:
            for x in it:
                if strict and x in out:
                    raise DuplicateError(x, "this set")
                out.add(x)
        return out

    def to_dict[K, V](
        self,
        key: Selector[T, K],
        value: Selector[T, V] = identity,
        strict: bool = False,
    ) -> dict[K, V]:
        """Collect into a dict; later keys overwrite earlier ones unless `strict`."""
        out: dict[K, V] = {}
        with opened(self) as it:
            for x in it:
                k = key(x)
                if strict and k in out:
                    raise DuplicateError(k, "this dict")
                out[k] = value(x)
        return out


__all__ = ("Seq",)
