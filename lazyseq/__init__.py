"""
Lazy sequence combinators.

Composable operations (select, where, zip, join, group, sort, take/skip,
cache, ...) over a single logical sequence of values, evaluated on demand.

Architecture:
- seq() wraps any iterable, iterator or factory into a Seq
- Every fluent method returns a new node; nothing runs until iteration
- Reductions (count, first, to_list, ...) consume the traversal
"""

import logging

# Core types
from ._types import (
    UNKNOWN,
    Children,
    Combiner,
    Comparer,
    FilterMap,
    IndexedPredicate,
    JoinMode,
    LengthHint,
    Predicate,
    Selector,
    Source,
    WindowPredicate,
)

# Internal helpers (for custom nodes)
from . import _helpers
from ._helpers import by, compare, identity

# Sequence contract
from .cursor import Cursor
from .sequence import Seq

# Sources
from .source import (
    EmptySeq,
    FactorySeq,
    FixedSeq,
    OnceSeq,
    RandSeq,
    RangeSeq,
    SourceSeq,
    empty,
    rand_seq,
    range_seq,
    seq,
)

# Projection & filtering
from .transform import (
    CaseSeq,
    DefaultSeq,
    DistinctSeq,
    EnumerateSeq,
    IntersectSeq,
    MergeSeq,
    OnFinishSeq,
    OnFirstSeq,
    RepeatSeq,
    ReverseSeq,
    SelectManySeq,
    SelectSeq,
    SelectWhereSeq,
    ShuffleSeq,
    WhereSeq,
    WrapSeq,
)

# Windowing
from .window import ChunkSeq, InsertSeq, RemoveAtSeq, SkipSeq, TakeSeq

# Pairwise combination
from .pairwise import JoinSeq, ZipSeq

# Grouping & ordering
from .ordering import GroupBySeq, Grouping, SortSeq

# Caching
from .caching import BufferCursor, BufferSeq, CacheSeq, StoreBySeq, StoredGroup

# Recursive expansion
from .expansion import FlattenSeq, TraverseSeq

# Errors
from ._errors import (
    CardinalityError,
    DuplicateError,
    EmptySequenceError,
    IndexOutOfRangeError,
    ReuseError,
    SequenceError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "UNKNOWN",
    "Children",
    "Combiner",
    "Comparer",
    "FilterMap",
    "IndexedPredicate",
    "JoinMode",
    "LengthHint",
    "Predicate",
    "Selector",
    "Source",
    "WindowPredicate",
    # Internal helpers (for custom nodes)
    "_helpers",
    "by",
    "compare",
    "identity",
    # Contract
    "Cursor",
    "Seq",
    # Sources
    "EmptySeq",
    "FactorySeq",
    "FixedSeq",
    "OnceSeq",
    "RandSeq",
    "RangeSeq",
    "SourceSeq",
    "empty",
    "rand_seq",
    "range_seq",
    "seq",
    # Transform
    "CaseSeq",
    "DefaultSeq",
    "DistinctSeq",
    "EnumerateSeq",
    "IntersectSeq",
    "MergeSeq",
    "OnFinishSeq",
    "OnFirstSeq",
    "RepeatSeq",
    "ReverseSeq",
    "SelectManySeq",
    "SelectSeq",
    "SelectWhereSeq",
    "ShuffleSeq",
    "WhereSeq",
    "WrapSeq",
    # Windowing
    "ChunkSeq",
    "InsertSeq",
    "RemoveAtSeq",
    "SkipSeq",
    "TakeSeq",
    # Pairwise
    "JoinSeq",
    "ZipSeq",
    # Ordering
    "GroupBySeq",
    "Grouping",
    "SortSeq",
    # Caching
    "BufferCursor",
    "BufferSeq",
    "CacheSeq",
    "StoreBySeq",
    "StoredGroup",
    # Expansion
    "FlattenSeq",
    "TraverseSeq",
    # Errors
    "CardinalityError",
    "DuplicateError",
    "EmptySequenceError",
    "IndexOutOfRangeError",
    "ReuseError",
    "SequenceError",
)
