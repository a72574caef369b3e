from .group import GroupBySeq, Grouping, lookup
from .sort import SortSeq, buckets_of, multiset_sort

__all__ = (
    # Grouping
    "GroupBySeq",
    "Grouping",
    "lookup",
    # Sorting
    "SortSeq",
    "buckets_of",
    "multiset_sort",
)
