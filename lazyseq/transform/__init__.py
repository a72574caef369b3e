from .filter import CaseSeq, DistinctSeq, IntersectSeq, WhereSeq
from .select import EnumerateSeq, SelectManySeq, SelectSeq, SelectWhereSeq
from .simple import (
    DefaultSeq,
    MergeSeq,
    OnFinishSeq,
    OnFirstSeq,
    RepeatSeq,
    ReverseSeq,
    ShuffleSeq,
    WrapSeq,
)

__all__ = (
    # Projection
    "EnumerateSeq",
    "SelectManySeq",
    "SelectSeq",
    "SelectWhereSeq",
    # Filtering
    "CaseSeq",
    "DistinctSeq",
    "IntersectSeq",
    "WhereSeq",
    # Wrappers
    "DefaultSeq",
    "MergeSeq",
    "OnFinishSeq",
    "OnFirstSeq",
    "RepeatSeq",
    "ReverseSeq",
    "ShuffleSeq",
    "WrapSeq",
)
