from .tree import LEAF_TYPES, FlattenSeq, TraverseSeq, flat

__all__ = (
    "FlattenSeq",
    "LEAF_TYPES",
    "TraverseSeq",
    "flat",
)
