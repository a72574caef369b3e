from .chunk import ChunkSeq
from .element import InsertSeq, RemoveAtSeq
from .skip import SkipSeq, skip_from
from .take import TakeSeq, take_from, take_while

__all__ = (
    # Nodes
    "ChunkSeq",
    "InsertSeq",
    "RemoveAtSeq",
    "SkipSeq",
    "TakeSeq",
    # Iterator helpers
    "skip_from",
    "take_from",
    "take_while",
)
