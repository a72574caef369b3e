from .join import JoinEntry, JoinSeq
from .zip import ZipSeq, zip_hint

__all__ = (
    "JoinEntry",
    "JoinSeq",
    "ZipSeq",
    "zip_hint",
)
