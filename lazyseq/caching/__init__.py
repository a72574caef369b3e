from .buffer import BufferCursor, BufferSeq, Position, Window
from .cache import CacheRecord, CacheSeq
from .store import StoreBySeq, StoreRecord, StoredGroup

__all__ = (
    # Shared traversal
    "CacheRecord",
    "CacheSeq",
    "StoreBySeq",
    "StoreRecord",
    "StoredGroup",
    # Chunked access
    "BufferCursor",
    "BufferSeq",
    "Position",
    "Window",
)
