from .base import (
    DeletionCompletion,
    Empty,
    Failure,
    FeedStore,
    Found,
    InsertionCompletion,
    QueuedFeedStore,
    RetrievalCompletion,
    RetrievalResult,
)
from .codable import DEFAULT_CACHE_KEY, CodableFeedStore
from .factory import build_byte_store, build_feed_store
from .in_memory import InMemoryFeedStore

__all__ = [
    "DEFAULT_CACHE_KEY",
    "CodableFeedStore",
    "DeletionCompletion",
    "Empty",
    "Failure",
    "FeedStore",
    "Found",
    "InMemoryFeedStore",
    "InsertionCompletion",
    "QueuedFeedStore",
    "RetrievalCompletion",
    "RetrievalResult",
    "build_byte_store",
    "build_feed_store",
]
