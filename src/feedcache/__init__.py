"""Single-slot feed cache with ordered, completion-style operations."""

from .codec import CodecFormat, FeedCacheCodec
from .config import AppConfig, StoreConfig, load_config
from .errors import (
    AdapterClearError,
    AdapterReadError,
    AdapterWriteError,
    DecodeError,
    EncodeError,
    FeedStoreError,
)
from .schemas import CacheRecord, FeedImage
from .store import (
    CodableFeedStore,
    Empty,
    Failure,
    FeedStore,
    Found,
    InMemoryFeedStore,
    build_feed_store,
)

__all__ = [
    "AdapterClearError",
    "AdapterReadError",
    "AdapterWriteError",
    "AppConfig",
    "CacheRecord",
    "CodableFeedStore",
    "CodecFormat",
    "DecodeError",
    "EncodeError",
    "Empty",
    "Failure",
    "FeedCacheCodec",
    "FeedImage",
    "FeedStore",
    "FeedStoreError",
    "Found",
    "InMemoryFeedStore",
    "StoreConfig",
    "build_feed_store",
    "load_config",
]
