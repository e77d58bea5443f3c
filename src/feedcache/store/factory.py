from __future__ import annotations

import logging
from pathlib import Path

from feedcache.codec import FeedCacheCodec
from feedcache.config import StoreBackend, StoreConfig
from feedcache.storage import ByteStore, FileByteStore, MemoryByteStore, SqliteByteStore

from .base import QueuedFeedStore
from .codable import CodableFeedStore
from .in_memory import InMemoryFeedStore

logger = logging.getLogger(__name__)


def build_feed_store(config: StoreConfig) -> QueuedFeedStore:
    if config.backend == StoreBackend.VOLATILE:
        logger.info("feed_store backend=volatile")
        return InMemoryFeedStore(max_workers=config.max_workers)

    byte_store = build_byte_store(config)
    logger.info("feed_store backend=%s codec=%s", config.backend, config.codec)
    return CodableFeedStore(
        byte_store,
        codec=FeedCacheCodec(config.codec),
        cache_key=config.cache_key,
        max_workers=config.max_workers,
    )


def build_byte_store(config: StoreConfig) -> ByteStore:
    if config.backend == StoreBackend.MEMORY:
        return MemoryByteStore()
    if config.path is None:
        raise ValueError(f"store.path is required for backend {config.backend}")
    if config.backend == StoreBackend.FILE:
        return FileByteStore(Path(config.path))
    if config.backend == StoreBackend.SQLITE:
        return SqliteByteStore(Path(config.path))
    raise ValueError(f"backend {config.backend} has no byte store")
