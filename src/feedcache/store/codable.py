from __future__ import annotations

import logging
from datetime import datetime

from pydantic import ValidationError

from feedcache.codec import FeedCacheCodec
from feedcache.errors import (
    AdapterClearError,
    AdapterReadError,
    AdapterWriteError,
    EncodeError,
    FeedStoreError,
)
from feedcache.schemas import CacheRecord, FeedImage
from feedcache.storage import ByteStore
from feedcache.storage.base import sha1_key

from .base import Empty, Failure, Found, QueuedFeedStore, RetrievalResult

DEFAULT_CACHE_KEY = "feed_cache_key"

logger = logging.getLogger(__name__)


class CodableFeedStore(QueuedFeedStore):
    """Persistent feed store encoding its single record into a byte store."""

    def __init__(
        self,
        byte_store: ByteStore,
        *,
        codec: FeedCacheCodec | None = None,
        cache_key: str = DEFAULT_CACHE_KEY,
        max_workers: int = 4,
    ) -> None:
        if not cache_key.strip():
            raise ValueError("cache_key must not be empty.")

        super().__init__(max_workers=max_workers)
        self.byte_store = byte_store
        self.codec = codec or FeedCacheCodec()
        self.cache_key = cache_key

    def _retrieve(self) -> RetrievalResult:
        try:
            data = self._read()
            if data is None:
                return Empty()
            record = self.codec.decode(data)
        except FeedStoreError as exc:
            logger.warning("feed_store retrieve failed key=%s error=%s", self._log_key, exc.code)
            return Failure(exc)

        logger.info("feed_store retrieve hit key=%s images=%d", self._log_key, len(record.images))
        return Found(images=record.images, timestamp=record.timestamp)

    def _insert(self, images: tuple[FeedImage, ...], timestamp: datetime) -> FeedStoreError | None:
        try:
            data = self._encode(images, timestamp)
            self._write(data)
        except FeedStoreError as exc:
            logger.warning("feed_store insert failed key=%s error=%s", self._log_key, exc.code)
            return exc

        logger.info("feed_store insert ok key=%s images=%d", self._log_key, len(images))
        return None

    def _delete(self) -> FeedStoreError | None:
        try:
            self._clear()
        except FeedStoreError as exc:
            logger.warning("feed_store delete failed key=%s error=%s", self._log_key, exc.code)
            return exc

        logger.info("feed_store delete ok key=%s", self._log_key)
        return None

    @property
    def _log_key(self) -> str:
        return sha1_key(self.cache_key)

    def _encode(self, images: tuple[FeedImage, ...], timestamp: datetime) -> bytes:
        try:
            record = CacheRecord(images=images, timestamp=timestamp)
        except ValidationError as exc:
            raise EncodeError(
                "feed cannot be represented as a cache record.",
                key=self.cache_key,
            ) from exc
        return self.codec.encode(record)

    def _read(self) -> bytes | None:
        try:
            return self.byte_store.read(self.cache_key)
        except Exception as exc:
            raise AdapterReadError(
                "byte store failed to read the feed cache.",
                key=self.cache_key,
            ) from exc

    def _write(self, data: bytes) -> None:
        try:
            self.byte_store.write(self.cache_key, data)
        except Exception as exc:
            raise AdapterWriteError(
                "byte store failed to write the feed cache.",
                key=self.cache_key,
            ) from exc

    def _clear(self) -> None:
        try:
            self.byte_store.clear(self.cache_key)
        except Exception as exc:
            raise AdapterClearError(
                "byte store failed to clear the feed cache.",
                key=self.cache_key,
            ) from exc
