from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from feedcache.errors import FeedStoreError
from feedcache.schemas import FeedImage

from .base import Empty, Found, QueuedFeedStore, RetrievalResult


@dataclass(frozen=True, slots=True)
class _InMemoryCache:
    images: tuple[FeedImage, ...]
    timestamp: datetime


class InMemoryFeedStore(QueuedFeedStore):
    """Volatile feed store; keeps the record itself, so it never fails."""

    def __init__(self, *, max_workers: int = 4) -> None:
        super().__init__(max_workers=max_workers)
        self._cache: _InMemoryCache | None = None

    def _retrieve(self) -> RetrievalResult:
        cache = self._cache
        if cache is None:
            return Empty()
        return Found(images=cache.images, timestamp=cache.timestamp)

    def _insert(self, images: tuple[FeedImage, ...], timestamp: datetime) -> FeedStoreError | None:
        self._cache = _InMemoryCache(images=images, timestamp=timestamp)
        return None

    def _delete(self) -> FeedStoreError | None:
        self._cache = None
        return None
