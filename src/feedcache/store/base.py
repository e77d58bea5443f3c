from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from feedcache.errors import FeedStoreError
from feedcache.scheduling import BarrierQueue
from feedcache.schemas import FeedImage


@dataclass(frozen=True, slots=True)
class Empty:
    pass


@dataclass(frozen=True, slots=True)
class Found:
    images: tuple[FeedImage, ...]
    timestamp: datetime


@dataclass(frozen=True, slots=True)
class Failure:
    error: FeedStoreError


RetrievalResult = Empty | Found | Failure
RetrievalCompletion = Callable[[RetrievalResult], None]
InsertionCompletion = Callable[[FeedStoreError | None], None]
DeletionCompletion = Callable[[FeedStoreError | None], None]


class FeedStore(Protocol):
    """Single-slot feed cache reporting every operation through a completion.

    Completions run exactly once on a worker thread, never on the caller's.
    """

    def retrieve(self, completion: RetrievalCompletion) -> None:
        """Deliver Empty, Found or Failure without touching the stored slot."""

    def insert(
        self,
        images: Iterable[FeedImage],
        timestamp: datetime,
        completion: InsertionCompletion,
    ) -> None:
        """Replace the slot with ``images`` and ``timestamp``."""

    def delete_cached_feed(self, completion: DeletionCompletion) -> None:
        """Empty the slot; succeeds when it is already empty."""


class QueuedFeedStore:
    """Funnels the three store operations through one BarrierQueue.

    ``insert`` and ``delete_cached_feed`` run as barriers, ``retrieve`` as a
    concurrent read. Subclasses implement the synchronous ``_retrieve``,
    ``_insert`` and ``_delete`` bodies, which run on the queue.
    """

    def __init__(self, *, max_workers: int = 4) -> None:
        self._queue = BarrierQueue(name=f"{type(self).__name__}Queue", max_workers=max_workers)

    def retrieve(self, completion: RetrievalCompletion) -> None:
        self._queue.submit(lambda: completion(self._retrieve()))

    def insert(
        self,
        images: Iterable[FeedImage],
        timestamp: datetime,
        completion: InsertionCompletion,
    ) -> None:
        snapshot = tuple(images)
        self._queue.submit(lambda: completion(self._insert(snapshot, timestamp)), barrier=True)

    def delete_cached_feed(self, completion: DeletionCompletion) -> None:
        self._queue.submit(lambda: completion(self._delete()), barrier=True)

    def wait_until_idle(self, timeout: float | None = None) -> bool:
        return self._queue.wait_idle(timeout=timeout)

    def close(self, timeout: float | None = None) -> None:
        self._queue.close(timeout=timeout)

    def __enter__(self) -> QueuedFeedStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _retrieve(self) -> RetrievalResult:
        raise NotImplementedError

    def _insert(self, images: tuple[FeedImage, ...], timestamp: datetime) -> FeedStoreError | None:
        raise NotImplementedError

    def _delete(self) -> FeedStoreError | None:
        raise NotImplementedError
