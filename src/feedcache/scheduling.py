"""FIFO serialization queue with reader/barrier semantics.

Work items start strictly in submission order. A barrier item starts only once
every earlier item has finished and nothing submitted after it starts until it
has finished. Non-barrier items may overlap each other but never a barrier.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _WorkItem:
    seq: int
    fn: Callable[[], None]
    barrier: bool


class BarrierQueue:
    def __init__(self, *, name: str = "barrier_queue", max_workers: int = 4) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1.")

        self.name = name
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=name)
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)
        self._pending: deque[_WorkItem] = deque()
        self._running = 0
        self._barrier_running = False
        self._closed = False
        self._seq = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, fn: Callable[[], None], *, barrier: bool = False) -> int:
        """Enqueue ``fn`` and return its sequence number."""
        with self._lock:
            if self._closed:
                raise RuntimeError(f"{self.name} is closed.")
            self._seq += 1
            item = _WorkItem(seq=self._seq, fn=fn, barrier=barrier)
            self._pending.append(item)
            ready = self._take_ready_locked()

        self._start(ready)
        return item.seq

    def wait_idle(self, timeout: float | None = None) -> bool:
        with self._idle:
            return self._idle.wait_for(self._is_idle_locked, timeout=timeout)

    def close(self, timeout: float | None = None) -> None:
        """Reject new work, drain what was submitted and stop the workers.

        When ``timeout`` expires, items that have not started yet are dropped
        and logged; items already running are still waited for. Must not be
        called from inside a work item.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True

        if not self.wait_idle(timeout=timeout):
            with self._lock:
                dropped = [item.seq for item in self._pending]
                self._pending.clear()
            if dropped:
                logger.warning(
                    "%s close timed out; dropped pending items seqs=%s",
                    self.name,
                    ",".join(str(seq) for seq in dropped),
                )
        self._executor.shutdown(wait=True)
        logger.debug("%s closed last_seq=%d", self.name, self._seq)

    def _take_ready_locked(self) -> list[_WorkItem]:
        ready: list[_WorkItem] = []
        while self._pending and not self._barrier_running:
            head = self._pending[0]
            if head.barrier:
                if self._running:
                    break
                self._barrier_running = True
            self._pending.popleft()
            self._running += 1
            ready.append(head)
        return ready

    def _is_idle_locked(self) -> bool:
        return self._running == 0 and not self._pending

    def _start(self, items: list[_WorkItem]) -> None:
        for item in items:
            self._executor.submit(self._run, item)

    def _run(self, item: _WorkItem) -> None:
        try:
            item.fn()
        except Exception:
            logger.exception("%s work item failed seq=%d barrier=%s", self.name, item.seq, item.barrier)
        finally:
            with self._lock:
                self._running -= 1
                if item.barrier:
                    self._barrier_running = False
                ready = self._take_ready_locked()
                if self._is_idle_locked():
                    self._idle.notify_all()
            self._start(ready)
