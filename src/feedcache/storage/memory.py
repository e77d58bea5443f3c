from __future__ import annotations

import logging
import threading

from .base import sha1_key

logger = logging.getLogger(__name__)


class MemoryByteStore:
    """Process-local byte store backed by a dict."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._data: dict[str, bytes] = dict(initial or {})
        self._lock = threading.Lock()

    def write(self, key: str, data: bytes) -> None:
        with self._lock:
            self._data[key] = bytes(data)
        logger.debug("memory_store set key=%s size=%d", sha1_key(key), len(data))

    def read(self, key: str) -> bytes | None:
        with self._lock:
            return self._data.get(key)

    def clear(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)
        logger.debug("memory_store clear key=%s", sha1_key(key))

    def keys(self) -> list[str]:
        with self._lock:
            return sorted(self._data)
