from __future__ import annotations

import hashlib
from typing import Protocol


class ByteStore(Protocol):
    """Opaque key-value blob storage consumed by CodableFeedStore.

    Implementations give no ordering guarantees of their own; callers are
    expected to serialize access per key.
    """

    def write(self, key: str, data: bytes) -> None:
        """Store ``data`` under ``key``, replacing any previous value."""

    def read(self, key: str) -> bytes | None:
        """Return the bytes stored under ``key`` or None when absent."""

    def clear(self, key: str) -> None:
        """Remove ``key``; clearing a missing key is not an error."""


def sha1_key(key: str) -> str:
    return hashlib.sha1(key.encode("utf-8")).hexdigest()
