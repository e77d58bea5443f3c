"""Failures reported through feed store completions."""

from __future__ import annotations


class FeedStoreError(Exception):
    """Base class for every failure a feed store operation can report."""

    code = "FEED_STORE_ERROR"

    def __init__(self, message: str, *, key: str | None = None) -> None:
        self.message = message
        self.key = key
        super().__init__(message)


class DecodeError(FeedStoreError):
    """Persisted bytes exist but do not form a valid cache record."""

    code = "DECODE_ERROR"


class EncodeError(FeedStoreError):
    """A cache record could not be serialized."""

    code = "ENCODE_ERROR"


class AdapterWriteError(FeedStoreError):
    code = "ADAPTER_WRITE_ERROR"


class AdapterReadError(FeedStoreError):
    code = "ADAPTER_READ_ERROR"


class AdapterClearError(FeedStoreError):
    code = "ADAPTER_CLEAR_ERROR"
