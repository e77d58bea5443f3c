from __future__ import annotations

import logging
import plistlib
import struct
from datetime import datetime
from enum import StrEnum
from xml.parsers.expat import ExpatError

from pydantic import ValidationError, field_validator

from feedcache.errors import DecodeError, EncodeError
from feedcache.schemas import CacheRecord, DTOBase, FeedImage, validate_json

CACHE_FORMAT_VERSION = 1

# plistlib surfaces malformed input through several unrelated exception types.
_PLIST_LOAD_ERRORS = (
    plistlib.InvalidFileException,
    ExpatError,
    ValueError,
    TypeError,
    KeyError,
    IndexError,
    OverflowError,
    struct.error,
)

logger = logging.getLogger(__name__)


class CodecFormat(StrEnum):
    JSON = "json"
    PLIST = "plist"


class _StoredCache(DTOBase):
    version: int = CACHE_FORMAT_VERSION
    feed: tuple[FeedImage, ...]
    timestamp: datetime

    @field_validator("version")
    @classmethod
    def validate_version(cls, value: int) -> int:
        if value != CACHE_FORMAT_VERSION:
            raise ValueError(f"unsupported cache format version: {value}")
        return value

    @classmethod
    def from_record(cls, record: CacheRecord) -> _StoredCache:
        return cls(feed=record.images, timestamp=record.timestamp)

    def to_record(self) -> CacheRecord:
        return CacheRecord(images=self.feed, timestamp=self.timestamp)


class FeedCacheCodec:
    """Converts a CacheRecord to and from the bytes kept in a byte store.

    Both formats are self-describing: the payload carries a ``version`` tag,
    the ordered ``feed`` list and the ``timestamp``. Optional image fields are
    written as null in JSON and omitted in property lists.
    """

    def __init__(self, fmt: CodecFormat | str = CodecFormat.JSON) -> None:
        try:
            self.format = CodecFormat(fmt)
        except ValueError as exc:
            raise ValueError(f"Unknown codec format: {fmt}") from exc

    def encode(self, record: CacheRecord) -> bytes:
        try:
            stored = _StoredCache.from_record(record)
            if self.format == CodecFormat.PLIST:
                payload = stored.model_dump(mode="json", exclude_none=True)
                return plistlib.dumps(payload, fmt=plistlib.FMT_BINARY, sort_keys=True)
            return stored.model_dump_json().encode("utf-8")
        except (ValueError, TypeError, OverflowError) as exc:
            raise EncodeError(f"failed to encode cache record as {self.format}: {exc}") from exc

    def decode(self, data: bytes) -> CacheRecord:
        if self.format == CodecFormat.PLIST:
            stored = self._decode_plist(data)
        else:
            stored = self._decode_json(data)
        return stored.to_record()

    @staticmethod
    def _decode_json(data: bytes) -> _StoredCache:
        try:
            return validate_json(_StoredCache, data)
        except ValidationError as exc:
            logger.debug("json cache payload rejected errors=%d", exc.error_count())
            raise DecodeError("cached bytes are not a valid JSON feed cache.") from exc

    @staticmethod
    def _decode_plist(data: bytes) -> _StoredCache:
        try:
            payload = plistlib.loads(data)
        except _PLIST_LOAD_ERRORS as exc:
            raise DecodeError("cached bytes are not a property list.") from exc

        if not isinstance(payload, dict):
            raise DecodeError("cached property list root must be a dictionary.")
        try:
            return _StoredCache.model_validate(payload)
        except ValidationError as exc:
            logger.debug("plist cache payload rejected errors=%d", exc.error_count())
            raise DecodeError("cached property list is not a valid feed cache.") from exc
