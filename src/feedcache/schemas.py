from __future__ import annotations

from datetime import datetime
from typing import TypeVar
from urllib.parse import urlsplit
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

TModel = TypeVar("TModel", bound=BaseModel)


class DTOBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class FeedImage(DTOBase):
    id: UUID
    description: str | None = None
    location: str | None = None
    url: str

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        normalized = value.strip()
        parts = urlsplit(normalized)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"url must be absolute: {value!r}")
        return normalized


class CacheRecord(DTOBase):
    """The single feed snapshot a store holds."""

    images: tuple[FeedImage, ...]
    timestamp: datetime


def validate_json(model_cls: type[TModel], payload: str | bytes | bytearray) -> TModel:
    return model_cls.model_validate_json(payload)
