from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from feedcache.schemas import CacheRecord, FeedImage, validate_json


def test_feed_image_accepts_optional_fields() -> None:
    image = FeedImage(id=uuid4(), url="https://images.example.com/feed/1.jpg")

    assert image.description is None
    assert image.location is None
    assert image.url == "https://images.example.com/feed/1.jpg"


def test_feed_image_rejects_relative_url_and_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        FeedImage(id=uuid4(), url="/feed/1.jpg")

    with pytest.raises(ValidationError):
        FeedImage(id=uuid4(), url="https://x/1", title="unexpected")


def test_feed_image_is_immutable() -> None:
    image = FeedImage(id=uuid4(), url="https://x/1")

    with pytest.raises(ValidationError):
        image.url = "https://x/2"  # type: ignore[misc]


def test_cache_record_json_roundtrip() -> None:
    image_id = UUID("6f1c2a4e-3b1d-4f0e-9a7c-1d2e3f4a5b6c")
    record = CacheRecord(
        images=[
            FeedImage(id=image_id, description="Harbour", location="Busan", url="https://x/1"),
            FeedImage(id=uuid4(), url="https://x/2"),
        ],
        timestamp=datetime(2026, 2, 28, 0, 0, tzinfo=timezone.utc),
    )

    restored = validate_json(CacheRecord, record.model_dump_json())

    assert restored == record
    assert isinstance(restored.images, tuple)
    assert restored.images[0].id == image_id
