from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path
from typing import Any

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from feedcache.codec import CodecFormat


class StoreBackend(StrEnum):
    VOLATILE = "volatile"
    MEMORY = "memory"
    FILE = "file"
    SQLITE = "sqlite"


class StoreConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    backend: StoreBackend = StoreBackend.FILE
    path: str | None = "data/feed-cache"
    cache_key: str = "feed_cache_key"
    codec: CodecFormat = CodecFormat.JSON
    max_workers: int = Field(default=4, ge=1)

    @field_validator("cache_key")
    @classmethod
    def validate_cache_key(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("store.cache_key must not be empty")
        return normalized

    @model_validator(mode="after")
    def validate_path(self) -> StoreConfig:
        needs_path = self.backend in (StoreBackend.FILE, StoreBackend.SQLITE)
        if needs_path and not (self.path or "").strip():
            raise ValueError("store.path is required when backend is file or sqlite")
        return self


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    store: StoreConfig = Field(default_factory=StoreConfig)


def load_config(path: str | Path) -> AppConfig:
    """Load the feed store config; ``.json`` files are parsed as JSON, anything else as YAML."""
    config_path = Path(path)
    payload = _read_store_payload(config_path)
    try:
        return AppConfig.model_validate(payload)
    except ValidationError as exc:
        raise ValueError(f"Invalid feed store config {config_path.name}: {exc}") from exc


def _read_store_payload(config_path: Path) -> dict[str, Any]:
    raw = config_path.read_text(encoding="utf-8")
    try:
        if config_path.suffix.lower() == ".json":
            parsed = json.loads(raw)
        else:
            parsed = yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ValueError(f"Feed store config {config_path.name} is not parseable: {exc}") from exc

    # An empty file means every store setting keeps its default.
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError(
            f"Feed store config {config_path.name} must be a mapping, "
            f"got {type(parsed).__name__}."
        )
    return parsed
