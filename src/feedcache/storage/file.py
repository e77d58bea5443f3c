from __future__ import annotations

import logging
import os
from pathlib import Path

from .base import sha1_key

logger = logging.getLogger(__name__)


class FileByteStore:
    def __init__(self, directory: str | Path, *, suffix: str = ".bin") -> None:
        if not suffix.startswith("."):
            raise ValueError("suffix must start with '.'")

        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self.suffix = suffix

    def write(self, key: str, data: bytes) -> None:
        data_path = self._data_path(key)
        tmp_path = data_path.with_name(f"{data_path.name}.{os.getpid()}.tmp")
        try:
            tmp_path.write_bytes(data)
            tmp_path.replace(data_path)
        finally:
            tmp_path.unlink(missing_ok=True)

        logger.info("file_store set key=%s size=%d", sha1_key(key), len(data))

    def read(self, key: str) -> bytes | None:
        data_path = self._data_path(key)
        try:
            data = data_path.read_bytes()
        except FileNotFoundError:
            logger.info("file_store miss key=%s", sha1_key(key))
            return None

        logger.info("file_store hit key=%s size=%d", sha1_key(key), len(data))
        return data

    def clear(self, key: str) -> None:
        self._data_path(key).unlink(missing_ok=True)
        logger.info("file_store clear key=%s", sha1_key(key))

    def path_for(self, key: str) -> Path:
        return self._data_path(key)

    def _data_path(self, key: str) -> Path:
        return self.directory / f"{sha1_key(key)}{self.suffix}"
