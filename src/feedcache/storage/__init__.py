"""Byte stores the persistent feed store can sit on."""

from .base import ByteStore
from .file import FileByteStore
from .memory import MemoryByteStore
from .sqlite import SqliteByteStore

__all__ = ["ByteStore", "FileByteStore", "MemoryByteStore", "SqliteByteStore"]
