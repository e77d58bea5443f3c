from __future__ import annotations

import pytest

from feedcache.storage import FileByteStore, MemoryByteStore, SqliteByteStore
from feedcache.storage.base import sha1_key


def _stores(tmp_path):
    return {
        "memory": MemoryByteStore(),
        "file": FileByteStore(tmp_path / "blobs"),
        "sqlite": SqliteByteStore(tmp_path / "blobs.db"),
    }


@pytest.mark.parametrize("backend", ["memory", "file", "sqlite"])
def test_byte_store_write_read_clear(tmp_path, backend: str) -> None:
    store = _stores(tmp_path)[backend]
    key = "feed_cache_key"

    assert store.read(key) is None

    store.write(key, b"first")
    store.write(key, b"second")
    assert store.read(key) == b"second"

    store.clear(key)
    assert store.read(key) is None


@pytest.mark.parametrize("backend", ["memory", "file", "sqlite"])
def test_byte_store_clear_missing_key_is_noop(tmp_path, backend: str) -> None:
    store = _stores(tmp_path)[backend]

    store.clear("missing")

    assert store.read("missing") is None


@pytest.mark.parametrize("backend", ["memory", "file", "sqlite"])
def test_byte_store_keys_are_independent(tmp_path, backend: str) -> None:
    store = _stores(tmp_path)[backend]
    store.write("a", b"\x00\x01")
    store.write("b", b"\x02")

    store.clear("a")

    assert store.read("a") is None
    assert store.read("b") == b"\x02"


def test_file_byte_store_replaces_atomically(tmp_path) -> None:
    store = FileByteStore(tmp_path / "blobs")

    store.write("feed_cache_key", b"payload")

    files = sorted(path.name for path in (tmp_path / "blobs").iterdir())
    assert files == [f"{sha1_key('feed_cache_key')}.bin"]
    assert store.path_for("feed_cache_key").read_bytes() == b"payload"


def test_file_byte_store_rejects_bad_suffix(tmp_path) -> None:
    with pytest.raises(ValueError):
        FileByteStore(tmp_path, suffix="bin")


def test_persistent_stores_survive_reopen(tmp_path) -> None:
    FileByteStore(tmp_path / "blobs").write("k", b"file-bytes")
    SqliteByteStore(tmp_path / "blobs.db").write("k", b"sqlite-bytes")

    assert FileByteStore(tmp_path / "blobs").read("k") == b"file-bytes"
    assert SqliteByteStore(tmp_path / "blobs.db").read("k") == b"sqlite-bytes"


def test_memory_byte_store_copies_initial_data() -> None:
    initial = {"k": b"v"}
    store = MemoryByteStore(initial)
    initial["k"] = b"changed"

    assert store.read("k") == b"v"
    assert store.keys() == ["k"]
