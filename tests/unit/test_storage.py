"""
Unit tests for durable storage adapters.
"""

import json
import os

import pytest

from itero_session.adapters.file_storage import FileStorageAdapter
from itero_session.adapters.memory_storage import MemoryStorageAdapter
from itero_session.adapters.redis_storage import RedisStorageAdapter
from itero_session.domain.errors import StorageError


@pytest.fixture(params=["memory", "file"])
def adapter(request, tmp_path):
    if request.param == "memory":
        return MemoryStorageAdapter()
    return FileStorageAdapter(tmp_path / "session.json")


def test_get_missing(adapter):
    assert adapter.get("SessionId") is None


def test_set_get(adapter):
    adapter.set("SessionId", "abc123")
    assert adapter.get("SessionId") == "abc123"

    adapter.set("SessionId", "def456")
    assert adapter.get("SessionId") == "def456"


def test_remove(adapter):
    adapter.set("SessionId", "abc123")
    adapter.set("User", "alice")

    adapter.remove("SessionId")

    assert adapter.get("SessionId") is None
    assert adapter.get("User") == "alice"


def test_remove_missing(adapter):
    """Removing an absent key is a no-op."""
    adapter.remove("SessionId")
    adapter.remove("SessionId")
    assert adapter.get("SessionId") is None


def test_file_survives_restart(tmp_path):
    """A new adapter on the same file sees previous values."""
    path = tmp_path / "nested" / "session.json"
    FileStorageAdapter(path).set("User", "alice")

    assert FileStorageAdapter(path).get("User") == "alice"
    assert json.loads(path.read_text()) == {"User": "alice"}


def test_file_leaves_no_temporary_files(tmp_path):
    adapter = FileStorageAdapter(tmp_path / "session.json")
    adapter.set("SessionId", "abc123")
    adapter.remove("SessionId")

    assert [p.name for p in tmp_path.iterdir()] == ["session.json"]


def test_file_write_error_survives_cleanup_failure(tmp_path, monkeypatch):
    """The original write error is reported even if the temporary file cannot be removed."""
    adapter = FileStorageAdapter(tmp_path / "session.json")
    replace_error = OSError("disk full")

    def failing_replace(src, dst):
        raise replace_error

    def failing_unlink(path):
        raise PermissionError("read-only directory")

    monkeypatch.setattr(os, "replace", failing_replace)
    monkeypatch.setattr(os, "unlink", failing_unlink)

    with pytest.raises(StorageError) as exc_info:
        adapter.set("SessionId", "abc123")

    assert exc_info.value.__cause__ is replace_error


def test_file_corrupted(tmp_path, caplog):
    """A corrupted file reads as empty and is replaced on next write."""
    path = tmp_path / "session.json"
    path.write_text("{not json")
    adapter = FileStorageAdapter(path)

    assert adapter.get("SessionId") is None
    assert "corrupted" in caplog.text

    adapter.set("SessionId", "abc123")
    assert adapter.get("SessionId") == "abc123"


def test_file_ignores_non_string_values(tmp_path):
    path = tmp_path / "session.json"
    path.write_text(json.dumps({"SessionId": 42, "User": "alice"}))

    adapter = FileStorageAdapter(path)

    assert adapter.get("SessionId") is None
    assert adapter.get("User") == "alice"


def test_file_unreadable(tmp_path):
    """A path that cannot be read raises StorageError."""
    adapter = FileStorageAdapter(tmp_path)

    with pytest.raises(StorageError):
        adapter.get("SessionId")


class FakeRedis:
    """Minimal stand-in for redis.Redis."""

    def __init__(self):
        self.data = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value

    def delete(self, key):
        return 1 if self.data.pop(key, None) is not None else 0


def test_redis_prefix():
    fake = FakeRedis()
    adapter = RedisStorageAdapter(redis_client=fake, prefix="test:")

    adapter.set("SessionId", "abc123")

    assert fake.data == {"test:SessionId": "abc123"}
    assert adapter.get("SessionId") == "abc123"

    adapter.remove("SessionId")
    adapter.remove("SessionId")
    assert adapter.get("SessionId") is None


def test_redis_decodes_bytes():
    fake = FakeRedis()
    fake.data["itero:User"] = b"alice"

    assert RedisStorageAdapter(redis_client=fake).get("User") == "alice"


def test_redis_errors_become_storage_errors():
    from redis.exceptions import ConnectionError

    class DownRedis(FakeRedis):
        def get(self, key):
            raise ConnectionError("refused")

    with pytest.raises(StorageError):
        RedisStorageAdapter(redis_client=DownRedis()).get("User")
