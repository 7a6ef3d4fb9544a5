"""
Unit tests for domain values and configuration.
"""

import dataclasses

import pytest

from itero_session.adapters.file_storage import FileStorageAdapter
from itero_session.adapters.memory_storage import MemoryStorageAdapter
from itero_session.adapters.redis_storage import RedisStorageAdapter
from itero_session.config import SessionConfig, build_storage
from itero_session.domain.login import LoginInfo
from itero_session.domain.session_info import SessionInfo, SessionState, StoredSession


def test_session_info_is_immutable():
    info = SessionInfo.authenticated("alice")

    with pytest.raises(dataclasses.FrozenInstanceError):
        info.registered = False


def test_session_info_state():
    assert SessionInfo.authenticated("alice").state == SessionState.AUTHENTICATED
    assert SessionInfo.anonymous().state == SessionState.ANONYMOUS
    assert SessionInfo.anonymous().to_dict() == {"registered": False, "user": ""}


def test_stored_session_requires_both_values():
    assert StoredSession.from_values("abc123", "alice") == StoredSession("abc123", "alice")
    assert StoredSession.from_values("abc123", None) is None
    assert StoredSession.from_values(None, "alice") is None
    assert StoredSession.from_values("", "") is None


def test_login_info_wire_form():
    info = LoginInfo(user="alice", password="secret")

    assert info.to_dict() == {"User": "alice", "Passwd": "secret"}
    assert "secret" not in repr(info)


def test_config_defaults():
    config = SessionConfig()

    assert config.header_name == "X-CSRF"
    assert config.query_param == "s"
    assert config.cookie_name == "s"
    assert config.cookie_path == "/"
    assert config.cookie_max_age == 1800
    assert config.login_path == "/login"


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("ITERO_BASE_URL", "https://itero.example/a")
    monkeypatch.setenv("ITERO_COOKIE_MAX_AGE", "600")
    monkeypatch.setenv("ITERO_TIMEOUT", "2.5")
    monkeypatch.setenv("ITERO_STORAGE_PATH", "/tmp/itero.json")

    config = SessionConfig.from_env()

    assert config.base_url == "https://itero.example/a"
    assert config.cookie_max_age == 600
    assert config.timeout == 2.5
    assert config.storage_path == "/tmp/itero.json"
    assert config.header_name == "X-CSRF"


def test_config_from_env_custom_prefix(monkeypatch):
    monkeypatch.setenv("APP_HEADER_NAME", "X-Session")
    assert SessionConfig.from_env(prefix="APP_").header_name == "X-Session"


def test_config_from_env_bad_number(monkeypatch):
    monkeypatch.setenv("ITERO_COOKIE_MAX_AGE", "soon")
    with pytest.raises(ValueError):
        SessionConfig.from_env()


def test_build_storage(tmp_path):
    assert isinstance(build_storage(SessionConfig()), MemoryStorageAdapter)

    file_config = SessionConfig(storage_path=str(tmp_path / "s.json"))
    assert isinstance(build_storage(file_config), FileStorageAdapter)

    redis_config = SessionConfig(redis_url="redis://localhost:6379/0", storage_path="ignored")
    assert isinstance(build_storage(redis_config), RedisStorageAdapter)
