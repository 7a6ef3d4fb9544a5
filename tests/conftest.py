"""
Shared fixtures for session tests.
"""

import httpx
import pytest

from itero_session.adapters.cookie_credential_store import CookieCredentialStore
from itero_session.adapters.memory_storage import MemoryStorageAdapter
from itero_session.domain.errors import LoginError
from itero_session.sdk.session_manager import SessionManager

from fakes import FakeExchange


@pytest.fixture
def storage():
    return MemoryStorageAdapter()


@pytest.fixture
def cookies():
    return httpx.Cookies()


@pytest.fixture
def store(storage, cookies):
    return CookieCredentialStore(storage, cookies=cookies)


@pytest.fixture
def manager(store):
    return SessionManager(store)


@pytest.fixture
def events(manager):
    """List receiving every SessionInfo the manager emits."""
    received = []
    manager.subscribe(received.append)
    return received


@pytest.fixture
def exchange():
    return FakeExchange()


@pytest.fixture
def failing_exchange():
    return FakeExchange(error=LoginError("Login rejected: HTTP 403", status_code=403))
