"""
Adapters - Implementations of ports.

Durable storage:
- FileStorageAdapter: JSON file on local disk
- RedisStorageAdapter: Redis-backed storage
- MemoryStorageAdapter: In-memory storage (testing)

Credential store:
- CookieCredentialStore: durable storage + httpx cookie jar mirror

Login exchange:
- HttpxLoginAdapter: POST /login over httpx
"""

# Durable storage
from itero_session.adapters.memory_storage import MemoryStorageAdapter
from itero_session.adapters.file_storage import FileStorageAdapter
from itero_session.adapters.redis_storage import RedisStorageAdapter

# Credential store
from itero_session.adapters.cookie_credential_store import CookieCredentialStore

# Login exchange
from itero_session.adapters.httpx_login import HttpxLoginAdapter

__all__ = [
    # Durable storage
    "MemoryStorageAdapter",
    "FileStorageAdapter",
    "RedisStorageAdapter",
    # Credential store
    "CookieCredentialStore",
    # Login exchange
    "HttpxLoginAdapter",
]
