"""
Configuration - Settings for the client session subsystem.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

from itero_session.ports.storage_port import StoragePort


@dataclass
class SessionConfig:
    """
    Session client settings.

    Defaults match the Itero server: X-CSRF header, "s" cookie and query
    parameter, 30 minutes session lifetime.
    """
    base_url: str = "http://localhost:8080"
    login_path: str = "/login"
    timeout: float = 10.0

    header_name: str = "X-CSRF"
    query_param: str = "s"

    cookie_name: str = "s"
    cookie_path: str = "/"
    cookie_domain: str = ""
    cookie_max_age: int = 30 * 60

    # Durable storage: Redis if redis_url is set, else a JSON file, else memory
    storage_path: Optional[str] = None
    redis_url: Optional[str] = None
    redis_prefix: str = "itero:"

    @classmethod
    def from_env(cls, prefix: str = "ITERO_") -> "SessionConfig":
        """
        Build a config from environment variables.

        Each field maps to PREFIX + FIELD_NAME in upper case,
        e.g. ITERO_BASE_URL or ITERO_COOKIE_MAX_AGE. Unset variables keep
        their default.

        Args:
            prefix: Environment variable prefix (default ITERO_)

        Returns:
            SessionConfig

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        values = {}
        for f in fields(cls):
            raw = os.environ.get(f"{prefix}{f.name.upper()}")
            if raw is None:
                continue
            if f.type in (int, "int"):
                values[f.name] = int(raw)
            elif f.type in (float, "float"):
                values[f.name] = float(raw)
            else:
                values[f.name] = raw
        return cls(**values)


def build_storage(config: SessionConfig) -> StoragePort:
    """
    Pick the durable storage adapter for a config.

    Args:
        config: Session settings

    Returns:
        RedisStorageAdapter, FileStorageAdapter or MemoryStorageAdapter
    """
    if config.redis_url:
        from itero_session.adapters.redis_storage import RedisStorageAdapter
        return RedisStorageAdapter(redis_url=config.redis_url, prefix=config.redis_prefix)

    if config.storage_path:
        from itero_session.adapters.file_storage import FileStorageAdapter
        return FileStorageAdapter(Path(config.storage_path))

    from itero_session.adapters.memory_storage import MemoryStorageAdapter
    return MemoryStorageAdapter()
