"""
Storage Port - Interface for durable key/value storage.

Implementations:
- FileStorageAdapter: JSON file on local disk
- RedisStorageAdapter: Redis-backed storage
- MemoryStorageAdapter: In-memory storage (testing only)
"""

from abc import ABC, abstractmethod
from typing import Optional


class StoragePort(ABC):
    """Port: String key/value storage that survives process restarts."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read a value.

        Args:
            key: Storage key

        Returns:
            Stored value, or None if absent
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Write a value, replacing any previous one.

        Args:
            key: Storage key
            value: Value to store
        """
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """
        Remove a value. Removing an absent key is a no-op.

        Args:
            key: Storage key
        """
        pass
