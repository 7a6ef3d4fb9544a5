"""
Memory Storage Adapter - In-memory key/value storage (testing only).
"""

from typing import Dict, Optional
from itero_session.ports.storage_port import StoragePort


class MemoryStorageAdapter(StoragePort):
    """
    In-memory storage.

    WARNING: Only for testing. Values are lost on restart,
    so a restored session never survives the process.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        """
        Initialize in-memory storage.

        Args:
            initial: Optional values to start with (e.g. a previous process' state)
        """
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def snapshot(self) -> Dict[str, str]:
        """Copy of all stored values."""
        return dict(self._values)
