"""
File Storage Adapter - JSON file key/value storage.

The local-disk counterpart of browser localStorage: values survive
process restarts and are shared by every process using the same file.
"""

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union
from itero_session.domain.errors import StorageError
from itero_session.ports.storage_port import StoragePort

logger = logging.getLogger(__name__)


class FileStorageAdapter(StoragePort):
    """
    JSON file storage.

    The whole mapping is rewritten on every change, through a temporary
    file and an atomic rename, so readers never see a half-written file.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize file storage.

        Args:
            path: Location of the JSON file (created on first write)
        """
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> Dict[str, str]:
        """Read the mapping from disk."""
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise StorageError(f"Cannot read {self._path}: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring corrupted storage file %s", self._path)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring storage file %s: not a JSON object", self._path)
            return {}

        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: Dict[str, str]) -> None:
        """Atomically replace the file with data."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self._path.parent, prefix=".tmp-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f)
                os.replace(tmp, self._path)
            except BaseException:
                with contextlib.suppress(OSError):
                    os.unlink(tmp)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write {self._path}: {e}") from e

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key not in data:
            return
        del data[key]
        self._write(data)
