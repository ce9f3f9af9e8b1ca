"""
Directory-backed key-value store, one file per key
"""

import os
import re
import tempfile
from pathlib import Path
from typing import Optional, Union

from lead_intel.core.exceptions import StorageError

from .base import IKeyValueStore

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class FileKeyValueStore(IKeyValueStore):
    """
    Stores each value in ``<directory>/<sanitized key>.json``.

    Writes go to a temporary file in the same directory and are moved into
    place with ``os.replace`` so a crash never leaves a half-written value.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def _path_for(self, key: str) -> Path:
        return self.directory / f"{_UNSAFE_CHARS.sub('_', key)}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(
                f"Failed to read {path}", key=key, operation="get", cause=e
            ) from e

    def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(value)
                os.replace(tmp_path, path)
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(
                f"Failed to write {path}", key=key, operation="set", cause=e
            ) from e

    def delete(self, key: str) -> None:
        path = self._path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(
                f"Failed to delete {path}", key=key, operation="delete", cause=e
            ) from e
