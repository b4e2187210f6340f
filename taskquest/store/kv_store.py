"""
Key-value stores for local persistence

InMemoryStore keeps values in a dict (tests, STORE_BACKEND=memory).
JsonFileStore mirrors the dict to a single JSON file after every write.
set_many writes a batch of keys in one flush; a failed flush leaves the
store unchanged.
Values must be JSON-compatible.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Iterator, Optional

from taskquest import config
from taskquest.exceptions import StorageError

logger = logging.getLogger(__name__)


class InMemoryStore:
    """In-process key-value store (nothing is persisted)"""

    def __init__(self, initial: Optional[dict] = None):
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        logger.debug(f"Stored key '{key}'")

    def set_many(self, values: dict[str, Any]) -> None:
        """Write several keys as one update"""
        self._data.update(values)
        logger.debug(f"Stored keys {sorted(values)}")

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> Iterator[str]:
        return iter(list(self._data))


class JsonFileStore(InMemoryStore):
    """Key-value store persisted to a JSON file"""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(self._load())

    def _load(self) -> dict:
        if not self.path.exists():
            logger.info(f"No store file at {self.path}, starting empty")
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(
                f"Could not read store file {self.path}",
                path=str(self.path),
                operation="load",
                cause=e,
            )
        if not isinstance(data, dict):
            raise StorageError(
                f"Store file {self.path} does not contain a JSON object",
                path=str(self.path),
                operation="load",
            )
        return data

    def _flush(self) -> None:
        """Write atomically: temp file in the same directory, then rename"""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(self._data, f, ensure_ascii=False, indent=2)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise StorageError(
                f"Could not write store file {self.path}",
                path=str(self.path),
                operation="flush",
                cause=e,
            )

    def _commit(self, previous: dict) -> None:
        """Flush, restoring the in-memory state if the file write fails"""
        try:
            self._flush()
        except StorageError:
            self._data = previous
            raise

    def set(self, key: str, value: Any) -> None:
        self.set_many({key: value})

    def set_many(self, values: dict[str, Any]) -> None:
        previous = dict(self._data)
        super().set_many(values)
        self._commit(previous)

    def delete(self, key: str) -> None:
        previous = dict(self._data)
        super().delete(key)
        self._commit(previous)


def create_store() -> InMemoryStore:
    """Build the key-value store selected by config.STORE_BACKEND"""
    if config.STORE_BACKEND == "memory":
        logger.warning("Using in-memory store - data will NOT be persisted")
        return InMemoryStore()
    return JsonFileStore(config.store_path())
