# core/storage.py

"""
Durable key–value storage for the current session snapshot.

Values are always strings (JSON produced by the session manager), mirroring
browser localStorage. Two backends are available:

  • MemoryStorage: process-local dict, lost on restart (tests, dev)
  • FileStorage:   single JSON file on disk, survives restarts
"""

import json
import os
from typing import Optional
from threading import Lock

from core.config import settings
from core.logging_config import logger


# Keys written by the session manager
CURRENT_USER_KEY = "currentUser"
USER_DATA_KEY = "userData"


class SessionStorage:
    """
    Interface shared by every storage backend.
    """

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str):
        raise NotImplementedError

    def remove_item(self, key: str):
        raise NotImplementedError

    def clear(self):
        raise NotImplementedError

    def keys(self) -> list[str]:
        raise NotImplementedError


class MemoryStorage(SessionStorage):
    """
    In-memory storage.

    Thread-safe for concurrent access.
    """

    def __init__(self):
        self._items: dict[str, str] = {}
        self._lock = Lock()

    def get_item(self, key: str) -> Optional[str]:
        """
        Get a value from storage.

        Args:
            key: Storage key

        Returns:
            Stored string or None if not found
        """
        with self._lock:
            return self._items.get(key)

    def set_item(self, key: str, value: str):
        """
        Store a string value under a key, replacing any previous value.

        Args:
            key: Storage key
            value: String to store
        """
        if not isinstance(value, str):
            raise TypeError(f"Storage values must be strings, got {type(value).__name__}")
        with self._lock:
            self._items[key] = value

    def remove_item(self, key: str):
        """Remove a key. Missing keys are ignored."""
        with self._lock:
            self._items.pop(key, None)

    def clear(self):
        """Remove every key."""
        with self._lock:
            self._items.clear()

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._items.keys())


class FileStorage(SessionStorage):
    """
    Storage persisted to a single JSON object file.

    Every write rewrites the whole file. A file that is missing or does not
    hold a JSON object (including one that is not valid UTF-8) is treated as
    empty storage; the values inside a readable file are returned untouched,
    so corrupted values are left for the caller to detect.
    """

    def __init__(self, path: str):
        self.path = path
        self._lock = Lock()

    def _read(self) -> dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            logger.warning(f"Session storage file unreadable, treating as empty: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning("Session storage file is not a JSON object, treating as empty")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write(self, items: dict[str, str]):
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as fh:
            json.dump(items, fh)
        os.replace(tmp_path, self.path)

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._read().get(key)

    def set_item(self, key: str, value: str):
        if not isinstance(value, str):
            raise TypeError(f"Storage values must be strings, got {type(value).__name__}")
        with self._lock:
            items = self._read()
            items[key] = value
            self._write(items)

    def remove_item(self, key: str):
        with self._lock:
            items = self._read()
            if key in items:
                del items[key]
                self._write(items)

    def clear(self):
        with self._lock:
            if os.path.exists(self.path):
                os.remove(self.path)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._read().keys())


def create_storage(backend: Optional[str] = None, path: Optional[str] = None) -> SessionStorage:
    """
    Build the storage backend named in settings (or the arguments).

    Example:
        storage = create_storage("file", "/tmp/session.json")
    """
    backend = (backend or settings.SESSION_STORAGE_BACKEND).lower()

    if backend == "memory":
        logger.info("Using in-memory session storage")
        return MemoryStorage()

    if backend == "file":
        path = path or settings.SESSION_STORAGE_PATH
        logger.info(f"Using file session storage at {path}")
        return FileStorage(path)

    raise ValueError(f"Unknown session storage backend: {backend}")
