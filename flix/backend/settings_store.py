"""
Settings Store
Simple key-value stores holding opaque byte blobs under string keys
"""

import base64
import json
import logging
import os
import tempfile
from typing import Protocol

logger = logging.getLogger(__name__)


class SettingsStoreError(Exception):
    """The backing settings file cannot be read as a key-value mapping."""


class SettingsStore(Protocol):
    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, value: bytes) -> None: ...


class InMemorySettingsStore:
    """Dict-backed store; contents are lost when the process exits."""

    def __init__(self, values: dict[str, bytes] | None = None):
        self._values = dict(values or {})

    def get(self, key: str) -> bytes | None:
        return self._values.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._values[key] = bytes(value)


class JsonFileSettingsStore:
    """
    Store persisted to a single JSON file.
    The file holds one object mapping each key to its base64-encoded value.
    """

    def __init__(self, path: str):
        self.path = path

    def _load(self) -> dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            raise SettingsStoreError(f"Cannot read settings file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise SettingsStoreError(f"Settings file {self.path} does not hold a JSON object")
        return data

    def _dump(self, data: dict[str, str]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def get(self, key: str) -> bytes | None:
        encoded = self._load().get(key)
        if encoded is None:
            return None
        try:
            return base64.b64decode(encoded, validate=True)
        except (ValueError, TypeError) as e:
            raise SettingsStoreError(f"Value for {key!r} in {self.path} is not base64") from e

    def set(self, key: str, value: bytes) -> None:
        data = self._load()
        data[key] = base64.b64encode(value).decode("ascii")
        self._dump(data)
        logger.debug("Wrote %d bytes to %r in %s", len(value), key, self.path)
