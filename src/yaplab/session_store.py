"""
Persistent Session Store

A small string key/value store that keeps the authenticated session
(access token and user ID) across restarts. With a file path it is backed
by a JSON file rewritten on every change; without one it lives in memory.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)

AUTH_TOKEN_KEY = "authToken"
USER_ID_KEY = "userId"


class SessionStore:
    """
    Key/value store for session data.

    Attributes:
        path: JSON file backing the store, or None for memory only
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path).expanduser() if path is not None else None
        self._data: Dict[str, str] = {}
        if self.path is not None:
            self._load()

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._data.get(key, default)

    def set(self, key: str, value: str) -> None:
        self.update({key: value})

    def update(self, values: Dict[str, str]) -> None:
        """
        Set several keys in one write.

        Raises:
            OSError: If the backing file cannot be written; the store is
                left unchanged
        """
        data = dict(self._data)
        data.update({key: str(value) for key, value in values.items()})
        self._commit(data)

    def remove(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
        if key not in self._data:
            return
        data = dict(self._data)
        del data[key]
        self._commit(data)

    def clear(self) -> None:
        self._commit({})

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def _load(self) -> None:
        """Load the backing file, treating a missing or corrupt file as empty."""
        if not self.path.exists():
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Could not read session file {self.path}: {e}")
            return
        if not isinstance(data, dict):
            logger.error(f"Ignoring session file {self.path}: not an object")
            return
        self._data = {str(k): str(v) for k, v in data.items()}
        logger.debug(f"Loaded {len(self._data)} session keys from {self.path}")

    def _commit(self, data: Dict[str, str]) -> None:
        # Memory only changes once the file write went through
        self._flush(data)
        self._data = data

    def _flush(self, data: Dict[str, str]) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f)
        os.replace(tmp_path, self.path)
