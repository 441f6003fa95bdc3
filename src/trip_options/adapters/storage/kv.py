"""Key-value backends for client-side selection overrides."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol
from urllib.parse import quote

LOG = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class FileStore:
    """One JSON file per key under ``store_dir``; last write wins."""

    def __init__(self, store_dir: Path) -> None:
        self.store_dir = store_dir
        self.store_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        # percent-encoding is reversible, so distinct keys never share a file
        return self.store_dir / f"{quote(key, safe='')}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as handle:
                value = json.load(handle)
        except json.JSONDecodeError:
            LOG.warning("Ignoring unreadable override stored at %s", path)
            return None
        if not isinstance(value, str):
            LOG.warning("Ignoring non-string override stored at %s", path)
            return None
        return value

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=self.store_dir, suffix=".tmp", delete=False
        ) as handle:
            json.dump(value, handle, ensure_ascii=True)
        os.replace(handle.name, path)
