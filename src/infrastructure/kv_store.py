# =========================
# FILE: cocktail_browser/src/infrastructure/kv_store.py
# =========================
from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Dict, Optional

from src.domain.repositories import KeyValueStore

log = logging.getLogger("infra.kv_store")


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileKeyValueStore(KeyValueStore):
    """
    Whole-file JSON object on disk, loaded on open() and rewritten on every write.
    Last writer wins across processes.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._data: Dict[str, str] = {}
        self._lock = threading.Lock()

    def open(self) -> None:
        self._data = self._load()
        log.info("JsonFileKeyValueStore opened %s (%d keys)", self.path, len(self._data))

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Ignoring unreadable store file %s: %s", self.path, e)
            return {}
        if not isinstance(raw, dict):
            log.warning("Ignoring store file %s: top level is not an object", self.path)
            return {}
        return {str(k): v for k, v in raw.items() if isinstance(v, str)}

    def _flush(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp, self.path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            updated = {**self._data, key: value}
            self._flush(updated)
            self._data = updated

    def remove(self, key: str) -> None:
        with self._lock:
            if key not in self._data:
                return
            updated = {k: v for k, v in self._data.items() if k != key}
            self._flush(updated)
            self._data = updated
