# cocktail_browser/src/domain/repositories.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class KeyValueStore(ABC):
    """
    String-keyed, string-valued durable store (the browser localStorage analogue).
    Adapters own their lifecycle: open() before first use, close() on shutdown.
    """

    def open(self) -> None:
        return None

    def close(self) -> None:
        return None

    @abstractmethod
    def get(self, key: str) -> Optional[str]: ...

    @abstractmethod
    def set(self, key: str, value: str) -> None: ...

    @abstractmethod
    def remove(self, key: str) -> None: ...


class DrinkReadRepo(ABC):
    """Read-only upstream drink source. Responses keep the upstream `{"drinks": [...] | None}` shape."""

    @abstractmethod
    def search(self, query: str) -> Dict[str, Any]: ...

    @abstractmethod
    def by_id(self, drink_id: str) -> Dict[str, Any]: ...
