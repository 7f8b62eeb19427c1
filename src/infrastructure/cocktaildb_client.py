# =========================
# FILE: cocktail_browser/src/infrastructure/cocktaildb_client.py
# =========================
from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional, Tuple

import requests

from src.core.config import COCKTAILDB_BASE_URL, DETAIL_CACHE_TTL_S, HTTP_TIMEOUT_S, SEARCH_CACHE_TTL_S
from src.domain.repositories import DrinkReadRepo

log = logging.getLogger("infra.cocktaildb_client")

_EMPTY: Dict[str, Any] = {"drinks": None}


class _TTLCache:
    def __init__(self, ttl_s: int = 60, max_items: int = 512) -> None:
        self.ttl_s = ttl_s
        self.max_items = max_items
        self._data: Dict[str, Tuple[float, Any]] = {}

    def get(self, key: str):
        now = time.time()
        v = self._data.get(key)
        if not v:
            return None
        ts, payload = v
        if now - ts > self.ttl_s:
            self._data.pop(key, None)
            return None
        return payload

    def set(self, key: str, payload: Any) -> None:
        if len(self._data) >= self.max_items:
            # drop oldest
            oldest = sorted(self._data.items(), key=lambda kv: kv[1][0])[: max(1, self.max_items // 10)]
            for k, _ in oldest:
                self._data.pop(k, None)
        self._data[key] = (time.time(), payload)


class CocktailDBClient(DrinkReadRepo):
    """
    Read-only client for TheCocktailDB JSON API.

    Every failure (network, HTTP status, non-JSON body) is logged and returned as
    {"drinks": None}, the same shape upstream uses for "no results".
    """

    def __init__(
        self,
        base_url: str = COCKTAILDB_BASE_URL,
        timeout_s: float = HTTP_TIMEOUT_S,
        session: Optional[requests.Session] = None,
        search_ttl_s: int = SEARCH_CACHE_TTL_S,
        detail_ttl_s: int = DETAIL_CACHE_TTL_S,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.session = session or requests.Session()
        self._search_cache = _TTLCache(ttl_s=search_ttl_s)
        self._detail_cache = _TTLCache(ttl_s=detail_ttl_s)

    def close(self) -> None:
        self.session.close()

    def _get_json(self, path: str, params: Dict[str, str]) -> Optional[Dict[str, Any]]:
        url = f"{self.base_url}/{path}"
        try:
            r = self.session.get(url, params=params, timeout=self.timeout_s)
            r.raise_for_status()
            data = r.json()
        except requests.RequestException as e:
            log.error("CocktailDB request failed: %s %s: %s", url, params, e)
            return None
        except ValueError as e:
            log.error("CocktailDB returned non-JSON body for %s: %s", url, e)
            return None

        if not isinstance(data, dict) or not (data.get("drinks") is None or isinstance(data.get("drinks"), list)):
            log.warning("CocktailDB payload has unexpected shape for %s", url)
            return None
        return data

    def search(self, query: str) -> Dict[str, Any]:
        q = (query or "").strip()
        if not q:
            return dict(_EMPTY)

        cached = self._search_cache.get(q.lower())
        if cached is not None:
            return cached

        data = self._get_json("search.php", {"s": q})
        if data is None:
            return dict(_EMPTY)
        self._search_cache.set(q.lower(), data)
        return data

    def by_id(self, drink_id: str) -> Dict[str, Any]:
        key = (drink_id or "").strip()
        if not key:
            return dict(_EMPTY)

        cached = self._detail_cache.get(key)
        if cached is not None:
            return cached

        data = self._get_json("lookup.php", {"i": key})
        if data is None:
            return dict(_EMPTY)
        self._detail_cache.set(key, data)
        return data
