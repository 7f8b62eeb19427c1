# =========================
# FILE: cocktail_browser/src/application/recency_store.py
# =========================
from __future__ import annotations

import json
import logging
import threading
from typing import Any, Callable, Generic, List, Optional, TypeVar

from src.core.config import MAX_SEARCH_HISTORY, MAX_VIEWED_DRINKS, SEARCH_HISTORY_KEY, VIEWED_DRINKS_KEY
from src.domain.entities import DrinkListItem
from src.domain.repositories import KeyValueStore

log = logging.getLogger("app.recency_store")

T = TypeVar("T")
Listener = Callable[[List[Any]], None]


class UpdateNotifier:
    """Same-process publish/subscribe. subscribe() returns an unsubscribe callable."""

    def __init__(self) -> None:
        self._listeners: List[Listener] = []
        self._lock = threading.Lock()

    def subscribe(self, fn: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(fn)

        def unsubscribe() -> None:
            with self._lock:
                if fn in self._listeners:
                    self._listeners.remove(fn)

        return unsubscribe

    def publish(self, entries: List[Any]) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for fn in listeners:
            try:
                fn(entries)
            except Exception:
                # one broken view must not block the others
                log.exception("Recency listener failed")


class RecencyStore(Generic[T]):
    """
    Bounded, deduplicated, most-recent-first list persisted as a JSON array under one key.

    add(): drop any entry with the same dedup key, prepend, truncate to cap.
    Read failures and malformed content behave as an empty store; write failures are logged.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        cap: int,
        dedup_key: Callable[[T], str],
        encode: Callable[[T], Any],
        decode: Callable[[Any], T],
        notifier: Optional[UpdateNotifier] = None,
    ) -> None:
        self.store = store
        self.key = key
        self.cap = cap
        self._dedup_key = dedup_key
        self._encode = encode
        self._decode = decode
        self.notifier = notifier

    def list(self) -> List[T]:
        try:
            raw = self.store.get(self.key)
        except Exception as e:
            log.warning("Reading %s failed: %s", self.key, e)
            return []
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            log.warning("Malformed %s content, treating as empty: %s", self.key, e)
            return []
        if not isinstance(data, list):
            log.warning("Malformed %s content (not a list), treating as empty", self.key)
            return []

        out: List[T] = []
        for item in data:
            try:
                out.append(self._decode(item))
            except (KeyError, TypeError, ValueError):
                log.debug("Skipping malformed %s entry: %r", self.key, item)
        return out[: self.cap]

    def _accepts(self, entry: T) -> bool:
        return True

    def add(self, entry: T) -> None:
        if not self._accepts(entry):
            return
        k = self._dedup_key(entry)
        updated = [entry] + [e for e in self.list() if self._dedup_key(e) != k]
        updated = updated[: self.cap]
        try:
            self.store.set(self.key, json.dumps([self._encode(e) for e in updated], ensure_ascii=False))
        except Exception as e:
            log.error("Saving %s failed: %s", self.key, e)
            return
        if self.notifier is not None:
            self.notifier.publish(updated)

    def clear(self) -> None:
        try:
            self.store.remove(self.key)
        except Exception as e:
            log.error("Clearing %s failed: %s", self.key, e)
            return
        if self.notifier is not None:
            self.notifier.publish([])


class SearchHistoryStore(RecencyStore[str]):
    def __init__(self, store: KeyValueStore, cap: int = MAX_SEARCH_HISTORY) -> None:
        super().__init__(
            store=store,
            key=SEARCH_HISTORY_KEY,
            cap=cap,
            dedup_key=lambda t: t.strip().lower(),
            encode=lambda t: t,
            decode=_decode_term,
        )

    def _accepts(self, entry: str) -> bool:
        return bool((entry or "").strip())

    def add(self, entry: str) -> None:
        super().add((entry or "").strip())


def _decode_term(v: Any) -> str:
    if not isinstance(v, str):
        raise TypeError("search term must be a string")
    return v


class ViewedDrinksStore(RecencyStore[DrinkListItem]):
    def __init__(
        self,
        store: KeyValueStore,
        cap: int = MAX_VIEWED_DRINKS,
        notifier: Optional[UpdateNotifier] = None,
    ) -> None:
        super().__init__(
            store=store,
            key=VIEWED_DRINKS_KEY,
            cap=cap,
            dedup_key=lambda d: d.id,
            encode=lambda d: d.to_dict(),
            decode=DrinkListItem.from_dict,
            notifier=notifier or UpdateNotifier(),
        )

    def _accepts(self, entry: DrinkListItem) -> bool:
        return entry is not None and bool(entry.id) and bool(entry.name)

    def subscribe(self, fn: Listener) -> Callable[[], None]:
        return self.notifier.subscribe(fn)  # type: ignore[union-attr]
