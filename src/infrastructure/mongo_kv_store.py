# cocktail_browser/src/infrastructure/mongo_kv_store.py
from __future__ import annotations
from typing import Optional
import logging
from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from src.domain.repositories import KeyValueStore

log = logging.getLogger("infra.mongo_kv_store")


class MongoKeyValueStore(KeyValueStore):
    """
    Key-value store backed by one MongoDB collection: {_id: key, value: str}.
    Errors surface to RecencyStore, which degrades to empty-store semantics.
    """
    def __init__(self, col: Collection) -> None:
        self._col = col

    def open(self) -> None:
        try:
            n = self._col.estimated_document_count()
            log.info("MongoKeyValueStore ready (%d keys)", n)
        except PyMongoError as e:
            log.warning("MongoKeyValueStore: collection not reachable yet: %s", e)

    def get(self, key: str) -> Optional[str]:
        doc = self._col.find_one({"_id": key})
        if not doc:
            return None
        v = doc.get("value")
        return v if isinstance(v, str) else None

    def set(self, key: str, value: str) -> None:
        self._col.replace_one({"_id": key}, {"_id": key, "value": value}, upsert=True)

    def remove(self, key: str) -> None:
        self._col.delete_one({"_id": key})
