from __future__ import annotations

import logging
import uvicorn
from fastapi import FastAPI
from pymongo import MongoClient
from dotenv import load_dotenv
load_dotenv()
from src.api.routes import router
from src.core.config import Paths, KV_BACKEND, MONGO_URI, MONGO_DB, MONGO_KV_COL, SEARCH_DEBOUNCE_MS

from src.domain.repositories import KeyValueStore
from src.infrastructure.cocktaildb_client import CocktailDBClient
from src.infrastructure.kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore
from src.infrastructure.mongo_kv_store import MongoKeyValueStore
from src.application.debounce import Debouncer
from src.application.recency_store import SearchHistoryStore, ViewedDrinksStore
from src.application.usecases import SearchDrinks, GetDrinkDetail, GetDrinkChart

log = logging.getLogger("app")
app = FastAPI(title="Cocktail Browser")
app.include_router(router)

_mongo_client: MongoClient | None = None


def build_kv_store(backend: str) -> KeyValueStore:
    global _mongo_client
    if backend == "mongo":
        _mongo_client = MongoClient(MONGO_URI, serverSelectionTimeoutMS=3000)
        return MongoKeyValueStore(_mongo_client[MONGO_DB][MONGO_KV_COL])
    if backend == "memory":
        return InMemoryKeyValueStore()
    return JsonFileKeyValueStore(Paths.KV_FILE)


@app.on_event("startup")
def on_startup() -> None:
    kv = build_kv_store(KV_BACKEND)
    kv.open()

    client = CocktailDBClient()
    search_history = SearchHistoryStore(kv)
    viewed_drinks = ViewedDrinksStore(kv)
    history_debouncer = Debouncer(SEARCH_DEBOUNCE_MS / 1000.0, search_history.add)
    viewed_drinks.subscribe(lambda entries: log.debug("viewed drinks updated: %d entries", len(entries)))

    # DI for routes.py
    app.state.kv_store = kv
    app.state.drink_client = client
    app.state.search_history = search_history
    app.state.viewed_drinks = viewed_drinks
    app.state.history_debouncer = history_debouncer
    app.state.search_uc = SearchDrinks(client, search_history, record_term=history_debouncer.call)
    app.state.detail_uc = GetDrinkDetail(client, viewed_drinks)
    app.state.chart_uc = GetDrinkChart(client)

    log.info("Startup complete (kv_backend=%s)", KV_BACKEND)


@app.on_event("shutdown")
def on_shutdown() -> None:
    global _mongo_client
    debouncer = getattr(app.state, "history_debouncer", None)
    if debouncer:
        debouncer.flush()
    client = getattr(app.state, "drink_client", None)
    if client:
        client.close()
    kv = getattr(app.state, "kv_store", None)
    if kv:
        kv.close()
    if _mongo_client:
        _mongo_client.close()
        _mongo_client = None


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8081, reload=False)
