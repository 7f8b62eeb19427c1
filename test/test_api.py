from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.routes import router
from src.application.recency_store import SearchHistoryStore, ViewedDrinksStore
from src.application.usecases import GetDrinkChart, GetDrinkDetail, SearchDrinks


@pytest.fixture
def client(drink_repo, kv):
    app = FastAPI()
    app.include_router(router)
    history = SearchHistoryStore(kv)
    viewed = ViewedDrinksStore(kv)
    app.state.search_history = history
    app.state.viewed_drinks = viewed
    app.state.search_uc = SearchDrinks(drink_repo, history)
    app.state.detail_uc = GetDrinkDetail(drink_repo, viewed)
    app.state.chart_uc = GetDrinkChart(drink_repo)
    return TestClient(app)


def test_healthz(client):
    assert client.get("/healthz").json() == {"status": "ok"}


def test_search_and_history(client):
    r = client.get("/drinks/search", params={"q": "marg"})
    assert r.status_code == 200
    body = r.json()
    assert body["drinks"][0]["name"] == "Margarita"
    assert body["drinks"][0]["highlight"][0] == {"text": "Marg", "is_match": True}

    assert client.get("/history/searches").json() == {"terms": ["marg"]}
    assert client.delete("/history/searches").status_code == 204
    assert client.get("/history/searches").json() == {"terms": []}


def test_detail_records_viewed(client):
    r = client.get("/drinks/11007")
    assert r.status_code == 200
    body = r.json()
    assert body["glass"] == "Cocktail glass"
    assert len(body["slices"]) == 3
    assert body["unsupported"][0]["color"] == "#cccccc"

    viewed = client.get("/history/viewed").json()["drinks"]
    assert [d["id"] for d in viewed] == ["11007"]
    assert client.delete("/history/viewed").status_code == 204
    assert client.get("/history/viewed").json() == {"drinks": []}


def test_detail_not_found(client):
    assert client.get("/drinks/404").status_code == 404


def test_chart_svg(client):
    r = client.get("/drinks/11007/chart.svg")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("image/svg+xml")
    assert r.text.startswith("<svg ")


def test_chart_unexpected_error_is_500(client):
    def broken(_drink_id):
        raise RuntimeError("boom")

    client.app.state.chart_uc = broken
    r = client.get("/drinks/11007/chart.svg")
    assert r.status_code == 500
    assert r.json()["detail"] == "boom"
