from __future__ import annotations

import pytest

from src.application.recency_store import SearchHistoryStore, ViewedDrinksStore
from src.application.usecases import GetDrinkChart, GetDrinkDetail, SearchDrinks


def test_search_ranks_and_highlights(drink_repo, kv):
    history = SearchHistoryStore(kv)
    out = SearchDrinks(drink_repo, history)("Marg")

    names = [d["name"] for d in out["drinks"]]
    assert names == ["Margarita", "margarita on the rocks", "Blue Margarita", "Tommy's Margarita"]
    assert out["drinks"][0]["highlight"] == [
        {"text": "Marg", "is_match": True},
        {"text": "arita", "is_match": False},
    ]
    assert history.list() == ["Marg"]


def test_blank_search_uses_default_term_and_skips_history(drink_repo, kv):
    history = SearchHistoryStore(kv)
    out = SearchDrinks(drink_repo, history, default_term="margarita")("   ")

    assert out["query"] == ""
    assert out["effective_query"] == "margarita"
    assert drink_repo.search_calls == ["margarita"]
    assert len(out["drinks"]) == 4
    assert out["drinks"][0]["highlight"] == [{"text": "Margarita", "is_match": False}]
    assert history.list() == []


def test_search_no_results(drink_repo, kv):
    out = SearchDrinks(drink_repo, SearchHistoryStore(kv))("zzz")
    assert out["drinks"] == []


def test_detail_view_model(drink_repo, kv):
    viewed = ViewedDrinksStore(kv)
    out = GetDrinkDetail(drink_repo, viewed)("11007")

    assert out["name"] == "Margarita"
    assert out["steps"] == [
        "Rub the rim of the glass with the lime slice.",
        "Shake the other ingredients with ice.",
        "Serve",
    ]
    assert [i["name"] for i in out["ingredients"]] == ["Tequila", "Triple sec", "Lime juice", "Salt"]
    assert [e["name"] for e in out["legend"]] == ["Tequila", "Triple sec", "Lime juice"]
    assert [e["name"] for e in out["unsupported"]] == ["Salt"]
    assert [s["name"] for s in out["slices"]] == ["Tequila", "Triple sec", "Lime juice"]
    assert sum(s["end_angle_deg"] - s["start_angle_deg"] for s in out["slices"]) == pytest.approx(360.0)
    assert [d.id for d in viewed.list()] == ["11007"]


def test_detail_errors(drink_repo, kv):
    uc = GetDrinkDetail(drink_repo, ViewedDrinksStore(kv))
    with pytest.raises(ValueError):
        uc("  ")
    with pytest.raises(LookupError):
        uc("404")


def test_chart_svg(drink_repo):
    svg = GetDrinkChart(drink_repo)("11007")
    assert svg.count("<path ") == 3


def test_search_history_goes_through_debouncer(drink_repo, kv):
    from src.application.debounce import Debouncer

    history = SearchHistoryStore(kv)
    debouncer = Debouncer(10.0, history.add)
    uc = SearchDrinks(drink_repo, history, record_term=debouncer.call)
    for q in ("m", "ma", "mar", "marg"):
        uc(q)
    assert history.list() == []
    debouncer.flush()
    assert history.list() == ["marg"]
