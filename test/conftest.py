from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from src.domain.repositories import DrinkReadRepo
from src.infrastructure.kv_store import InMemoryKeyValueStore


def make_drink(drink_id: str, name: str, slots: Optional[List[tuple]] = None, **extra: Any) -> Dict[str, Any]:
    d: Dict[str, Any] = {
        "idDrink": drink_id,
        "strDrink": name,
        "strDrinkThumb": f"https://img.example/{drink_id}.jpg",
        "strInstructions": None,
        "strGlass": None,
        "strCategory": None,
        "strAlcoholic": None,
    }
    for i in range(1, 16):
        d[f"strIngredient{i}"] = None
        d[f"strMeasure{i}"] = None
    for i, (ing, measure) in enumerate(slots or [], start=1):
        d[f"strIngredient{i}"] = ing
        d[f"strMeasure{i}"] = measure
    d.update(extra)
    return d


class FakeDrinkRepo(DrinkReadRepo):
    def __init__(self, drinks: List[Dict[str, Any]]) -> None:
        self.drinks = drinks
        self.search_calls: List[str] = []

    def search(self, query: str) -> Dict[str, Any]:
        self.search_calls.append(query)
        q = (query or "").strip().lower()
        hits = [d for d in self.drinks if q and q in d["strDrink"].lower()]
        return {"drinks": hits or None}

    def by_id(self, drink_id: str) -> Dict[str, Any]:
        hits = [d for d in self.drinks if d["idDrink"] == drink_id]
        return {"drinks": hits or None}


@pytest.fixture
def margarita() -> Dict[str, Any]:
    return make_drink(
        "11007",
        "Margarita",
        [("Tequila", "1 1/2 oz"), ("Triple sec", "1/2 oz"), ("Lime juice", "1 oz"), ("Salt", None)],
        strInstructions="Rub the rim of the glass with the lime slice. Shake the other ingredients with ice.\nServe",
        strGlass="Cocktail glass",
        strCategory="Ordinary Drink",
        strAlcoholic="Alcoholic",
    )


@pytest.fixture
def drink_repo(margarita) -> FakeDrinkRepo:
    return FakeDrinkRepo(
        [
            make_drink("1", "Blue Margarita"),
            make_drink("2", "margarita on the rocks"),
            margarita,
            make_drink("3", "Tommy's Margarita"),
        ]
    )


@pytest.fixture
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()
