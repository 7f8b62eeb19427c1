# =========================
# FILE: cocktail_browser/src/application/usecases.py
# =========================
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List, Optional

from src.application.recency_store import SearchHistoryStore, ViewedDrinksStore
from src.core.config import DEFAULT_SEARCH_TERM
from src.domain.entities import DrinkListItem
from src.domain.repositories import DrinkReadRepo
from src.services.ingredient_normalizer import get_first_drink, has_drinks, to_drink
from src.services.instruction_segmenter import segment
from src.services.pie_chart import build_legend, build_slices, build_unsupported, render_svg
from src.services.search_ranker import highlight, rank

log = logging.getLogger("app.usecases")


def _list_item(raw: Dict[str, Any]) -> DrinkListItem | None:
    drink_id = str(raw.get("idDrink") or "").strip()
    name = str(raw.get("strDrink") or "").strip()
    if not drink_id or not name:
        return None
    return DrinkListItem(id=drink_id, name=name, image=raw.get("strDrinkThumb"))


@dataclass(frozen=True)
class SearchDrinks:
    drink_repo: DrinkReadRepo
    history: SearchHistoryStore
    default_term: str = DEFAULT_SEARCH_TERM
    # e.g. Debouncer.call, so search-as-you-type only records the settled term
    record_term: Optional[Callable[[str], None]] = None

    def __call__(self, query: str, record_history: bool = True) -> Dict[str, Any]:
        typed = (query or "").strip()
        effective = typed or self.default_term

        resp = self.drink_repo.search(effective)
        items: List[DrinkListItem] = []
        if has_drinks(resp):
            for raw in resp["drinks"]:
                if isinstance(raw, dict):
                    item = _list_item(raw)
                    if item is not None:
                        items.append(item)

        ranked = rank(items, effective)
        if typed and record_history:
            (self.record_term or self.history.add)(typed)

        log.info("search %r -> %d drinks", effective, len(ranked))
        return {
            "query": typed,
            "effective_query": effective,
            "drinks": [
                {
                    **d.to_dict(),
                    "highlight": [{"text": s.text, "is_match": s.is_match} for s in highlight(d.name, typed)],
                }
                for d in ranked
            ],
        }


@dataclass(frozen=True)
class GetDrinkDetail:
    drink_repo: DrinkReadRepo
    viewed: ViewedDrinksStore

    def __call__(self, drink_id: str, record_view: bool = True) -> Dict[str, Any]:
        key = (drink_id or "").strip()
        if not key:
            raise ValueError("drink_id is required")

        raw = get_first_drink(self.drink_repo.by_id(key))
        if raw is None:
            raise LookupError(f"Drink not found: {drink_id}")

        drink = to_drink(raw)
        if record_view:
            self.viewed.add(drink.to_list_item())

        return {
            "id": drink.id,
            "name": drink.name,
            "image": drink.image,
            "glass": drink.glass,
            "category": drink.category,
            "alcoholic": drink.alcoholic,
            "instructions": drink.instructions,
            "steps": segment(drink.instructions),
            "ingredients": [i.to_dict() for i in drink.ingredients],
            "legend": [asdict(e) for e in build_legend(drink.ingredients)],
            "unsupported": [asdict(e) for e in build_unsupported(drink.ingredients)],
            "slices": [s.to_dict() for s in build_slices(drink.ingredients)],
        }


@dataclass(frozen=True)
class GetDrinkChart:
    drink_repo: DrinkReadRepo

    def __call__(self, drink_id: str) -> str:
        key = (drink_id or "").strip()
        if not key:
            raise ValueError("drink_id is required")
        raw = get_first_drink(self.drink_repo.by_id(key))
        if raw is None:
            raise LookupError(f"Drink not found: {drink_id}")
        return render_svg(build_slices(to_drink(raw).ingredients))
