# =========================
# FILE: cocktail_browser/src/services/ingredient_normalizer.py
# =========================
from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional

from src.core.config import INGREDIENT_SLOTS
from src.domain.entities import Drink, NormalizedIngredient, RawIngredientSlot
from src.services.unit_converter import parse_measurement_to_ml

log = logging.getLogger("services.ingredient_normalizer")


def _clean(v: Any) -> Optional[str]:
    if v is None:
        return None
    s = str(v).strip()
    return s or None


def iter_slots(drink: Mapping[str, Any]) -> Iterator[RawIngredientSlot]:
    """View over the upstream strIngredientN / strMeasureN fields, N = 1..15."""
    for i in range(1, INGREDIENT_SLOTS + 1):
        yield RawIngredientSlot(
            position=i,
            name=drink.get(f"strIngredient{i}"),
            measure=drink.get(f"strMeasure{i}"),
        )


def normalize_ingredients(drink: Mapping[str, Any] | None) -> List[NormalizedIngredient]:
    """
    Uniform ingredient list in slot order.
    - slots with no ingredient name are skipped
    - every named slot is kept; amount/unit only when the measure converts to a positive ml value
    """
    if not drink:
        return []

    out: List[NormalizedIngredient] = []
    for slot in iter_slots(drink):
        name = _clean(slot.name)
        if not name:
            continue
        measure = _clean(slot.measure)
        ml = parse_measurement_to_ml(measure)
        if ml is not None and ml > 0:
            out.append(NormalizedIngredient(name=name, amount=ml, unit="ml", original_measure=measure))
        else:
            out.append(NormalizedIngredient(name=name, original_measure=measure))
    return out


def supported_ingredients(ingredients: List[NormalizedIngredient]) -> List[NormalizedIngredient]:
    return [i for i in ingredients if i.is_supported]


def unsupported_ingredients(ingredients: List[NormalizedIngredient]) -> List[NormalizedIngredient]:
    return [i for i in ingredients if not i.is_supported]


def to_drink(raw: Mapping[str, Any]) -> Drink:
    return Drink(
        id=str(raw.get("idDrink") or ""),
        name=_clean(raw.get("strDrink")) or "",
        image=_clean(raw.get("strDrinkThumb")),
        instructions=raw.get("strInstructions"),
        ingredients=normalize_ingredients(raw),
        glass=_clean(raw.get("strGlass")),
        category=_clean(raw.get("strCategory")),
        alcoholic=_clean(raw.get("strAlcoholic")),
    )


def has_drinks(response: Dict[str, Any] | None) -> bool:
    """Upstream signals "no results" with drinks=None; an empty list means the same."""
    drinks = (response or {}).get("drinks")
    return isinstance(drinks, list) and len(drinks) > 0


def get_first_drink(response: Dict[str, Any] | None) -> Optional[Dict[str, Any]]:
    if not has_drinks(response):
        return None
    first = response["drinks"][0]  # type: ignore[index]
    return first if isinstance(first, dict) else None
