# =========================
# FILE: cocktail_browser/src/services/unit_converter.py
# =========================
from __future__ import annotations

import logging
import math
import re
from typing import Dict, Optional

log = logging.getLogger("services.unit_converter")

# Conversion factors to milliliters. Plurals are accepted by the regex (`s?`).
_UNITS_TO_ML: Dict[str, float] = {
    "oz": 29.5735,
    "fl oz": 29.5735,
    "fluid ounce": 29.5735,
    "cup": 236.588,
    "tsp": 4.92892,
    "teaspoon": 4.92892,
    "tbsp": 14.7868,
    "tablespoon": 14.7868,
    "cl": 10.0,
    "centiliter": 10.0,
    "ml": 1.0,
    "milliliter": 1.0,
}

# longest first so "fl oz" wins over "oz"
_UNIT_ALT = "|".join(
    re.escape(u).replace(r"\ ", r"\s+") for u in sorted(_UNITS_TO_ML, key=len, reverse=True)
)

_NUM = r"\d+(?:\.\d+)?"
_RE_MEASUREMENT = re.compile(
    rf"^(?:(?P<whole>\d+)\s+(?=\d+\s*/))?"
    rf"(?P<num>{_NUM})(?:\s*/\s*(?P<den>{_NUM}))?"
    rf"\s*(?P<unit>{_UNIT_ALT})s?$",
    re.IGNORECASE,
)


def _unit_key(unit: str) -> Optional[str]:
    u = " ".join((unit or "").lower().split())
    if u in _UNITS_TO_ML:
        return u
    if u.endswith("s") and u[:-1] in _UNITS_TO_ML:
        return u[:-1]
    return None


def is_supported_unit(unit: str) -> bool:
    return _unit_key(unit) is not None


def parse_quantity(whole: str | None, num: str, den: str | None) -> Optional[float]:
    """Integer, decimal, `N/D`, or `W N/D`. None on zero denominator."""
    try:
        value = float(num)
        if den is not None:
            d = float(den)
            if d == 0:
                return None
            value = value / d
        if whole is not None:
            value += float(whole)
    except ValueError:
        return None
    return value


def parse_measurement_to_ml(measure: str | None) -> Optional[float]:
    """
    Parse a free-form recipe measurement ("1 2/3 oz", "3/4 cup", "2.5 tsp") into milliliters.

    Returns None for anything outside the `<quantity> <unit>[s]` grammar, unknown units,
    zero denominators and non-positive results. Never raises.
    """
    text = (measure or "").strip()
    if not text:
        return None

    m = _RE_MEASUREMENT.match(text)
    if not m:
        return None

    qty = parse_quantity(m.group("whole"), m.group("num"), m.group("den"))
    key = _unit_key(m.group("unit"))
    if qty is None or key is None:
        log.debug("Unparseable measurement: %r", text)
        return None

    ml = qty * _UNITS_TO_ML[key]
    # huge digit runs overflow to inf
    if not math.isfinite(ml) or ml <= 0:
        return None
    return ml
