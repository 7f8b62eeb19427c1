# cocktail_browser/src/services/color_assigner.py
from __future__ import annotations

from typing import Dict, Iterable, List

from src.core.theme import PASTEL


def _hash32(s: str) -> int:
    # hash = hash*31 + code, wrapped to signed 32 bits; codes are UTF-16 units
    raw = s.encode("utf-16-le")
    h = 0
    for i in range(0, len(raw), 2):
        code = raw[i] | (raw[i + 1] << 8)
        h = (h * 31 + code) & 0xFFFFFFFF
    if h & 0x80000000:
        h -= 0x100000000
    return h


def color_for(name: str | None, palette: List[str] = PASTEL) -> str:
    key = (name or "").strip().lower()
    if not key:
        return palette[0]
    return palette[abs(_hash32(key)) % len(palette)]


def color_map_for(names: Iterable[str], palette: List[str] = PASTEL) -> Dict[str, str]:
    """First occurrence wins; keys keep the caller's casing."""
    out: Dict[str, str] = {}
    for n in names:
        if n not in out:
            out[n] = color_for(n, palette)
    return out
