# =========================
# FILE: cocktail_browser/src/services/search_ranker.py
# =========================
from __future__ import annotations

import unicodedata
from typing import List, Sequence

from src.domain.entities import DrinkListItem, HighlightSegment


def _fold(s: str) -> str:
    return unicodedata.normalize("NFKD", s or "").casefold()


def _collation_key(name: str) -> str:
    # accent/case-insensitive; names equal under it keep upstream order
    return "".join(ch for ch in _fold(name) if not unicodedata.combining(ch))


def rank(items: Sequence[DrinkListItem], query: str) -> List[DrinkListItem]:
    """
    Prefix matches first, then case-insensitive alphabetical.
    sorted() is stable, so equal keys keep upstream order.
    """
    q = (query or "").strip().lower()

    def key(item: DrinkListItem):
        starts = bool(q) and (item.name or "").lower().startswith(q)
        return (0 if starts else 1, _collation_key(item.name or ""))

    return sorted(items, key=key)


def highlight(text: str, query: str) -> List[HighlightSegment]:
    """Non-overlapping, left-to-right, case-insensitive matches; original casing kept."""
    q = (query or "").strip().lower()
    if not q or not text:
        return [HighlightSegment(text=text or "", is_match=False)]

    hay = text.lower()
    # lower() can change length for a few code points; fall back to no highlight
    if len(hay) != len(text):
        return [HighlightSegment(text=text, is_match=False)]

    segments: List[HighlightSegment] = []
    last = 0
    idx = hay.find(q, last)
    while idx != -1:
        if idx > last:
            segments.append(HighlightSegment(text=text[last:idx], is_match=False))
        segments.append(HighlightSegment(text=text[idx: idx + len(q)], is_match=True))
        last = idx + len(q)
        idx = hay.find(q, last)

    if last < len(text):
        segments.append(HighlightSegment(text=text[last:], is_match=False))

    if not segments:
        return [HighlightSegment(text=text, is_match=False)]
    return segments
