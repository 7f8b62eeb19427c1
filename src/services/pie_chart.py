# =========================
# FILE: cocktail_browser/src/services/pie_chart.py
# =========================
from __future__ import annotations

import math
from dataclasses import dataclass
from html import escape
from typing import Dict, List, Optional, Sequence

from src.core.config import ChartGeometry
from src.core.theme import SLICE_STROKE, UNSUPPORTED_COLOR
from src.domain.entities import NormalizedIngredient, PieSlice
from src.services.color_assigner import color_for, color_map_for
from src.services.ingredient_normalizer import supported_ingredients, unsupported_ingredients


@dataclass(frozen=True)
class LegendEntry:
    name: str
    label: str
    color: str


def _point(cx: float, cy: float, r: float, angle_deg: float) -> tuple[float, float]:
    rad = math.radians(angle_deg)
    return cx + r * math.cos(rad), cy + r * math.sin(rad)


def _sector_path(cx: float, cy: float, r: float, start_deg: float, end_deg: float) -> str:
    x1, y1 = _point(cx, cy, r, start_deg)
    x2, y2 = _point(cx, cy, r, end_deg)
    large_arc = 1 if (end_deg - start_deg) > 180 else 0
    return " ".join(
        [
            f"M {cx:g} {cy:g}",
            f"L {x1:.4f} {y1:.4f}",
            f"A {r:g} {r:g} 0 {large_arc} 1 {x2:.4f} {y2:.4f}",
            "Z",
        ]
    )


def build_slices(
    ingredients: Sequence[NormalizedIngredient],
    colors: Optional[Dict[str, str]] = None,
    geometry: ChartGeometry = ChartGeometry(),
) -> List[PieSlice]:
    """
    One circular sector per supported ingredient, clockwise from 12 o'clock,
    in input order. Angles are cumulative; the last slice is pinned to close the circle.
    """
    items = supported_ingredients(list(ingredients))
    total = sum(i.amount or 0.0 for i in items)
    if not items or total <= 0:
        return []

    colors = colors if colors is not None else color_map_for(i.name for i in items)
    start_deg = geometry.START_ANGLE_DEG
    full_end = start_deg + 360.0

    slices: List[PieSlice] = []
    current = start_deg
    for idx, ing in enumerate(items):
        sweep = (ing.amount or 0.0) / total * 360.0
        end = full_end if idx == len(items) - 1 else current + sweep
        if len(items) == 1:
            # a single 360° arc has coincident endpoints and would render empty
            path = _full_circle_path(geometry)
        else:
            path = _sector_path(geometry.CENTER_X, geometry.CENTER_Y, geometry.RADIUS, current, end)
        slices.append(
            PieSlice(
                name=ing.name,
                color=colors.get(ing.name) or color_for(ing.name),
                start_angle_deg=current,
                end_angle_deg=end,
                svg_path_data=path,
            )
        )
        current = end
    return slices


def _full_circle_path(g: ChartGeometry) -> str:
    top_y = g.CENTER_Y - g.RADIUS
    bottom_y = g.CENTER_Y + g.RADIUS
    return (
        f"M {g.CENTER_X:g} {top_y:g} "
        f"A {g.RADIUS:g} {g.RADIUS:g} 0 1 1 {g.CENTER_X:g} {bottom_y:g} "
        f"A {g.RADIUS:g} {g.RADIUS:g} 0 1 1 {g.CENTER_X:g} {top_y:g} Z"
    )


def build_legend(ingredients: Sequence[NormalizedIngredient]) -> List[LegendEntry]:
    items = supported_ingredients(list(ingredients))
    colors = color_map_for(i.name for i in items)
    return [LegendEntry(name=i.name, label=i.label, color=colors[i.name]) for i in items]


def build_unsupported(ingredients: Sequence[NormalizedIngredient]) -> List[LegendEntry]:
    return [
        LegendEntry(name=i.name, label=i.label, color=UNSUPPORTED_COLOR)
        for i in unsupported_ingredients(list(ingredients))
    ]


def render_svg(slices: Sequence[PieSlice], geometry: ChartGeometry = ChartGeometry()) -> str:
    size = f"{geometry.SIZE:g}"
    paths = "".join(
        f'<path d="{escape(s.svg_path_data)}" fill="{escape(s.color)}" stroke="{SLICE_STROKE}" stroke-width="1">'
        f"<title>{escape(s.name)}</title></path>"
        for s in slices
    )
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" '
        f'viewBox="0 0 {size} {size}">{paths}</svg>'
    )
