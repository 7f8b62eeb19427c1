# =========================
# FILE: cocktail_browser/src/api/schemas.py
# =========================
from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field


class HighlightSegmentOut(BaseModel):
    text: str
    is_match: bool


class DrinkListItemOut(BaseModel):
    id: str
    name: str
    image: Optional[str] = None


class RankedDrinkOut(DrinkListItemOut):
    highlight: List[HighlightSegmentOut] = Field(default_factory=list)


class SearchResponse(BaseModel):
    query: str
    effective_query: str
    drinks: List[RankedDrinkOut]


class IngredientOut(BaseModel):
    name: str
    amount: Optional[float] = Field(default=None, gt=0, description="Milliliters")
    unit: Optional[str] = None
    original_measure: Optional[str] = None


class LegendEntryOut(BaseModel):
    name: str
    label: str
    color: str


class PieSliceOut(BaseModel):
    name: str
    color: str
    start_angle_deg: float
    end_angle_deg: float
    svg_path_data: str


class DrinkDetailResponse(BaseModel):
    id: str
    name: str
    image: Optional[str] = None
    glass: Optional[str] = None
    category: Optional[str] = None
    alcoholic: Optional[str] = None
    instructions: Optional[str] = None
    steps: List[str] = Field(default_factory=list)
    ingredients: List[IngredientOut] = Field(default_factory=list)
    legend: List[LegendEntryOut] = Field(default_factory=list)
    unsupported: List[LegendEntryOut] = Field(default_factory=list)
    slices: List[PieSliceOut] = Field(default_factory=list)


class SearchHistoryResponse(BaseModel):
    terms: List[str]


class ViewedDrinksResponse(BaseModel):
    drinks: List[DrinkListItemOut]
