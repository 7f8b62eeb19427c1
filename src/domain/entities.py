# cocktail_browser/src/domain/entities.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class RawIngredientSlot:
    position: int  # 1..15
    name: Optional[str]
    measure: Optional[str]


@dataclass(frozen=True)
class NormalizedIngredient:
    name: str
    amount: float | None = None  # milliliters
    unit: str | None = None  # "ml" when amount is set
    original_measure: str | None = None

    @property
    def is_supported(self) -> bool:
        return self.amount is not None and self.amount > 0

    @property
    def label(self) -> str:
        if self.original_measure:
            return f"{self.name} ({self.original_measure})"
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "original_measure": self.original_measure,
        }


@dataclass(frozen=True)
class PieSlice:
    name: str
    color: str
    start_angle_deg: float
    end_angle_deg: float
    svg_path_data: str

    @property
    def sweep_deg(self) -> float:
        return self.end_angle_deg - self.start_angle_deg

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class HighlightSegment:
    text: str
    is_match: bool


@dataclass(frozen=True)
class DrinkListItem:
    id: str
    name: str
    image: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "image": self.image}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "DrinkListItem":
        return cls(id=str(d["id"]), name=str(d["name"]), image=d.get("image"))


@dataclass(frozen=True)
class Drink:
    id: str
    name: str
    image: str | None
    instructions: str | None
    ingredients: List[NormalizedIngredient]
    glass: str | None
    category: str | None
    alcoholic: str | None

    def to_list_item(self) -> DrinkListItem:
        return DrinkListItem(id=self.id, name=self.name, image=self.image)
