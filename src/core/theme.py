# cocktail_browser/src/core/theme.py
from __future__ import annotations

from typing import List

# Pastel palette for ingredient legend + pie chart. Order is part of the
# color contract: reordering changes every ingredient's color.
PASTEL: List[str] = [
    "#ffb3ba",  # pink
    "#ffdfba",  # peach
    "#ffffba",  # yellow
    "#baffc9",  # green
    "#bae1ff",  # blue
    "#e0bbff",  # purple
    "#ffcccb",  # light red
    "#ffd9b3",  # light orange
    "#fff4a3",  # light yellow
    "#c7f5d9",  # mint
    "#b3e5fc",  # sky blue
    "#d1c4e9",  # light purple
    "#f8bbd0",  # light pink
    "#ffe0b2",  # amber
    "#fff9c4",  # lemon
    "#c5e1a5",  # lime
    "#b2ebf2",  # cyan
    "#ce93d8",  # violet
    "#f48fb1",  # pink
    "#90caf9",  # indigo
    "#a5d6a7",  # green
    "#ffccbc",  # deep orange
    "#d7ccc8",  # brown
    "#b0bec5",  # blue grey
    "#e1bee7",  # purple
]

UNSUPPORTED_COLOR = "#cccccc"
SLICE_STROKE = "#fff"
