# cocktail_browser/src/core/config.py
from __future__ import annotations
from dataclasses import dataclass
import os
import logging

# Upstream recipe API
COCKTAILDB_BASE_URL: str = os.getenv("COCKTAILDB_BASE_URL", "https://www.thecocktaildb.com/api/json/v1/1")
HTTP_TIMEOUT_S: float = float(os.getenv("HTTP_TIMEOUT_S", "10"))
SEARCH_CACHE_TTL_S: int = int(os.getenv("SEARCH_CACHE_TTL_S", "600"))
DETAIL_CACHE_TTL_S: int = int(os.getenv("DETAIL_CACHE_TTL_S", "1800"))

# Search behaviour
DEFAULT_SEARCH_TERM: str = os.getenv("DEFAULT_SEARCH_TERM", "margarita")
SEARCH_DEBOUNCE_MS: int = int(os.getenv("SEARCH_DEBOUNCE_MS", "500"))

# Recency stores
SEARCH_HISTORY_KEY = "drink-search-history"
VIEWED_DRINKS_KEY = "drink-viewed-history"
MAX_SEARCH_HISTORY: int = int(os.getenv("MAX_SEARCH_HISTORY", "10"))
MAX_VIEWED_DRINKS: int = int(os.getenv("MAX_VIEWED_DRINKS", "5"))

# Key-value store backend: memory | file | mongo
KV_BACKEND: str = os.getenv("KV_BACKEND", "file").lower()
MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGO_DB: str = os.getenv("MONGO_DB", "cocktail_browser")
MONGO_KV_COL: str = os.getenv("MONGO_KV_COL", "kv_store")

# Drinks carry a fixed number of ingredient/measure slots
INGREDIENT_SLOTS = 15


@dataclass(frozen=True)
class Paths:
    ROOT: str = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
    DATA_DIR: str = os.path.join(ROOT, "data")
    KV_FILE: str = os.getenv("KV_FILE_PATH", os.path.join(ROOT, "data", "kv_store.json"))


@dataclass(frozen=True)
class ChartGeometry:
    SIZE: float = 120.0
    CENTER_X: float = 60.0
    CENTER_Y: float = 60.0
    RADIUS: float = 60.0
    START_ANGLE_DEG: float = -90.0


# Global logging (module-level loggers inherit this)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
LOGGER = logging.getLogger("cocktail_browser")
