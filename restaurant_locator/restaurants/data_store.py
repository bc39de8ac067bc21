from __future__ import annotations

import json
import logging
from pathlib import Path

import pandas as pd

from ..config import DEFAULT_SEARCH_CONFIG
from .models import Restaurant

logger = logging.getLogger(__name__)

_restaurants: list[Restaurant] | None = None
_df: pd.DataFrame | None = None


def _load(path: Path) -> list[Restaurant]:
    try:
        with path.open(encoding="utf-8") as fh:
            raw = json.load(fh)
        restaurants = [Restaurant.model_validate(r) for r in raw["restaurants"]]
    except Exception:
        logger.exception("Failed to load restaurant data from %s", path)
        raise

    logger.info("Loaded %d restaurants from %s", len(restaurants), path)
    return restaurants


def get_restaurants() -> list[Restaurant]:
    """Return the in-memory restaurant list, loading it on first call."""
    global _restaurants
    if _restaurants is None:
        _restaurants = _load(DEFAULT_SEARCH_CONFIG.restaurants_path)
    return _restaurants


def get_dataframe() -> pd.DataFrame:
    """Tabular view of the restaurants, used for metadata aggregation."""
    global _df
    if _df is None:
        _df = pd.DataFrame([r.model_dump(by_alias=True) for r in get_restaurants()])
    return _df


def reload(path: Path | None = None) -> list[Restaurant]:
    """Replace the in-memory dataset, e.g. after re-running ingestion."""
    global _restaurants, _df
    _restaurants = _load(path or DEFAULT_SEARCH_CONFIG.restaurants_path)
    _df = None
    return _restaurants
