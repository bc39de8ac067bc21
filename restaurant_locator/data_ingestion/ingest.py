from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import List

import numpy as np
import pandas as pd

from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig

logger = logging.getLogger(__name__)

RAW_COLUMNS: List[str] = [
    "name",
    "address",
    "phone",
    "operating_hours",
    "cuisine",
    "vegetarian_options",
    "signature_dishes",
    "price_range",
    "rating",
    "website",
    "special_features",
]

CANONICAL_FIELDS: List[str] = [
    "id",
    "name",
    "address",
    "cuisine",
    "rating",
    "priceRange",
    "openingHours",
    "closingHours",
    "operatingHoursDisplay",
    "latitude",
    "longitude",
    "phone",
    "description",
]

_TIME_RANGE = re.compile(r"(\d{1,2}:\d{2}[AP]M)-(\d{1,2}:\d{2}[AP]M)")
_DEFAULT_HOURS = ("11:00", "22:00")


def _map_price_to_tier(price: str | None) -> str:
    """Map a price text such as ``"$15-25"`` to a tier by its low end."""
    digits = re.sub(r"[^0-9-]", "", str(price or "")).split("-")[0]
    try:
        low = int(digits)
    except ValueError:
        return "$$$$"

    if low < 10:
        return "$"
    if low < 20:
        return "$$"
    if low < 30:
        return "$$$"
    return "$$$$"


def _to_24_hour(time_12h: str) -> str:
    clock, meridiem = time_12h[:-2], time_12h[-2:]
    hours, minutes = clock.split(":")
    hour = int(hours) % 12
    if meridiem == "PM":
        hour += 12
    return f"{hour:02d}:{minutes}"


def _parse_operating_hours(hours: str | None) -> tuple[str, str]:
    """Return (opening, closing) from the first time range in *hours*."""
    match = _TIME_RANGE.search(str(hours or ""))
    if not match:
        return _DEFAULT_HOURS
    return _to_24_hour(match.group(1)), _to_24_hour(match.group(2))


def _normalize_rating(rating: float | str | None) -> float | None:
    try:
        value = float(rating)
    except (TypeError, ValueError):
        return None
    if np.isnan(value):
        return None
    return max(0.0, min(5.0, value))


def _build_description(row: pd.Series) -> str:
    return f"{row['special_features']}. Specialties: {row['signature_dishes']}"


def run_ingestion(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> Path:
    """
    Convert the raw restaurant CSV into ``restaurants.json``.

    Rows without a name or a usable rating are dropped. Coordinates are
    spread uniformly around the configured home point using a fixed seed,
    so repeated runs produce the same file.
    """
    config.processed_data_dir.mkdir(parents=True, exist_ok=True)

    df = pd.read_csv(config.raw_csv_path, header=0, names=RAW_COLUMNS, dtype=str)
    df = df.apply(lambda col: col.str.strip())

    df["rating"] = df["rating"].apply(_normalize_rating)
    skipped = df["name"].isna() | df["rating"].isna()
    if skipped.any():
        logger.warning("Skipping %d rows without a name or rating", int(skipped.sum()))
    df = df.loc[~skipped].reset_index(drop=True)

    rng = np.random.default_rng(config.seed)
    half_spread = config.coordinate_spread / 2
    jitter = rng.uniform(-half_spread, half_spread, size=(len(df), 2))

    hours = df["operating_hours"].apply(_parse_operating_hours)

    canonical = pd.DataFrame({
        "id": (df.index + 1).astype(str),
        "name": df["name"],
        "address": df["address"].fillna(""),
        "cuisine": df["cuisine"].fillna(""),
        "rating": df["rating"],
        "priceRange": df["price_range"].apply(_map_price_to_tier),
        "openingHours": hours.map(lambda h: h[0]),
        "closingHours": hours.map(lambda h: h[1]),
        "operatingHoursDisplay": df["operating_hours"].fillna(""),
        "latitude": (config.home_latitude + jitter[:, 0]).round(4),
        "longitude": (config.home_longitude + jitter[:, 1]).round(4),
        "phone": df["phone"].fillna(""),
        "description": df[["special_features", "signature_dishes"]].fillna("").apply(
            _build_description, axis=1
        ),
    })[CANONICAL_FIELDS]

    output_path = config.processed_path
    with output_path.open("w", encoding="utf-8") as fh:
        json.dump({"restaurants": canonical.to_dict(orient="records")}, fh, indent=2)

    logger.info("Wrote %d restaurants to %s", len(canonical), output_path)
    return output_path


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    path = run_ingestion()
    print(f"Ingestion complete. Processed data saved to: {path}")
