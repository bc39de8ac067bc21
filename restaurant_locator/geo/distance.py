from __future__ import annotations

import math

import numpy as np

from ..restaurants.models import Coordinate

EARTH_RADIUS_KM = 6371.0


def _haversine(lat1, lon1, lat2, lon2):
    """Haversine distance in km; works on scalars and numpy arrays alike."""
    lat1_rad = np.radians(lat1)
    lat2_rad = np.radians(lat2)
    d_lat = np.radians(np.subtract(lat2, lat1))
    d_lon = np.radians(np.subtract(lon2, lon1))

    h = np.sin(d_lat / 2) ** 2 + np.cos(lat1_rad) * np.cos(lat2_rad) * np.sin(d_lon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * np.arctan2(np.sqrt(h), np.sqrt(1 - h))


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points in kilometers.

    Coordinates are not range-checked. Non-finite input yields a
    non-finite result instead of an error.
    """
    with np.errstate(invalid="ignore"):
        return float(_haversine(lat1, lon1, lat2, lon2))


def haversine(a: Coordinate, b: Coordinate) -> float:
    return distance_km(a.latitude, a.longitude, b.latitude, b.longitude)


def distances_km(origin: Coordinate, latitudes, longitudes) -> np.ndarray:
    """Distance from *origin* to every (lat, lon) pair, as a 1-D array."""
    lats = np.asarray(latitudes, dtype=float)
    lons = np.asarray(longitudes, dtype=float)
    with np.errstate(invalid="ignore"):
        return _haversine(origin.latitude, origin.longitude, lats, lons)


def format_distance(km: float) -> str:
    """Render ``0.5`` as ``"500m"`` and ``5.5`` as ``"5.5 km"``."""
    if not math.isfinite(km):
        return f"{km:.1f} km"
    # Halves round up, not to even
    if km < 1:
        return f"{math.floor(km * 1000 + 0.5)}m"
    return f"{math.floor(km * 10 + 0.5) / 10:.1f} km"
