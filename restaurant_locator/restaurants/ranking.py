from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from ..geo.distance import distances_km
from .filters import apply_filters
from .models import Coordinate, RankedRestaurant, Restaurant, SearchCriteria

RESULTS_LIMIT = 5


def rank_by_distance(
    origin: Coordinate,
    candidates: Sequence[Restaurant],
    criteria: SearchCriteria | None = None,
    limit: int = RESULTS_LIMIT,
) -> list[RankedRestaurant]:
    """Return the *limit* filtered candidates closest to *origin*.

    Equal distances keep their filtered order. Candidates whose distance
    is not finite are kept and sort after every finite distance.
    """
    if limit <= 0:
        return []

    filtered = apply_filters(candidates, criteria)
    if not filtered:
        return []

    distances = distances_km(
        origin,
        [r.latitude for r in filtered],
        [r.longitude for r in filtered],
    )
    order = np.argsort(distances, kind="stable")[:limit]

    return [
        # A stored "distance" field is replaced, not duplicated
        RankedRestaurant(**{**filtered[i].model_dump(), "distance": float(distances[i])})
        for i in order
    ]


def search(
    origin_lat: float,
    origin_lng: float,
    candidates: Sequence[Restaurant],
    criteria: SearchCriteria | None = None,
    limit: int = RESULTS_LIMIT,
) -> list[RankedRestaurant]:
    origin = Coordinate(latitude=origin_lat, longitude=origin_lng)
    return rank_by_distance(origin, candidates, criteria, limit)
