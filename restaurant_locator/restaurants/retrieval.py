from __future__ import annotations

import logging
import time

from ..analytics.store import record_event
from ..config import DEFAULT_SEARCH_CONFIG, SearchConfig
from ..geo.distance import format_distance
from ..geo.gazetteer import DEFAULT_COORDINATE, resolve_location
from .cache import cache_get, cache_set
from .data_store import get_restaurants
from .filters import apply_filters
from .models import Coordinate, RestaurantSearchRequest, RestaurantSearchResponse
from .ranking import rank_by_distance

logger = logging.getLogger(__name__)


def resolve_origin(request: RestaurantSearchRequest) -> tuple[Coordinate, str]:
    """Pick the search origin and report where it came from.

    Explicit coordinates win over an address; with neither the default
    location is used. Callers must reject a half-given coordinate pair.
    """
    if request.latitude is not None and request.longitude is not None:
        return Coordinate(latitude=request.latitude, longitude=request.longitude), "coordinates"
    if request.address and request.address.strip():
        return resolve_location(request.address), "address"
    return DEFAULT_COORDINATE, "default"


def _record_search(
    request: RestaurantSearchRequest,
    response: RestaurantSearchResponse,
    origin_source: str,
    start_time: float,
    cache_hit: bool,
) -> None:
    filters = request.filters
    record_event("search", {
        "address": request.address,
        "origin_source": origin_source,
        "latitude": response.origin.latitude,
        "longitude": response.origin.longitude,
        "cuisine": filters.cuisine if filters else None,
        "min_rating": filters.min_rating if filters else None,
        "price_range": filters.price_range if filters else None,
        "total_candidates": response.total_candidates,
        "results_returned": len(response.restaurants),
        "response_time_ms": round((time.time() - start_time) * 1000, 3),
        "cache_hit": cache_hit,
    })


def find_restaurants(
    request: RestaurantSearchRequest,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> RestaurantSearchResponse:
    start_time = time.time()
    limit = request.limit or config.results_limit
    origin, origin_source = resolve_origin(request)

    # --- Cache check ---
    request_dict = request.model_dump()
    request_dict["limit"] = limit
    cached = cache_get(request_dict)
    if cached is not None:
        logger.debug("Cache hit for %s", request_dict)
        _record_search(request, cached, origin_source, start_time, cache_hit=True)
        return cached.model_copy(deep=True)

    # --- Filter, then rank the survivors ---
    candidates = apply_filters(get_restaurants(), request.filters)
    ranked = rank_by_distance(origin, candidates, limit=limit)

    response = RestaurantSearchResponse(
        restaurants=[
            r.model_copy(update={"distance_display": format_distance(r.distance)})
            for r in ranked
        ],
        origin=origin,
        total_candidates=len(candidates),
    )
    cache_set(request_dict, response.model_copy(deep=True), ttl=config.cache_ttl)

    logger.info(
        "Search from (%.4f, %.4f) [%s]: %d candidates, %d returned",
        origin.latitude,
        origin.longitude,
        origin_source,
        len(candidates),
        len(response.restaurants),
    )
    _record_search(request, response, origin_source, start_time, cache_hit=False)
    return response
