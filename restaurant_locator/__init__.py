"""
Nearby restaurant locator.

Library entry points for resolving a search origin, ranking restaurants
by distance and formatting the result. The HTTP layer lives in
``restaurant_locator.app``.
"""
from .geo.distance import distance_km, format_distance, haversine
from .geo.gazetteer import DEFAULT_COORDINATE, resolve_location
from .restaurants.filters import apply_filters
from .restaurants.models import Coordinate, RankedRestaurant, Restaurant, SearchCriteria
from .restaurants.ranking import rank_by_distance, search

__all__ = [
    "Coordinate",
    "DEFAULT_COORDINATE",
    "RankedRestaurant",
    "Restaurant",
    "SearchCriteria",
    "apply_filters",
    "distance_km",
    "format_distance",
    "haversine",
    "rank_by_distance",
    "resolve_location",
    "search",
]
