"""
Approximate geocoding against a fixed keyword table.

The gazetteer is an ordered sequence of ``(keyword, coordinate)`` pairs.
A query resolves to the first keyword, in declared order, that occurs
anywhere in the lower-cased query. Zip codes come first, in ascending
order, followed by place names, so ``"Houston, TX 77036"`` resolves to
the 77036 centroid. Among place names, a query naming both a broad area
and a more specific one resolves to whichever comes first in
``GAZETTEER`` (``"downtown houston"`` resolves to ``houston``). Queries
with no known keyword fall back to ``DEFAULT_COORDINATE``.
"""
from __future__ import annotations

import logging

from ..restaurants.models import Coordinate

logger = logging.getLogger(__name__)

# Houston city center
DEFAULT_COORDINATE = Coordinate(latitude=29.7604, longitude=-95.3698)


def _c(latitude: float, longitude: float) -> Coordinate:
    return Coordinate(latitude=latitude, longitude=longitude)


GAZETTEER: tuple[tuple[str, Coordinate], ...] = (
    # Zip codes, ascending
    ("77002", _c(29.7589, -95.3677)),
    ("77004", _c(29.7244, -95.3592)),
    ("77006", _c(29.7425, -95.3889)),
    ("77019", _c(29.7481, -95.4194)),
    ("77027", _c(29.7508, -95.4617)),
    ("77036", _c(29.7119, -95.5136)),
    ("77057", _c(29.7389, -95.4619)),
    ("77063", _c(29.7419, -95.5203)),
    ("77074", _c(29.6964, -95.5294)),
    ("77081", _c(29.7028, -95.4983)),
    ("77098", _c(29.7344, -95.4161)),
    ("77099", _c(29.6619, -95.6075)),
    ("94102", _c(37.7813, -122.4167)),
    ("94103", _c(37.7726, -122.4119)),
    # Houston areas
    ("houston", DEFAULT_COORDINATE),
    ("downtown", _c(29.7589, -95.3677)),
    ("midtown", _c(29.7425, -95.3889)),
    ("uptown", _c(29.7508, -95.4617)),
    ("galleria", _c(29.7389, -95.4619)),
    ("rice village", _c(29.7181, -95.4212)),
    ("montrose", _c(29.7396, -95.3929)),
    ("heights", _c(29.7997, -95.4056)),
    ("memorial", _c(29.7628, -95.5342)),
    ("bellaire", _c(29.7058, -95.4672)),
    ("chinatown", _c(29.7067, -95.5067)),
    ("hillcroft", _c(29.7119, -95.5136)),
    ("westheimer", _c(29.7386, -95.4617)),
    # San Francisco (legacy)
    ("san francisco", _c(37.7749, -122.4194)),
)


def resolve_location(
    query: str,
    gazetteer: tuple[tuple[str, Coordinate], ...] = GAZETTEER,
    default: Coordinate = DEFAULT_COORDINATE,
) -> Coordinate:
    """Return the coordinate of the first gazetteer keyword contained in *query*."""
    query_lower = query.lower()
    for keyword, coordinate in gazetteer:
        if keyword in query_lower:
            return coordinate

    logger.debug("No gazetteer match for %r, using default location", query)
    return default


def known_locations(gazetteer: tuple[tuple[str, Coordinate], ...] = GAZETTEER) -> list[str]:
    return [keyword for keyword, _ in gazetteer]
