from __future__ import annotations

from collections.abc import Sequence

from .models import Restaurant, SearchCriteria


def apply_filters(
    candidates: Sequence[Restaurant],
    criteria: SearchCriteria | None = None,
) -> list[Restaurant]:
    """Keep candidates matching every criterion that is set.

    Cuisine matches case-insensitively, rating is a lower bound and price
    tier must match exactly. Unset criteria impose no constraint, and the
    input order is preserved.
    """
    filtered = list(candidates)
    if criteria is None:
        return filtered

    if criteria.cuisine:
        cuisine_lower = criteria.cuisine.lower()
        filtered = [r for r in filtered if r.cuisine.lower() == cuisine_lower]

    if criteria.min_rating:
        filtered = [r for r in filtered if r.rating >= criteria.min_rating]

    if criteria.price_range:
        filtered = [r for r in filtered if r.price_range == criteria.price_range]

    return filtered
