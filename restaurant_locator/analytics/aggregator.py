from __future__ import annotations

from collections import Counter
from typing import Any


def _rate(count: int, total: int) -> float:
    return round(count / total * 100, 1) if total else 0.0


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == "search"]
    total = len(searches)

    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Free-text queries only; coordinate searches have no address
    address_counter: Counter[str] = Counter(
        s["address"].strip().lower() for s in searches if s.get("address")
    )
    top_locations = [{"name": n, "count": c} for n, c in address_counter.most_common(10)]

    cuisine_counter: Counter[str] = Counter(
        s["cuisine"].lower() for s in searches if s.get("cuisine")
    )
    top_cuisines = [{"name": n, "count": c} for n, c in cuisine_counter.most_common(10)]

    price_usage = dict(Counter(s["price_range"] for s in searches if s.get("price_range")))

    filter_usage = {
        "cuisine": _rate(sum(1 for s in searches if s.get("cuisine")), total),
        "rating": _rate(sum(1 for s in searches if s.get("min_rating")), total),
        "price_range": _rate(sum(1 for s in searches if s.get("price_range")), total),
    }

    origin_sources = Counter(s.get("origin_source", "default") for s in searches)
    empty_results = sum(1 for s in searches if s.get("results_returned") == 0)

    cache_hits = sum(1 for s in searches if s.get("cache_hit"))

    return {
        "total_searches": total,
        "avg_response_time_ms": avg_time,
        "top_locations": top_locations,
        "top_cuisines": top_cuisines,
        "price_range_usage": price_usage,
        "filter_usage": filter_usage,
        "origin_sources": dict(origin_sources),
        "empty_result_rate": _rate(empty_results, total),
        "cache_stats": {
            "hits": cache_hits,
            "misses": total - cache_hits,
            "hit_rate": _rate(cache_hits, total),
        },
    }
