from __future__ import annotations

from fastapi import FastAPI, HTTPException, Query

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .blogs.models import BlogListResponse, BlogResponse
from .blogs.store import get_blog, get_blogs
from .config import DEFAULT_SEARCH_CONFIG, configure_logging
from .geo.gazetteer import known_locations
from .restaurants.cache import get_cache_stats
from .restaurants.data_store import get_dataframe
from .restaurants.models import (
    PRICE_TIERS,
    RestaurantSearchRequest,
    RestaurantSearchResponse,
)
from .restaurants.retrieval import find_restaurants

configure_logging()

app = FastAPI(title="Restaurant Locator API", version="1.0.0")


def _require_coordinate_pair(latitude: float | None, longitude: float | None) -> None:
    if (latitude is None) != (longitude is None):
        raise HTTPException(
            status_code=400,
            detail="Latitude and longitude must be provided together",
        )


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    df = get_dataframe()
    cuisines = sorted(df["cuisine"].dropna().unique().tolist())
    present = set(df["priceRange"].dropna())
    return {
        "cuisines": cuisines,
        "price_ranges": [p for p in PRICE_TIERS if p in present],
        "locations": known_locations(),
        "total_restaurants": len(df),
    }


# ── Restaurant search ────────────────────────────────────────────────────


@app.get(
    "/restaurants",
    response_model=RestaurantSearchResponse,
    response_model_by_alias=True,
)
def restaurants_nearby(
    address: str | None = Query(default=None, description="Area, neighborhood or zip code"),
    lat: float | None = Query(default=None, ge=-90.0, le=90.0),
    lng: float | None = Query(default=None, ge=-180.0, le=180.0),
    limit: int | None = Query(default=None, ge=1, le=DEFAULT_SEARCH_CONFIG.max_limit),
) -> RestaurantSearchResponse:
    _require_coordinate_pair(lat, lng)
    body = RestaurantSearchRequest(latitude=lat, longitude=lng, address=address, limit=limit)
    return find_restaurants(body)


@app.post(
    "/restaurants",
    response_model=RestaurantSearchResponse,
    response_model_by_alias=True,
)
def restaurants_filtered(body: RestaurantSearchRequest) -> RestaurantSearchResponse:
    _require_coordinate_pair(body.latitude, body.longitude)
    return find_restaurants(body)


# ── Blogs ────────────────────────────────────────────────────────────────


@app.get("/blogs", response_model=BlogListResponse, response_model_by_alias=True)
def blogs() -> BlogListResponse:
    return BlogListResponse(blogs=get_blogs())


@app.get("/blogs/{blog_id}", response_model=BlogResponse, response_model_by_alias=True)
def blog_detail(blog_id: str) -> BlogResponse:
    blog = get_blog(blog_id)
    if blog is None:
        raise HTTPException(status_code=404, detail="Blog not found")
    return BlogResponse(blog=blog)


# ── Operational ──────────────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()
