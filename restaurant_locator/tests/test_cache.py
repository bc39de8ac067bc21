from __future__ import annotations

from fastapi.testclient import TestClient

from restaurant_locator.app import app
from restaurant_locator.restaurants import cache
from restaurant_locator.restaurants.cache import cache_get, cache_set, clear_cache, get_cache_stats
from restaurant_locator.restaurants.models import RestaurantSearchRequest
from restaurant_locator.restaurants.retrieval import find_restaurants

client = TestClient(app)


def test_cache_miss_then_hit():
    clear_cache()
    resp1 = client.get("/restaurants", params={"address": "Montrose", "limit": 3})
    assert resp1.status_code == 200
    assert get_cache_stats()["misses"] == 1

    resp2 = client.get("/restaurants", params={"address": "Montrose", "limit": 3})
    assert resp2.status_code == 200
    assert get_cache_stats()["hits"] == 1
    assert resp1.json() == resp2.json()


def test_cache_different_queries_miss():
    clear_cache()
    client.get("/restaurants", params={"address": "Heights"})
    client.get("/restaurants", params={"address": "Bellaire"})
    stats = get_cache_stats()
    assert stats["misses"] == 2
    assert stats["hits"] == 0
    assert stats["size"] == 2


def test_default_limit_and_explicit_limit_share_entry():
    clear_cache()
    client.get("/restaurants", params={"address": "Uptown"})
    client.get("/restaurants", params={"address": "Uptown", "limit": 5})
    assert get_cache_stats()["hits"] == 1


def test_cache_stats_endpoint():
    clear_cache()
    client.post("/restaurants", json={"address": "Memorial", "filters": {"priceRange": "$$"}})
    client.post("/restaurants", json={"address": "Memorial", "filters": {"priceRange": "$$"}})
    resp = client.get("/cache/stats")
    assert resp.status_code == 200
    body = resp.json()
    assert body["hits"] == 1
    assert body["hit_rate"] == 50.0


def test_expired_entry_is_a_miss():
    clear_cache()
    cache_set({"q": "expired"}, "value", ttl=0)
    assert cache_get({"q": "expired"}) is None
    assert get_cache_stats()["size"] == 0


def test_oldest_entry_evicted_when_full(monkeypatch):
    clear_cache()
    monkeypatch.setattr(cache, "MAX_ENTRIES", 2)
    cache_set({"q": 1}, "one")
    cache_set({"q": 2}, "two")
    cache_set({"q": 3}, "three")

    assert cache_get({"q": 1}) is None
    assert cache_get({"q": 3}) == "three"
    assert get_cache_stats()["evictions"] == 1


def test_cached_response_is_not_shared_between_callers():
    clear_cache()
    request = RestaurantSearchRequest(address="Bellaire", limit=2)

    first = find_restaurants(request)
    first.restaurants.clear()
    second = find_restaurants(request)
    third = find_restaurants(request)

    assert get_cache_stats()["hits"] == 2
    assert len(second.restaurants) == 2
    assert second is not third
    second.restaurants.clear()
    assert len(third.restaurants) == 2
