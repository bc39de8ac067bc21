"""
Read-through cache for search responses.

Entries are keyed by a hash of the normalized request and expire after
``SearchConfig.cache_ttl`` seconds. When full, the oldest entry is
evicted first.
"""
from __future__ import annotations

import hashlib
import json
import time
from collections import OrderedDict
from typing import Any

from ..config import DEFAULT_SEARCH_CONFIG

MAX_ENTRIES = 1024

_entries: OrderedDict[str, tuple[float, Any]] = OrderedDict()
_stats: dict[str, int] = {"hits": 0, "misses": 0, "evictions": 0}


def make_key(request_dict: dict) -> str:
    normalized = json.dumps(request_dict, sort_keys=True, default=str)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def cache_get(request_dict: dict) -> Any | None:
    key = make_key(request_dict)
    entry = _entries.get(key)
    if entry is not None:
        expires_at, value = entry
        if time.monotonic() < expires_at:
            _stats["hits"] += 1
            return value
        del _entries[key]
    _stats["misses"] += 1
    return None


def cache_set(
    request_dict: dict,
    value: Any,
    ttl: float = DEFAULT_SEARCH_CONFIG.cache_ttl,
) -> None:
    key = make_key(request_dict)
    _entries[key] = (time.monotonic() + ttl, value)
    _entries.move_to_end(key)
    while len(_entries) > MAX_ENTRIES:
        _entries.popitem(last=False)
        _stats["evictions"] += 1


def get_cache_stats() -> dict:
    lookups = _stats["hits"] + _stats["misses"]
    return {
        "size": len(_entries),
        "hits": _stats["hits"],
        "misses": _stats["misses"],
        "evictions": _stats["evictions"],
        "hit_rate": round(_stats["hits"] / lookups * 100, 1) if lookups else 0.0,
    }


def clear_cache() -> None:
    _entries.clear()
    for name in _stats:
        _stats[name] = 0
