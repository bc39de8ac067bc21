from __future__ import annotations

import json
import logging

from ..config import DEFAULT_SEARCH_CONFIG
from .models import BlogPost

logger = logging.getLogger(__name__)

_blogs: dict[str, BlogPost] | None = None


def _load() -> dict[str, BlogPost]:
    path = DEFAULT_SEARCH_CONFIG.blogs_path
    try:
        with path.open(encoding="utf-8") as fh:
            raw = json.load(fh)
        posts = [BlogPost.model_validate(b) for b in raw["blogs"]]
    except Exception:
        logger.exception("Failed to load blog posts from %s", path)
        raise
    return {post.id: post for post in posts}


def get_blogs() -> list[BlogPost]:
    global _blogs
    if _blogs is None:
        _blogs = _load()
    return list(_blogs.values())


def get_blog(blog_id: str) -> BlogPost | None:
    """Return the post with *blog_id*, or ``None`` if there is none."""
    get_blogs()
    return _blogs.get(blog_id)
