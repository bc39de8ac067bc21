from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"


@dataclass(frozen=True)
class SearchConfig:
    results_limit: int = int(os.getenv("RESULTS_LIMIT", "5"))
    max_limit: int = 50
    cache_ttl: int = int(os.getenv("SEARCH_CACHE_TTL", "300"))
    data_dir: Path = Path(os.getenv("RESTAURANT_DATA_DIR", str(_PACKAGE_DATA_DIR)))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def restaurants_path(self) -> Path:
        return self.data_dir / "restaurants.json"

    @property
    def blogs_path(self) -> Path:
        return self.data_dir / "blogs.json"


DEFAULT_SEARCH_CONFIG = SearchConfig()


def configure_logging(config: SearchConfig = DEFAULT_SEARCH_CONFIG) -> None:
    """Attach a single stream handler to the root logger."""
    root = logging.getLogger()
    if root.hasHandlers():
        return

    root.setLevel(config.log_level.upper())
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s - %(message)s"))
    root.addHandler(handler)
