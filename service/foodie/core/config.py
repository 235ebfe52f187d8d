"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_DEFAULT_BASE_URL = "https://api.yelp.com/v3"


@dataclass(frozen=True)
class Settings:
    yelp_api_key: str
    yelp_base_url: str = _DEFAULT_BASE_URL
    http_timeout: Optional[float] = None
    dedupe_results: bool = False
    server_port: int = 8080


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("YELP_HTTP_TIMEOUT=%r is not numeric; using the transport default.", raw)
        return None
    return value if value > 0 else None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    yelp_api_key = os.getenv("YELP_API_KEY", "")
    yelp_base_url = (os.getenv("YELP_API_BASE_URL") or _DEFAULT_BASE_URL).rstrip("/")
    http_timeout = _parse_timeout(os.getenv("YELP_HTTP_TIMEOUT"))
    dedupe_results = os.getenv("SEARCH_DEDUPE", "false").lower() in {"1", "true", "yes"}
    server_port = int(os.getenv("PORT", "8080"))

    if not yelp_api_key:
        logger.warning("YELP_API_KEY is not configured; Yelp search requests will be rejected.")

    return Settings(
        yelp_api_key=yelp_api_key,
        yelp_base_url=yelp_base_url,
        http_timeout=http_timeout,
        dedupe_results=dedupe_results,
        server_port=server_port,
    )
