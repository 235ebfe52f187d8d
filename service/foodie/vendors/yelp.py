"""Client utilities for the Yelp Fusion business-search API."""

import logging
from typing import Any, Dict, List, Optional

import requests

from foodie.etl.transform import parse_search_response
from foodie.models import BusinessRecord
from foodie.search.errors import DecodeFailure, EmptyResponseBody, InvalidRequest, TransportFailure

logger = logging.getLogger(__name__)
_SESSION = requests.Session()
_BASE_URL = "https://api.yelp.com/v3"


def business_search(
    params: Dict[str, Any],
    api_key: str,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> List[BusinessRecord]:
    """Run one business search and decode its ``businesses`` list.

    Every failure is raised as a ``SearchError`` subclass so callers can
    decide whether a single request failing is fatal.
    """
    url = f"{(base_url or _BASE_URL).rstrip('/')}/businesses/search"
    headers = {"Authorization": f"Bearer {api_key}"}
    logger.info("Calling Yelp business search params=%s", params)

    try:
        response = _SESSION.get(url, params=params, headers=headers, timeout=timeout)
    except requests.exceptions.InvalidURL as exc:
        raise InvalidRequest(f"Could not build search URL: {exc}") from exc
    except requests.RequestException as exc:
        logger.error("business_search transport failure: %s", exc)
        raise TransportFailure(str(exc)) from exc

    if not (200 <= response.status_code < 300):
        logger.error(
            "business_search failed: status=%s, body=%s", response.status_code, (response.text or "")[:300]
        )
        raise TransportFailure(f"Yelp returned HTTP {response.status_code}")

    if not response.content:
        raise EmptyResponseBody("Yelp returned an empty response body.")

    try:
        payload = response.json()
    except ValueError as exc:
        raise DecodeFailure(f"Response body is not valid JSON: {exc}") from exc

    return parse_search_response(payload)
