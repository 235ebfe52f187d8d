"""Utilities for turning Yelp business-search payloads into restaurants."""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import urlparse

from foodie.models import BusinessRecord, Category, Restaurant
from foodie.search.errors import DecodeFailure

logger = logging.getLogger(__name__)

NO_ADDRESS = "No address available"


def parse_business(raw: Dict[str, Any]) -> BusinessRecord:
    location = _expect(raw.get("location") or {}, dict, "location")
    coordinates = _expect(raw.get("coordinates") or {}, dict, "coordinates")
    hours = _expect(raw.get("business_hours") or [], list, "business_hours")
    first_hours = _expect(hours[0], dict, "business_hours[0]") if hours else {}
    transactions = _expect(raw.get("transactions") or [], list, "transactions")

    return BusinessRecord(
        id=_strip_or_none(raw.get("id")),
        name=_strip_or_none(raw.get("name")),
        address1=_strip_or_none(location.get("address1")),
        address2=_strip_or_none(location.get("address2")),
        address3=_strip_or_none(location.get("address3")),
        city=_strip_or_none(location.get("city")),
        state=_strip_or_none(location.get("state")),
        zip_code=_strip_or_none(location.get("zip_code")),
        country=_strip_or_none(location.get("country")),
        latitude=_safe_float(coordinates.get("latitude")),
        longitude=_safe_float(coordinates.get("longitude")),
        phone=_strip_or_none(raw.get("phone")),
        display_phone=_strip_or_none(raw.get("display_phone")),
        url=_strip_or_none(raw.get("url")),
        rating=_safe_float(raw.get("rating")),
        price=_strip_or_none(raw.get("price")),
        categories=_parse_categories(raw.get("categories")),
        image_url=_strip_or_none(raw.get("image_url")),
        is_open_now=bool(first_hours.get("is_open_now", False)),
        review_count=_safe_int(raw.get("review_count")),
        distance=_safe_float(raw.get("distance")),
        transactions=tuple(str(t) for t in transactions),
    )


def parse_search_response(payload: Any) -> List[BusinessRecord]:
    """Decode the ``{"businesses": [...]}`` envelope."""
    if not isinstance(payload, dict):
        raise DecodeFailure(f"Expected a JSON object, got {type(payload).__name__}.")
    businesses = payload.get("businesses")
    if not isinstance(businesses, list):
        logger.error("Search response missing businesses list. keys=%s", list(payload.keys())[:10])
        raise DecodeFailure("Response has no 'businesses' list.")

    records: List[BusinessRecord] = []
    for raw in businesses:
        if not isinstance(raw, dict):
            raise DecodeFailure(f"Business entry is not an object: {str(raw)[:100]}")
        try:
            records.append(parse_business(raw))
        except (AttributeError, TypeError, ValueError, OverflowError) as exc:
            raise DecodeFailure(f"Malformed business entry id={raw.get('id')!r}: {exc}") from exc
    return records


def full_address(record: BusinessRecord) -> str:
    parts = [record.address1, record.city, record.state, record.zip_code]
    present = [part for part in parts if part]
    if not present:
        return NO_ADDRESS
    return ", ".join(present)


def parse_website(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        return None
    return parsed.geturl()


def to_restaurant(record: BusinessRecord) -> Restaurant:
    return Restaurant(
        id=record.id,
        name=record.name,
        address=full_address(record),
        latitude=record.latitude,
        longitude=record.longitude,
        phone_number=record.phone,
        display_phone=record.display_phone,
        website=parse_website(record.url),
        rating=record.rating,
        price=record.price,
        categories=tuple(c.title for c in record.categories if c.title),
        image_url=record.image_url,
        is_open_now=record.is_open_now,
        review_count=record.review_count,
        distance=record.distance,
        transactions=record.transactions,
    )


def _parse_categories(raw: Optional[Iterable[Any]]) -> Tuple[Category, ...]:
    categories = []
    for item in _expect(raw or [], list, "categories"):
        if not isinstance(item, dict):
            continue
        categories.append(Category(title=_strip_or_none(item.get("title")), alias=_strip_or_none(item.get("alias"))))
    return tuple(categories)


def _expect(value: Any, expected: type, name: str) -> Any:
    if not isinstance(value, expected):
        raise DecodeFailure(f"Field {name!r} should be {expected.__name__}, got {type(value).__name__}.")
    return value


def _strip_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    value_str = str(value).strip()
    return value_str or None


def _safe_float(value: Any) -> Optional[float]:
    try:
        if value is None:
            return None
        return float(value)
    except (TypeError, ValueError):
        return None


def _safe_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            return int(value)
        except (ValueError, OverflowError):
            return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None
