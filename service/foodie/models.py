"""Core data models shared by the search pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True, slots=True)
class Category:
    title: Optional[str] = None
    alias: Optional[str] = None


@dataclass(frozen=True, slots=True)
class BusinessRecord:
    """One business as returned by the Yelp business-search endpoint."""

    id: Optional[str] = None
    name: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    address3: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    phone: Optional[str] = None
    display_phone: Optional[str] = None
    url: Optional[str] = None
    rating: Optional[float] = None
    price: Optional[str] = None
    categories: Tuple[Category, ...] = ()
    image_url: Optional[str] = None
    is_open_now: bool = False
    review_count: Optional[int] = None
    distance: Optional[float] = None
    transactions: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Restaurant:
    """Display-ready restaurant. Two restaurants are the same restaurant when their ids match."""

    id: Optional[str]
    name: Optional[str] = field(default=None, compare=False)
    address: str = field(default="", compare=False)
    latitude: Optional[float] = field(default=None, compare=False)
    longitude: Optional[float] = field(default=None, compare=False)
    phone_number: Optional[str] = field(default=None, compare=False)
    display_phone: Optional[str] = field(default=None, compare=False)
    website: Optional[str] = field(default=None, compare=False)
    rating: Optional[float] = field(default=None, compare=False)
    price: Optional[str] = field(default=None, compare=False)
    categories: Tuple[str, ...] = field(default=(), compare=False)
    image_url: Optional[str] = field(default=None, compare=False)
    is_open_now: bool = field(default=False, compare=False)
    review_count: Optional[int] = field(default=None, compare=False)
    distance: Optional[float] = field(default=None, compare=False)
    transactions: Tuple[str, ...] = field(default=(), compare=False)

    @property
    def coordinate(self) -> Tuple[float, float]:
        return (self.latitude or 0.0, self.longitude or 0.0)

    def to_dict(self) -> Dict[str, Any]:
        entry = asdict(self)
        entry["categories"] = list(self.categories)
        entry["transactions"] = list(self.transactions)
        return entry
