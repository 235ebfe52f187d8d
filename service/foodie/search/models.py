"""Value types passed between the query builder and the aggregator."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

from foodie.search.errors import InvalidRequest
from foodie.search.filters import unique_filters


class CombinationMode(str, Enum):
    MATCH_ALL = "all"
    MATCH_ANY = "any"

    @classmethod
    def parse(cls, value: str) -> "CombinationMode":
        normalized = (value or "").strip().lower()
        for mode in cls:
            if normalized in {mode.value, mode.name.lower()}:
                return mode
        raise InvalidRequest(f"Unknown combination mode: {value!r}")


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class SearchCriteria:
    """Everything one search needs. Filters keep caller order with repeats removed."""

    filters: Tuple[str, ...]
    origin: Coordinate
    radius_miles: int
    mode: CombinationMode = CombinationMode.MATCH_ALL

    def __post_init__(self) -> None:
        object.__setattr__(self, "filters", unique_filters(self.filters))

        lat, lon = self.origin.latitude, self.origin.longitude
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise InvalidRequest("Origin coordinates must be finite numbers.")
        if not -90.0 <= lat <= 90.0:
            raise InvalidRequest(f"Latitude {lat} is outside [-90, 90].")
        if not -180.0 <= lon <= 180.0:
            raise InvalidRequest(f"Longitude {lon} is outside [-180, 180].")
        if isinstance(self.radius_miles, bool) or not isinstance(self.radius_miles, int):
            raise InvalidRequest("Radius must be an integer.")
        if self.radius_miles <= 0:
            raise InvalidRequest("Radius must be positive.")
        if not isinstance(self.mode, CombinationMode):
            raise InvalidRequest(f"Unknown combination mode: {self.mode!r}")

    @classmethod
    def create(
        cls,
        filters: Iterable[str],
        latitude: float,
        longitude: float,
        radius_miles: int,
        mode: CombinationMode = CombinationMode.MATCH_ALL,
    ) -> "SearchCriteria":
        return cls(
            filters=tuple(filters),
            origin=Coordinate(latitude=float(latitude), longitude=float(longitude)),
            radius_miles=radius_miles,
            mode=mode,
        )


@dataclass(frozen=True)
class RequestSpec:
    """Parameters of one upstream business-search call."""

    latitude: float
    longitude: float
    radius_meters: int
    limit: int
    open_now: bool = False
    price_csv: Optional[str] = None
    category_term: Optional[str] = None

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "radius": self.radius_meters,
            "limit": self.limit,
        }
        if self.open_now:
            params["open_now"] = "true"
        if self.price_csv:
            params["price"] = self.price_csv
        if self.category_term:
            params["categories"] = self.category_term
            params["term"] = self.category_term
        return params
