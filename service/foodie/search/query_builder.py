"""Translate search criteria into upstream business-search requests."""

from __future__ import annotations

from dataclasses import replace
from typing import List

from foodie.search.filters import partition_filters
from foodie.search.models import CombinationMode, RequestSpec, SearchCriteria

METERS_PER_MILE = 1609.344
RESULT_LIMIT = 50
# Radii at or above this value are taken to be meters already.
MILES_THRESHOLD = 8


def radius_to_meters(radius: int) -> int:
    if radius >= MILES_THRESHOLD:
        return int(radius)
    return int(round(radius * METERS_PER_MILE))


def build_requests(criteria: SearchCriteria) -> List[RequestSpec]:
    """Build the request(s) for one search.

    MATCH_ALL always yields a single request whose category and term are the
    comma-joined category tokens. MATCH_ANY yields one request per category
    token so the union can be computed locally; without category tokens both
    modes produce the same radius-only request.
    """
    buckets = partition_filters(criteria.filters)
    base = RequestSpec(
        latitude=criteria.origin.latitude,
        longitude=criteria.origin.longitude,
        radius_meters=radius_to_meters(criteria.radius_miles),
        limit=RESULT_LIMIT,
        open_now=buckets.open_now,
        price_csv=",".join(buckets.prices) or None,
    )

    if not buckets.categories:
        return [base]

    if criteria.mode is CombinationMode.MATCH_ALL:
        return [replace(base, category_term=",".join(buckets.categories))]

    return [replace(base, category_term=category) for category in buckets.categories]
