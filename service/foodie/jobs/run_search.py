"""CLI job that runs one restaurant search and prints the results as JSON."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from foodie.core.config import get_settings
from foodie.models import Restaurant
from foodie.search.aggregator import SearchAggregator
from foodie.search.catalog import MAX_RADIUS_MILES, MIN_RADIUS_MILES, validate_selection
from foodie.search.errors import InvalidRequest, SearchError
from foodie.search.models import CombinationMode, SearchCriteria
from foodie.search.selection import random_pick, shuffled

logger = logging.getLogger(__name__)


def run_search_job(
    *,
    latitude: float,
    longitude: float,
    radius: int,
    filters: List[str],
    mode: str,
    pick: str = "list",
) -> str:
    """Run a search and render it. Raises InvalidRequest before any upstream call on bad input."""
    validate_selection(filters, radius)
    criteria = SearchCriteria.create(
        filters=filters,
        latitude=latitude,
        longitude=longitude,
        radius_miles=radius,
        mode=CombinationMode.parse(mode),
    )

    settings = get_settings()
    with SearchAggregator(settings=settings) as aggregator:
        restaurants = aggregator.search(criteria)

    logger.info("Found %d restaurants", len(restaurants))
    return render(restaurants, pick)


def render(restaurants: List[Restaurant], pick: str) -> str:
    if pick == "random":
        chosen = random_pick(restaurants)
        return json.dumps({"restaurant": chosen.to_dict() if chosen else None}, indent=2)
    if pick == "shuffle":
        restaurants = shuffled(restaurants)
    return json.dumps(
        {"count": len(restaurants), "restaurants": [r.to_dict() for r in restaurants]},
        indent=2,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search for nearby restaurants on Yelp")
    parser.add_argument("--lat", dest="latitude", type=float, required=True, help="Origin latitude")
    parser.add_argument("--lon", dest="longitude", type=float, required=True, help="Origin longitude")
    parser.add_argument(
        "--radius",
        dest="radius",
        type=int,
        default=MIN_RADIUS_MILES,
        help=f"Search radius in miles ({MIN_RADIUS_MILES}-{MAX_RADIUS_MILES})",
    )
    parser.add_argument(
        "--filter",
        dest="filters",
        action="append",
        default=[],
        help="Filter token, e.g. 'open_now', '$2', 'Sushi'. Repeatable.",
    )
    parser.add_argument(
        "--mode",
        dest="mode",
        choices=[m.value for m in CombinationMode],
        default=CombinationMode.MATCH_ALL.value,
        help="'all': every filter must apply; 'any': one filter is enough",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--pick", dest="pick", action="store_const", const="random", help="Print one random restaurant")
    output.add_argument("--shuffle", dest="pick", action="store_const", const="shuffle", help="Print results shuffled")
    parser.set_defaults(pick="list")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        output = run_search_job(
            latitude=args.latitude,
            longitude=args.longitude,
            radius=args.radius,
            filters=args.filters,
            mode=args.mode,
            pick=args.pick,
        )
    except InvalidRequest as exc:
        logger.error("Invalid search: %s", exc)
        raise SystemExit(2) from exc
    except SearchError as exc:
        logger.error("Search failed: %s", exc)
        raise SystemExit(1) from exc

    sys.stdout.write(output + "\n")


if __name__ == "__main__":
    main()
