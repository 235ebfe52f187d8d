"""The closed list of filters a user can pick, and validation at the input boundary."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from foodie.search.errors import InvalidRequest
from foodie.search.filters import OPEN_NOW

MIN_RADIUS_MILES = 1
MAX_RADIUS_MILES = 7

# (section title, [(token, label), ...])
CATALOG: List[Tuple[str, List[Tuple[str, str]]]] = [
    ("OPERATIONAL STATUS", [
        (OPEN_NOW, "Open Now"),
    ]),
    ("PRICE RANGE", [
        ("$1", "Inexpensive ($)"),
        ("$2", "Moderate ($$)"),
        ("$3", "Expensive ($$$)"),
        ("$4", "Very Expensive ($$$$)"),
    ]),
    ("RESTAURANT TYPES", [
        ("Bar", "Bar"),
        ("Pizzeria", "Pizzeria"),
        ("Steakhouse", "Steakhouse"),
        ("Fast Food", "Fast Food"),
        ("Barbeque", "Barbeque"),
        ("Cafe", "Cafes"),
        ("Pub", "Pub"),
        ("Brewery", "Brewery"),
        ("Diner", "Diner"),
        ("Buffet", "Buffet"),
        ("Deli", "Deli"),
        ("Bakery", "Bakery"),
        ("Food Trucks", "Food Trucks"),
        ("Dessert", "Desserts"),
    ]),
    ("FOOD TYPES", [
        ("Pizza", "Pizza"),
        ("Sushi", "Sushi"),
        ("Tacos", "Tacos"),
        ("Chicken", "Chicken"),
        ("Burgers", "Burgers"),
        ("Seafood", "Seafood"),
        ("Subs", "Subs"),
        ("Steak", "Steak"),
        ("Pasta", "Pasta"),
        ("Sandwiches", "Sandwiches"),
        ("Soup", "Soup"),
        ("Coffee", "Coffee"),
        ("Ice Cream", "Ice Cream"),
        ("Salad", "Salad"),
        ("Bagels", "Bagels"),
        ("Wings", "Wings"),
    ]),
    ("DIETARY PREFERENCES", [
        ("Gluten-Free", "Gluten-Free"),
        ("Halal", "Halal"),
        ("Vegetarian", "Vegetarian"),
        ("Vegan", "Vegan"),
        ("Organic", "Organic"),
        ("Kosher", "Kosher"),
    ]),
    ("CUISINES", [
        ("American", "American"),
        ("Italian", "Italian"),
        ("Mexican", "Mexican"),
        ("Chinese", "Chinese"),
        ("Japanese", "Japanese"),
        ("Indian", "Indian"),
        ("Mediterranean", "Mediterranean"),
        ("French", "French"),
        ("Thai", "Thai"),
        ("Greek", "Greek"),
        ("Korean", "Korean"),
        ("Southern", "Southern"),
        ("Vietnamese", "Vietnamese"),
        ("Jamaican", "Jamaican"),
        ("Spanish", "Spanish"),
        ("Ethiopian", "Ethiopian"),
        ("Turkish", "Turkish"),
        ("Peruvian", "Peruvian"),
        ("Portuguese", "Portuguese"),
        ("Brazilian", "Brazilian"),
        ("Australian", "Australian"),
    ]),
]

KNOWN_FILTERS = frozenset(token for _, entries in CATALOG for token, _ in entries)


def is_known_filter(token: str) -> bool:
    return token in KNOWN_FILTERS


def unknown_filters(tokens: Iterable[str]) -> List[str]:
    """Return the tokens that are not in the catalog, in input order."""
    return [token for token in tokens if not is_known_filter(token)]


def is_valid_radius(radius_miles: int) -> bool:
    return MIN_RADIUS_MILES <= radius_miles <= MAX_RADIUS_MILES


def validate_selection(tokens: Iterable[str], radius_miles: int) -> None:
    """Reject a user selection the catalog does not allow."""
    unknown = unknown_filters(tokens)
    if unknown:
        raise InvalidRequest(f"Unknown filters: {', '.join(unknown)}")
    if not is_valid_radius(radius_miles):
        raise InvalidRequest(f"Radius must be between {MIN_RADIUS_MILES} and {MAX_RADIUS_MILES} miles.")


def catalog_as_dict() -> List[Dict[str, object]]:
    """Serialisable form of the catalog for API consumers."""
    return [
        {
            "title": title,
            "filters": [{"token": token, "label": label} for token, label in entries],
        }
        for title, entries in CATALOG
    ]
