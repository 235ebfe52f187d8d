"""Classification of filter tokens into price, open-now and category kinds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

OPEN_NOW = "open_now"
PRICE_SIGIL = "$"


class FilterKind(str, Enum):
    PRICE = "price"
    OPEN_NOW = "open_now"
    CATEGORY = "category"


def classify_filter(token: str) -> FilterKind:
    """Return the kind of a filter token. Anything unrecognised is a category."""
    if token.startswith(PRICE_SIGIL):
        return FilterKind.PRICE
    if token == OPEN_NOW:
        return FilterKind.OPEN_NOW
    return FilterKind.CATEGORY


def price_value(token: str) -> str:
    """Strip the sigil from a price token: "$2" -> "2"."""
    return token[len(PRICE_SIGIL):]


@dataclass(frozen=True)
class FilterBuckets:
    prices: Tuple[str, ...] = ()
    open_now: bool = False
    categories: Tuple[str, ...] = ()


def unique_filters(tokens: Iterable[str]) -> Tuple[str, ...]:
    """Drop repeated tokens, keeping the first occurrence of each."""
    seen = set()
    ordered: List[str] = []
    for token in tokens:
        if token in seen:
            continue
        seen.add(token)
        ordered.append(token)
    return tuple(ordered)


def partition_filters(tokens: Iterable[str]) -> FilterBuckets:
    prices: List[str] = []
    categories: List[str] = []
    open_now = False
    for token in unique_filters(tokens):
        kind = classify_filter(token)
        if kind is FilterKind.PRICE:
            value = price_value(token)
            if value:
                prices.append(value)
        elif kind is FilterKind.OPEN_NOW:
            open_now = True
        else:
            categories.append(token)
    return FilterBuckets(prices=tuple(prices), open_now=open_now, categories=tuple(categories))
