import pytest

from foodie.search import catalog
from foodie.search.errors import InvalidRequest
from foodie.search.filters import FilterKind, classify_filter, partition_filters, price_value


@pytest.mark.parametrize(
    "token, kind",
    [
        ("$1", FilterKind.PRICE),
        ("$4", FilterKind.PRICE),
        ("open_now", FilterKind.OPEN_NOW),
        ("Sushi", FilterKind.CATEGORY),
        ("Gluten-Free", FilterKind.CATEGORY),
        ("Open Now", FilterKind.CATEGORY),
        ("definitely-not-in-catalog", FilterKind.CATEGORY),
    ],
)
def test_classify_filter(token, kind):
    assert classify_filter(token) is kind


def test_every_catalog_token_has_exactly_one_kind():
    for token in catalog.KNOWN_FILTERS:
        assert classify_filter(token) in set(FilterKind)


def test_price_value_strips_sigil():
    assert price_value("$3") == "3"


def test_partition_keeps_order_and_drops_repeats():
    buckets = partition_filters(["Tacos", "$2", "open_now", "Sushi", "$1", "Tacos"])
    assert buckets.prices == ("2", "1")
    assert buckets.open_now is True
    assert buckets.categories == ("Tacos", "Sushi")


def test_partition_empty():
    buckets = partition_filters([])
    assert buckets.prices == ()
    assert buckets.open_now is False
    assert buckets.categories == ()


def test_catalog_sections_and_lookup():
    titles = [title for title, _ in catalog.CATALOG]
    assert titles[0] == "OPERATIONAL STATUS"
    assert "CUISINES" in titles
    assert catalog.is_known_filter("open_now")
    assert catalog.is_known_filter("$2")
    assert not catalog.is_known_filter("Closed Now")
    assert catalog.unknown_filters(["Sushi", "Nope", "$9"]) == ["Nope", "$9"]


def test_catalog_as_dict_is_serialisable():
    sections = catalog.catalog_as_dict()
    price = next(s for s in sections if s["title"] == "PRICE RANGE")
    assert price["filters"][0] == {"token": "$1", "label": "Inexpensive ($)"}


def test_validate_selection():
    catalog.validate_selection(["Sushi", "$2"], 7)
    with pytest.raises(InvalidRequest):
        catalog.validate_selection(["Sushi", "Nope"], 3)
    with pytest.raises(InvalidRequest):
        catalog.validate_selection([], 0)
    with pytest.raises(InvalidRequest):
        catalog.validate_selection([], 8)
