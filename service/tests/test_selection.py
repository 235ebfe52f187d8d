import random

from foodie.models import Restaurant
from foodie.search.selection import random_pick, shuffled


def test_random_pick_empty():
    assert random_pick([]) is None


def test_random_pick_returns_member():
    restaurants = [Restaurant(id=i) for i in "abc"]
    assert random_pick(restaurants, random.Random(7)) in restaurants


def test_shuffled_returns_copy():
    restaurants = [Restaurant(id=i) for i in "abcdef"]
    deck = shuffled(restaurants, random.Random(7))
    assert sorted(r.id for r in deck) == list("abcdef")
    assert [r.id for r in restaurants] == list("abcdef")
