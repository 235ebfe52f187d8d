"""Ways of presenting a result list: one random pick, or a shuffled deck."""

import random
from typing import List, Optional, Sequence

from foodie.models import Restaurant


def random_pick(restaurants: Sequence[Restaurant], rng: Optional[random.Random] = None) -> Optional[Restaurant]:
    if not restaurants:
        return None
    return (rng or random).choice(restaurants)


def shuffled(restaurants: Sequence[Restaurant], rng: Optional[random.Random] = None) -> List[Restaurant]:
    """Return a shuffled copy; the input is left untouched."""
    deck = list(restaurants)
    (rng or random).shuffle(deck)
    return deck
