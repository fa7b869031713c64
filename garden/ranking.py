"""Candidate selection and priority ordering.

The ranked list produced here is the only priority signal the placer
uses: earlier candidates get first pick of the grid in every sweep.
"""

# Fallback priority for varieties the user did not ask for, most popular
# first.  Identifiers missing from the table sort after all of these.
POPULARITY_RANK: dict[str, int] = {
    "tomato": 1,
    "lettuce": 2,
    "zucchini": 3,
    "green-bean": 4,
    "carrot": 5,
    "radish": 6,
    "cucumber": 7,
    "basil": 8,
    "strawberry": 9,
    "pepper": 10,
    "onion": 11,
    "garlic": 12,
    "spinach": 13,
    "pea": 14,
    "potato": 15,
    "parsley": 16,
    "leek": 17,
    "beetroot": 18,
    "eggplant": 19,
    "chives": 20,
    "cabbage": 21,
    "squash": 22,
    "thyme": 23,
    "corn": 24,
    "chard": 25,
}

_UNRANKED = max(POPULARITY_RANK.values()) + 1


def popularity_rank(variety_id: str) -> int:
    return POPULARITY_RANK.get(variety_id, _UNRANKED)


def matches_constraints(variety, request) -> bool:
    """True if *variety* can grow under every constraint set on *request*."""
    if request.season not in variety.seasons:
        return False
    if request.sun is not None and request.sun not in variety.sun:
        return False
    if request.soil is not None and request.soil not in variety.soils:
        return False
    if request.region is not None and request.region not in variety.regions:
        return False
    if request.level == "beginner" and not variety.beginner_friendly:
        return False
    return True


def filter_candidates(varieties, request) -> list:
    """Filter *varieties* by the request's constraints and rank them.

    Varieties named in ``request.preferences`` come first, in the order the
    user listed them.  The rest follow by ``POPULARITY_RANK``.  ``sorted``
    is stable, so equal keys keep catalogue order.
    """
    positions: dict[str, int] = {}
    for index, variety_id in enumerate(request.preference_ids):
        positions.setdefault(variety_id, index)

    def priority(variety):
        if variety.id in positions:
            return (0, positions[variety.id])
        return (1, popularity_rank(variety.id))

    survivors = [v for v in varieties if matches_constraints(v, request)]
    return sorted(survivors, key=priority)
