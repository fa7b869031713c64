"""Companion-planting scores.

Scores are read from the candidate's own lists only.  Catalogue data is
allowed to be asymmetric (A lists B as a bad neighbour while B says
nothing about A) and is used exactly as recorded.
"""

GOOD_COMPANION_SCORE = 2
BAD_COMPANION_SCORE = -3


def companion_score(variety, neighbor_ids) -> int:
    """Score *variety* against the identifiers of its neighbours.

    Each neighbour adds ``GOOD_COMPANION_SCORE`` if it is in the variety's
    good list and ``BAD_COMPANION_SCORE`` if it is in the bad list.  A
    neighbour listed in both contributes both, so tomato next to basil,
    carrot and fennel scores 2 + 2 - 3 = 1.
    """
    score = 0
    for neighbor_id in neighbor_ids:
        if neighbor_id in variety.good_companions:
            score += GOOD_COMPANION_SCORE
        if neighbor_id in variety.bad_companions:
            score += BAD_COMPANION_SCORE
    return score


def is_compatible(a, b) -> bool:
    """True unless either variety lists the other as a bad companion."""
    return a.id not in b.bad_companions and b.id not in a.bad_companions


def companion_details(variety, catalogue) -> dict:
    """Resolve a variety's companion lists against *catalogue*.

    Identifiers the catalogue does not know are dropped.

    Returns:
        dict with ``id``, ``name``, ``good`` and ``bad``; the last two are
        lists of ``{"id", "name"}`` dicts in the variety's own order.
    """
    def resolve(ids):
        found = []
        for cid in ids:
            other = catalogue.get(cid)
            if other is not None:
                found.append({"id": other.id, "name": other.name})
        return found

    return {
        "id": variety.id,
        "name": variety.name,
        "good": resolve(variety.good_companions),
        "bad": resolve(variety.bad_companions),
    }
