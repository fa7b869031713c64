"""Turn quantity preferences into a placement queue.

Only preferences that carry an explicit quantity take part; the others
just influence ranking.  Reservations are made in preference order from
the pool of free cells, so when space runs short the user's first choices
win.
"""

import logging

logger = logging.getLogger(__name__)


class Allocation:
    """Working state of the explicit-quantity phase.

    Attributes:
        ledger:  variety id → reserved cell count.
        counts:  variety id → number of placements allotted.
        queue:   variety ids, one entry per plant instance to place.
    """

    def __init__(self):
        self.ledger: dict[str, int] = {}
        self.counts: dict[str, int] = {}
        self.queue: list[str] = []

    def __repr__(self) -> str:
        return f"Allocation(counts={self.counts}, queue={len(self.queue)} entries)"


def plan_allocations(candidates, preferences, free_cells: int) -> Allocation:
    """Reserve cells for each preference with an explicit quantity.

    Args:
        candidates:  Ranked varieties that passed filtering.
        preferences: Ordered ``Preference`` list from the request.
        free_cells:  Cells neither blocked nor already planted.

    Returns:
        An ``Allocation``.  A preference naming a variety that is not a
        candidate reserves nothing.
    """
    by_id = {v.id: v for v in candidates}
    allocation = Allocation()
    remaining = max(0, free_cells)

    for pref in preferences:
        if pref.quantity is None:
            continue
        variety = by_id.get(pref.variety_id)
        if variety is None:
            logger.debug("Preference %r is not a candidate, nothing reserved",
                         pref.variety_id)
            continue
        block = variety.span ** 2
        reserved = min(pref.quantity * block, remaining)
        remaining -= reserved
        allocation.ledger[variety.id] = allocation.ledger.get(variety.id, 0) + reserved

    for variety_id, reserved in allocation.ledger.items():
        block = by_id[variety_id].span ** 2
        count = max(1, reserved // block) if reserved > 0 else 0
        allocation.counts[variety_id] = count
        allocation.queue.extend([variety_id] * count)

    logger.debug("Reserved %d of %d free cells: %s",
                 free_cells - remaining, free_cells, allocation.counts)
    return allocation
