"""Garden layout planner.

Places ranked candidate varieties on a partially-filled grid in two
phases, both greedy and both using the same rule: scan every free block
the variety fits in (row-major), score it against the plants around it,
and commit to the strictly best one (the first found wins a tie).

1. **Explicit quantities**: varieties the user asked for a number of are
   placed from a queue built by ``plan_allocations``.

2. **Fill**: the whole ranked list is swept again and again, one
   placement per candidate per sweep, until a sweep places nothing.  This
   is what hands cells a large variety couldn't use to smaller ones.

The planner never finds a global optimum; it looks one block ahead.
"""

import logging

from .allocation import plan_allocations
from .companion import companion_score
from .errors import LayoutError
from .grid import GardenGrid, Placement
from .request import BLOCKED
from .response import build_response

logger = logging.getLogger(__name__)

PRESENT_REASON = "Present in the existing layout."


class GardenPlanner:
    """Greedy placer bound to one grid.

    Args:
        grid:       A ``GardenGrid``, possibly pre-filled.
        candidates: Ranked varieties from ``filter_candidates``.
    """

    def __init__(self, grid: GardenGrid, candidates):
        self.grid = grid
        self.candidates = list(candidates)
        self.score = 0
        self.placed: dict[str, int] = {}

    # ----- scoring -----

    def block_score(self, variety, row: int, col: int) -> int:
        neighbors = self.grid.neighbors_of_block(row, col, variety.span)
        return companion_score(variety, [p.variety_id for p in neighbors])

    def best_block(self, variety):
        """Best free position for *variety*.

        Returns:
            ``(row, col, score)``, or ``None`` if no block fits.
        """
        span = variety.span
        best = None
        for r, c in self.grid.block_positions(span):
            if not self.grid.is_block_free(r, c, span):
                continue
            s = self.block_score(variety, r, c)
            if best is None or s > best[2]:
                best = (r, c, s)
        return best

    # ----- committing -----

    def commit(self, variety, row: int, col: int, score: int) -> Placement:
        """Place *variety* at (row, col) and book its score."""
        neighbors = self.grid.neighbors_of_block(row, col, variety.span)
        reason = build_reason(
            variety, [p.name for p in neighbors], score, self.grid.is_empty()
        )
        placement = Placement(
            variety.id, variety.name, reason,
            variety.plants_per_cell, variety.span, (row, col),
        )
        self.grid.place(placement)
        self.score += score
        self.placed[variety.id] = self.placed.get(variety.id, 0) + 1
        logger.debug("Placed %s at (%d, %d) span=%d score=%+d",
                     variety.id, row, col, variety.span, score)
        return placement

    def try_place(self, variety) -> Placement | None:
        best = self.best_block(variety)
        if best is None:
            return None
        return self.commit(variety, *best)

    # ----- phase 1: explicit quantities -----

    def place_queue(self, allocation) -> int:
        """Place the allocation queue in order.

        An entry whose variety already has its allotted placements is
        skipped.  When a 1x1 variety finds no free cell the grid is full and
        the rest of the queue is dropped; a larger variety that doesn't fit
        is skipped so smaller ones later in the queue still get a chance.

        Returns the number of placements made.
        """
        by_id = {v.id: v for v in self.candidates}
        made = 0
        for variety_id in allocation.queue:
            variety = by_id[variety_id]
            if self.placed.get(variety_id, 0) >= allocation.counts.get(variety_id, 0):
                continue
            if self.try_place(variety) is not None:
                made += 1
            elif variety.span == 1:
                logger.debug("Grid exhausted during quantity phase")
                break
            else:
                logger.debug("No %dx%d block free for %s, skipped",
                             variety.span, variety.span, variety_id)
        return made

    # ----- phase 2: fill -----

    def fill(self) -> int:
        """Sweep the ranked candidates until a full sweep places nothing.

        Every candidate gets one attempt per sweep regardless of how earlier
        ones fared.  Returns the number of placements made.
        """
        made = 0
        sweeps = 0
        while True:
            sweeps += 1
            progress = 0
            for variety in self.candidates:
                if self.try_place(variety) is not None:
                    progress += 1
            made += progress
            if progress == 0:
                break
        logger.debug("Fill phase: %d placements over %d sweeps", made, sweeps)
        return made


def build_reason(variety, neighbor_names: list[str], score: int,
                 grid_was_empty: bool) -> str:
    """Explain why *variety* went where it did."""
    if grid_was_empty:
        beginner = ", beginner-friendly" if variety.beginner_friendly else ""
        return f"First placed ({variety.category}{beginner})"

    if score > 0:
        qualifier = "good companion with"
    elif score < 0:
        qualifier = "constrained placement near"
    else:
        qualifier = "neutral with"
    neighbors = ", ".join(neighbor_names) if neighbor_names else "no adjacent plants"
    beginner = " (beginner-friendly)" if variety.beginner_friendly else ""
    return f"{variety.name} {qualifier} {neighbors}{beginner}"


# -----------------------------------------------------------------------
# Full pipeline
# -----------------------------------------------------------------------

def build_grid(layout, catalogue, warnings: list[str]) -> GardenGrid:
    """Create a grid from a normalised layout.

    Pre-planted identifiers the catalogue doesn't know leave their cell
    free and add a warning.

    Raises:
        LayoutError: for a layout with no rows or an empty first row.
    """
    if not layout:
        raise LayoutError("Layout must contain at least one row.")
    if not layout[0]:
        raise LayoutError("Layout rows must not be empty.")

    grid = GardenGrid(len(layout), len(layout[0]))
    for r, row in enumerate(layout):
        for c, value in enumerate(row[:grid.cols]):
            if not value:
                continue
            if value is BLOCKED:
                grid.set_blocked(r, c)
                continue
            variety = catalogue.get(value)
            if variety is None:
                logger.warning("Unknown pre-planted variety %r at [%d][%d]", value, r, c)
                warnings.append(
                    f"Variety '{value}' at [{r}][{c}] not found in the catalogue, skipped."
                )
                continue
            grid.place(Placement(
                variety.id, variety.name, PRESENT_REASON,
                variety.plants_per_cell, 1, (r, c),
            ))
    return grid


def plan_garden(candidates, request, catalogue) -> dict:
    """Run the complete planning pipeline.

    1. Build the grid from ``request.layout`` (blocked + pre-planted cells)
    2. Reserve cells for explicit quantities and place that queue
    3. Fill whatever is left from the ranked candidates
    4. Package the grid, cumulative score and warnings

    Args:
        candidates: Ranked varieties (see ``filter_candidates``).
        request:    A ``PlanRequest``.
        catalogue:  ``VarietyCatalogue`` used to resolve pre-planted ids.

    Returns:
        The plan dict produced by ``build_response``.

    Raises:
        LayoutError: if the layout has no rows or no columns.
    """
    warnings: list[str] = []
    grid = build_grid(request.layout, catalogue, warnings)

    available = grid.rows * grid.cols - grid.count_blocked()
    if grid.count_occupied() >= available:
        warnings.append("The grid is already fully occupied by the existing layout.")
        return build_response(grid, 0, warnings)

    planner = GardenPlanner(grid, candidates)
    allocation = plan_allocations(planner.candidates, request.preferences, grid.count_free())
    queued = planner.place_queue(allocation)
    filled = planner.fill()
    logger.info("Planned %dx%d grid: %d quantity + %d fill placements, score %+d",
                grid.rows, grid.cols, queued, filled, planner.score)
    logger.debug("Final layout:\n%s", grid.display())

    return build_response(grid, planner.score, warnings)
