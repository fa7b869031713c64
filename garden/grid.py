"""Garden grid representation.

The garden is modeled as a 2D grid of square cells.  Each cell is either
blocked (a path, a shed, anything that can't be planted), free, or covered
by a ``Placement``.

A placement occupies a ``span x span`` block whose top-left cell is its
*anchor*.  Every cell in the block points at the very same ``Placement``
object, so "which plant is here?" is a single lookup from any cell, and
two cells belong to the same plant exactly when they share an anchor.
"""

from .errors import LayoutError


class Placement:
    """One plant instance (or one cell's worth of small plants).

    Attributes:
        variety_id, name:  Identity of the variety.
        reason:            Human-readable rationale for the position.
        plants_per_cell:   Plants in the cell (always 1 when span > 1).
        span:              Cells per axis covered by this placement.
        anchor:            (row, col) of the top-left cell of the block.
    """

    def __init__(self, variety_id: str, name: str, reason: str,
                 plants_per_cell: int, span: int, anchor: tuple[int, int]):
        self.variety_id = variety_id
        self.name = name
        self.reason = reason
        self.plants_per_cell = plants_per_cell
        self.span = span
        self.anchor = anchor

    def __repr__(self) -> str:
        return f"Placement({self.variety_id!r}, anchor={self.anchor}, span={self.span})"

    def cells(self):
        """All (row, col) coordinates covered by this placement."""
        r0, c0 = self.anchor
        return [
            (r, c)
            for r in range(r0, r0 + self.span)
            for c in range(c0, c0 + self.span)
        ]


class Cell:
    def __init__(self):
        self.placement: Placement | None = None
        self.blocked = False

    @property
    def is_free(self) -> bool:
        return self.placement is None and not self.blocked


class GardenGrid:
    """2D grid of cells for one planning run.

    Attributes:
        rows:  Number of rows.
        cols:  Number of columns.
        cells: 2D list (row-major) of ``Cell``.
    """

    def __init__(self, rows: int, cols: int):
        """Create a grid of free cells.

        Raises LayoutError if either dimension is below 1.
        """
        if rows < 1 or cols < 1:
            raise LayoutError(f"Grid must be at least 1x1, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.cells = [[Cell() for _ in range(cols)] for _ in range(rows)]

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> Cell:
        """Return a single cell.

        Raises IndexError if (row, col) is out of bounds.
        """
        if not self.in_bounds(row, col):
            raise IndexError(
                f"Cell ({row}, {col}) out of bounds for "
                f"{self.rows}x{self.cols} grid"
            )
        return self.cells[row][col]

    def set_blocked(self, row: int, col: int):
        cell = self.get_cell(row, col)
        if cell.placement is not None:
            raise ValueError(f"Cell ({row}, {col}) is planted and cannot be blocked")
        cell.blocked = True

    # ------------------------------------------------------------------
    # Block queries
    # ------------------------------------------------------------------

    def is_block_free(self, row: int, col: int, span: int) -> bool:
        """True if the ``span x span`` block at (row, col) can be planted.

        False when the block leaves the grid or touches a blocked or
        occupied cell.
        """
        if row < 0 or col < 0 or row + span > self.rows or col + span > self.cols:
            return False
        return all(
            self.cells[r][c].is_free
            for r in range(row, row + span)
            for c in range(col, col + span)
        )

    def block_positions(self, span: int):
        """Every top-left position a ``span`` block could start at, row-major."""
        for r in range(self.rows - span + 1):
            for c in range(self.cols - span + 1):
                yield r, c

    def neighbors_of_block(self, row: int, col: int, span: int) -> list[Placement]:
        """Distinct placements touching the block's edges.

        Looks at the ring of cells directly above, below, left and right of
        the block (corners excluded, clipped to the grid).  For span 1 these
        are the four axis-aligned neighbours.  Each placement is returned
        once, in the order it is first met.
        """
        ring = (
            [(row - 1, c) for c in range(col, col + span)]
            + [(row + span, c) for c in range(col, col + span)]
            + [(r, col - 1) for r in range(row, row + span)]
            + [(r, col + span) for r in range(row, row + span)]
        )
        found: list[Placement] = []
        seen: set[tuple[int, int]] = set()
        for r, c in ring:
            if not self.in_bounds(r, c):
                continue
            p = self.cells[r][c].placement
            if p is not None and p.anchor not in seen:
                seen.add(p.anchor)
                found.append(p)
        return found

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def place(self, placement: Placement):
        """Write *placement* into every cell of its block.

        Raises ValueError if the block is not free.
        """
        row, col = placement.anchor
        if not self.is_block_free(row, col, placement.span):
            raise ValueError(
                f"Block at ({row}, {col}) with span {placement.span} is not free"
            )
        for r, c in placement.cells():
            self.cells[r][c].placement = placement

    # ------------------------------------------------------------------
    # Counts
    # ------------------------------------------------------------------

    def count_free(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell.is_free)

    def count_blocked(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell.blocked)

    def count_occupied(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell.placement is not None)

    def is_empty(self) -> bool:
        return self.count_occupied() == 0

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def display(self) -> str:
        """Return a human-readable string of the grid.

        Blocked cells are shown as '#', free cells as '.'.  Covered cells
        repeat the variety id so multi-cell blocks are visible.
        """
        labels = [
            [
                "#" if cell.blocked
                else "." if cell.placement is None
                else cell.placement.variety_id
                for cell in row
            ]
            for row in self.cells
        ]
        w = max(3, max(len(v) for row in labels for v in row))
        return "\n".join(" ".join(v.rjust(w) for v in row) for row in labels)
