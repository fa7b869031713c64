"""Conversion between planting distances and grid cells.

The garden is divided into square cells of ``CELL_SIZE_CM`` per side.  A
variety whose recommended spacing is wider than one cell occupies a
``span x span`` block; a narrow one fits several plants in a single cell.

    spacing  5 cm → span 1, 36 plants per cell
    spacing 30 cm → span 1,  1 plant per cell
    spacing 60 cm → span 2,  1 plant per 2x2 block
"""

from math import ceil

CELL_SIZE_CM = 30


def cell_span(spacing_cm: float) -> int:
    """Number of cells per axis a single plant occupies."""
    spacing = spacing_cm if spacing_cm > 0 else 1
    return max(1, ceil(spacing / CELL_SIZE_CM))


def plants_per_cell(spacing_cm: float) -> int:
    """How many plants fit in one cell.

    Always 1 for multi-cell varieties, since the plant fills its whole
    block.
    """
    if cell_span(spacing_cm) > 1:
        return 1
    spacing = spacing_cm if spacing_cm > 0 else 1
    return max(1, int(CELL_SIZE_CM // spacing) ** 2)


def meters_to_cells(meters: float) -> int:
    """Cells needed to cover *meters* along one axis (0 for non-positive)."""
    if meters <= 0:
        return 0
    return ceil(round(meters * 100, 6) / CELL_SIZE_CM)
