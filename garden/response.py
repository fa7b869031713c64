"""Serialise a finished grid into the plan result.

Each cell becomes a small dict tagged by ``"type"``:

    plant        anchor of a 1x1 placement (full plant data)
    overflowing  anchor of a larger block (plant data + block width/length)
    overflowed   cell covered by someone else's block (anchor coordinate only)
    empty        plantable but unused
    blocked      not plantable

Only anchors carry plant data; covered cells point back at their anchor
so nothing is duplicated.
"""

PLANT = "plant"
OVERFLOWING = "overflowing"
OVERFLOWED = "overflowed"
EMPTY = "empty"
BLOCKED = "blocked"


def classify_cell(grid, row: int, col: int) -> dict:
    cell = grid.cells[row][col]
    p = cell.placement
    if p is None:
        return {"type": BLOCKED if cell.blocked else EMPTY}

    if p.anchor != (row, col):
        return {"type": OVERFLOWED, "anchor": {"row": p.anchor[0], "col": p.anchor[1]}}

    entry = {
        "type": PLANT if p.span == 1 else OVERFLOWING,
        "id": p.variety_id,
        "name": p.name,
        "reason": p.reason,
        "plants_per_cell": p.plants_per_cell,
    }
    if p.span > 1:
        entry["width"] = p.span
        entry["length"] = p.span
    return entry


def build_response(grid, score: int, warnings: list[str]) -> dict:
    """Build the plan dict from the final grid.

    Appends one aggregate warning if plantable cells were left empty.
    *warnings* itself is not modified.
    """
    matrix = [
        [classify_cell(grid, r, c) for c in range(grid.cols)]
        for r in range(grid.rows)
    ]
    warnings = list(warnings)

    empty = sum(1 for row in matrix for cell in row if cell["type"] == EMPTY)
    if empty > 0:
        warnings.append(
            f"{empty} empty cell(s): not enough compatible varieties "
            f"to fill the entire grid."
        )

    return {
        "grid": matrix,
        "rows": grid.rows,
        "cols": grid.cols,
        "score": score,
        "warnings": warnings,
    }


def placed_ids(plan: dict) -> list[str]:
    """Variety ids of every anchor in a plan result, row-major."""
    return [
        cell["id"]
        for row in plan["grid"]
        for cell in row
        if cell["type"] in (PLANT, OVERFLOWING)
    ]
