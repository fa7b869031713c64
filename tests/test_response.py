from garden import GardenGrid, Placement, build_response
from garden.response import classify_cell, placed_ids


def _grid():
    grid = GardenGrid(3, 3)
    grid.set_blocked(2, 2)
    grid.place(Placement("tomato", "Tomato", "First placed (fruit)", 1, 2, (0, 0)))
    grid.place(Placement("basil", "Basil", "Basil good companion with Tomato", 1, 1, (0, 2)))
    return grid


def test_anchor_of_single_cell_is_plant():
    assert classify_cell(_grid(), 0, 2) == {
        "type": "plant",
        "id": "basil",
        "name": "Basil",
        "reason": "Basil good companion with Tomato",
        "plants_per_cell": 1,
    }


def test_anchor_of_block_is_overflowing():
    cell = classify_cell(_grid(), 0, 0)
    assert cell["type"] == "overflowing"
    assert cell["id"] == "tomato"
    assert (cell["width"], cell["length"]) == (2, 2)


def test_covered_cells_point_to_anchor():
    grid = _grid()
    for r, c in [(0, 1), (1, 0), (1, 1)]:
        assert classify_cell(grid, r, c) == {"type": "overflowed", "anchor": {"row": 0, "col": 0}}


def test_blocked_and_empty():
    grid = _grid()
    assert classify_cell(grid, 2, 2) == {"type": "blocked"}
    assert classify_cell(grid, 2, 0) == {"type": "empty"}


def test_build_response_counts_empty_cells():
    grid = _grid()
    warnings = ["earlier warning"]
    plan = build_response(grid, 2, warnings)
    assert plan["rows"] == 3 and plan["cols"] == 3
    assert plan["score"] == 2
    assert plan["warnings"] == [
        "earlier warning",
        "3 empty cell(s): not enough compatible varieties to fill the entire grid.",
    ]
    assert warnings == ["earlier warning"]
    assert placed_ids(plan) == ["tomato", "basil"]


def test_build_response_without_empty_cells_adds_no_warning():
    grid = GardenGrid(1, 2)
    grid.set_blocked(0, 0)
    grid.place(Placement("pea", "Pea", "First placed (pod)", 4, 1, (0, 1)))
    plan = build_response(grid, 0, [])
    assert plan["warnings"] == []
    assert [c["type"] for c in plan["grid"][0]] == ["blocked", "plant"]
