import pytest

from garden import GardenGrid, LayoutError, Placement


def _place(grid, variety_id, row, col, span=1):
    p = Placement(variety_id, variety_id.title(), "test", 1, span, (row, col))
    grid.place(p)
    return p


def test_dimensions_must_be_positive():
    with pytest.raises(LayoutError):
        GardenGrid(0, 3)
    with pytest.raises(LayoutError):
        GardenGrid(3, 0)


def test_new_grid_is_free():
    grid = GardenGrid(2, 3)
    assert grid.count_free() == 6
    assert grid.is_empty()


def test_get_cell_out_of_bounds():
    grid = GardenGrid(2, 2)
    with pytest.raises(IndexError):
        grid.get_cell(2, 0)


def test_block_free_respects_bounds():
    grid = GardenGrid(3, 3)
    assert grid.is_block_free(0, 0, 3)
    assert grid.is_block_free(1, 1, 2)
    assert not grid.is_block_free(2, 2, 2)
    assert not grid.is_block_free(0, 0, 4)
    assert not grid.is_block_free(-1, 0, 1)


def test_block_free_respects_blocked_and_occupied_cells():
    grid = GardenGrid(3, 3)
    grid.set_blocked(1, 1)
    assert not grid.is_block_free(0, 0, 2)
    assert not grid.is_block_free(1, 1, 1)
    _place(grid, "basil", 0, 2)
    assert not grid.is_block_free(0, 2, 1)
    assert grid.is_block_free(2, 0, 1)


def test_place_fills_whole_block_with_same_placement():
    grid = GardenGrid(3, 3)
    p = _place(grid, "tomato", 1, 0, span=2)
    covered = [(r, c) for r in range(3) for c in range(3) if grid.cells[r][c].placement is p]
    assert covered == [(1, 0), (1, 1), (2, 0), (2, 1)]
    assert grid.count_occupied() == 4
    assert grid.cells[2][1].placement.anchor == (1, 0)


def test_place_rejects_overlap():
    grid = GardenGrid(3, 3)
    _place(grid, "tomato", 0, 0, span=2)
    with pytest.raises(ValueError):
        _place(grid, "basil", 1, 1)


def test_blocked_cell_cannot_be_planted():
    grid = GardenGrid(2, 2)
    grid.set_blocked(0, 0)
    with pytest.raises(ValueError):
        _place(grid, "basil", 0, 0)


def test_neighbors_span_one_are_axis_aligned():
    grid = GardenGrid(3, 3)
    up = _place(grid, "up", 0, 1)
    down = _place(grid, "down", 2, 1)
    left = _place(grid, "left", 1, 0)
    right = _place(grid, "right", 1, 2)
    _place(grid, "corner", 0, 0)
    assert grid.neighbors_of_block(1, 1, 1) == [up, down, left, right]


def test_neighbors_of_block_are_distinct():
    grid = GardenGrid(4, 4)
    big = _place(grid, "tomato", 0, 0, span=2)
    # a 2x2 block right of the tomato touches it along two cells
    assert grid.neighbors_of_block(0, 2, 2) == [big]


def test_neighbors_of_block_perimeter_excludes_corners_and_clips():
    grid = GardenGrid(4, 4)
    corner = _place(grid, "corner", 0, 0)
    below = _place(grid, "below", 3, 1)
    assert grid.neighbors_of_block(1, 1, 2) == [below]
    assert corner not in grid.neighbors_of_block(1, 1, 2)
    assert grid.neighbors_of_block(0, 1, 1) == [corner]


def test_block_positions_row_major():
    grid = GardenGrid(2, 3)
    assert list(grid.block_positions(2)) == [(0, 0), (0, 1)]
    assert list(grid.block_positions(3)) == []


def test_display_marks_cells():
    grid = GardenGrid(1, 3)
    grid.set_blocked(0, 0)
    _place(grid, "pea", 0, 2)
    assert grid.display().split() == ["#", ".", "pea"]
