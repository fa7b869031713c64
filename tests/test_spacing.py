from math import ceil

import pytest

from garden.spacing import CELL_SIZE_CM, cell_span, meters_to_cells, plants_per_cell


@pytest.mark.parametrize("spacing, span", [(30, 1), (31, 2), (90, 3), (5, 1), (60, 2), (91, 4)])
def test_cell_span_known_values(spacing, span):
    assert cell_span(spacing) == span


def test_cell_span_matches_ceil_formula():
    for s in range(1, 200):
        assert cell_span(s) == max(1, ceil(s / CELL_SIZE_CM))


def test_zero_spacing_treated_as_one():
    assert cell_span(0) == 1
    assert plants_per_cell(0) == CELL_SIZE_CM ** 2


def test_plants_per_cell():
    assert plants_per_cell(5) == 36
    assert plants_per_cell(10) == 9
    assert plants_per_cell(15) == 4
    assert plants_per_cell(25) == 1
    assert plants_per_cell(30) == 1


def test_plants_per_cell_is_one_for_multi_cell_varieties():
    assert plants_per_cell(60) == 1
    assert plants_per_cell(120) == 1


def test_meters_to_cells():
    assert meters_to_cells(1.0) == 4
    assert meters_to_cells(2.0) == 7
    assert meters_to_cells(3.0) == 10
    assert meters_to_cells(0.9) == 3
    assert meters_to_cells(0.6) == 2
    assert meters_to_cells(0) == 0
