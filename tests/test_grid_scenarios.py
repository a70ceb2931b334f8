from itertools import product

import numpy as np

from cellular_models.src.arrays.triangular import build_triangular_array, measure_footprint, triangular_array_footprint
from cellular_models.src.model5d import IsotropicHypercubicArrayModel5DA, RegularIntGrid5D


def test_cross_section_total_of_coordinate_sum_grid():
    values = [
        [[[[v + w + x + y + z for z in range(2)] for y in range(2)] for x in range(2)] for w in range(2)]
        for v in range(2)
    ]
    grid = RegularIntGrid5D(values)
    section = grid.cross_section_at_z(0)
    expected = sum(v + w + x + y for v, w, x, y in product(range(2), repeat=4))
    assert section.total() == expected == 32
    assert grid.total() == 80


def test_iteration_completeness_matches_bound_queries():
    shape = (3, 1, 2, 2, 4)
    grid = RegularIntGrid5D(np.zeros(shape), min_coordinates=(-1, 4, 0, -2, 1))
    accepted = [
        c for c in product(range(-3, 5), range(2, 7), range(-1, 3), range(-4, 2), range(-1, 7))
        if grid.is_within_bounds(c)
    ]
    assert len(list(grid.iterate())) == int(np.prod(shape)) == len(accepted)
    assert sorted(grid.positions()) == sorted(accepted)


def test_footprint_of_live_storage():
    model = IsotropicHypercubicArrayModel5DA(
        build_triangular_array(3, np.int64), lambda grid, generation: (grid, False), "Scenario"
    )
    for side in range(4):
        assert triangular_array_footprint(side, np.int64) == measure_footprint(build_triangular_array(side, np.int64))
    assert model.memory_footprint() == triangular_array_footprint(3, np.int64)
