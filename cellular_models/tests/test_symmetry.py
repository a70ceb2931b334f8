from itertools import permutations, product

import numpy as np
import pytest

from cellular_models.src.arrays.triangular import build_triangular_array, triangular_position_count
from cellular_models.src.core.errors import IllegalArgumentError, IrregularShapeError
from cellular_models.src.core.values import ValueKind
from cellular_models.src.model5d import (
    AnisotropicArrayGrid5D,
    IsotropicHypercubicArrayModel5DA,
    canonicalize,
)


def _numbered_values(side):
    values = build_triangular_array(side, np.int64)
    counter = 0
    for v in range(side):
        for w in range(v + 1):
            for x in range(w + 1):
                for y in range(x + 1):
                    for z in range(y + 1):
                        counter += 1
                        values[v][w][x][y][z] = counter
    return values


def _unchanged(grid, generation):
    return grid, False


def _equivalents(coordinates):
    for permutation in set(permutations(coordinates)):
        for signs in product((1, -1), repeat=5):
            yield tuple(s * c for s, c in zip(signs, permutation))


def test_canonicalize_sorts_magnitudes():
    assert canonicalize((-1, 3, 0, -3, 2)) == (3, 3, 2, 1, 0)
    assert canonicalize((0, 0, 0, 0, -4)) == (4, 0, 0, 0, 0)


def test_symmetric_values_are_invariant():
    model = IsotropicHypercubicArrayModel5DA(_numbered_values(3), _unchanged, "Test")
    for canonical in [(2, 1, 1, 0, 0), (2, 2, 1, 1, 0), (1, 0, 0, 0, 0)]:
        expected = model.value_at(canonical)
        for coordinates in _equivalents(canonical):
            assert model.value_at(coordinates) == expected


def test_isotropic_full_bounds():
    model = IsotropicHypercubicArrayModel5DA(_numbered_values(3), _unchanged, "Test")
    assert (model.min_v(), model.max_v()) == (-2, 2)
    assert (model.min_z(v=1, w=-1), model.max_z(v=1, w=-1)) == (-2, 2)
    assert model.get_size() == 3
    assert len(list(model.positions())) == 5 ** 5


def test_asymmetric_section_bounds():
    model = IsotropicHypercubicArrayModel5DA(_numbered_values(3), _unchanged, "Test")
    section = model.asymmetric_section()
    assert (section.min_v(), section.max_v()) == (0, 2)
    assert section.max_w(v=1) == 1
    assert section.min_w(x=1) == 1
    assert section.min_v(y=2) == 2
    assert (section.min_x(v=2, z=1), section.max_x(v=2, z=1)) == (1, 2)
    positions = list(section.positions())
    assert len(positions) == triangular_position_count(5, 3)
    assert all(p == canonicalize(p) for p in positions)
    assert list(section) == list(range(1, 22))


def test_asymmetric_section_path_and_size():
    model = IsotropicHypercubicArrayModel5DA(_numbered_values(2), _unchanged, "Test")
    section = model.asymmetric_section()
    assert section.subfolder_path() == "Test/5D/asymmetric_section"
    assert section.memory_footprint() == model.memory_footprint()
    assert section.name() == "Test"


def test_whole_grid_unfolds_snapshot():
    snapshot = AnisotropicArrayGrid5D(_numbered_values(3))
    whole = snapshot.whole_grid()
    assert (whole.min_w(), whole.max_w()) == (-2, 2)
    assert whole.value_at((0, -2, 1, 0, 0)) == snapshot.value_at((2, 1, 0, 0, 0))
    assert whole.asymmetric_section().total() == snapshot.total()


def test_anisotropic_snapshot_bounds():
    snapshot = AnisotropicArrayGrid5D(_numbered_values(4))
    assert (snapshot.min_y(), snapshot.max_y()) == (0, 3)
    assert (snapshot.min_y(x=2), snapshot.max_y(x=2)) == (0, 2)
    assert (snapshot.min_w(v=3, x=1), snapshot.max_w(v=3, x=1)) == (1, 3)
    assert snapshot.total() == sum(range(1, triangular_position_count(5, 4) + 1))


def test_anisotropic_snapshot_rejects_irregular_values():
    values = _numbered_values(2)
    values[1] = values[1][:1]
    with pytest.raises(IrregularShapeError):
        AnisotropicArrayGrid5D(values)


def test_whole_grid_reports_snapshot_footprint():
    snapshot = AnisotropicArrayGrid5D(build_triangular_array(2, np.int64))
    whole = snapshot.whole_grid()
    assert whole.memory_footprint() == snapshot.memory_footprint()
    assert whole.asymmetric_section().memory_footprint() == snapshot.memory_footprint()


def test_int_snapshot_rejects_values_outside_range():
    values = _numbered_values(2)
    values[1][0][0][0][0] = 2**40
    with pytest.raises(IllegalArgumentError):
        AnisotropicArrayGrid5D(values, value_kind=ValueKind.INT)
