import logging

import numpy as np
import pytest

from cellular_models.src.arrays.triangular import (
    build_triangular_array,
    copy_triangular_array,
    triangular_position_count,
)
from cellular_models.src.core.errors import (
    IllegalArgumentError,
    OutOfBoundsError,
    UnsupportedOperationError,
)
from cellular_models.src.core.values import ValueKind
from cellular_models.src.model5d import (
    IsotropicHypercubicArrayModel5DA,
    IsotropicHypercubicArrayModel5DStepsDelta,
)


def _canonical_positions(side):
    for v in range(side):
        for w in range(v + 1):
            for x in range(w + 1):
                for y in range(x + 1):
                    for z in range(y + 1):
                        yield v, w, x, y, z


def _growing_rule(grid, generation):
    """Grow by one and add ``sum(c) + generation + 1`` to every cell."""
    side = len(grid)
    grown = build_triangular_array(side + 1, np.int64)
    for v, w, x, y, z in _canonical_positions(side + 1):
        old = grid[v][w][x][y][z] if v < side else 0
        grown[v][w][x][y][z] = old + v + w + x + y + z + generation + 1
    return grown, True


def _in_place_rule(grid, generation):
    grid[0][0][0][0][0] += 1
    return grid, True


def _shrinking_rule(grid, generation):
    return build_triangular_array(len(grid) - 1, np.int64), True


def _model(rule=_growing_rule, side=2):
    return IsotropicHypercubicArrayModel5DA(build_triangular_array(side, np.int64), rule, "Test")


def test_live_model_steps():
    model = _model()
    assert model.current_generation() == 0
    assert model.is_changed() is None
    assert model.step() is True
    assert model.current_generation() == 1
    assert model.is_changed() is True
    assert model.get_size() == 3
    assert model.value_at((0, -1, 1, 0, 0)) == 2 + 0 + 1


def test_delta_matches_retained_snapshots():
    reference = _model()
    snapshots = [copy_triangular_array(reference.grid)]
    for _ in range(2):
        reference.step()
        snapshots.append(copy_triangular_array(reference.grid))
    s0, s1, s2 = snapshots

    two_steps = IsotropicHypercubicArrayModel5DStepsDelta(_model(), steps_back=2)
    one_step = IsotropicHypercubicArrayModel5DStepsDelta(_model(), steps_back=1)
    one_step.step()
    assert two_steps.current_generation() == one_step.current_generation() == 2

    assert two_steps.asymmetric_max_v() == 1
    assert one_step.asymmetric_max_v() == 2
    for v, w, x, y, z in _canonical_positions(2):
        assert two_steps.value_at((v, w, x, y, z)) == s2[v][w][x][y][z] - s0[v][w][x][y][z]
    for v, w, x, y, z in _canonical_positions(3):
        assert one_step.value_at((v, w, x, y, z)) == s2[v][w][x][y][z] - s1[v][w][x][y][z]

    assert two_steps.value_at((1, 1, 0, 0, 0)) == 7
    assert one_step.value_at((1, 1, 0, 0, 0)) == 4
    assert one_step.value_at((0, -1, 0, 1, 0)) == one_step.value_at((1, 1, 0, 0, 0))


def test_delta_section_covers_intersection():
    delta = IsotropicHypercubicArrayModel5DStepsDelta(_model(), steps_back=2)
    section = delta.asymmetric_section()
    assert len(list(section.positions())) == triangular_position_count(5, 2)
    assert section.min_and_max() == (3, 13)


def test_delta_copies_before_in_place_step():
    one_step = IsotropicHypercubicArrayModel5DStepsDelta(_model(_in_place_rule), steps_back=1)
    two_steps = IsotropicHypercubicArrayModel5DStepsDelta(_model(_in_place_rule), steps_back=2)
    assert one_step.value_at((0, 0, 0, 0, 0)) == 1
    assert two_steps.value_at((0, 0, 0, 0, 0)) == 2
    one_step.step()
    two_steps.step()
    assert one_step.value_at((0, 0, 0, 0, 0)) == 1
    assert two_steps.value_at((0, 0, 0, 0, 0)) == 2
    assert one_step.value_at((1, 1, 1, 1, 1)) == 0


def test_delta_paths_and_lifecycle():
    one_step = IsotropicHypercubicArrayModel5DStepsDelta(_model(), steps_back=1)
    two_steps = IsotropicHypercubicArrayModel5DStepsDelta(_model(), steps_back=2)
    assert one_step.subfolder_path() == "Test/5D/delta"
    assert two_steps.subfolder_path() == "Test/5D/two_steps_delta"
    assert one_step.name() == "Test"
    assert one_step.is_changed() is True
    assert one_step.memory_footprint() > 0


def test_delta_rejects_bad_arguments():
    with pytest.raises(IllegalArgumentError):
        IsotropicHypercubicArrayModel5DStepsDelta(_model(), steps_back=3)
    boolean_model = IsotropicHypercubicArrayModel5DA(
        build_triangular_array(2, np.bool_), _unchanged_rule, "Flags", value_kind=ValueKind.BOOLEAN
    )
    with pytest.raises(UnsupportedOperationError):
        IsotropicHypercubicArrayModel5DStepsDelta(boolean_model)


def _unchanged_rule(grid, generation):
    return grid, False


def test_backup_round_trip(tmp_path):
    model = _model()
    model.step()
    delta = IsotropicHypercubicArrayModel5DStepsDelta(model, steps_back=1)
    delta.back_up(str(tmp_path), "generation.pkl")
    restored = IsotropicHypercubicArrayModel5DA.from_backup(str(tmp_path / "generation.pkl"), _growing_rule)
    assert restored.current_generation() == model.current_generation() == 2
    assert restored.is_changed() is True
    assert restored.subfolder_path() == "Test/5D"
    assert list(restored.asymmetric_section()) == list(model.asymmetric_section())
    restored.step()
    model.step()
    assert list(restored.asymmetric_section()) == list(model.asymmetric_section())


def test_views_follow_live_model_steps():
    model = _model()
    section = model.cross_section_at_v(1)
    assert section.subfolder_path() == "Test/5D/v=1"
    before = section.value_at((0, 0, 0, 0))
    section.step()
    assert model.current_generation() == 1
    assert section.value_at((0, 0, 0, 0)) == before + 1 + 1
    sub = model.subsection((1, None, None, None, None), (2, 1, None, None, None))
    assert sub.subfolder_path() == "Test/5D/v[1,2]_w(-∞,1]"
    diagonal = model.diagonal_cross_section_on_vz(False, 1)
    assert diagonal.subfolder_path() == "Test/5D/z=-v+1"


def test_cross_section_invalidated_by_shrinking_step(caplog):
    model = _model(_shrinking_rule, side=3)
    section = model.cross_section_at_v(2)
    with caplog.at_level(logging.WARNING):
        with pytest.raises(OutOfBoundsError):
            section.step()
    assert any("no longer intersects" in rec.message for rec in caplog.records)


def test_step_is_logged(caplog):
    model = _model()
    with caplog.at_level(logging.DEBUG, logger="cellular_models.src.model5d.anisotropic"):
        model.step()
    assert any("reached generation 1" in rec.message for rec in caplog.records)
