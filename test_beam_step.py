import numpy as np

from beam_model import BeamModel
from beam_step import run_step
from contact import Contact
from engine_config import EngineConfig
from loads import PointForce, PolynomialForce


def _beam(**kwargs):
    params = dict(center=(5.0, 0.0), right=(1.0, 0.0), length=10.0, thickness=0.2, mass=5.0)
    params.update(kwargs)
    return BeamModel.from_transform(**params)


def _contact(x, body, normal_impulse=1.0, tangent_impulse=0.0):
    return Contact(
        position=(x, 0.1),
        normal=(0.0, -1.0),
        normal_impulse=normal_impulse,
        tangent_impulse=tangent_impulse,
        body_id=body,
    )


def test_step_without_contacts_has_only_self_weight():
    config = EngineConfig(gravity=(0.0, -9.8))
    result = run_step(_beam(), [], dt=0.02, config=config)
    assert len(result.loads) == 1
    assert isinstance(result.loads.loads[0], PolynomialForce)
    np.testing.assert_allclose(result.sample.pressure, -4.9)
    assert np.isclose(result.sample.shear[-1], 49.0)
    assert result.markers == []


def test_step_combines_edge_and_point_loads():
    contacts = [_contact(2.0, "plank"), _contact(4.0, "plank"), _contact(7.0, "ball", normal_impulse=0.5)]
    result = run_step(_beam(mass=0.0), contacts, dt=0.5)
    forces = result.loads.forces()
    assert len(forces) == 3
    assert isinstance(forces[2], PointForce)
    # Contacts push down on the beam: 2 N + 2 N + 1 N
    assert np.isclose(result.loads.net_force(), -5.0)
    assert np.isclose(result.sample.shear[-1], 5.0)
    assert len(result.loads.moments()) == 2


def test_lines_are_offset_along_up_by_divisor():
    config = EngineConfig(samples=11, pressure_divisor=2.0, shear_divisor=10.0, moment_divisor=100.0)
    beam = _beam()
    result = run_step(beam, [_contact(5.0, "ball")], dt=0.1, config=config)
    lines = result.lines
    assert lines.shear.shape == (11, 2)
    np.testing.assert_allclose(lines.shear[:, 0], result.sample.x)
    np.testing.assert_allclose(lines.shear[:, 1], result.sample.shear / 10.0)
    np.testing.assert_allclose(lines.moment[:, 1], result.sample.moment / 100.0)
    np.testing.assert_allclose(lines.pressure[:, 1], result.sample.pressure / 2.0)


def test_markers_follow_contacts():
    contacts = [_contact(1.0, "a", normal_impulse=0.25)]
    result = run_step(_beam(), contacts, dt=0.02)
    (position, size), = result.markers
    np.testing.assert_allclose(position, [1.0, 0.1])
    assert size == 0.25


def test_non_positive_step_duration_skips_contacts(caplog):
    with caplog.at_level("WARNING", logger="beam_loads"):
        result = run_step(_beam(), [_contact(3.0, "a")], dt=0.0)
    assert len(result.loads) == 1
    assert len(result.markers) == 1
    assert "not positive" in caplog.text


def test_zero_length_beam_skips_sampling():
    result = run_step(_beam(length=0.0), [_contact(0.0, "a")], dt=0.02)
    assert result.sample.skipped
    np.testing.assert_allclose(result.lines.moment, np.tile(result.lines.moment[0], (20, 1)))


def test_steps_are_independent():
    beam = _beam()
    first = run_step(beam, [_contact(3.0, "a", normal_impulse=5.0)], dt=0.02)
    second = run_step(beam, [], dt=0.02)
    baseline = run_step(beam, [], dt=0.02)
    np.testing.assert_allclose(second.sample.moment, baseline.sample.moment)
    assert len(first.loads) == 3


def test_non_finite_contact_does_not_halt_step():
    beam = _beam()
    result = run_step(beam, [_contact(float("nan"), "a"), _contact(4.0, "b")], dt=0.02)
    assert len(result.loads) == 3
    assert np.all(np.isfinite(result.sample.moment))
