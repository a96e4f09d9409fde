"""Tests for pairwise forces and body state."""

import math
import numpy as np
import pytest
from threebody_sim.errors import DegenerateConfiguration
from threebody_sim.physics.body import Body, Snapshot, validate_system
from threebody_sim.physics.force_calculator import ForceCalculator, ordered_pairs, pairwise_force
from threebody_sim.physics.parameters import SimulationParameters, GRAVITATIONAL_CONSTANT


def test_pairwise_force_magnitude_and_direction():
    """Force on i points from i to j with magnitude G m_i m_j / r^2."""
    body_i = Body(1.0, (0.0, 0.0))
    body_j = Body(2.0, (3.0, 4.0))

    force = pairwise_force(body_i, body_j, G=1.0)

    assert np.isclose(np.linalg.norm(force), 1.0 * 2.0 / 25.0)
    assert np.allclose(force / np.linalg.norm(force), [0.6, 0.8])


def test_pairwise_force_is_not_reciprocal_by_construction():
    """The (j, i) force is computed separately and is the mirror image."""
    a = Body(1.0, (0.3089693008, 0.4236727692))
    b = Body(3.0, (-0.5, 0.0))

    f_ab = pairwise_force(a, b)
    f_ba = pairwise_force(b, a)

    assert np.allclose(f_ab, -f_ba, rtol=1e-12, atol=0)


def test_mass_scaling():
    """Doubling the acting mass doubles the force without changing its direction."""
    target = Body(1.0, (-0.5, 0.0))
    light = Body(1.0, (0.3089693008, 0.4236727692))
    heavy = Body(2.0, (0.3089693008, 0.4236727692))

    f_light = pairwise_force(target, light)
    f_heavy = pairwise_force(target, heavy)

    assert np.allclose(f_heavy, 2.0 * f_light, rtol=1e-14, atol=0)
    assert math.isclose(math.atan2(f_heavy[1], f_heavy[0]), math.atan2(f_light[1], f_light[0]))


def test_coincident_bodies_raise():
    """Zero separation is a degenerate configuration."""
    a = Body(1.0, (0.5, 0.5))
    b = Body(1.0, (0.5, 0.5))

    with pytest.raises(DegenerateConfiguration) as excinfo:
        pairwise_force(a, b, pair=(0, 2), step=7)

    assert excinfo.value.bodies == (0, 2)
    assert excinfo.value.step == 7
    assert excinfo.value.separation == 0.0


def test_min_separation_threshold():
    """Separations at or below the threshold are rejected."""
    a = Body(1.0, (0.0, 0.0))
    b = Body(1.0, (1e-6, 0.0))

    pairwise_force(a, b, min_separation=1e-7)
    with pytest.raises(DegenerateConfiguration):
        pairwise_force(a, b, min_separation=1e-6)


def test_ordered_pairs():
    """Pairs are visited i-major, skipping i == j."""
    assert list(ordered_pairs(3)) == [(0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1)]


def test_net_forces_sum_to_zero():
    """Equal and opposite pair forces cancel over the whole system."""
    calculator = ForceCalculator(G=1.0)
    bodies = [
        Body(1.0, (0.3089693008, 0.4236727692)),
        Body(2.0, (-0.5, 0.0)),
        Body(0.5, (0.5, 0.0)),
    ]

    forces = calculator.net_forces(bodies)

    assert forces.shape == (3, 2)
    assert np.allclose(forces.sum(axis=0), 0.0, atol=1e-12)


def test_body_validation():
    """Bodies need positive mass and finite 2D vectors."""
    with pytest.raises(ValueError):
        Body(0.0, (0.0, 0.0))
    with pytest.raises(ValueError):
        Body(1.0, (0.0, 0.0, 0.0))
    with pytest.raises(ValueError):
        Body(1.0, (float("nan"), 0.0))

    body = Body(1, [1, 2])
    assert body.velocity.tolist() == [0.0, 0.0]
    assert body.position.dtype == np.float64


def test_body_copy_is_independent():
    """Copies share no arrays with the original."""
    body = Body(1.0, (1.0, 2.0), (3.0, 4.0))
    clone = body.copy()
    clone.position += 1.0

    assert body.position.tolist() == [1.0, 2.0]


def test_validate_system_requires_three_bodies():
    """A system is exactly three bodies."""
    with pytest.raises(ValueError):
        validate_system([Body(1.0, (0.0, 0.0)), Body(1.0, (1.0, 0.0))])
    with pytest.raises(ValueError):
        validate_system([Body(1.0, (0.0, 0.0)), Body(1.0, (1.0, 0.0)), (2.0, 0.0)])


def test_snapshot_is_immutable_copy():
    """Snapshots copy state and refuse writes."""
    bodies = [Body(1.0, (float(i), 0.0)) for i in range(3)]
    snapshot = Snapshot.from_bodies(4, 0.04, bodies)

    bodies[0].position[0] = 99.0
    assert snapshot.position(0) == (0.0, 0.0)

    with pytest.raises(ValueError):
        snapshot.positions[0, 0] = 1.0
    with pytest.raises(AttributeError):
        snapshot.step = 5

    restored = snapshot.bodies
    restored[1].position += 1.0
    assert snapshot.position(1) == (1.0, 0.0)


def test_simulation_parameters_defaults_and_validation():
    """Defaults match the reference run; invalid values are rejected."""
    params = SimulationParameters()
    assert params.time_step == 0.01
    assert params.step_count == 100000
    assert params.gravitational_constant == GRAVITATIONAL_CONSTANT == 6.67430e-11
    assert params.time_at(250) == 250 * 0.01

    for kwargs in (
        {"time_step": 0.0},
        {"time_step": float("inf")},
        {"step_count": 0},
        {"step_count": 1.5},
        {"gravitational_constant": -1.0},
        {"min_separation": -1.0},
        {"progress_interval": 0},
    ):
        with pytest.raises(ValueError):
            SimulationParameters(**kwargs)


def test_accumulate_yields_velocity_deltas():
    """Per-pair deltas are force / m_i * dt, in pair order."""
    calculator = ForceCalculator(G=1.0)
    bodies = [
        Body(1.0, (0.3089693008, 0.4236727692)),
        Body(2.0, (-0.5, 0.0)),
        Body(0.5, (0.5, 0.0)),
    ]
    dt = 0.01

    deltas = list(calculator.accumulate(bodies, dt))
    forces = list(calculator.pair_forces(bodies))

    assert [(i, j) for i, j, _ in deltas] == list(ordered_pairs(3))
    for (i, j, delta), (_, _, force) in zip(deltas, forces):
        assert np.array_equal(delta, force / bodies[i].mass * dt)

    summed = np.zeros((3, 2))
    for i, _, delta in deltas:
        summed[i] += delta
    masses = np.array([b.mass for b in bodies])
    assert np.allclose(summed, calculator.net_forces(bodies) / masses[:, None] * dt, rtol=1e-12, atol=0)
