"""Tests for trajectory I/O."""

import numpy as np
import tempfile
import os
import pytest
from threebody_sim import SimulationParameters, Simulator
from threebody_sim.presets import ReferenceTriangle
from threebody_sim.io.trajectory_io import save_trajectory, load_trajectory


def _snapshots():
    params = SimulationParameters(step_count=20, gravitational_constant=1.0)
    return list(Simulator(params).run(ReferenceTriangle().generate()))[::5]


def test_save_load_npz():
    """Test saving and loading NPZ format."""
    snapshots = _snapshots()
    metadata = {"time_step": 0.01, "stride": 5}

    with tempfile.NamedTemporaryFile(suffix='.npz', delete=False) as f:
        temp_path = f.name

    try:
        save_trajectory(snapshots, temp_path, metadata)

        loaded = load_trajectory(temp_path)

        assert loaded.steps.tolist() == [0, 5, 10, 15]
        assert np.allclose(loaded.times, [0.0, 0.05, 0.1, 0.15])
        assert np.allclose(loaded.positions[2], snapshots[2].positions)
        assert np.allclose(loaded.velocities[3], snapshots[3].velocities)
        assert np.allclose(loaded.masses, 1.0)
        assert loaded.metadata.get("stride") == 5
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)


def test_save_load_json():
    """Test saving and loading JSON format."""
    snapshots = _snapshots()
    metadata = {"time_step": 0.01, "stride": 5}

    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
        temp_path = f.name

    try:
        save_trajectory(snapshots, temp_path, metadata)

        loaded = load_trajectory(temp_path)
        rebuilt = loaded.snapshots()

        assert [s.step for s in rebuilt] == [0, 5, 10, 15]
        assert np.allclose(rebuilt[1].positions, snapshots[1].positions)
        assert loaded.metadata.get("time_step") == 0.01
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)


def test_unsupported_format():
    """Only .npz and .json are supported."""
    with pytest.raises(ValueError):
        save_trajectory(_snapshots(), "trajectory.csv")
    with pytest.raises(ValueError):
        save_trajectory([], "trajectory.npz")
