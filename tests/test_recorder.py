"""Tests for stride-based trajectory recording."""

import numpy as np
import pytest
from threebody_sim import SimulationParameters, Simulator, Snapshot
from threebody_sim.presets import ReferenceTriangle
from threebody_sim.render.recorder import TrajectoryRecorder


def _snapshot(step):
    return Snapshot(step, step * 0.01, np.full((3, 2), float(step)), np.zeros((3, 2)), np.ones(3))


def test_reference_stride():
    """100000 steps over a 60 s, 60 fps animation keeps every 27th step."""
    recorder = TrajectoryRecorder(100000, animation_length_seconds=60, frames_per_second=60)

    assert recorder.target_frames == 3600
    assert recorder.stride == 27

    retained = recorder.record_all(_snapshot(step) for step in range(100000))

    assert retained == len(recorder) == 100000 // 27 + 1 == 3704
    steps = recorder.steps()
    assert steps[0] == 0
    assert np.all(steps % 27 == 0)
    assert np.all(np.diff(steps) == 27)


def test_stride_never_below_one():
    """Short runs keep every snapshot."""
    recorder = TrajectoryRecorder(100)
    assert recorder.stride == 1
    assert recorder.record_all(_snapshot(step) for step in range(100)) == 100


def test_consume_passes_everything_through():
    """consume() yields every snapshot but retains only stride multiples."""
    params = SimulationParameters(step_count=90)
    recorder = TrajectoryRecorder(params.step_count, animation_length_seconds=1, frames_per_second=30)

    seen = list(recorder.consume(Simulator(params).run(ReferenceTriangle().generate())))

    assert len(seen) == 90
    assert recorder.stride == 3
    assert recorder.steps().tolist() == list(range(0, 90, 3))
    assert recorder.positions().shape == (30, 3, 2)


def test_record_returns_flag_and_clear():
    """record() reports retention; clear() drops everything."""
    recorder = TrajectoryRecorder(1000, animation_length_seconds=1, frames_per_second=100)

    assert recorder.record(_snapshot(0))
    assert not recorder.record(_snapshot(5))
    assert recorder.record(_snapshot(10))

    recorder.clear()
    assert len(recorder) == 0
    assert recorder.positions().shape == (0, 3, 2)


def test_invalid_arguments():
    """Non-positive sizes are rejected."""
    with pytest.raises(ValueError):
        TrajectoryRecorder(0)
    with pytest.raises(ValueError):
        TrajectoryRecorder(100, animation_length_seconds=0)
