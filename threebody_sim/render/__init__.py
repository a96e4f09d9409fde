"""Trajectory recording and rasterization."""

from threebody_sim.render.recorder import TrajectoryRecorder
from threebody_sim.render.renderer_2d import TrajectoryRenderer, body_color

__all__ = ["TrajectoryRecorder", "TrajectoryRenderer", "body_color"]
