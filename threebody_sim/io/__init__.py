"""I/O utilities for image, animation and trajectory export."""

from threebody_sim.io.image_io import save_image
from threebody_sim.io.gif_exporter import GIFExporter
from threebody_sim.io.trajectory_io import save_trajectory, load_trajectory, Trajectory

__all__ = ["save_image", "GIFExporter", "save_trajectory", "load_trajectory", "Trajectory"]
