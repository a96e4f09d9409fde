"""
Three-body simulator - planar gravitational three-body integration.

Features:
- Ordered pairwise Newtonian forces with fail-fast singularity checks
- Semi-implicit Euler (Euler-Cromer) integration
- Lazy per-step snapshots
- Stride-sampled trajectory rendering to PNG and GIF
- CLI with JSON/YAML configuration
"""

__version__ = "0.1.0"

from threebody_sim.errors import (
    ThreeBodyError,
    SimulationError,
    DegenerateConfiguration,
    NonFiniteState,
    RenderingFailure,
)
from threebody_sim.physics.body import Body, Snapshot
from threebody_sim.physics.parameters import SimulationParameters
from threebody_sim.physics.simulator import Simulator, simulate

__all__ = [
    "Body",
    "Snapshot",
    "SimulationParameters",
    "Simulator",
    "simulate",
    "ThreeBodyError",
    "SimulationError",
    "DegenerateConfiguration",
    "NonFiniteState",
    "RenderingFailure",
]
