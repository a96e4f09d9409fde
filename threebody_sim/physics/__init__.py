"""Physics engine for three-body simulations."""

from threebody_sim.physics.body import Body, Snapshot
from threebody_sim.physics.parameters import SimulationParameters
from threebody_sim.physics.force_calculator import ForceCalculator, pairwise_force
from threebody_sim.physics.simulator import Simulator, simulate

__all__ = ["Body", "Snapshot", "SimulationParameters", "ForceCalculator", "pairwise_force", "Simulator", "simulate"]
