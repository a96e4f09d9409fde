"""Numerical integrators for three-body simulations."""

from threebody_sim.physics.integrators.base import Integrator
from threebody_sim.physics.integrators.euler_cromer import EulerCromerIntegrator

__all__ = ["Integrator", "EulerCromerIntegrator"]
