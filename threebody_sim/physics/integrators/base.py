"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import List, Optional
from threebody_sim.physics.body import Body
from threebody_sim.physics.force_calculator import ForceCalculator


class Integrator(ABC):
    """Abstract interface for numerical integrators."""

    @abstractmethod
    def step(self, bodies: List[Body], force_calculator: ForceCalculator, dt: float, step: Optional[int] = None):
        """Advance ``bodies`` in place by one time step.

        Args:
            bodies: Live body state (mutated)
            force_calculator: Pairwise force evaluator
            dt: Time step
            step: Current step index, for error reporting
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
