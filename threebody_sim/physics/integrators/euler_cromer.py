"""Semi-implicit Euler (Euler-Cromer) integrator, O(h) accuracy."""

from typing import List, Optional
from threebody_sim.physics.body import Body
from threebody_sim.physics.force_calculator import ForceCalculator
from threebody_sim.physics.integrators.base import Integrator


class EulerCromerIntegrator(Integrator):
    """Euler-Cromer method: velocities first, then positions from the new velocities.

    Each ordered pair's force is folded into the acted-upon body's velocity
    as soon as it is known, in pair iteration order.
    """

    @property
    def name(self) -> str:
        return "euler_cromer"

    @property
    def order(self) -> int:
        return 1

    def step(self, bodies: List[Body], force_calculator: ForceCalculator, dt: float, step: Optional[int] = None):
        """Euler-Cromer step: v_new = v + (F/m)*dt, r_new = r + v_new*dt.

        Args:
            bodies: Live body state (mutated)
            force_calculator: Pairwise force evaluator
            dt: Time step
            step: Current step index, for error reporting
        """
        # All forces come from pre-step positions; nothing moves until every
        # velocity of the step is final.
        deltas = list(force_calculator.accumulate(bodies, dt, step))

        for i, _, delta in deltas:
            bodies[i].velocity += delta

        for body in bodies:
            body.position += body.velocity * dt
