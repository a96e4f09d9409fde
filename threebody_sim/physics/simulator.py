"""Main simulator controller."""

from typing import Callable, Iterator, List, Optional, Sequence
import numpy as np
from threebody_sim.errors import NonFiniteState
from threebody_sim.physics.body import Body, Snapshot, validate_system
from threebody_sim.physics.parameters import SimulationParameters
from threebody_sim.physics.force_calculator import ForceCalculator
from threebody_sim.physics.integrators.base import Integrator
from threebody_sim.physics.integrators.euler_cromer import EulerCromerIntegrator

ProgressCallback = Callable[[Snapshot], None]


class Simulator:
    """Main simulation controller.

    Runs a fixed number of integration steps and emits one Snapshot per step.
    A Simulator keeps no state between runs; every call to :meth:`run` starts
    from a private copy of the bodies it is given.
    """

    def __init__(
        self,
        params: Optional[SimulationParameters] = None,
        integrator: Optional[Integrator] = None,
        on_progress: Optional[ProgressCallback] = None,
    ):
        """Initialize simulator.

        Args:
            params: Simulation parameters (defaults to the reference run)
            integrator: Integrator to use (default: Euler-Cromer)
            on_progress: Called with the snapshot of every
                ``params.progress_interval``-th step
        """
        self.params = params or SimulationParameters()
        self.integrator = integrator or EulerCromerIntegrator()
        self.on_progress = on_progress
        self.force_calculator = ForceCalculator(
            G=self.params.gravitational_constant,
            min_separation=self.params.min_separation,
        )

    def run(self, initial_bodies: Sequence[Body]) -> Iterator[Snapshot]:
        """Simulate from ``initial_bodies``.

        The bodies are validated immediately; integration happens lazily as
        the returned iterator is consumed. Stopping early is always safe.

        Args:
            initial_bodies: Exactly three bodies (not modified)

        Returns:
            Iterator over ``params.step_count`` snapshots in step order

        Raises:
            ValueError: if the system is not a valid three-body system
        """
        bodies = [body.copy() for body in validate_system(initial_bodies)]
        return self._iterate(bodies)

    def _iterate(self, bodies: List[Body]) -> Iterator[Snapshot]:
        params = self.params
        for step in range(params.step_count):
            self.integrator.step(bodies, self.force_calculator, params.time_step, step=step)
            self._check_finite(bodies, step)

            snapshot = Snapshot.from_bodies(step, params.time_at(step), bodies)
            if self.on_progress is not None and step % params.progress_interval == 0:
                self.on_progress(snapshot)
            yield snapshot

    @staticmethod
    def _check_finite(bodies: Sequence[Body], step: int):
        for index, body in enumerate(bodies):
            if not np.all(np.isfinite(body.velocity)):
                raise NonFiniteState(step, index, "velocity")
            if not np.all(np.isfinite(body.position)):
                raise NonFiniteState(step, index, "position")

    def run_to_end(self, initial_bodies: Sequence[Body]) -> Snapshot:
        """Run all steps and return the last snapshot."""
        snapshot = None
        for snapshot in self.run(initial_bodies):
            pass
        return snapshot


def simulate(
    initial_bodies: Sequence[Body],
    params: Optional[SimulationParameters] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> Iterator[Snapshot]:
    """Shortcut for ``Simulator(params, on_progress=on_progress).run(initial_bodies)``."""
    return Simulator(params, on_progress=on_progress).run(initial_bodies)
