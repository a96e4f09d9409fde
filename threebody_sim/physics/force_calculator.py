"""Ordered pairwise gravitational forces.

Forces are evaluated one ordered pair ``(i, j)`` at a time: the force body
``j`` exerts on body ``i``. The reciprocal force on ``j`` is computed
separately when the iteration reaches ``(j, i)``; Newton's third law is never
applied within a pair.
"""

from typing import Iterator, Optional, Sequence, Tuple
import math
import numpy as np
from threebody_sim.errors import DegenerateConfiguration
from threebody_sim.physics.body import Body
from threebody_sim.physics.parameters import GRAVITATIONAL_CONSTANT, DEFAULT_MIN_SEPARATION


def ordered_pairs(n: int) -> Iterator[Tuple[int, int]]:
    """Yield ``(i, j)`` for every ordered pair of distinct indices, i-major."""
    for i in range(n):
        for j in range(n):
            if i != j:
                yield i, j


def pairwise_force(
    body_i: Body,
    body_j: Body,
    G: float = GRAVITATIONAL_CONSTANT,
    min_separation: float = DEFAULT_MIN_SEPARATION,
    pair: Tuple[int, int] = (0, 1),
    step: Optional[int] = None,
) -> np.ndarray:
    """Force exerted on ``body_i`` by ``body_j``.

    F = G * m_i * m_j / r^2, directed along atan2(dy, dx) from i towards j.

    Args:
        body_i: Body acted upon
        body_j: Acting body
        G: Gravitational constant
        min_separation: Separations at or below this are degenerate
        pair: Indices of (body_i, body_j), for error reporting
        step: Current step index, for error reporting

    Returns:
        Force vector (2,)

    Raises:
        DegenerateConfiguration: if the separation is not above ``min_separation``
    """
    dx = body_j.position[0] - body_i.position[0]
    dy = body_j.position[1] - body_i.position[1]
    r = math.sqrt(dx * dx + dy * dy)
    # Also rejects NaN separations
    if not r > min_separation:
        raise DegenerateConfiguration(step, pair, r)

    force = G * body_j.mass * body_i.mass / r / r
    angle = math.atan2(dy, dx)
    return np.array([force * math.cos(angle), force * math.sin(angle)])


class ForceCalculator:
    """Pairwise force evaluation over a fixed set of bodies."""

    def __init__(
        self,
        G: float = GRAVITATIONAL_CONSTANT,
        min_separation: float = DEFAULT_MIN_SEPARATION,
    ):
        """Initialize force calculator.

        Args:
            G: Gravitational constant
            min_separation: Degeneracy threshold for pair separations
        """
        self.G = G
        self.min_separation = min_separation

    def pair_forces(self, bodies: Sequence[Body], step: Optional[int] = None) -> Iterator[Tuple[int, int, np.ndarray]]:
        """Yield ``(i, j, force on i from j)`` in iteration order.

        Positions are only read, so every force of a step comes from the same
        pre-step configuration as long as the caller does not move bodies
        while iterating.
        """
        for i, j in ordered_pairs(len(bodies)):
            yield i, j, pairwise_force(
                bodies[i], bodies[j], self.G, self.min_separation, pair=(i, j), step=step
            )

    def accumulate(self, bodies: Sequence[Body], dt: float, step: Optional[int] = None) -> Iterator[Tuple[int, int, np.ndarray]]:
        """Yield ``(i, j, velocity delta of i due to j)`` in iteration order.

        The delta is ``force / m_i * dt``, the increment an explicit velocity
        update adds for one ordered pair.
        """
        for i, j, force in self.pair_forces(bodies, step):
            yield i, j, force / bodies[i].mass * dt

    def net_forces(self, bodies: Sequence[Body], step: Optional[int] = None) -> np.ndarray:
        """Total force on every body.

        Returns:
            Forces array (n, 2)
        """
        forces = np.zeros((len(bodies), 2))
        for i, _, force in self.pair_forces(bodies, step):
            forces[i] += force
        return forces
