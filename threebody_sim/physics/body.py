"""Body state and immutable per-step snapshots."""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple
import numpy as np

N_BODIES = 3


def _as_vector(value, name: str) -> np.ndarray:
    vec = np.array(value, dtype=np.float64).reshape(-1)
    if vec.shape != (2,):
        raise ValueError(f"{name} must have exactly 2 components, got shape {vec.shape}")
    if not np.all(np.isfinite(vec)):
        raise ValueError(f"{name} must be finite, got {vec}")
    return vec


@dataclass(eq=False)
class Body:
    """A point mass moving in the plane.

    The engine mutates ``position`` and ``velocity`` in place once per step.
    """
    mass: float
    position: np.ndarray
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(2))

    def __post_init__(self):
        self.mass = float(self.mass)
        if not np.isfinite(self.mass) or self.mass <= 0:
            raise ValueError(f"Body mass must be positive and finite, got {self.mass}")
        self.position = _as_vector(self.position, "position")
        self.velocity = _as_vector(self.velocity, "velocity")

    def copy(self) -> "Body":
        """Return an independent copy of this body."""
        return Body(self.mass, self.position.copy(), self.velocity.copy())

    def __repr__(self) -> str:
        return (
            f"Body(mass={self.mass}, position=({self.position[0]}, {self.position[1]}), "
            f"velocity=({self.velocity[0]}, {self.velocity[1]}))"
        )


def validate_system(bodies: Sequence[Body]) -> List[Body]:
    """Check that ``bodies`` is a three-body system and return it as a list.

    Raises:
        ValueError: if there are not exactly three Body instances
    """
    bodies = list(bodies)
    if len(bodies) != N_BODIES:
        raise ValueError(f"A three-body system needs exactly {N_BODIES} bodies, got {len(bodies)}")
    for index, body in enumerate(bodies):
        if not isinstance(body, Body):
            raise ValueError(f"Entry {index} is not a Body: {body!r}")
    return bodies


def _frozen(array: np.ndarray) -> np.ndarray:
    array = np.array(array, dtype=np.float64, copy=True)
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class Snapshot:
    """Immutable record of the system state after one integration step.

    Arrays are private read-only copies, so holding on to a snapshot never
    aliases the live simulation state.

    Attributes:
        step: Step index (0-based)
        time: Simulated time, ``step * time_step``
        positions: Positions array (3, 2)
        velocities: Velocities array (3, 2)
        masses: Masses array (3,)
    """
    step: int
    time: float
    positions: np.ndarray
    velocities: np.ndarray
    masses: np.ndarray

    def __post_init__(self):
        if self.step < 0:
            raise ValueError(f"Snapshot step must be non-negative, got {self.step}")
        object.__setattr__(self, "positions", _frozen(self.positions))
        object.__setattr__(self, "velocities", _frozen(self.velocities))
        object.__setattr__(self, "masses", _frozen(self.masses))

    @classmethod
    def from_bodies(cls, step: int, time: float, bodies: Sequence[Body]) -> "Snapshot":
        """Capture the state of ``bodies``."""
        return cls(
            step=step,
            time=time,
            positions=np.stack([body.position for body in bodies]),
            velocities=np.stack([body.velocity for body in bodies]),
            masses=np.array([body.mass for body in bodies]),
        )

    @property
    def n_bodies(self) -> int:
        return self.positions.shape[0]

    @property
    def bodies(self) -> List[Body]:
        """Fresh, mutable Body copies of the recorded state."""
        return [
            Body(self.masses[i], self.positions[i], self.velocities[i])
            for i in range(self.n_bodies)
        ]

    def position(self, index: int) -> Tuple[float, float]:
        x, y = self.positions[index]
        return float(x), float(y)

    def velocity(self, index: int) -> Tuple[float, float]:
        vx, vy = self.velocities[index]
        return float(vx), float(vy)
