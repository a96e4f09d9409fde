"""Error taxonomy for three-body simulations."""

from typing import Optional, Tuple


class ThreeBodyError(Exception):
    """Base class for all errors raised by threebody_sim."""


class SimulationError(ThreeBodyError, RuntimeError):
    """Fatal error during integration. The run cannot continue."""

    def __init__(self, message: str, step: Optional[int] = None):
        super().__init__(message)
        self.step = step


class DegenerateConfiguration(SimulationError):
    """Two bodies are (numerically) coincident during force computation."""

    def __init__(self, step: Optional[int], bodies: Tuple[int, int], separation: float):
        i, j = bodies
        super().__init__(
            f"Bodies {i} and {j} have separation {separation!r} at step {step}; "
            f"gravitational force is undefined",
            step=step,
        )
        self.bodies = bodies
        self.separation = separation


class NonFiniteState(SimulationError):
    """A position or velocity component became infinite or NaN."""

    def __init__(self, step: Optional[int], body: int, quantity: str):
        super().__init__(
            f"Body {body} has a non-finite {quantity} after step {step}",
            step=step,
        )
        self.body = body
        self.quantity = quantity


class RenderingFailure(ThreeBodyError, RuntimeError):
    """Output-stage error. Never affects already computed snapshots."""
