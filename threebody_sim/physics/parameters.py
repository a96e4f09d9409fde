"""Fixed simulation parameters."""

from dataclasses import dataclass
import math
import numbers

DEFAULT_TIME_STEP = 0.01
DEFAULT_STEP_COUNT = 100_000
GRAVITATIONAL_CONSTANT = 6.67430e-11  # G, SI units
DEFAULT_MIN_SEPARATION = 1e-12
DEFAULT_PROGRESS_INTERVAL = 1000


def _is_positive_int(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class SimulationParameters:
    """Parameters fixed for the duration of a run.

    Attributes:
        time_step: Fixed integration step
        step_count: Number of steps (and snapshots) in a run
        gravitational_constant: Newton's G
        min_separation: Separations at or below this abort the run
        progress_interval: Progress callback fires every this many steps
    """
    time_step: float = DEFAULT_TIME_STEP
    step_count: int = DEFAULT_STEP_COUNT
    gravitational_constant: float = GRAVITATIONAL_CONSTANT
    min_separation: float = DEFAULT_MIN_SEPARATION
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL

    def __post_init__(self):
        if not math.isfinite(self.time_step) or self.time_step <= 0:
            raise ValueError(f"time_step must be positive and finite, got {self.time_step}")
        if not _is_positive_int(self.step_count):
            raise ValueError(f"step_count must be a positive integer, got {self.step_count!r}")
        if not math.isfinite(self.gravitational_constant) or self.gravitational_constant <= 0:
            raise ValueError(
                f"gravitational_constant must be positive and finite, got {self.gravitational_constant}"
            )
        if not math.isfinite(self.min_separation) or self.min_separation < 0:
            raise ValueError(f"min_separation must be non-negative, got {self.min_separation}")
        if not _is_positive_int(self.progress_interval):
            raise ValueError(f"progress_interval must be a positive integer, got {self.progress_interval!r}")

    def time_at(self, step: int) -> float:
        """Simulated time of ``step``."""
        return step * self.time_step
