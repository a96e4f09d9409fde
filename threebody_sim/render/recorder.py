"""Stride-based retention of snapshots for rendering."""

from typing import Iterable, Iterator, List
import numpy as np
from threebody_sim.physics.body import Snapshot

DEFAULT_ANIMATION_LENGTH_SECONDS = 60
DEFAULT_FRAMES_PER_SECOND = 60


class TrajectoryRecorder:
    """Keeps every ``stride``-th snapshot of a run.

    The stride is chosen so that a run of ``step_count`` steps yields about
    one retained snapshot per animation frame.
    """

    def __init__(
        self,
        step_count: int,
        animation_length_seconds: int = DEFAULT_ANIMATION_LENGTH_SECONDS,
        frames_per_second: int = DEFAULT_FRAMES_PER_SECOND,
    ):
        """Initialize recorder.

        Args:
            step_count: Number of steps in the run being recorded
            animation_length_seconds: Target animation length
            frames_per_second: Target animation frame rate
        """
        if step_count <= 0:
            raise ValueError(f"step_count must be positive, got {step_count}")
        if animation_length_seconds <= 0 or frames_per_second <= 0:
            raise ValueError("animation_length_seconds and frames_per_second must be positive")
        self.step_count = step_count
        self.animation_length_seconds = animation_length_seconds
        self.frames_per_second = frames_per_second
        self.snapshots: List[Snapshot] = []

    @property
    def target_frames(self) -> int:
        return int(self.animation_length_seconds * self.frames_per_second)

    @property
    def stride(self) -> int:
        """Retention stride; never below 1."""
        return max(1, self.step_count // self.target_frames)

    def record(self, snapshot: Snapshot) -> bool:
        """Retain ``snapshot`` if its step falls on the stride.

        Returns:
            True if the snapshot was retained
        """
        if snapshot.step % self.stride != 0:
            return False
        self.snapshots.append(snapshot)
        return True

    def consume(self, snapshots: Iterable[Snapshot]) -> Iterator[Snapshot]:
        """Record snapshots while passing every one of them through."""
        for snapshot in snapshots:
            self.record(snapshot)
            yield snapshot

    def record_all(self, snapshots: Iterable[Snapshot]) -> int:
        """Exhaust ``snapshots``, recording as it goes.

        Returns:
            Number of snapshots retained by this call
        """
        retained = 0
        for snapshot in snapshots:
            retained += self.record(snapshot)
        return retained

    def steps(self) -> np.ndarray:
        return np.array([snapshot.step for snapshot in self.snapshots], dtype=np.int64)

    def positions(self) -> np.ndarray:
        """Retained positions.

        Returns:
            Array (n_retained, n_bodies, 2)
        """
        if not self.snapshots:
            return np.zeros((0, 3, 2))
        return np.stack([snapshot.positions for snapshot in self.snapshots])

    def clear(self):
        self.snapshots = []

    def __len__(self) -> int:
        return len(self.snapshots)
