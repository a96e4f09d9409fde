"""Saving and loading recorded trajectories."""

import numpy as np
import json
from typing import Any, Dict, NamedTuple, Optional, Sequence
from pathlib import Path
from threebody_sim.physics.body import Snapshot

TRAJECTORY_FORMATS = ('.npz', '.json')


class Trajectory(NamedTuple):
    steps: np.ndarray       # (n,)
    times: np.ndarray       # (n,)
    positions: np.ndarray   # (n, 3, 2)
    velocities: np.ndarray  # (n, 3, 2)
    masses: np.ndarray      # (3,)
    metadata: Dict[str, Any]

    def snapshots(self):
        """Rebuild Snapshot records."""
        return [
            Snapshot(int(step), float(time), pos, vel, self.masses)
            for step, time, pos, vel in zip(self.steps, self.times, self.positions, self.velocities)
        ]


def save_trajectory(
    snapshots: Sequence[Snapshot],
    output_path: str,
    metadata: Optional[Dict[str, Any]] = None
):
    """Save recorded snapshots to file.

    Args:
        snapshots: Snapshots to save (at least one)
        output_path: Output file path (.npz or .json)
        metadata: Optional metadata dictionary
    """
    if not snapshots:
        raise ValueError("No snapshots to save")
    output_path = Path(output_path)

    steps = np.array([s.step for s in snapshots], dtype=np.int64)
    times = np.array([s.time for s in snapshots])
    positions = np.stack([s.positions for s in snapshots])
    velocities = np.stack([s.velocities for s in snapshots])
    masses = snapshots[0].masses

    if output_path.suffix == '.npz':
        save_dict = {
            'steps': steps,
            'times': times,
            'positions': positions,
            'velocities': velocities,
            'masses': masses,
        }
        if metadata:
            for key, value in metadata.items():
                if isinstance(value, (int, float, str)):
                    save_dict[f'metadata_{key}'] = value
        np.savez_compressed(output_path, **save_dict)

    elif output_path.suffix == '.json':
        state_dict = {
            'steps': steps.tolist(),
            'times': times.tolist(),
            'positions': positions.tolist(),
            'velocities': velocities.tolist(),
            'masses': masses.tolist(),
            'metadata': metadata or {}
        }
        with open(output_path, 'w') as f:
            json.dump(state_dict, f, indent=2)

    else:
        raise ValueError(f"Unsupported file format: {output_path.suffix}. Use .npz or .json")


def load_trajectory(input_path: str) -> Trajectory:
    """Load a trajectory written by :func:`save_trajectory`."""
    input_path = Path(input_path)

    if input_path.suffix == '.npz':
        with np.load(input_path) as data:
            metadata = {}
            for key in data.keys():
                if key.startswith('metadata_'):
                    metadata[key[9:]] = data[key].item()
            return Trajectory(
                data['steps'], data['times'], data['positions'],
                data['velocities'], data['masses'], metadata,
            )

    elif input_path.suffix == '.json':
        with open(input_path, 'r') as f:
            state_dict = json.load(f)
        return Trajectory(
            np.array(state_dict['steps'], dtype=np.int64),
            np.array(state_dict['times']),
            np.array(state_dict['positions']),
            np.array(state_dict['velocities']),
            np.array(state_dict['masses']),
            state_dict.get('metadata', {}),
        )

    else:
        raise ValueError(f"Unsupported file format: {input_path.suffix}. Use .npz or .json")
