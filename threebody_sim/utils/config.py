"""Configuration management."""

import json
from typing import Any, Dict, List, Optional
from pathlib import Path
from dataclasses import dataclass, asdict, fields
from threebody_sim.physics.body import Body
from threebody_sim.physics.parameters import (
    SimulationParameters,
    DEFAULT_TIME_STEP,
    DEFAULT_STEP_COUNT,
    GRAVITATIONAL_CONSTANT,
    DEFAULT_MIN_SEPARATION,
    DEFAULT_PROGRESS_INTERVAL,
)
from threebody_sim.presets import get_preset


@dataclass
class Config:
    """Run configuration."""
    # Simulation parameters
    time_step: float = DEFAULT_TIME_STEP
    step_count: int = DEFAULT_STEP_COUNT
    gravitational_constant: float = GRAVITATIONAL_CONSTANT
    min_separation: float = DEFAULT_MIN_SEPARATION
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL

    # Initial conditions: a preset, unless bodies are given explicitly
    preset: str = "reference"
    bodies: Optional[List[Dict[str, Any]]] = None

    # Recording and rendering parameters
    animation_length_seconds: int = 60
    frames_per_second: int = 60
    width: int = 250
    height: int = 255
    scale: float = 100.0

    # Export parameters
    output_path: str = "trajectory.png"
    export_gif: bool = False
    save_trajectory: Optional[str] = None

    def simulation_parameters(self) -> SimulationParameters:
        return SimulationParameters(
            time_step=self.time_step,
            step_count=self.step_count,
            gravitational_constant=self.gravitational_constant,
            min_separation=self.min_separation,
            progress_interval=self.progress_interval,
        )

    def initial_bodies(self) -> List[Body]:
        """Bodies from the explicit list if present, otherwise from the preset."""
        if self.bodies is None:
            return get_preset(self.preset).generate()
        return [
            Body(
                body["mass"],
                body["position"],
                body.get("velocity", (0.0, 0.0)),
            )
            for body in self.bodies
        ]


def config_from_dict(data: Dict[str, Any]) -> Config:
    """Build a Config, rejecting unknown keys."""
    known = {f.name for f in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {unknown}")
    return Config(**data)


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix == '.yaml' or config_path.suffix == '.yml':
            try:
                import yaml
            except ImportError:
                raise ImportError("YAML support requires PyYAML. Install with: pip install pyyaml")
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    return config_from_dict(data or {})


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if output_path.suffix == '.yaml' or output_path.suffix == '.yml':
            try:
                import yaml
            except ImportError:
                raise ImportError("YAML support requires PyYAML. Install with: pip install pyyaml")
            yaml.dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
