"""Preset initial configurations for three-body simulations."""

from threebody_sim.presets.base import Preset
from threebody_sim.presets.reference import ReferenceTriangle, REFERENCE_POSITIONS

PRESETS = {
    "reference": ReferenceTriangle,
}


def get_preset(name: str, **kwargs) -> Preset:
    """Get preset by name."""
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list(PRESETS.keys())}")
    return preset_class(**kwargs)


__all__ = ["Preset", "ReferenceTriangle", "REFERENCE_POSITIONS", "PRESETS", "get_preset"]
