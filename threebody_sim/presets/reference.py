"""Reference starting triangle: three unit masses at rest."""

from typing import List
from threebody_sim.physics.body import Body
from threebody_sim.presets.base import Preset

REFERENCE_POSITIONS = (
    (0.3089693008, 0.4236727692),
    (-0.5, 0.0),
    (0.5, 0.0),
)


class ReferenceTriangle(Preset):
    """Three bodies of equal mass released from rest.

    Body 0 sits above the segment joining bodies 1 and 2.
    """

    def __init__(self, mass: float = 1.0):
        """Initialize preset.

        Args:
            mass: Mass of every body
        """
        self.mass = mass

    @property
    def name(self) -> str:
        return "reference"

    def generate(self) -> List[Body]:
        return [Body(self.mass, position, (0.0, 0.0)) for position in REFERENCE_POSITIONS]
