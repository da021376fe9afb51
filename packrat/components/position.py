"""Position component for entities placed in the world."""

from dataclasses import dataclass
from ..core.component import Component


@dataclass
class PositionComponent(Component):
    """Location in world space. Units are whatever the host uses."""

    x: float = 0.0
    y: float = 0.0

    def distance_squared(self, x: float, y: float) -> float:
        dx = self.x - x
        dy = self.y - y
        return dx * dx + dy * dy

