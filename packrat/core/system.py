"""Base system class for the ECS framework."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .world import World


class System:
    """
    Base class for systems.

    A system is bound to one World by ``World.register_system``. Event-driven
    systems (bag moves) only expose operations; ticking systems (world items)
    override ``update``.
    """

    priority: int = 0  # Lower = runs earlier

    def __init__(self):
        self.world: Optional['World'] = None

    def update(self, delta_time: float) -> None:
        """Advance time-based state. No-op unless overridden."""
