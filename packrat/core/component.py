"""Base component class for the ECS framework."""

from dataclasses import dataclass
from typing import TypeVar


@dataclass
class Component:
    """
    Base class for all components.
    Components hold an entity's data; the world calls ``teardown`` when the
    owning entity is destroyed.
    """

    def teardown(self) -> None:
        """Release anything owned by this component."""
        pass


# Type variable for generic component operations
T = TypeVar('T', bound=Component)
