"""Component for item stacks lying in the world."""

from dataclasses import dataclass

from ..core.component import Component
from ..models.item_stack import ItemStack


@dataclass(eq=False)
class WorldItemComponent(Component):
    """A dropped stack waiting to be picked up."""

    stack: ItemStack
    grace_timer: float = 0.0  # Seconds until the stack can be picked up

    @property
    def can_pick_up(self) -> bool:
        return self.grace_timer <= 0 and not self.stack.is_empty

    def tick(self, delta_time: float) -> None:
        """Count the grace timer down."""
        if self.grace_timer > 0:
            self.grace_timer = max(0.0, self.grace_timer - delta_time)
