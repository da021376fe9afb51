"""World item system: dropped stacks and pickups."""

import logging
import random
from typing import List, Optional, Tuple

from ..core.system import System
from ..components.inventory import InventoryComponent
from ..components.position import PositionComponent
from ..components.world_item import WorldItemComponent
from ..models.item_definition import ItemDefinition
from ..models.item_stack import ItemStack
from ..models.settings import InventorySettings

logger = logging.getLogger(__name__)


class WorldItemSystem(System):
    """Tracks item stacks lying in the world and moves them into inventories."""

    priority = 150

    def __init__(
        self,
        settings: Optional[InventorySettings] = None,
        rng: Optional[random.Random] = None,
    ):
        super().__init__()
        self.settings = settings or InventorySettings()
        self.rng = rng or random.Random()

    @property
    def item_count(self) -> int:
        return len(self.world.get_all_components(WorldItemComponent))

    def spawn_item(
        self,
        stack: Optional[ItemStack],
        x: float,
        y: float,
        grace_time: Optional[float] = None,
    ) -> Optional[int]:
        """
        Put a stack into the world.

        Args:
            stack: Stack to drop; the pickup takes ownership of it
            x: World x position
            y: World y position
            grace_time: Seconds before pickup is allowed (settings default)

        Returns:
            Entity ID of the pickup, or None if nothing was spawned
        """
        if stack is None or stack.is_empty:
            return None

        if self.item_count >= self.settings.max_world_items:
            logger.warning("World item limit reached, cannot spawn %s", stack)
            return None

        if grace_time is None:
            grace_time = self.settings.pickup_grace_time

        entity_id = self.world.create_entity()
        self.world.add_component(entity_id, PositionComponent(x=x, y=y))
        self.world.add_component(entity_id, WorldItemComponent(stack=stack, grace_timer=grace_time))
        return entity_id

    def _scatter(self, x: float, y: float) -> Tuple[float, float]:
        spread = self.settings.item_drop_spread
        return (
            x + self.rng.uniform(-spread, spread),
            y + self.rng.uniform(-spread, spread),
        )

    def spawn_item_pile(
        self,
        definition: ItemDefinition,
        quantity: int,
        x: float,
        y: float,
    ) -> Tuple[List[int], List[ItemStack]]:
        """
        Drop any quantity of an item as a pile of max-size stacks around a point.

        Returns:
            Entity IDs of the spawned pickups, and the stacks the world refused
            once its item limit was reached
        """
        spawned: List[int] = []
        refused: List[ItemStack] = []
        while quantity > 0:
            size = min(quantity, definition.max_stack_size)
            stack = ItemStack(definition, size)
            quantity -= size
            if refused:
                refused.append(stack)
                continue
            entity_id = self.spawn_item(stack, *self._scatter(x, y))
            if entity_id is None:
                refused.append(stack)
            else:
                spawned.append(entity_id)
        return spawned, refused

    def drop_all(self, stacks: List[ItemStack], x: float, y: float) -> List[ItemStack]:
        """
        Drop a list of stacks (an overflow list) around a point.

        Returns:
            Stacks the world could not take because the item limit was reached
        """
        refused = []
        for stack in stacks:
            if self.spawn_item(stack, *self._scatter(x, y)) is None:
                refused.append(stack)
        return refused

    def pickup(self, collector_id: int, pickup_id: int) -> bool:
        """
        Move a pickup into the collector's inventory.

        Whatever does not fit stays in the world as a smaller stack.

        Returns:
            True if at least part of the stack was taken
        """
        inventory = self.world.get_component(collector_id, InventoryComponent)
        item = self.world.get_component(pickup_id, WorldItemComponent)
        if inventory is None or item is None or not item.can_pick_up:
            return False

        before = item.stack.quantity
        remainder = inventory.add_item(item.stack)
        if remainder is None:
            self.world.destroy_entity(pickup_id)
            return True

        if remainder.quantity < before:
            item.stack = remainder
            return True
        return False

    def pickup_nearby(self, collector_id: int, radius: float) -> int:
        """
        Pick up everything within ``radius`` of the collector, nearest first.

        Returns:
            Number of pickups that were at least partly collected
        """
        position = self.world.get_component(collector_id, PositionComponent)
        if position is None:
            return 0

        collected = 0
        for pickup_id in self.items_near(position.x, position.y, radius):
            if self.pickup(collector_id, pickup_id):
                collected += 1
        return collected

    def items_near(self, x: float, y: float, radius: float) -> List[int]:
        """Pickup entity IDs within ``radius`` of a point, nearest first."""
        radius_squared = radius * radius
        nearby = []
        for entity_id, position, _ in self.world.query(PositionComponent, WorldItemComponent):
            dist = position.distance_squared(x, y)
            if dist <= radius_squared:
                nearby.append((dist, entity_id))
        return [entity_id for _, entity_id in sorted(nearby)]

    def remove_item(self, pickup_id: int) -> Optional[ItemStack]:
        """Take a pickup out of the world and return its stack."""
        item = self.world.get_component(pickup_id, WorldItemComponent)
        if item is None:
            return None
        self.world.destroy_entity(pickup_id)
        return item.stack

    def clear_all(self) -> List[ItemStack]:
        """Remove every pickup and return their stacks."""
        return [
            stack for stack in (
                self.remove_item(pickup_id)
                for pickup_id in list(self.world.get_all_components(WorldItemComponent))
            )
            if stack is not None
        ]

    def update(self, delta_time: float) -> None:
        """Count down grace timers and clear out emptied pickups."""
        for entity_id, item in self.world.get_all_components(WorldItemComponent).items():
            if item.stack.is_empty:
                self.world.destroy_entity(entity_id)
            else:
                item.tick(delta_time)
