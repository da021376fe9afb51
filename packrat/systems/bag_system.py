"""Bag system: moves bags between containers and equipment slots."""

import logging
from typing import List, Optional

from ..core.system import System
from ..components.inventory import BagRef, ContainerRef, InventoryComponent
from ..models.item_stack import ItemStack

logger = logging.getLogger(__name__)


class BagSystem(System):
    """
    Handles equipping and unequipping bags as single steps.

    Each operation either completes fully or leaves the inventory exactly as
    it was, so a bag is never duplicated or lost between its stack form and
    its equipped form.
    """

    priority = 80

    def _inventory(self, entity_id: int) -> Optional[InventoryComponent]:
        return self.world.get_component(entity_id, InventoryComponent)

    def equip_from_container(
        self,
        entity_id: int,
        source: ContainerRef,
        slot_index: int,
        bag_slot: int,
    ) -> bool:
        """
        Equip the bag stack found in a container slot.

        Args:
            entity_id: Entity that owns the inventory
            source: Container holding the bag stack
            slot_index: Slot of the bag stack in that container
            bag_slot: Equipment slot to equip into

        Returns:
            True if the bag was equipped and removed from the source
        """
        inventory = self._inventory(entity_id)
        if inventory is None:
            return False

        container = inventory.container_at(source)
        if container is None:
            return False

        stack = container.get_item(slot_index)
        if stack is None:
            return False

        if inventory.equip_bag(stack, bag_slot) is None:
            logger.debug("Could not equip %r into bag slot %d", stack, bag_slot)
            return False

        container.remove_item(slot_index, 1)
        logger.debug("Equipped %s into bag slot %d", stack.item_id, bag_slot)
        return True

    def unequip_to_container(
        self,
        entity_id: int,
        bag_slot: int,
        target: ContainerRef,
        slot_index: int,
    ) -> bool:
        """
        Unequip an empty bag and place its stack in an empty container slot.

        Refuses, changing nothing, if the bag holds items, the target slot is
        occupied or filtered, or the target is the bag's own container.

        Returns:
            True if the bag now sits in the target slot
        """
        inventory = self._inventory(entity_id)
        if inventory is None:
            return False

        bag = inventory.get_bag(bag_slot)
        if bag is None:
            return False

        if target == BagRef(bag_slot):
            return False

        container = inventory.container_at(target)
        if container is None or not 0 <= slot_index < container.size:
            return False
        if not container.is_slot_empty(slot_index):
            logger.debug("Cannot unequip into occupied slot %d", slot_index)
            return False
        if not container.filter.allows(bag.definition):
            logger.debug("Target container does not accept %s", bag.id)
            return False

        stack = inventory.unequip(bag_slot)
        if stack is None:
            return False

        container.set_item(slot_index, stack)
        return True

    def force_unequip(self, entity_id: int, bag_slot: int) -> List[ItemStack]:
        """
        Remove a bag whatever it holds.

        Its contents are redistributed, then the bag's own stack is offered
        to the inventory as well.

        Returns:
            Stacks that found no room, to be dropped into the world
        """
        inventory = self._inventory(entity_id)
        if inventory is None:
            return []

        bag = inventory.get_bag(bag_slot)
        if bag is None:
            return []

        drops = inventory.unequip_bag(bag_slot)
        leftover = inventory.add_item(ItemStack(bag.definition, 1))
        if leftover is not None:
            drops.append(leftover)

        if drops:
            logger.debug("Forced unequip of %s left %d stacks to drop", bag.id, len(drops))
        return drops

    def swap_bags(self, entity_id: int, first: int, second: int) -> bool:
        """Exchange two equipment slots, contents included."""
        inventory = self._inventory(entity_id)
        if inventory is None:
            return False
        return inventory.swap_bags(first, second)
