"""Equipped bags and the conversions between bag stacks and live bags.

A bag exists in exactly one of two forms. Stored, it is an ItemStack of a
bag definition (quantity 1) sitting in some container. Equipped, it is a
``Bag`` bound to an equipment slot with a live Container. ``equip_bag`` and
``unequip_bag_to_stack`` are the only ways between the two.
"""

import logging
from typing import List, Optional

from ..models.item_definition import ItemDefinition
from ..models.item_filter import ItemFilter
from ..models.item_stack import ItemStack
from .container import Container

logger = logging.getLogger(__name__)


class Bag:
    """An equipped bag: identity plus a live container of its own."""

    def __init__(self, definition: ItemDefinition, slot_index: int):
        self.definition = definition
        self.slot_index = slot_index
        self.container = Container(definition.bag_capacity or 0, definition.container_filter)

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def slot_count(self) -> int:
        return self.container.size

    @property
    def filter(self) -> ItemFilter:
        return self.container.filter

    @property
    def icon(self) -> Optional[str]:
        return self.definition.icon

    @property
    def is_empty(self) -> bool:
        return self.container.is_empty

    def can_accept_bag(self, other: Optional["Bag"]) -> bool:
        """Bags may only hold other bags that are empty."""
        return other is not None and other is not self and other.is_empty

    def add_item(self, stack: Optional[ItemStack]) -> Optional[ItemStack]:
        """Place a stack in this bag. Returns the remainder."""
        return self.container.add_item(stack)

    def clear_contents(self) -> List[ItemStack]:
        """Empty the bag and return what it held."""
        return self.container.clear()

    def __repr__(self) -> str:
        return (
            f"Bag({self.id!r}, slot={self.slot_index}, "
            f"{self.container.empty_slot_count}/{self.slot_count} empty)"
        )


def equip_bag(stack: Optional[ItemStack], slot_index: int) -> Optional[Bag]:
    """
    Turn a bag stack into an equipped Bag bound to ``slot_index``.

    The new bag starts empty. The source stack is left untouched; removing it
    from wherever it came from is up to the caller.

    Returns:
        The Bag, or None if the stack is not an equippable bag
    """
    if stack is None or stack.is_empty:
        return None

    capacity = stack.definition.bag_capacity
    if capacity is None or capacity <= 0:
        logger.debug("Cannot equip %r: bag capacity is %s", stack, capacity)
        return None

    return Bag(stack.definition, slot_index)


def unequip_bag_to_stack(bag: Bag) -> Optional[ItemStack]:
    """
    Collapse an equipped Bag back into a single-item stack.

    Only an empty bag can collapse; a bag with contents is left as it is.

    Returns:
        The bag's stack, or None if the bag still holds items
    """
    if not bag.is_empty:
        logger.debug("Cannot unequip %r: bag is not empty", bag)
        return None

    bag.container.clear()
    return ItemStack(bag.definition, 1)
