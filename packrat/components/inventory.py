"""Inventory component: a root container plus equipment slots for bags."""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple, Union

from ..core.component import Component
from ..models.item_filter import ItemFilter
from ..models.item_stack import ItemStack
from .bag import Bag, equip_bag, unequip_bag_to_stack
from .container import Container

if TYPE_CHECKING:
    from ..models.catalog import ItemCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RootRef:
    """Points at an inventory's root container."""

    def resolve(self, inventory: "InventoryComponent") -> Optional[Container]:
        return inventory.root


@dataclass(frozen=True)
class BagRef:
    """Points at the container of the bag equipped in ``bag_slot``."""

    bag_slot: int

    def resolve(self, inventory: "InventoryComponent") -> Optional[Container]:
        bag = inventory.get_bag(self.bag_slot)
        return bag.container if bag is not None else None


ContainerRef = Union[RootRef, BagRef]


@dataclass(eq=False)
class InventoryComponent(Component):
    """
    Items carried by an entity.

    Placement searches tiers in a fixed order: the root container first, then
    each equipped bag by equipment slot index.
    """

    root_size: int = 8
    max_bag_slots: int = 16
    root_filter: Optional[ItemFilter] = None
    root: Container = field(init=False, repr=False)
    bag_slots: List[Optional[Bag]] = field(init=False, repr=False)

    def __post_init__(self):
        self.root = Container(self.root_size, self.root_filter)
        self.bag_slots = [None] * self.max_bag_slots

    # --- Placement -------------------------------------------------------

    def add_item(self, stack: Optional[ItemStack]) -> Optional[ItemStack]:
        """
        Place a stack across every tier.

        Returns:
            Whatever could not be placed anywhere, or None
        """
        return self._add_to_tiers(stack)

    def _add_to_tiers(
        self,
        stack: Optional[ItemStack],
        skip_bag_slot: Optional[int] = None,
    ) -> Optional[ItemStack]:
        if stack is None or stack.is_empty:
            return None

        remaining: Optional[ItemStack] = stack
        for ref, container in self.tiers():
            if isinstance(ref, BagRef) and ref.bag_slot == skip_bag_slot:
                continue
            remaining = container.add_item(remaining)
            if remaining is None:
                return None

        if remaining is not None:
            logger.debug("No room for %r", remaining)
        return remaining

    def has_space(self, stack: Optional[ItemStack]) -> bool:
        """True if any tier can take at least part of the stack."""
        return any(container.has_space(stack) for _, container in self.tiers())

    # --- Tiers -----------------------------------------------------------

    def tiers(self) -> Iterator[Tuple[ContainerRef, Container]]:
        """Yield (ref, container) pairs in placement order."""
        yield RootRef(), self.root
        for i, bag in enumerate(self.bag_slots):
            if bag is not None:
                yield BagRef(i), bag.container

    def container_at(self, ref: ContainerRef) -> Optional[Container]:
        """Resolve a container reference, or None if the bag slot is empty."""
        return ref.resolve(self)

    # --- Bags ------------------------------------------------------------

    def _bag_slot_in_range(self, slot_index: int) -> bool:
        return 0 <= slot_index < self.max_bag_slots

    def get_bag(self, slot_index: int) -> Optional[Bag]:
        if not self._bag_slot_in_range(slot_index):
            return None
        return self.bag_slots[slot_index]

    def first_empty_bag_slot(self) -> int:
        """Index of the first free equipment slot, or -1 if all are taken."""
        for i, bag in enumerate(self.bag_slots):
            if bag is None:
                return i
        return -1

    @property
    def equipped_bag_count(self) -> int:
        return sum(1 for bag in self.bag_slots if bag is not None)

    def equip_bag(self, stack: Optional[ItemStack], slot_index: int) -> Optional[Bag]:
        """
        Equip a bag stack into an equipment slot.

        The source stack is not consumed; the caller removes it from its
        origin as part of the same step.

        Returns:
            The equipped Bag, or None if the slot is occupied or out of range,
            or the stack is not a bag
        """
        if not self._bag_slot_in_range(slot_index):
            return None
        if self.bag_slots[slot_index] is not None:
            logger.debug("Bag slot %d already occupied", slot_index)
            return None

        bag = equip_bag(stack, slot_index)
        if bag is not None:
            self.bag_slots[slot_index] = bag
        return bag

    def unequip(self, slot_index: int) -> Optional[ItemStack]:
        """
        Strictly unequip a bag, turning it back into a stack.

        Fails without changing anything if the bag still holds items.

        Returns:
            The bag's stack, or None
        """
        bag = self.get_bag(slot_index)
        if bag is None:
            return None

        stack = unequip_bag_to_stack(bag)
        if stack is not None:
            self.bag_slots[slot_index] = None
        return stack

    def unequip_bag(self, slot_index: int) -> List[ItemStack]:
        """
        Forcibly remove a bag, moving its contents to the other tiers.

        Every stack drained from the bag is offered to the root and the
        remaining equipped bags. Nothing is discarded: stacks that still do
        not fit are returned.

        Returns:
            Stacks that could not be placed (to be dropped by the caller)
        """
        bag = self.get_bag(slot_index)
        if bag is None:
            return []

        overflow: List[ItemStack] = []
        for stack in bag.clear_contents():
            remaining = self._add_to_tiers(stack, skip_bag_slot=slot_index)
            if remaining is not None:
                overflow.append(remaining)

        self.bag_slots[slot_index] = None
        logger.debug(
            "Removed bag %r from slot %d, %d stacks overflowed",
            bag.id, slot_index, len(overflow),
        )
        return overflow

    def swap_bags(self, first: int, second: int) -> bool:
        """
        Exchange the bags in two equipment slots (either may be empty).
        Bags keep their contents.
        """
        if not (self._bag_slot_in_range(first) and self._bag_slot_in_range(second)):
            return False
        if first == second:
            return False

        a, b = self.bag_slots[first], self.bag_slots[second]
        if a is None and b is None:
            return False

        self.bag_slots[first], self.bag_slots[second] = b, a
        if b is not None:
            b.slot_index = first
        if a is not None:
            a.slot_index = second
        return True

    # --- Aggregates ------------------------------------------------------

    @property
    def total_slot_count(self) -> int:
        return sum(container.size for _, container in self.tiers())

    @property
    def empty_slot_count(self) -> int:
        return sum(container.empty_slot_count for _, container in self.tiers())

    @property
    def is_full(self) -> bool:
        return self.empty_slot_count == 0

    def count_item(self, item_id: str) -> int:
        """Total quantity of an item across every tier."""
        return sum(container.count_item(item_id) for _, container in self.tiers())

    def all_items(self) -> List[Optional[ItemStack]]:
        """Every slot of every tier in placement order, None for empty slots."""
        items: List[Optional[ItemStack]] = []
        for _, container in self.tiers():
            items.extend(container.all_items())
        return items

    def clear(self) -> List[ItemStack]:
        """
        Empty every tier and unequip every bag.

        Returns:
            All stacks that were held, with each equipped bag's own stack
            after its contents
        """
        removed = self.root.clear()
        for i, bag in enumerate(self.bag_slots):
            if bag is not None:
                removed.extend(bag.clear_contents())
                removed.append(ItemStack(bag.definition, 1))
                self.bag_slots[i] = None
        return removed

    def teardown(self) -> None:
        """Owner destroyed: drop everything held."""
        dropped = self.clear()
        if dropped:
            logger.debug("Inventory torn down with %d stacks", len(dropped))

    # --- Persistence -----------------------------------------------------

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        def slots_of(container: Container) -> list:
            return [stack.to_dict() if stack else None for stack in container.all_items()]

        return {
            "root_size": self.root_size,
            "max_bag_slots": self.max_bag_slots,
            "root_filter": self.root_filter.to_dict() if self.root_filter else None,
            "root": slots_of(self.root),
            "bags": [
                {"slot_index": i, "bag_id": bag.id, "slots": slots_of(bag.container)}
                for i, bag in enumerate(self.bag_slots)
                if bag is not None
            ],
        }

    @classmethod
    def from_dict(cls, data: dict, catalog: "ItemCatalog") -> "InventoryComponent":
        """
        Rebuild an inventory, resolving item ids against ``catalog``.
        Unknown ids are logged and skipped.
        """
        root_filter = data.get("root_filter")
        inventory = cls(
            root_size=data.get("root_size", 8),
            max_bag_slots=data.get("max_bag_slots", 16),
            root_filter=ItemFilter.from_dict(root_filter) if root_filter else None,
        )
        _restore_slots(inventory.root, data.get("root", []), catalog)

        for entry in data.get("bags", []):
            bag_id = entry.get("bag_id")
            definition = catalog.find(bag_id)
            if definition is None:
                logger.warning("Skipping bag with unknown id %r", bag_id)
                continue
            bag = inventory.equip_bag(ItemStack(definition, 1), entry.get("slot_index", -1))
            if bag is None:
                logger.warning("Could not re-equip bag %r in slot %s", bag_id, entry.get("slot_index"))
                continue
            _restore_slots(bag.container, entry.get("slots", []), catalog)

        return inventory


def _restore_slots(container: Container, slots: list, catalog: "ItemCatalog") -> None:
    for i, slot_data in enumerate(slots[:container.size]):
        if not slot_data:
            continue
        item_id = slot_data.get("item_id")
        definition = catalog.find(item_id)
        if definition is None:
            logger.warning("Skipping unknown item %r in slot %d", item_id, i)
            continue
        stack = ItemStack(definition, max(0, slot_data.get("quantity", 1)))
        if stack.is_empty:
            continue
        if not container.set_item(i, stack):
            logger.warning("Container refused saved %r in slot %d", stack, i)
