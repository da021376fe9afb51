"""Slot containers with admission filters and stack placement."""

import logging
from typing import List, Optional

from ..models.item_filter import ItemFilter
from ..models.item_stack import ItemStack

logger = logging.getLogger(__name__)


class Container:
    """
    Fixed-size array of optional item stacks behind an admission filter.

    Used both for an inventory's root slots and for the slots of an equipped
    bag. The filter is fixed for the container's lifetime.
    """

    def __init__(self, size: int, item_filter: Optional[ItemFilter] = None):
        if size < 0:
            raise ValueError(f"Container size cannot be negative, got {size}")
        self._size = size
        self._filter = item_filter or ItemFilter.allow_all()
        self._slots: List[Optional[ItemStack]] = [None] * size

    @property
    def size(self) -> int:
        return self._size

    @property
    def filter(self) -> ItemFilter:
        return self._filter

    def accepts(self, stack: Optional[ItemStack]) -> bool:
        """True if the filter admits the stack's definition."""
        return stack is not None and self._filter.allows(stack.definition)

    def _in_range(self, slot_index: int) -> bool:
        return 0 <= slot_index < self._size

    def add_item(self, stack: Optional[ItemStack]) -> Optional[ItemStack]:
        """
        Place a stack, merging into matching stacks before using empty slots.

        The caller's stack is never stored or mutated. A stack the filter
        rejects comes back as the same object with no slot touched.

        Args:
            stack: Stack to place

        Returns:
            The portion that did not fit, or None if everything was placed
        """
        if stack is None or stack.is_empty:
            return None

        if not self.accepts(stack):
            logger.debug("Filter rejected %r", stack)
            return stack

        remaining = stack.copy()

        # Merge pass
        for existing in self._slots:
            if existing is not None and existing.can_merge_with(remaining) and not existing.is_full:
                overflow = existing.add(remaining.quantity)
                remaining.set_quantity(overflow)
                if remaining.is_empty:
                    return None

        # Fill pass
        for i in range(self._size):
            if self._slots[i] is None:
                to_place = min(remaining.quantity, remaining.max_stack_size)
                self._slots[i] = ItemStack(remaining.definition, to_place)
                remaining.remove(to_place)
                if remaining.is_empty:
                    return None

        return remaining

    def remove_item(self, slot_index: int, amount: Optional[int] = None) -> Optional[ItemStack]:
        """
        Take items out of a slot.

        With no amount (or an amount covering the whole stack) the slot is
        cleared and its stack returned. A smaller amount splits the stack and
        leaves the rest in place. An out-of-range index does nothing.

        Returns:
            The removed stack, or None
        """
        if not self._in_range(slot_index):
            logger.debug("remove_item ignored out-of-range slot %d (size %d)", slot_index, self._size)
            return None

        stack = self._slots[slot_index]
        if stack is None:
            return None

        if amount is None or amount >= stack.quantity:
            self._slots[slot_index] = None
            return stack

        return stack.split(amount)

    def get_item(self, slot_index: int) -> Optional[ItemStack]:
        """Get the stack in a slot, or None if empty or out of range."""
        if not self._in_range(slot_index):
            return None
        return self._slots[slot_index]

    def set_item(self, slot_index: int, stack: Optional[ItemStack]) -> bool:
        """
        Write a slot directly (UI moves). Passing None or an empty stack clears it.

        Returns:
            True if written; False if out of range or the filter refuses
        """
        if not self._in_range(slot_index):
            return False

        if stack is not None and stack.is_empty:
            stack = None

        if stack is not None and not self.accepts(stack):
            logger.debug("Filter refused %r for slot %d", stack, slot_index)
            return False

        self._slots[slot_index] = stack
        return True

    def is_slot_empty(self, slot_index: int) -> bool:
        return self.get_item(slot_index) is None

    def first_empty_slot(self) -> int:
        """Index of the first empty slot, or -1 if none."""
        for i, stack in enumerate(self._slots):
            if stack is None:
                return i
        return -1

    def has_space(self, stack: Optional[ItemStack]) -> bool:
        """
        Pre-flight check: can at least part of the stack go in?

        True when a matching stack has room or an empty slot exists.
        """
        if stack is None:
            return True

        if not self.accepts(stack):
            return False

        for existing in self._slots:
            if existing is not None and existing.can_merge_with(stack) and not existing.is_full:
                return True

        return self.first_empty_slot() != -1

    @property
    def is_empty(self) -> bool:
        return all(stack is None or stack.is_empty for stack in self._slots)

    @property
    def is_full(self) -> bool:
        """True when every slot is occupied."""
        return all(stack is not None for stack in self._slots)

    @property
    def empty_slot_count(self) -> int:
        return sum(1 for stack in self._slots if stack is None)

    def count_item(self, item_id: str) -> int:
        """Total quantity of an item id across all slots."""
        return sum(
            stack.quantity for stack in self._slots
            if stack is not None and stack.item_id == item_id
        )

    def all_items(self) -> List[Optional[ItemStack]]:
        """Copy of the slot list, including None for empty slots."""
        return list(self._slots)

    def clear(self) -> List[ItemStack]:
        """Empty every slot and return the stacks that were in them."""
        removed = [stack for stack in self._slots if stack is not None]
        self._slots = [None] * self._size
        return removed

    def __repr__(self) -> str:
        return f"Container(size={self._size}, used={self._size - self.empty_slot_count})"
