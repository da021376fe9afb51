"""Stacks of items: a definition plus a quantity."""

from typing import Optional

from .item_definition import ItemDefinition


class ItemStack:
    """
    A quantity of one item definition treated as a single placeable unit.

    The quantity always stays within ``0..definition.max_stack_size``; every
    mutator clamps instead of overflowing.
    """

    __slots__ = ("_definition", "_quantity")

    def __init__(self, definition: ItemDefinition, quantity: int = 1):
        if definition is None:
            raise ValueError("ItemStack needs a definition")
        if quantity < 0:
            raise ValueError(f"Quantity cannot be negative, got {quantity}")
        self._definition = definition
        self._quantity = min(quantity, definition.max_stack_size)

    @property
    def definition(self) -> ItemDefinition:
        return self._definition

    @property
    def item_id(self) -> str:
        return self._definition.id

    @property
    def quantity(self) -> int:
        return self._quantity

    def set_quantity(self, quantity: int) -> None:
        """Set quantity, clamped into the valid range."""
        self._quantity = max(0, min(quantity, self._definition.max_stack_size))

    @property
    def max_stack_size(self) -> int:
        return self._definition.max_stack_size

    @property
    def remaining_space(self) -> int:
        """How many more items this stack can absorb."""
        return self._definition.max_stack_size - self._quantity

    @property
    def is_full(self) -> bool:
        return self._quantity >= self._definition.max_stack_size

    @property
    def is_empty(self) -> bool:
        return self._quantity == 0

    def add(self, amount: int) -> int:
        """
        Add to the stack, respecting max stack size.

        Returns:
            Amount that could not be absorbed (overflow)
        """
        amount = max(0, amount)
        to_add = min(amount, self.remaining_space)
        self.set_quantity(self._quantity + to_add)
        return amount - to_add

    def remove(self, amount: int) -> int:
        """
        Remove from the stack.

        Returns:
            Amount actually removed
        """
        to_remove = min(max(0, amount), self._quantity)
        self.set_quantity(self._quantity - to_remove)
        return to_remove

    def can_merge_with(self, other: Optional["ItemStack"]) -> bool:
        """Stacks merge when they share a definition id."""
        return other is not None and other.item_id == self.item_id

    def split(self, amount: int) -> Optional["ItemStack"]:
        """
        Split ``amount`` off into a new stack.

        Splitting nothing or the whole stack is refused; moving an entire
        stack is a different operation.

        Returns:
            The new stack, or None if the split is not possible
        """
        if amount <= 0 or amount >= self._quantity:
            return None
        self.set_quantity(self._quantity - amount)
        return ItemStack(self._definition, amount)

    def copy(self) -> "ItemStack":
        return ItemStack(self._definition, self._quantity)

    def to_dict(self) -> dict:
        """Persisted form: definition id and quantity."""
        return {"item_id": self.item_id, "quantity": self._quantity}

    def __eq__(self, other) -> bool:
        if not isinstance(other, ItemStack):
            return NotImplemented
        return self.item_id == other.item_id and self._quantity == other._quantity

    __hash__ = None

    def __repr__(self) -> str:
        return f"ItemStack({self.item_id!r}, {self._quantity})"

    def __str__(self) -> str:
        return f"{self._definition.name} x{self._quantity}"
