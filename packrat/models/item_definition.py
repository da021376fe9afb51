"""Immutable item definitions."""

from dataclasses import dataclass
from typing import Optional

from .enums import ItemCategory
from .item_filter import ItemFilter


@dataclass(frozen=True)
class ItemDefinition:
    """
    Static description of an item type.

    Definitions are registered once in an ItemCatalog and shared by every
    stack of that item. A definition with a ``bag_capacity`` can be equipped
    as a bag.
    """

    id: str
    name: str
    description: str = ""
    category: ItemCategory = ItemCategory.MISC
    max_stack_size: int = 1
    bag_capacity: Optional[int] = None
    consumable: bool = False
    icon: Optional[str] = None           # Opaque reference, never loaded here
    bag_filter: Optional[ItemFilter] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("Item definition needs a non-empty id")
        if self.max_stack_size < 1:
            raise ValueError(
                f"max_stack_size must be >= 1 for {self.id!r}, got {self.max_stack_size}"
            )
        if self.bag_capacity is not None and self.max_stack_size != 1:
            raise ValueError(f"Bag {self.id!r} must have max_stack_size 1, got {self.max_stack_size}")

    @property
    def is_stackable(self) -> bool:
        return self.max_stack_size > 1

    @property
    def is_bag(self) -> bool:
        """True if the item can be equipped as a bag."""
        return self.bag_capacity is not None

    @property
    def container_filter(self) -> ItemFilter:
        """Filter applied to the container of a bag built from this definition."""
        return self.bag_filter or ItemFilter.allow_all()

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category.name,
            "max_stack_size": self.max_stack_size,
            "consumable": self.consumable,
            "icon": self.icon,
        }
        if self.bag_capacity is not None:
            data["bag_capacity"] = self.bag_capacity
        if self.bag_filter is not None:
            data["bag_filter"] = self.bag_filter.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ItemDefinition":
        """Create from a catalog data entry."""
        bag_filter = data.get("bag_filter")
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            description=data.get("description", ""),
            category=ItemCategory.from_name(data.get("category", "MISC")),
            max_stack_size=data.get("max_stack_size", 1),
            bag_capacity=data.get("bag_capacity"),
            consumable=data.get("consumable", False),
            icon=data.get("icon"),
            bag_filter=ItemFilter.from_dict(bag_filter) if bag_filter else None,
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"
