"""Admission filters for containers."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, FrozenSet, Iterable, Optional

from .enums import ItemCategory

if TYPE_CHECKING:
    from .item_definition import ItemDefinition


@dataclass(frozen=True)
class ItemFilter:
    """
    Decides which item definitions a container accepts.

    In whitelist mode only the listed categories and ids are admitted. In
    blocklist mode everything except them is admitted. A filter that lists
    nothing admits every definition regardless of mode.
    """

    categories: FrozenSet[ItemCategory] = field(default_factory=frozenset)
    item_ids: FrozenSet[str] = field(default_factory=frozenset)
    whitelist: bool = False

    @classmethod
    def allow_all(cls) -> "ItemFilter":
        """Permissive filter."""
        return cls()

    @classmethod
    def allow_categories(cls, *categories: ItemCategory) -> "ItemFilter":
        """Admit only the given categories (e.g. a herb pouch)."""
        return cls(categories=frozenset(categories), whitelist=True)

    @classmethod
    def allow_items(cls, *item_ids: str) -> "ItemFilter":
        """Admit only the given item ids."""
        return cls(item_ids=frozenset(item_ids), whitelist=True)

    @classmethod
    def block_categories(cls, *categories: ItemCategory) -> "ItemFilter":
        """Admit everything except the given categories."""
        return cls(categories=frozenset(categories), whitelist=False)

    @classmethod
    def block_items(cls, *item_ids: str) -> "ItemFilter":
        """Admit everything except the given item ids."""
        return cls(item_ids=frozenset(item_ids), whitelist=False)

    @property
    def is_unrestricted(self) -> bool:
        return not self.categories and not self.item_ids

    def allows(self, definition: Optional["ItemDefinition"]) -> bool:
        """Check whether a definition may be placed behind this filter."""
        if definition is None:
            return False

        if self.is_unrestricted:
            return True

        listed = definition.category in self.categories or definition.id in self.item_ids
        return listed if self.whitelist else not listed

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "mode": "whitelist" if self.whitelist else "blocklist",
            "categories": sorted(c.name for c in self.categories),
            "item_ids": sorted(self.item_ids),
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "ItemFilter":
        """Create from dictionary. Missing data yields a permissive filter."""
        if not data:
            return cls.allow_all()

        categories: Iterable[str] = data.get("categories", [])
        return cls(
            categories=frozenset(ItemCategory.from_name(name) for name in categories),
            item_ids=frozenset(data.get("item_ids", [])),
            whitelist=data.get("mode", "blocklist") == "whitelist",
        )
