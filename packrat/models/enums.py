"""Item enumerations."""

from enum import Enum, auto


class ItemCategory(Enum):
    """Broad item categories used by admission filters."""
    CONSUMABLE = auto()  # Potions, food
    WEAPON = auto()
    ARMOR = auto()
    TOOL = auto()        # Pickaxe, shovel
    MATERIAL = auto()    # Crafting materials
    QUEST = auto()
    RESOURCE = auto()
    BAG = auto()         # Container-capable items
    MISC = auto()

    @classmethod
    def from_name(cls, name: str) -> "ItemCategory":
        """Look up a category by case-insensitive name, defaulting to MISC."""
        try:
            return cls[name.strip().upper()]
        except (KeyError, AttributeError):
            return cls.MISC
