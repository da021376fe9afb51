"""Tunable inventory settings."""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


DEFAULT_SETTINGS_PATH = Path(__file__).parent.parent / "data" / "settings.json"


@dataclass
class InventorySettings:
    """Sizes and limits shared by the inventory and world item systems."""

    # Inventory sizes
    default_inventory_size: int = 8     # Root slots when no bags are equipped
    max_bag_slots: int = 16             # Number of bag equipment slots

    # World items
    max_world_items: int = 100          # Global limit for dropped items
    item_drop_spread: float = 16.0      # Radius for a dropped item pile
    pickup_grace_time: float = 0.0      # Seconds before a fresh drop can be picked up

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "InventorySettings":
        """Create from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def save(self, path: Optional[Path] = None) -> None:
        """Save to disk."""
        path = path or DEFAULT_SETTINGS_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "InventorySettings":
        """Load from disk, or use defaults if missing or unreadable."""
        path = path or DEFAULT_SETTINGS_PATH

        if path.exists():
            try:
                with open(path) as f:
                    data = json.load(f)
                return cls.from_dict(data)
            except (json.JSONDecodeError, TypeError, AttributeError) as e:
                logger.warning("Ignoring malformed settings file %s: %s", path, e)

        return cls()
