"""Save data for inventories and dropped items."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


DEFAULT_SAVE_PATH = Path.home() / ".packrat" / "save.json"


@dataclass
class SaveData:
    """
    Everything needed to rebuild inventories and world drops.

    Stacks are stored as ``{"item_id", "quantity"}`` pairs and resolved
    against the catalog named by ``catalog_id`` on load.
    """

    catalog_id: str = "default"
    # holder name -> InventoryComponent.to_dict()
    inventories: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    # {"item_id", "quantity", "x", "y"} per dropped stack
    world_items: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "catalog_id": self.catalog_id,
            "inventories": self.inventories,
            "world_items": self.world_items,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SaveData":
        """Create from dictionary."""
        return cls(
            catalog_id=data.get("catalog_id", "default"),
            inventories=data.get("inventories", {}),
            world_items=data.get("world_items", []),
        )

    def save(self, path: Optional[Path] = None) -> None:
        """Save to disk."""
        if path is None:
            path = DEFAULT_SAVE_PATH

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info("Saved %d inventories to %s", len(self.inventories), path)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "SaveData":
        """Load from disk, or create new if not found."""
        if path is None:
            path = DEFAULT_SAVE_PATH

        if path.exists():
            try:
                with open(path) as f:
                    data = json.load(f)
                return cls.from_dict(data)
            except (json.JSONDecodeError, KeyError, AttributeError, TypeError) as e:
                logger.warning("Could not read save file %s: %s", path, e)

        return cls()
