"""Factory for creating item stacks and loading catalog data."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from ..models.catalog import ItemCatalog
from ..models.item_definition import ItemDefinition
from ..models.item_stack import ItemStack

logger = logging.getLogger(__name__)


DEFAULT_DATA_PATH = Path(__file__).parent.parent / "data" / "items"


class ItemFactory:
    """Creates item stacks from catalog ids."""

    def __init__(self, catalog: ItemCatalog):
        self.catalog = catalog

    @staticmethod
    def _load_entries(filepath: Path) -> List[Dict]:
        """Load item entries from a JSON file."""
        with open(filepath) as f:
            data = json.load(f)
        return data.get("items", [])

    @classmethod
    def load_catalog(
        cls,
        catalog: Optional[ItemCatalog] = None,
        data_path: Optional[Path] = None,
        freeze: bool = True,
    ) -> ItemCatalog:
        """
        Register every definition found in the JSON files under ``data_path``.

        Args:
            catalog: Catalog to fill, or None for a new default catalog
            data_path: Directory of ``*.json`` item files
            freeze: Freeze the catalog once loaded

        Returns:
            The filled catalog

        Raises:
            DuplicateDefinition: if two entries share an id
        """
        catalog = catalog if catalog is not None else ItemCatalog()
        data_path = data_path or DEFAULT_DATA_PATH

        for filepath in sorted(data_path.glob("*.json")):
            entries = cls._load_entries(filepath)
            for entry in entries:
                catalog.register(ItemDefinition.from_dict(entry))
            logger.info("Loaded %d item definitions from %s", len(entries), filepath.name)

        if freeze:
            catalog.freeze()
        return catalog

    def create(self, item_id: str, quantity: int = 1) -> Optional[ItemStack]:
        """
        Create a stack of an item.

        Args:
            item_id: Catalog id
            quantity: Stack quantity (clamped to the max stack size)

        Returns:
            The new stack, or None if the id is unknown
        """
        definition = self.catalog.find(item_id)
        if definition is None:
            logger.warning("Attempted to create unknown item: %s", item_id)
            return None
        return ItemStack(definition, max(0, quantity))

    def create_max_stack(self, item_id: str) -> Optional[ItemStack]:
        """Create a full stack of an item, or None if the id is unknown."""
        definition = self.catalog.find(item_id)
        if definition is None:
            logger.warning("Attempted to create unknown item: %s", item_id)
            return None
        return ItemStack(definition, definition.max_stack_size)

    def create_stacks(self, item_id: str, quantity: int) -> List[ItemStack]:
        """Split an arbitrary quantity into as many full stacks as needed."""
        definition = self.catalog.find(item_id)
        if definition is None:
            logger.warning("Attempted to create unknown item: %s", item_id)
            return []

        stacks = []
        while quantity > 0:
            size = min(quantity, definition.max_stack_size)
            stacks.append(ItemStack(definition, size))
            quantity -= size
        return stacks
