"""Inventory service - wires the catalog, world, factories and systems."""

import logging
import random
from pathlib import Path
from typing import Dict, List, Optional

from ..core.world import World
from ..components.inventory import ContainerRef, InventoryComponent
from ..components.position import PositionComponent
from ..components.world_item import WorldItemComponent
from ..factories.inventory_factory import InventoryFactory
from ..factories.item_factory import ItemFactory
from ..models.catalog import ItemCatalog
from ..models.item_stack import ItemStack
from ..models.persistent_data import SaveData
from ..models.settings import InventorySettings
from ..systems.bag_system import BagSystem
from ..systems.world_item_system import WorldItemSystem

logger = logging.getLogger(__name__)


class InventoryService:
    """
    Entry point for hosts: one world, one frozen catalog, named holders.

    Operations that hand a remainder to the world (pickup overflow, forced
    bag removal, drops) finish both steps inside a single call.
    """

    def __init__(
        self,
        catalog: Optional[ItemCatalog] = None,
        settings: Optional[InventorySettings] = None,
        data_path: Optional[Path] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or InventorySettings()
        if catalog is None:
            catalog = ItemFactory.load_catalog(data_path=data_path)
        elif not catalog.is_frozen:
            catalog.freeze()
        self.catalog = catalog
        self.rng = rng or random.Random()

        self.world = World()
        self.holders: Dict[str, int] = {}
        self.item_factory = ItemFactory(self.catalog)
        self.inventory_factory = InventoryFactory(self.world, self.settings)

        self.bag_system = BagSystem()
        self.world_item_system = WorldItemSystem(self.settings, self.rng)
        self.world.register_system(self.bag_system)
        self.world.register_system(self.world_item_system)

    # --- Holders ---------------------------------------------------------

    def create_holder(self, name: str, x: float = 0.0, y: float = 0.0) -> int:
        """Create a named entity with an empty inventory."""
        if name in self.holders:
            raise ValueError(f"Holder {name!r} already exists")
        entity_id = self.inventory_factory.create_holder(x, y)
        self.holders[name] = entity_id
        return entity_id

    def inventory_of(self, entity_id: int) -> Optional[InventoryComponent]:
        return self.world.get_component(entity_id, InventoryComponent)

    def _position_of(self, entity_id: int) -> PositionComponent:
        return self.world.get_component(entity_id, PositionComponent) or PositionComponent()

    def give(self, entity_id: int, item_id: str, quantity: int = 1) -> List[ItemStack]:
        """
        Add any quantity of an item to a holder.

        Returns:
            Stacks that did not fit
        """
        inventory = self.inventory_of(entity_id)
        stacks = self.item_factory.create_stacks(item_id, quantity)
        if inventory is None:
            return stacks

        leftovers = []
        for stack in stacks:
            remainder = inventory.add_item(stack)
            if remainder is not None:
                leftovers.append(remainder)
        return leftovers

    def give_or_drop(self, entity_id: int, item_id: str, quantity: int = 1) -> List[ItemStack]:
        """
        Add an item to a holder, dropping what does not fit at its feet.

        Returns:
            Stacks neither the inventory nor the world could take
        """
        leftovers = self.give(entity_id, item_id, quantity)
        return self._drop_at(entity_id, leftovers)

    def teardown(self, entity_id: int, drop_contents: bool = True) -> List[ItemStack]:
        """
        Destroy a holder. Its contents are dropped at its position first.

        Returns:
            Stacks that could not be dropped
        """
        inventory = self.inventory_of(entity_id)
        refused: List[ItemStack] = []
        if inventory is not None and drop_contents:
            refused = self._drop_at(entity_id, inventory.clear())

        self.world.destroy_entity(entity_id)
        self.holders = {name: eid for name, eid in self.holders.items() if eid != entity_id}
        return refused

    # --- World hand-off --------------------------------------------------

    def _drop_at(self, entity_id: int, stacks: List[ItemStack]) -> List[ItemStack]:
        if not stacks:
            return []
        position = self._position_of(entity_id)
        refused = self.world_item_system.drop_all(stacks, position.x, position.y)
        if refused:
            logger.warning("World refused %d stacks dropped by entity %d", len(refused), entity_id)
        return refused

    def pickup_nearby(self, entity_id: int, radius: float) -> int:
        """Collect pickups around a holder. Returns how many were taken."""
        return self.world_item_system.pickup_nearby(entity_id, radius)

    def drop_slot(
        self,
        entity_id: int,
        source: ContainerRef,
        slot_index: int,
        amount: Optional[int] = None,
    ) -> Optional[int]:
        """
        Drop the contents of a slot into the world at the holder's position.

        If the world cannot take the stack it goes back into the slot.

        Returns:
            Entity ID of the new pickup, or None
        """
        inventory = self.inventory_of(entity_id)
        if inventory is None:
            return None
        container = inventory.container_at(source)
        if container is None:
            return None

        removed = container.remove_item(slot_index, amount)
        if removed is None:
            return None

        position = self._position_of(entity_id)
        pickup_id = self.world_item_system.spawn_item(removed, position.x, position.y)
        if pickup_id is None:
            left_behind = container.get_item(slot_index)
            if left_behind is None:
                container.set_item(slot_index, removed)
            else:
                left_behind.add(removed.quantity)
        return pickup_id

    def force_unequip_and_drop(self, entity_id: int, bag_slot: int) -> List[ItemStack]:
        """
        Remove a bag whatever it holds and drop what no longer fits.

        Returns:
            Stacks neither the inventory nor the world could take
        """
        drops = self.bag_system.force_unequip(entity_id, bag_slot)
        return self._drop_at(entity_id, drops)

    def update(self, delta_time: float) -> None:
        self.world.update(delta_time)

    # --- Persistence -----------------------------------------------------

    def snapshot(self) -> SaveData:
        """Capture every holder's inventory and every world pickup."""
        save = SaveData(catalog_id=self.catalog.catalog_id)
        for name, entity_id in self.holders.items():
            inventory = self.inventory_of(entity_id)
            if inventory is not None:
                data = inventory.to_dict()
                position = self._position_of(entity_id)
                data["position"] = [position.x, position.y]
                save.inventories[name] = data

        for _, position, item in self.world.query(PositionComponent, WorldItemComponent):
            entry = item.stack.to_dict()
            entry["x"] = position.x
            entry["y"] = position.y
            save.world_items.append(entry)
        return save

    def restore(self, save: SaveData) -> None:
        """Replace the current world with the contents of a save."""
        if save.catalog_id != self.catalog.catalog_id:
            logger.warning(
                "Save was made with catalog %r, loading against %r",
                save.catalog_id, self.catalog.catalog_id,
            )

        self.world.reset()
        self.holders.clear()

        for name, data in save.inventories.items():
            inventory = InventoryComponent.from_dict(data, self.catalog)
            x, y = data.get("position", [0.0, 0.0])
            self.holders[name] = self.inventory_factory.create_holder(x, y, inventory)

        for entry in save.world_items:
            definition = self.catalog.find(entry.get("item_id"))
            if definition is None:
                logger.warning("Skipping unknown world item %r", entry.get("item_id"))
                continue
            stack = ItemStack(definition, max(0, entry.get("quantity", 1)))
            self.world_item_system.spawn_item(stack, entry.get("x", 0.0), entry.get("y", 0.0), 0.0)

    def save(self, path: Optional[Path] = None) -> None:
        self.snapshot().save(path)

    def load(self, path: Optional[Path] = None) -> None:
        self.restore(SaveData.load(path))
        logger.info("Loaded %d holders", len(self.holders))
