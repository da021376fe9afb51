"""Factory for creating inventory-holding entities."""

from typing import Optional

from ..core.world import World
from ..components.inventory import InventoryComponent
from ..components.position import PositionComponent
from ..models.item_filter import ItemFilter
from ..models.settings import InventorySettings


class InventoryFactory:
    """Creates entities that carry an inventory."""

    def __init__(self, world: World, settings: Optional[InventorySettings] = None):
        self.world = world
        self.settings = settings or InventorySettings()

    def create_inventory(self, root_filter: Optional[ItemFilter] = None) -> InventoryComponent:
        """Build a bare inventory sized from settings."""
        return InventoryComponent(
            root_size=self.settings.default_inventory_size,
            max_bag_slots=self.settings.max_bag_slots,
            root_filter=root_filter,
        )

    def create_holder(
        self,
        x: float = 0.0,
        y: float = 0.0,
        inventory: Optional[InventoryComponent] = None,
    ) -> int:
        """
        Create an entity with a position and an inventory.

        Args:
            x: World x position
            y: World y position
            inventory: Existing inventory to attach (e.g. restored from a save)

        Returns:
            Entity ID of the holder
        """
        entity_id = self.world.create_entity()
        self.world.add_component(entity_id, PositionComponent(x=x, y=y))
        self.world.add_component(entity_id, inventory or self.create_inventory())
        return entity_id
