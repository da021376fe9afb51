from .container import Container
from .bag import Bag, equip_bag, unequip_bag_to_stack
from .inventory import InventoryComponent, RootRef, BagRef, ContainerRef
from .position import PositionComponent
from .world_item import WorldItemComponent

__all__ = [
    'Container',
    'Bag',
    'equip_bag',
    'unequip_bag_to_stack',
    'InventoryComponent',
    'RootRef',
    'BagRef',
    'ContainerRef',
    'PositionComponent',
    'WorldItemComponent',
]
