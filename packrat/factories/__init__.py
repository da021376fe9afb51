from .item_factory import ItemFactory
from .inventory_factory import InventoryFactory

__all__ = ['ItemFactory', 'InventoryFactory']
