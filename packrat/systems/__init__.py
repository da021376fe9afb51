from .bag_system import BagSystem
from .world_item_system import WorldItemSystem

__all__ = [
    'BagSystem',
    'WorldItemSystem',
]
