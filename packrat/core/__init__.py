"""Entity-component-system core shared by holders and world pickups."""

from .entity import EntityManager
from .component import Component
from .world import World
from .system import System

__all__ = ['EntityManager', 'Component', 'World', 'System']
