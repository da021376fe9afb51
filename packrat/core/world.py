"""ECS World container - owns every entity and its components."""

import logging
from typing import Type, TypeVar, Optional, Iterator, Tuple, List, Dict
from collections import defaultdict

from .entity import EntityManager
from .component import Component, T
from .system import System

logger = logging.getLogger(__name__)

S = TypeVar('S', bound=System)


class World:
    """
    The ECS World - container for all entities and their components.

    Inventory holders and dropped item pickups are both entities here.
    """

    def __init__(self):
        self.entities = EntityManager()
        self._components: Dict[Type[Component], Dict[int, Component]] = defaultdict(dict)
        self._systems: List[System] = []

    def create_entity(self) -> int:
        """Create a new entity and return its ID."""
        return self.entities.create()

    def destroy_entity(self, entity_id: int) -> None:
        """Destroy an entity, tearing down each of its components."""
        for component_store in self._components.values():
            component = component_store.pop(entity_id, None)
            if component is not None:
                component.teardown()
        self.entities.destroy(entity_id)
        logger.debug("Destroyed entity %d", entity_id)

    def add_component(self, entity_id: int, component: Component) -> None:
        """Attach a component to an entity."""
        self._components[type(component)][entity_id] = component

    def get_component(self, entity_id: int, component_type: Type[T]) -> Optional[T]:
        """Get a specific component from an entity."""
        return self._components[component_type].get(entity_id)

    def get_all_components(self, component_type: Type[T]) -> Dict[int, T]:
        """Get all entities with a specific component type."""
        return dict(self._components[component_type])

    def query(self, *component_types: Type[Component]) -> Iterator[Tuple]:
        """
        Query entities that have ALL specified components.

        Yields tuples of (entity_id, component1, component2, ...) in entity id
        order.
        """
        if not component_types:
            return

        candidate_entities = set(self._components[component_types[0]].keys())
        for comp_type in component_types[1:]:
            candidate_entities &= set(self._components[comp_type].keys())

        for entity_id in sorted(candidate_entities):
            if self.entities.is_alive(entity_id):
                components = tuple(
                    self._components[comp_type][entity_id]
                    for comp_type in component_types
                )
                yield (entity_id, *components)

    def register_system(self, system: System) -> None:
        """Register a system with this world."""
        system.world = self
        self._systems.append(system)
        self._systems.sort(key=lambda s: s.priority)

    def get_system(self, system_type: Type[S]) -> Optional[S]:
        """Get a registered system by type."""
        for system in self._systems:
            if isinstance(system, system_type):
                return system
        return None

    def update(self, delta_time: float = 0.0) -> None:
        """Update all registered systems."""
        for system in self._systems:
            system.update(delta_time)

    def reset(self) -> None:
        """Destroy every entity; registered systems stay."""
        for entity_id in list(self.entities.all_entities()):
            self.destroy_entity(entity_id)
        self._components.clear()
        self.entities.reset()
