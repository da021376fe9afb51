"""Registry of item definitions."""

import logging
from typing import Dict, Iterator, List, Optional

from .errors import CatalogFrozen, DefinitionNotFound, DuplicateDefinition
from .item_definition import ItemDefinition

logger = logging.getLogger(__name__)


class ItemCatalog:
    """
    Maps item ids to their definitions.

    A catalog is built once at startup, frozen, and then only read. It is
    passed explicitly to whatever needs it; there is no module-level registry.
    """

    def __init__(self, catalog_id: str = "default"):
        self.catalog_id = catalog_id
        self._definitions: Dict[str, ItemDefinition] = {}
        self._frozen = False

    def register(self, definition: ItemDefinition) -> None:
        """
        Register an item definition.

        Raises:
            DuplicateDefinition: if the id is already registered
            CatalogFrozen: if the catalog has been frozen
        """
        if self._frozen:
            raise CatalogFrozen(
                f"Catalog {self.catalog_id!r} is frozen; cannot register {definition.id!r}"
            )
        if definition.id in self._definitions:
            raise DuplicateDefinition(definition.id)
        self._definitions[definition.id] = definition

    def get(self, item_id: str) -> ItemDefinition:
        """
        Get a definition by id.

        Raises:
            DefinitionNotFound: if the id is unknown
        """
        try:
            return self._definitions[item_id]
        except KeyError:
            raise DefinitionNotFound(item_id) from None

    def find(self, item_id: str) -> Optional[ItemDefinition]:
        """Get a definition by id, or None if unknown."""
        return self._definitions.get(item_id)

    def has(self, item_id: str) -> bool:
        return item_id in self._definitions

    def all(self) -> List[ItemDefinition]:
        """All registered definitions in registration order."""
        return list(self._definitions.values())

    def freeze(self) -> None:
        """End bootstrap; further registration fails."""
        self._frozen = True
        logger.info("Catalog %r frozen with %d definitions", self.catalog_id, len(self))

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def clear(self) -> None:
        """Drop every definition and reopen for registration (test resets, reloads)."""
        self._definitions.clear()
        self._frozen = False

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._definitions

    def __iter__(self) -> Iterator[ItemDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)
