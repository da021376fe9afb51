"""Exceptions raised by the item catalog.

Capacity refusals, invalid bag transitions and overflow are not exceptions:
they come back as return values from the container and inventory calls.
"""


class InventoryError(Exception):
    """Base class for packrat errors."""


class DefinitionNotFound(InventoryError, KeyError):
    """An item id is not registered in the catalog."""

    def __init__(self, item_id: str):
        super().__init__(item_id)
        self.item_id = item_id

    def __str__(self) -> str:
        return f"Unknown item id: {self.item_id!r}"


class DuplicateDefinition(InventoryError, ValueError):
    """An item id was registered twice."""

    def __init__(self, item_id: str):
        super().__init__(f"Item already registered: {item_id!r}")
        self.item_id = item_id


class CatalogFrozen(InventoryError, RuntimeError):
    """Registration was attempted after the catalog finished bootstrapping."""
