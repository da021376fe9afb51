import random

import pytest

from packrat.models.catalog import ItemCatalog
from packrat.models.enums import ItemCategory
from packrat.models.item_definition import ItemDefinition
from packrat.models.item_filter import ItemFilter
from packrat.models.item_stack import ItemStack
from packrat.models.settings import InventorySettings


TEST_DEFINITIONS = [
    ItemDefinition("item_a", "Item A", category=ItemCategory.MISC, max_stack_size=10),
    ItemDefinition("item_b", "Item B", category=ItemCategory.MISC, max_stack_size=10),
    ItemDefinition("stone", "Stone", category=ItemCategory.MATERIAL, max_stack_size=99),
    ItemDefinition("wood", "Wood", category=ItemCategory.MATERIAL, max_stack_size=64),
    ItemDefinition("potion", "Potion", category=ItemCategory.CONSUMABLE, max_stack_size=10, consumable=True),
    ItemDefinition("herb", "Herb", category=ItemCategory.RESOURCE, max_stack_size=20),
    ItemDefinition("sword", "Sword", category=ItemCategory.WEAPON),
    ItemDefinition("bag", "Bag", category=ItemCategory.BAG, bag_capacity=3),
    ItemDefinition("pouch", "Pouch", category=ItemCategory.BAG, bag_capacity=2),
    ItemDefinition(
        "herb_pouch", "Herb Pouch", category=ItemCategory.BAG, bag_capacity=2,
        bag_filter=ItemFilter.allow_categories(ItemCategory.RESOURCE),
    ),
    ItemDefinition("torn_bag", "Torn Bag", category=ItemCategory.BAG, bag_capacity=0),
]


@pytest.fixture
def catalog():
    catalog = ItemCatalog("test")
    for definition in TEST_DEFINITIONS:
        catalog.register(definition)
    catalog.freeze()
    yield catalog
    catalog.clear()


@pytest.fixture
def make_stack(catalog):
    def _make(item_id, quantity=1):
        return ItemStack(catalog.get(item_id), quantity)
    return _make


@pytest.fixture
def settings():
    return InventorySettings(
        default_inventory_size=4,
        max_bag_slots=3,
        max_world_items=5,
        item_drop_spread=2.0,
    )


@pytest.fixture
def rng():
    return random.Random(1234)
