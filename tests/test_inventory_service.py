import pytest

from packrat.components.inventory import RootRef
from packrat.services.inventory_service import InventoryService


@pytest.fixture
def service(catalog, settings, rng):
    return InventoryService(catalog=catalog, settings=settings, rng=rng)


@pytest.fixture
def alice(service):
    return service.create_holder("alice", 3.0, 4.0)


def test_duplicate_holder_name_rejected(service, alice):
    with pytest.raises(ValueError):
        service.create_holder("alice")


def test_give_splits_large_quantities(service, alice):
    assert service.give(alice, "stone", 150) == []
    inventory = service.inventory_of(alice)
    assert inventory.count_item("stone") == 150
    assert inventory.root.get_item(0).quantity == 99
    assert inventory.root.get_item(1).quantity == 51


def test_give_returns_leftovers(service, alice):
    leftovers = service.give(alice, "sword", 6)
    assert len(leftovers) == 2
    assert service.inventory_of(alice).count_item("sword") == 4


def test_give_unknown_item_gives_nothing(service, alice):
    assert service.give(alice, "nope", 3) == []
    assert service.inventory_of(alice).empty_slot_count == 4


def test_give_or_drop_puts_overflow_in_world(service, alice):
    assert service.give_or_drop(alice, "sword", 6) == []
    assert service.world_item_system.item_count == 2


def test_drop_slot_partial(service, alice):
    service.give(alice, "stone", 10)
    pickup = service.drop_slot(alice, RootRef(), 0, 4)
    assert pickup is not None
    assert service.inventory_of(alice).root.get_item(0).quantity == 6
    assert service.world_item_system.item_count == 1


def test_drop_slot_restores_when_world_is_full(service, alice, make_stack, settings):
    service.give(alice, "stone", 10)
    service.give(alice, "wood", 5)
    for _ in range(settings.max_world_items):
        service.world_item_system.spawn_item(make_stack("herb"), 0, 0)

    assert service.drop_slot(alice, RootRef(), 0, 4) is None
    assert service.drop_slot(alice, RootRef(), 1) is None
    root = service.inventory_of(alice).root
    assert root.get_item(0).quantity == 10
    assert root.get_item(1).quantity == 5


def test_drop_slot_empty_or_missing(service, alice):
    assert service.drop_slot(alice, RootRef(), 0) is None
    assert service.drop_slot(999, RootRef(), 0) is None


def test_force_unequip_and_drop(service, alice, make_stack):
    inventory = service.inventory_of(alice)
    service.give(alice, "sword", 4)
    inventory.equip_bag(make_stack("pouch"), 0)
    inventory.get_bag(0).add_item(make_stack("stone", 7))

    assert service.force_unequip_and_drop(alice, 0) == []
    assert service.world_item_system.item_count == 2
    assert inventory.equipped_bag_count == 0


def test_teardown_drops_contents(service, alice, make_stack):
    service.give(alice, "stone", 5)
    service.inventory_of(alice).equip_bag(make_stack("bag"), 0)

    assert service.teardown(alice) == []
    assert "alice" not in service.holders
    assert not service.world.entities.is_alive(alice)
    # stone plus the bag itself
    assert service.world_item_system.item_count == 2


def test_teardown_without_drop(service, alice):
    service.give(alice, "stone", 5)
    service.teardown(alice, drop_contents=False)
    assert service.world_item_system.item_count == 0


def test_pickup_nearby(service, alice, make_stack):
    service.world_item_system.spawn_item(make_stack("herb", 3), 3.5, 4.0)
    assert service.pickup_nearby(alice, 1.0) == 1
    assert service.inventory_of(alice).count_item("herb") == 3


def test_save_and_load(service, alice, catalog, settings, make_stack, tmp_path):
    inventory = service.inventory_of(alice)
    service.give(alice, "stone", 42)
    inventory.equip_bag(make_stack("herb_pouch"), 2)
    inventory.get_bag(2).add_item(make_stack("herb", 7))
    service.world_item_system.spawn_item(make_stack("wood", 9), 1.0, 2.0)

    path = tmp_path / "save.json"
    service.save(path)

    loaded = InventoryService(catalog=catalog, settings=settings)
    loaded.load(path)

    holder = loaded.holders["alice"]
    restored = loaded.inventory_of(holder)
    assert restored.count_item("stone") == 42
    assert restored.get_bag(2).id == "herb_pouch"
    assert restored.get_bag(2).container.count_item("herb") == 7
    position = loaded._position_of(holder)
    assert (position.x, position.y) == (3.0, 4.0)
    assert loaded.world_item_system.item_count == 1


def test_load_missing_file_gives_empty_world(service, alice, tmp_path):
    service.load(tmp_path / "missing.json")
    assert service.holders == {}
    assert service.world_item_system.item_count == 0
