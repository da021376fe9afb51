import pytest

from packrat.components.inventory import InventoryComponent
from packrat.components.world_item import WorldItemComponent
from packrat.core.world import World
from packrat.factories.inventory_factory import InventoryFactory
from packrat.systems.world_item_system import WorldItemSystem


@pytest.fixture
def world(settings, rng):
    world = World()
    world.register_system(WorldItemSystem(settings, rng))
    return world


@pytest.fixture
def drops(world):
    return world.get_system(WorldItemSystem)


@pytest.fixture
def holder(world, settings):
    return InventoryFactory(world, settings).create_holder(x=10.0, y=10.0)


def test_spawn_and_limit(drops, make_stack, settings):
    ids = [drops.spawn_item(make_stack("stone", 1), 0, 0) for _ in range(settings.max_world_items)]
    assert all(entity_id is not None for entity_id in ids)
    assert drops.item_count == settings.max_world_items
    assert drops.spawn_item(make_stack("stone", 1), 0, 0) is None
    assert drops.spawn_item(None, 0, 0) is None


def test_spawn_pile_splits_into_max_stacks(world, drops, catalog, settings):
    ids, refused = drops.spawn_item_pile(catalog.get("item_a"), 25, 5.0, 5.0)
    assert len(ids) == 3
    assert refused == []
    sizes = sorted(world.get_component(i, WorldItemComponent).stack.quantity for i in ids)
    assert sizes == [5, 10, 10]


def test_spawn_pile_at_limit_returns_what_did_not_fit(world, drops, catalog, make_stack, settings):
    for _ in range(settings.max_world_items - 1):
        drops.spawn_item(make_stack("stone", 1), 0, 0)

    ids, refused = drops.spawn_item_pile(catalog.get("item_a"), 35, 0, 0)
    assert len(ids) == 1
    assert [s.quantity for s in refused] == [10, 10, 5]
    placed = world.get_component(ids[0], WorldItemComponent).stack.quantity
    assert placed + sum(s.quantity for s in refused) == 35


def test_drop_all_returns_refused_stacks(drops, make_stack, settings):
    stacks = [make_stack("stone", i + 1) for i in range(settings.max_world_items + 2)]
    refused = drops.drop_all(stacks, 0, 0)
    assert [s.quantity for s in refused] == [6, 7]


def test_pickup_moves_stack_into_inventory(world, drops, holder, make_stack):
    pickup = drops.spawn_item(make_stack("stone", 5), 10, 10)
    assert drops.pickup(holder, pickup)
    assert world.get_component(holder, InventoryComponent).count_item("stone") == 5
    assert not world.entities.is_alive(pickup)
    assert drops.item_count == 0


def test_partial_pickup_leaves_remainder(world, drops, holder, make_stack):
    inventory = world.get_component(holder, InventoryComponent)
    for _ in range(3):
        inventory.add_item(make_stack("sword"))
    inventory.add_item(make_stack("item_a", 6))

    pickup = drops.spawn_item(make_stack("item_a", 10), 10, 10)
    assert drops.pickup(holder, pickup)
    assert inventory.count_item("item_a") == 10
    assert world.get_component(pickup, WorldItemComponent).stack.quantity == 6


def test_pickup_with_no_room_changes_nothing(world, drops, holder, make_stack):
    inventory = world.get_component(holder, InventoryComponent)
    for _ in range(4):
        inventory.add_item(make_stack("sword"))
    pickup = drops.spawn_item(make_stack("stone", 3), 10, 10)
    assert not drops.pickup(holder, pickup)
    assert world.get_component(pickup, WorldItemComponent).stack.quantity == 3


def test_grace_timer_blocks_pickup_until_elapsed(world, drops, holder, make_stack):
    pickup = drops.spawn_item(make_stack("stone", 3), 10, 10, grace_time=1.0)
    assert not drops.pickup(holder, pickup)
    world.update(0.6)
    assert not drops.pickup(holder, pickup)
    world.update(0.6)
    assert drops.pickup(holder, pickup)


def test_items_near_sorted_by_distance(drops, make_stack):
    far = drops.spawn_item(make_stack("stone", 1), 8, 0)
    near = drops.spawn_item(make_stack("stone", 1), 1, 0)
    drops.spawn_item(make_stack("stone", 1), 50, 50)
    assert drops.items_near(0, 0, 10) == [near, far]


def test_pickup_nearby(world, drops, holder, make_stack):
    drops.spawn_item(make_stack("stone", 2), 11, 10)
    drops.spawn_item(make_stack("wood", 2), 9, 10)
    drops.spawn_item(make_stack("herb", 2), 100, 100)
    assert drops.pickup_nearby(holder, 3.0) == 2
    assert drops.item_count == 1


def test_remove_and_clear(drops, make_stack):
    pickup = drops.spawn_item(make_stack("stone", 2), 0, 0)
    drops.spawn_item(make_stack("wood", 3), 0, 0)
    assert drops.remove_item(pickup).quantity == 2
    assert drops.remove_item(pickup) is None
    assert [s.item_id for s in drops.clear_all()] == ["wood"]
    assert drops.item_count == 0


def test_update_removes_emptied_pickups(world, drops, make_stack):
    pickup = drops.spawn_item(make_stack("stone", 2), 0, 0)
    world.get_component(pickup, WorldItemComponent).stack.remove(2)
    world.update(0.1)
    assert drops.item_count == 0
