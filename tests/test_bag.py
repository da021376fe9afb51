import pytest

from packrat.components.bag import Bag, equip_bag, unequip_bag_to_stack
from packrat.components.container import Container
from packrat.models.enums import ItemCategory
from packrat.models.item_definition import ItemDefinition


def test_equip_creates_empty_bag_of_declared_capacity(make_stack):
    source = make_stack("bag")
    bag = equip_bag(source, 2)
    assert bag is not None
    assert bag.slot_index == 2
    assert bag.slot_count == 3
    assert bag.is_empty
    assert bag.id == "bag"
    assert source.quantity == 1


def test_equip_refuses_non_bags_and_zero_capacity(make_stack):
    assert equip_bag(make_stack("stone", 3), 0) is None
    assert equip_bag(make_stack("torn_bag"), 0) is None
    assert equip_bag(None, 0) is None


def test_bag_uses_definition_filter(make_stack):
    pouch = equip_bag(make_stack("herb_pouch"), 0)
    stone = make_stack("stone", 2)
    assert pouch.add_item(stone) is stone
    assert pouch.add_item(make_stack("herb", 5)) is None


def test_strict_unequip_requires_empty_bag(make_stack):
    bag = equip_bag(make_stack("bag"), 0)
    bag.add_item(make_stack("stone", 5))

    assert unequip_bag_to_stack(bag) is None
    assert bag.container.count_item("stone") == 5

    bag.clear_contents()
    stack = unequip_bag_to_stack(bag)
    assert stack.item_id == "bag"
    assert stack.quantity == 1


def test_can_accept_only_empty_bags(catalog, make_stack):
    outer = Bag(catalog.get("bag"), 0)
    inner = Bag(catalog.get("pouch"), 1)
    assert outer.can_accept_bag(inner)
    inner.add_item(make_stack("stone", 1))
    assert not outer.can_accept_bag(inner)
    assert not outer.can_accept_bag(outer)
    assert not outer.can_accept_bag(None)


def test_bag_definitions_cannot_stack():
    with pytest.raises(ValueError):
        ItemDefinition("sack", "Sack", category=ItemCategory.BAG, bag_capacity=4, max_stack_size=5)


def test_bag_stacks_take_one_slot_each(make_stack):
    container = Container(2)
    assert container.add_item(make_stack("bag")) is None
    assert container.add_item(make_stack("bag")) is None
    assert [s.quantity for s in container.all_items()] == [1, 1]
