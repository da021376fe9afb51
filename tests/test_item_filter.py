from packrat.models.enums import ItemCategory
from packrat.models.item_filter import ItemFilter


def test_allow_all(catalog):
    assert ItemFilter.allow_all().allows(catalog.get("sword"))
    assert not ItemFilter.allow_all().allows(None)


def test_whitelist_by_category_and_id(catalog):
    herbs = ItemFilter.allow_categories(ItemCategory.RESOURCE)
    assert herbs.allows(catalog.get("herb"))
    assert not herbs.allows(catalog.get("stone"))

    only_stone = ItemFilter.allow_items("stone")
    assert only_stone.allows(catalog.get("stone"))
    assert not only_stone.allows(catalog.get("wood"))


def test_blocklist(catalog):
    no_weapons = ItemFilter.block_categories(ItemCategory.WEAPON)
    assert not no_weapons.allows(catalog.get("sword"))
    assert no_weapons.allows(catalog.get("stone"))

    no_wood = ItemFilter.block_items("wood")
    assert not no_wood.allows(catalog.get("wood"))
    assert no_wood.allows(catalog.get("stone"))


def test_empty_whitelist_allows_everything(catalog):
    assert ItemFilter(whitelist=True).allows(catalog.get("sword"))


def test_dict_form():
    original = ItemFilter.allow_categories(ItemCategory.RESOURCE, ItemCategory.CONSUMABLE)
    data = original.to_dict()
    assert data["mode"] == "whitelist"
    assert data["categories"] == ["CONSUMABLE", "RESOURCE"]
    assert ItemFilter.from_dict(data) == original
    assert ItemFilter.from_dict(None) == ItemFilter.allow_all()
