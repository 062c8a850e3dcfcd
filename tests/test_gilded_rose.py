import pytest

from katas.gilded_rose import (
    AgedBrieItem,
    BackstagePassesItem,
    GildedRoseItem,
    Item,
    NormalItem,
    SulfurasItem,
)


def _updated(cls, sell_in, quality):
    item = Item("thing", sell_in, quality)
    cls(item).update_quality()
    return item


def test_base_is_abstract():
    with pytest.raises(TypeError):
        GildedRoseItem(Item("x", 1, 1))


def test_normal_item_degrades_by_one():
    item = _updated(NormalItem, 10, 20)
    assert item.quality == 20 - 1
    assert item.sell_in == 10


def test_normal_item_degrades_twice_after_date():
    assert _updated(NormalItem, 0, 20).quality == 20 - 2


def test_normal_item_never_negative():
    assert _updated(NormalItem, 0, 1).quality == 0
    assert _updated(NormalItem, 5, 0).quality == 0


def test_aged_brie_improves():
    assert _updated(AgedBrieItem, 2, 0).quality == 0 + 1
    assert _updated(AgedBrieItem, 0, 10).quality == 10 + 2


def test_aged_brie_capped_at_fifty():
    assert _updated(AgedBrieItem, 0, 49).quality == 50
    assert _updated(AgedBrieItem, 5, 50).quality == 50


def test_sulfuras_unchanged():
    item = _updated(SulfurasItem, -1, 80)
    assert (item.sell_in, item.quality) == (-1, 80)


@pytest.mark.parametrize(
    "sell_in, quality, gain",
    [(15, 20, 1), (10, 20, 2), (5, 20, 3)],
)
def test_backstage_gain(sell_in, quality, gain):
    assert _updated(BackstagePassesItem, sell_in, quality).quality == quality + gain


def test_backstage_capped_at_fifty():
    assert _updated(BackstagePassesItem, 10, 49).quality == 50
    assert _updated(BackstagePassesItem, 5, 49).quality == 50


def test_backstage_worthless_after_concert():
    assert _updated(BackstagePassesItem, 0, 49).quality == 0


@pytest.mark.parametrize("cls", [NormalItem, AgedBrieItem, BackstagePassesItem])
def test_quality_stays_in_bounds_over_many_days(cls):
    item = Item("thing", 20, 25)
    wrapper = cls(item)
    for _ in range(40):
        wrapper.update_quality()
        item.sell_in -= 1
        assert 0 <= item.quality <= 50