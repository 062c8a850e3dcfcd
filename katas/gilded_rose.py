"""Daily quality updates for the items of the Gilded Rose inn."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

MAX_QUALITY = 50
MIN_QUALITY = 0


@dataclass
class Item:
    """An item for sale: its name, days left to sell it, and its quality."""

    name: str
    sell_in: int
    quality: int


class GildedRoseItem(ABC):
    """Quality rule wrapped around an :class:`Item`."""

    def __init__(self, item: Item) -> None:
        self.item = item

    @abstractmethod
    def update_quality(self) -> None:
        """Apply one day's change to the wrapped item's quality."""


class AgedBrieItem(GildedRoseItem):
    """Improves with age, twice as fast once past its sell-by date."""

    def update_quality(self) -> None:
        item = self.item
        steps = 2 if item.sell_in < 1 else 1
        for _ in range(steps):
            if item.quality < MAX_QUALITY:
                item.quality += 1


class BackstagePassesItem(GildedRoseItem):
    """Gains value as the concert nears and is worthless after it."""

    def update_quality(self) -> None:
        item = self.item
        if item.quality < MAX_QUALITY:
            item.quality += 1
            for threshold in (11, 6):
                if item.sell_in < threshold and item.quality < MAX_QUALITY:
                    item.quality += 1
        if item.sell_in < 1:
            item.quality = 0


class SulfurasItem(GildedRoseItem):
    """A legendary item whose quality never changes."""

    def update_quality(self) -> None:
        pass


class NormalItem(GildedRoseItem):
    """Degrades daily, twice as fast once past its sell-by date."""

    def update_quality(self) -> None:
        item = self.item
        steps = 2 if item.sell_in < 1 else 1
        for _ in range(steps):
            if item.quality > MIN_QUALITY:
                item.quality -= 1