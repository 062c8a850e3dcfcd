"""Small worked examples: unit conversion, a player, range sums, tax."""

from dataclasses import dataclass
from enum import Enum


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert a temperature from Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def square_area(side: float) -> float:
    """Return the area of a square with the given side length."""
    return side * side


@dataclass
class Player:
    """A game character's name, level and resources."""

    name: str = "hwan"
    level: int = 10
    hp: int = 180
    mp: int = 200

    def add_level(self, level: int) -> None:
        """Raise the level by ``level``."""
        self.level += level

    def add_hp(self, hp: int) -> None:
        """Change hit points by ``hp``."""
        self.hp += hp

    def add_mp(self, mp: int) -> None:
        """Change magic points by ``mp``."""
        self.mp += mp


def ranged_sum(begin: int, end: int) -> int:
    """Return the sum of the integers from ``begin`` to ``end`` inclusive."""
    return end * (end + 1) // 2 - (begin - 1) * begin // 2


def squared_hundred_sum() -> int:
    """Return the square of the sum of 1 to 100."""
    total = ranged_sum(1, 100)
    return total * total


class _Bracket(Enum):
    LOWER = 0.1
    MIDDLE = 0.2
    UPPER = 0.3


_LOWER_LIMIT = 30000.0
_MIDDLE_LIMIT = 100000.0


class TaxCalculator:
    """Progressive income tax over three brackets."""

    def calculate_tax(self, income: float) -> float:
        """Return the tax owed on ``income``."""
        return sum(
            self._taxable_in(income, bracket) * bracket.value for bracket in _Bracket
        )

    @staticmethod
    def _taxable_in(income: float, bracket: _Bracket) -> float:
        if bracket is _Bracket.LOWER:
            return min(income, _LOWER_LIMIT)
        if bracket is _Bracket.MIDDLE:
            return min(income, _MIDDLE_LIMIT) - _LOWER_LIMIT if income > _LOWER_LIMIT else 0
        return income - _MIDDLE_LIMIT if income > _MIDDLE_LIMIT else 0