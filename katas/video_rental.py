"""Video rental charges and customer statements."""

from dataclasses import dataclass, field
from enum import IntEnum


class PriceCode(IntEnum):
    """Pricing category of a movie."""

    REGULAR = 0
    NEW_RELEASE = 1
    CHILDREN = 2


@dataclass
class Movie:
    """A movie title and its pricing category."""

    title: str
    price_code: int


@dataclass
class Rental:
    """A movie rented for a number of days."""

    movie: Movie
    days_rented: int


def _regular_charge(days: int) -> float:
    return 2.0 + (days - 2) * 1.5 if days > 2 else 2.0


def _new_release_charge(days: int) -> float:
    return days * 3.0


def _children_charge(days: int) -> float:
    return 1.5 + (days - 3) * 1.5 if days > 3 else 1.5


_CHARGES = {
    PriceCode.REGULAR: _regular_charge,
    PriceCode.NEW_RELEASE: _new_release_charge,
    PriceCode.CHILDREN: _children_charge,
}


@dataclass
class Customer:
    """A customer and the rentals they have made."""

    name: str
    rentals: list[Rental] = field(default_factory=list)

    def add_rental(self, rental: Rental) -> None:
        """Record a rental."""
        self.rentals.append(rental)

    def charge(self, rental: Rental) -> float:
        """Return the amount owed for one rental."""
        try:
            price = _CHARGES[PriceCode(rental.movie.price_code)]
        except ValueError:
            return 0.0
        return price(rental.days_rented)

    def frequent_renter_points(self) -> int:
        """Return the renter points earned across all rentals."""
        return sum(
            2
            if rental.movie.price_code == PriceCode.NEW_RELEASE and rental.days_rented > 1
            else 1
            for rental in self.rentals
        )

    def statement(self) -> str:
        """Return the printable rental record of this customer."""
        lines = [f"Rental Record for {self.name}\n"]
        total = 0.0
        for rental in self.rentals:
            amount = self.charge(rental)
            total += amount
            lines.append(f"\t{rental.movie.title}\t{amount:.1f}\n")
        lines.append(f"Amount owed is {total:.1f}\n")
        lines.append(
            f"You earned {self.frequent_renter_points()} frequent renter points"
        )
        return "".join(lines)