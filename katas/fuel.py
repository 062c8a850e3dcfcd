"""A car that burns fuel and a petrol station that fills it up."""

from dataclasses import dataclass, field


@dataclass
class Car:
    """A car with a fuel tank."""

    max_fuel: int
    remaining_fuel: int = field(init=False)

    def __post_init__(self) -> None:
        self.remaining_fuel = self.max_fuel

    def refuel(self) -> None:
        """Fill the tank."""
        self.remaining_fuel = self.max_fuel

    def accelerate(self) -> None:
        """Burn one unit of fuel."""
        self.remaining_fuel -= 1


class Shell:
    """A petrol station attendant."""

    def fill_up(self, customer: Car) -> None:
        """Fill the customer's tank to its capacity."""
        customer.remaining_fuel = customer.max_fuel