"""A pilot who speeds up whatever vehicle they are given."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional


class Vehicle(ABC):
    """Anything that can accelerate."""

    @abstractmethod
    def accelerate(self) -> None:
        """Speed up."""


@dataclass
class RacingCar(Vehicle):
    """A car that burns a unit of fuel for each unit of power gained."""

    max_fuel: int
    remaining_fuel: int = field(init=False)
    power: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.remaining_fuel = self.max_fuel

    def accelerate(self) -> None:
        self.power += 1
        self.remaining_fuel -= 1


@dataclass
class Pilot:
    """Drives the vehicle assigned to them."""

    vehicle: Optional[Vehicle] = None

    def increase_speed(self) -> None:
        """Accelerate the assigned vehicle."""
        if self.vehicle is None:
            raise RuntimeError("pilot has no vehicle")
        self.vehicle.accelerate()