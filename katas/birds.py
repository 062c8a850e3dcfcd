"""Birds that fly and molt, and one that cannot fly."""

from abc import ABC, abstractmethod


class Bird(ABC):
    """Something with feathers."""

    def __init__(self, initial_feather_count: int) -> None:
        self.number_of_feathers = initial_feather_count
        self.current_location = ""

    @abstractmethod
    def fly(self) -> None:
        """Take to the air."""

    @abstractmethod
    def molt(self) -> None:
        """Lose a feather."""


class Eagle(Bird):
    """A bird that flies."""

    def fly(self) -> None:
        self.current_location = "in the air"

    def molt(self) -> None:
        self.number_of_feathers -= 1


class Penguin(Bird):
    """A bird that swims but cannot fly."""

    def molt(self) -> None:
        self.number_of_feathers -= 1

    def fly(self) -> None:
        raise NotImplementedError("Unsupported Operation Exception")

    def swim(self) -> None:
        """Go into the water."""
        self.current_location = "in the water"