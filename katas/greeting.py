"""Greetings whose tone is chosen by plugging in a formality."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Greetable(ABC):
    """A style of greeting."""

    @abstractmethod
    def greet(self) -> str:
        """Return the greeting text."""


class Formal(Greetable):
    """A formal greeting."""

    def greet(self) -> str:
        return "Good evening, sir."


class Casual(Greetable):
    """A casual greeting."""

    def greet(self) -> str:
        return "Sup bro?"


class Intimate(Greetable):
    """An intimate greeting."""

    def greet(self) -> str:
        return "Hello Darling!"


class Normal(Greetable):
    """A plain greeting."""

    def greet(self) -> str:
        return "Hello."


@dataclass
class Greeter:
    """Greets in whatever formality it currently holds."""

    formality: Greetable

    def greet(self) -> str:
        """Return the greeting of the current formality."""
        return self.formality.greet()