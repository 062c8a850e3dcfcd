"""Small coding katas and design-principle examples."""

__version__ = "0.1.0"