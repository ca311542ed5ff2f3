"""Recipe shopping list service."""

__version__ = "0.1.0"
