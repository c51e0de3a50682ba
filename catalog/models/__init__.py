"""Domain models."""

from catalog.models.item import Item

__all__ = ["Item"]
