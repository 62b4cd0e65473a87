"""
Base Protocol for Sort Strategy Pattern

Defines the interface every collection ordering implements.
"""

from typing import Any, List, Protocol
from model.collection_item import CollectionItem


class SortStrategy(Protocol):
    """Protocol defining a named, swappable ordering of collection items."""

    @property
    def name(self) -> str:
        """Display name shown in the sort selector."""
        ...

    def sort_key(self, item: CollectionItem) -> Any:
        """
        Get the comparable key for an item.

        Args:
            item: The item to order

        Returns:
            Comparable value; items with equal keys keep their relative order
        """
        ...

    def compare(self, first: CollectionItem, second: CollectionItem) -> int:
        """Three-way comparison: negative, zero or positive."""
        ...

    def sort(self, items: List[CollectionItem]) -> None:
        """Sort the list in place (stable)."""
        ...
