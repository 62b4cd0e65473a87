"""
Concrete Sort Strategy Implementations

Each class orders the collection by one attribute. All sorts are stable,
so items with equal keys stay in their previous relative order.
"""

from types import MappingProxyType
from typing import Any, List
from model.collection_item import CollectionItem


class _KeyedSort:
    """Shared comparison and in-place sort on top of ``sort_key``."""

    name = ""

    def sort_key(self, item: CollectionItem) -> Any:
        raise NotImplementedError

    def compare(self, first: CollectionItem, second: CollectionItem) -> int:
        a, b = self.sort_key(first), self.sort_key(second)
        return (a > b) - (a < b)

    def sort(self, items: List[CollectionItem]) -> None:
        items.sort(key=self.sort_key)

    def __repr__(self):
        return f"<{self.__class__.__name__} '{self.name}'>"


class SortByArtist(_KeyedSort):
    """Artist name, case-insensitive A-Z."""

    name = "Artist"

    def sort_key(self, item: CollectionItem) -> Any:
        return item.artist.lower()


class SortByTitle(_KeyedSort):
    """Title, case-insensitive A-Z."""

    name = "Title"

    def sort_key(self, item: CollectionItem) -> Any:
        return item.title.lower()


class SortByYear(_KeyedSort):
    """Release year, oldest first."""

    name = "Year"

    def sort_key(self, item: CollectionItem) -> Any:
        return item.year


class SortByCondition(_KeyedSort):
    """Goldmine grade, best first. Unrecognised grades sort last."""

    name = "Condition"

    CONDITION_RANK = MappingProxyType({
        "M": 1,    # mint
        "NM": 2,   # near mint
        "EX": 3,   # excellent
        "VG+": 4,  # very good plus
        "VG": 5,   # very good
        "G+": 6,   # good plus
        "G": 7,    # good
        "F": 8,    # fair
        "P": 9,    # poor
    })
    UNKNOWN_RANK = 99

    def sort_key(self, item: CollectionItem) -> Any:
        return self.CONDITION_RANK.get(item.condition, self.UNKNOWN_RANK)


class SortByMediaType(_KeyedSort):
    """Format display name, case-insensitive, which groups formats together."""

    name = "Format"

    def sort_key(self, item: CollectionItem) -> Any:
        return item.media_type.lower()
