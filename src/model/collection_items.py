import dataclasses
import logging
from typing import Iterator, List, Optional
from PySide6.QtCore import QObject, Signal

from common.errors import IndexOutOfRange, MalformedAttributes
from model.collection_item import CollectionItem
from model.sorting import SortStrategy, SortByArtist

logger = logging.getLogger(__name__)

COMMON_FIELDS = ("title", "artist", "year", "condition")


def matches_text(item: CollectionItem, needle: str) -> bool:
    """Case-insensitive substring match on title, artist, format and year."""
    if not needle:
        return True
    return (
        needle in item.title.lower()
        or needle in item.artist.lower()
        or needle in item.media_type.lower()
        or needle in str(item.year)
    )


class ItemSearch:
    """Lazy view of the items matching a search text.

    Nothing is evaluated until iteration; every new iteration walks the
    store again in its current order.
    """

    def __init__(self, items: List[CollectionItem], text: str):
        self._items = items
        self.text = text
        self._needle = (text or "").lower()

    def __iter__(self) -> Iterator[CollectionItem]:
        needle = self._needle
        return (item for item in list(self._items) if matches_text(item, needle))

    def __repr__(self):
        return f"<ItemSearch {self.text!r}>"


class CollectionItems(QObject):

    cleared = Signal()
    added = Signal(CollectionItem)
    updated = Signal(CollectionItem)
    deleted = Signal(CollectionItem)
    filterChanged = Signal()
    listChanged = Signal()  # Order or membership changed
    strategyChanged = Signal(str)

    def __init__(self, strategy: Optional[SortStrategy] = None):
        super().__init__()
        self._items: List[CollectionItem] = []
        self._strategy: SortStrategy = strategy or SortByArtist()
        self._filter_text: str = ""

    @property
    def items(self) -> List[CollectionItem]:
        """Snapshot of the items in current sort order."""
        return list(self._items)

    @property
    def strategy(self) -> SortStrategy:
        return self._strategy

    def clear(self):
        self._items.clear()
        self.cleared.emit()
        self.listChanged.emit()

    def add(self, item: CollectionItem):
        logger.debug("Adding %r", item)
        self._items.append(item)
        self._apply_strategy()
        self.added.emit(item)
        self.listChanged.emit()

    def add_batch(self, items: List[CollectionItem]):
        """Add several items with a single re-sort and a single listChanged."""
        if not items:
            return
        self._items.extend(items)
        self._apply_strategy()
        logger.debug("Added %s items in batch", len(items))
        self.listChanged.emit()

    def remove(self, index: int) -> CollectionItem:
        self._check_index(index)
        item = self._items.pop(index)
        logger.debug("Removed %r from position %s", item, index)
        self.deleted.emit(item)
        return item

    def update(self, index: int, **changes) -> CollectionItem:
        """Edit the item at ``index`` in place and re-sort.

        Accepts the common fields, a ``details`` payload of the same variant,
        or the field names of the item's own payload (e.g. ``speed="45"``).
        All names are checked before anything is changed.
        """
        self._check_index(index)
        item = self._items[index]

        details_fields = {f.name for f in dataclasses.fields(item.details)}
        unknown = [key for key in changes if key not in COMMON_FIELDS and key != "details" and key not in details_fields]
        if unknown:
            raise MalformedAttributes(f"Unknown field(s) for {item.media_type}: {', '.join(sorted(unknown))}")
        new_details = changes.get("details")
        if new_details is not None and type(new_details) is not type(item.details):
            raise MalformedAttributes(
                f"Cannot change a {item.media_type} into {type(new_details).__name__}; variant is fixed"
            )

        for key in COMMON_FIELDS:
            if key in changes:
                setattr(item, key, changes[key])
        if new_details is not None:
            item.details = new_details
        for key in details_fields & changes.keys():
            setattr(item.details, key, changes[key])

        logger.debug("Updated %r (%s)", item, ", ".join(sorted(changes)))
        self._apply_strategy()
        self.updated.emit(item)
        self.listChanged.emit()
        return item

    def set_strategy(self, strategy: SortStrategy):
        self._strategy = strategy
        self._apply_strategy()
        logger.info("Sort strategy changed to %s", strategy.name)
        self.strategyChanged.emit(strategy.name)
        self.listChanged.emit()

    def resort(self):
        """Re-apply the active strategy, e.g. after an item was edited directly."""
        self._apply_strategy()
        self.listChanged.emit()

    def find(self, text: str) -> ItemSearch:
        return ItemSearch(self._items, text)

    def filtered(self) -> ItemSearch:
        """Items matching the current filter text."""
        return self.find(self._filter_text)

    def index_of(self, item: CollectionItem) -> int:
        """Position of this exact instance (identity, not equality)."""
        for index, candidate in enumerate(self._items):
            if candidate is item:
                return index
        raise ValueError(f"{item!r} is not in the collection")

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self):
        return iter(list(self._items))

    @property
    def filter_text(self):
        return self._filter_text

    @filter_text.setter
    def filter_text(self, value):
        self._filter_text = value or ""
        self.filterChanged.emit()

    def _check_index(self, index: int):
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(self._items):
            raise IndexOutOfRange(index, len(self._items))

    def _apply_strategy(self):
        if len(self._items) > 1:
            self._strategy.sort(self._items)
