import logging
from typing import List, Optional

from actions.base_actions import BaseActions
from model.collection_item import CollectionItem
from services.demo_collection import build_demo_items

logger = logging.getLogger(__name__)


class CollectionActions(BaseActions):
    """Add, edit, delete, sort and filter operations triggered from the UI.

    Confirmation and input validation happen in the widgets before these
    are called; errors from the store propagate to the caller.
    """

    def add_item(self, item: CollectionItem):
        self.items.add(item)
        self.data.selected_item = item
        self._status(f"Added: {item.title}")

    def add_items(self, items: List[CollectionItem]):
        self.items.add_batch(items)
        self._status(f"Added {len(items)} items")

    def load_demo_items(self):
        self.add_items(build_demo_items())

    def edit_item(self, item: CollectionItem, **changes) -> CollectionItem:
        index = self.items.index_of(item)
        updated = self.items.update(index, **changes)
        self._status(f"Updated: {updated.title}")
        return updated

    def delete_item(self, item: CollectionItem) -> CollectionItem:
        index = self.items.index_of(item)
        removed = self.items.remove(index)
        if self.data.selected_item is removed:
            self.data.selected_item = None
        self._status(f"Deleted: {removed.title}")
        return removed

    def delete_selected_item(self) -> Optional[CollectionItem]:
        item = self.data.selected_item
        if item is None:
            logger.error("No item selected to delete.")
            return None
        return self.delete_item(item)

    def set_sort(self, name: str):
        """Activate the strategy with this display name and remember it as default."""
        strategy = self.data.strategies.get(name)
        self.items.set_strategy(strategy)
        self.config.default_sort = strategy.name
        self._status(f"Sorted by {strategy.name}")

    def set_filter(self, text: str):
        self.items.filter_text = text
        self.config.filter_text = self.items.filter_text
        if self.items.filter_text:
            count = sum(1 for _ in self.items.filtered())
            self._status(f"Found {count} matching items")
        else:
            self._status(f"Showing {len(self.items)} items")

    def clear_filter(self):
        self.set_filter("")
