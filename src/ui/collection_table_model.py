from typing import List, Optional
from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex
import logging

from common.constants import TABLE_COLUMNS
from model.collection_item import CollectionItem
from model.collection_items import CollectionItems

logger = logging.getLogger(__name__)

YEAR_COLUMN = TABLE_COLUMNS.index("Year")


def _column_text(item: CollectionItem, column: int) -> str:
    if column == 0:
        return item.artist
    if column == 1:
        return item.title
    if column == 2:
        return str(item.year)
    if column == 3:
        return item.condition
    if column == 4:
        return item.media_type
    if column == 5:
        return item.format_details
    return ""


class CollectionTableModel(QAbstractTableModel):
    """Read-only table over the store's filtered items, in store order.

    Sorting is owned by the store's active strategy, so the view never
    sorts on its own.
    """

    def __init__(self, items_model: CollectionItems, parent=None):
        super().__init__(parent)
        self.items_model = items_model
        self.rows: List[CollectionItem] = list(items_model.filtered())

        self.items_model.listChanged.connect(self.refresh)
        self.items_model.filterChanged.connect(self.refresh)
        self.items_model.updated.connect(self.item_updated)
        self.items_model.deleted.connect(self.item_deleted)
        self.items_model.cleared.connect(self.refresh)

    def refresh(self):
        self.beginResetModel()
        self.rows = list(self.items_model.filtered())
        self.endResetModel()
        logger.debug("Table refreshed: %s of %s items shown", len(self.rows), len(self.items_model))

    def item_updated(self, item: CollectionItem):
        row = self.row_of(item)
        if row is None:
            return
        self.dataChanged.emit(self.index(row, 0), self.index(row, self.columnCount() - 1))

    def item_deleted(self, item: CollectionItem):
        row = self.row_of(item)
        if row is None:
            logger.debug("Deleted item was not visible: %r", item)
            return
        self.beginRemoveRows(QModelIndex(), row, row)
        self.rows.pop(row)
        self.endRemoveRows()

    def row_of(self, item: CollectionItem) -> Optional[int]:
        for row, candidate in enumerate(self.rows):
            if candidate is item:
                return row
        return None

    def item_at(self, row: int) -> Optional[CollectionItem]:
        if 0 <= row < len(self.rows):
            return self.rows[row]
        return None

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self.rows)

    def columnCount(self, parent=QModelIndex()):
        return len(TABLE_COLUMNS)

    def data(self, index, role=Qt.ItemDataRole.DisplayRole):
        if not index.isValid() or not (0 <= index.row() < len(self.rows)):
            return None

        item = self.rows[index.row()]
        if role == Qt.ItemDataRole.UserRole:
            return item
        elif role == Qt.ItemDataRole.DisplayRole:
            return _column_text(item, index.column())
        elif role == Qt.ItemDataRole.ToolTipRole:
            return str(item)
        elif role == Qt.ItemDataRole.TextAlignmentRole:
            if index.column() == YEAR_COLUMN:
                return Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            return Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter
        return None

    def headerData(self, section, orientation, role=Qt.ItemDataRole.DisplayRole):
        if orientation == Qt.Orientation.Horizontal and role == Qt.ItemDataRole.DisplayRole:
            return TABLE_COLUMNS[section]
        return None

    def flags(self, index):
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        return Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable
