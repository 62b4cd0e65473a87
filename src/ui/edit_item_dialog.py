import logging
from typing import Dict, Optional

from PySide6.QtWidgets import QDialog, QDialogButtonBox, QMessageBox, QVBoxLayout

from common.errors import ValidationFailed
from model.collection_item import CollectionItem
from ui.add_item_dialog import MISSING_INFO_TEXT, MISSING_INFO_TITLE
from ui.item_form import ItemForm

logger = logging.getLogger(__name__)


class EditItemDialog(QDialog):
    """Edits an existing item's fields; the format is shown but locked.

    The dialog does not touch the item. On accept ``changes`` holds the new
    values, ready for the store's update().
    """

    def __init__(self, item: CollectionItem, parent=None):
        super().__init__(parent)
        self.item = item
        self.setWindowTitle(f"Edit {item.media_type}")
        self.setModal(True)
        self.setMinimumWidth(380)
        self.changes: Optional[Dict[str, object]] = None

        layout = QVBoxLayout(self)
        self.form = ItemForm(self)
        self.form.load_item(item)
        layout.addWidget(self.form)

        self.buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel)
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)
        layout.addWidget(self.buttons)

    @property
    def was_updated(self) -> bool:
        return self.changes is not None

    def accept(self):
        try:
            self.changes = self.form.changes()
        except ValidationFailed as e:
            logger.info("Edit rejected: %s", e)
            QMessageBox.warning(self, MISSING_INFO_TITLE, MISSING_INFO_TEXT)
            return
        super().accept()
