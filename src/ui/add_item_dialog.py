import logging
from typing import Optional

from PySide6.QtWidgets import QDialog, QDialogButtonBox, QMessageBox, QVBoxLayout

from common.errors import ValidationFailed
from model.collection_item import CollectionItem
from ui.item_form import ItemForm

logger = logging.getLogger(__name__)

MISSING_INFO_TITLE = "Missing Information"
MISSING_INFO_TEXT = "Please fill in both title and artist fields."


class AddItemDialog(QDialog):
    """Collects a new item. ``created_item`` is set only when the user confirms valid input."""

    def __init__(self, parent=None, config=None):
        super().__init__(parent)
        self.setWindowTitle("Add Item")
        self.setModal(True)
        self.setMinimumWidth(380)
        self.created_item: Optional[CollectionItem] = None

        layout = QVBoxLayout(self)
        self.form = ItemForm(self)
        if config is not None:
            self.form.apply_defaults(config)
        layout.addWidget(self.form)

        self.buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel)
        self.buttons.button(QDialogButtonBox.StandardButton.Ok).setText("Add")
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)
        layout.addWidget(self.buttons)

    def accept(self):
        try:
            self.created_item = self.form.build_item()
        except ValidationFailed as e:
            logger.info("Add rejected: %s", e)
            QMessageBox.warning(self, MISSING_INFO_TITLE, MISSING_INFO_TEXT)
            return
        super().accept()
