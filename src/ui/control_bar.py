from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QComboBox, QPushButton
from PySide6.QtCore import Signal
import logging

from actions.collection_actions import CollectionActions

logger = logging.getLogger(__name__)


class ControlBar(QWidget):
    """Bottom row: Add/Edit/Delete on the left, sort selector on the right.

    Signals:
        addClicked, editClicked, deleteClicked: forwarded button clicks;
            the main window owns the dialogs
    """

    addClicked = Signal()
    editClicked = Signal()
    deleteClicked = Signal()

    def __init__(self, actions: CollectionActions, parent=None):
        super().__init__(parent)
        self._actions = actions
        data = actions.data

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.addButton = QPushButton("Add Item")
        self.addButton.setStyleSheet("QPushButton { background-color: #00b894; color: white; }")
        self.addButton.clicked.connect(self.addClicked)
        layout.addWidget(self.addButton)

        self.editButton = QPushButton("Edit Item")
        self.editButton.clicked.connect(self.editClicked)
        layout.addWidget(self.editButton)

        self.deleteButton = QPushButton("Delete Item")
        self.deleteButton.setStyleSheet("QPushButton { background-color: #ff7675; color: white; }")
        self.deleteButton.clicked.connect(self.deleteClicked)
        layout.addWidget(self.deleteButton)

        layout.addStretch(1)

        layout.addWidget(QLabel("Sort by:"))
        self.sortCombo = QComboBox()
        self.sortCombo.addItems(data.strategies.names)
        self.sortCombo.setCurrentText(data.items.strategy.name)
        # Connected after the initial selection so startup does not re-sort
        self.sortCombo.currentTextChanged.connect(self.onSortChanged)
        layout.addWidget(self.sortCombo)

        data.selected_item_changed.connect(self.updateButtonStates)
        self.updateButtonStates(data.selected_item)

    def onSortChanged(self, name: str):
        self._actions.set_sort(name)

    def updateButtonStates(self, item=None):
        has_selection = item is not None
        self.editButton.setEnabled(has_selection)
        self.deleteButton.setEnabled(has_selection)
