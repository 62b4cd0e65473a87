from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QLineEdit, QPushButton
from PySide6.QtGui import QFont
import logging

from actions.collection_actions import CollectionActions
from common.constants import APP_NAME

logger = logging.getLogger(__name__)


class SearchBar(QWidget):
    """Header row: application title on the left, text filter on the right.

    The filter is applied on Enter or the Filter button, not on every keystroke.
    """

    def __init__(self, actions: CollectionActions, parent=None):
        super().__init__(parent)
        self._actions = actions

        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(10, 8, 10, 8)
        self.setLayout(self._layout)

        self.titleLabel = QLabel(APP_NAME)
        font = QFont()
        font.setPointSize(18)
        font.setBold(True)
        self.titleLabel.setFont(font)
        self._layout.addWidget(self.titleLabel)
        self._layout.addStretch(1)

        self._layout.addWidget(QLabel("Search:"))
        self.searchBox = QLineEdit()
        self.searchBox.setPlaceholderText("Title, artist, format or year")
        self.searchBox.setMinimumWidth(220)
        self.searchBox.setText(actions.items.filter_text)
        self.searchBox.returnPressed.connect(self.onFilterClicked)
        self._layout.addWidget(self.searchBox)

        self.filterButton = QPushButton("Filter")
        self.filterButton.clicked.connect(self.onFilterClicked)
        self._layout.addWidget(self.filterButton)

        self.clearButton = QPushButton("Clear")
        self.clearButton.clicked.connect(self.onClearClicked)
        self._layout.addWidget(self.clearButton)

    def onFilterClicked(self):
        self._actions.set_filter(self.searchBox.text())

    def onClearClicked(self):
        self.searchBox.clear()
        self._actions.clear_filter()
