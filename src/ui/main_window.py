"""
Main Window

Builds the collection window (header, table, controls, status line) and
runs the Qt event loop. Separated from the entry point so tests can
construct the window without starting the application.
"""

import sys
import logging

from PySide6.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QDialog,
    QHeaderView,
    QLabel,
    QMessageBox,
    QTableView,
    QVBoxLayout,
    QWidget,
)

from actions.collection_actions import CollectionActions
from app.app_data import AppData
from common.constants import APP_NAME
from common.errors import CollectionError
from common.utils.async_logging import shutdown_async_logging
from ui.add_item_dialog import AddItemDialog
from ui.collection_table_model import CollectionTableModel
from ui.control_bar import ControlBar
from ui.edit_item_dialog import EditItemDialog
from ui.search_bar import SearchBar
from utils.theme import apply_theme
from utils.version import get_version

logger = logging.getLogger(__name__)


def format_status(message: str, count: int) -> str:
    return f"{message} - {count} items in collection"


class MainWindow(QWidget):

    def __init__(self, data: AppData, actions: CollectionActions, parent=None):
        super().__init__(parent)
        self.data = data
        self.actions = actions
        self.setWindowTitle(f"{APP_NAME} {get_version()}")
        self.setMinimumSize(700, 450)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(5, 5, 5, 5)
        layout.setSpacing(4)

        self.searchBar = SearchBar(actions, self)
        layout.addWidget(self.searchBar)

        self.tableModel = CollectionTableModel(data.items, self)
        self.tableView = self._create_table_view()
        layout.addWidget(self.tableView, 1)

        self.controlBar = ControlBar(actions, self)
        self.controlBar.addClicked.connect(self.show_add_dialog)
        self.controlBar.editClicked.connect(self.show_edit_dialog)
        self.controlBar.deleteClicked.connect(self.delete_selected)
        layout.addWidget(self.controlBar)

        self.statusLabel = QLabel()
        self.statusLabel.setStyleSheet("padding: 2px 4px;")
        layout.addWidget(self.statusLabel)

        data.status_message.connect(self.show_status)
        data.selected_item_changed.connect(self._select_row)
        self.tableModel.modelReset.connect(lambda: self._select_row(data.selected_item))
        self.show_status("Ready")

    def _create_table_view(self) -> QTableView:
        view = QTableView(self)
        view.setModel(self.tableModel)
        view.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        view.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        view.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        view.setSortingEnabled(False)
        view.setAlternatingRowColors(True)
        view.verticalHeader().setVisible(False)
        view.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Interactive)
        view.horizontalHeader().setStretchLastSection(True)
        view.selectionModel().selectionChanged.connect(self._on_selection_changed)
        view.doubleClicked.connect(lambda _index: self.show_edit_dialog())
        return view

    def _on_selection_changed(self, *_):
        rows = self.tableView.selectionModel().selectedRows()
        item = self.tableModel.item_at(rows[0].row()) if rows else None
        self.data.selected_item = item

    def _select_row(self, item):
        """Keep the view's selection in step with data.selected_item."""
        row = self.tableModel.row_of(item) if item is not None else None
        if row is None:
            self.tableView.clearSelection()
            return
        current = self.tableView.selectionModel().selectedRows()
        if current and current[0].row() == row:
            return
        self.tableView.selectRow(row)

    def show_status(self, message: str):
        self.statusLabel.setText(format_status(message, len(self.data.items)))

    def show_add_dialog(self):
        dialog = AddItemDialog(self, self.data.config)
        if dialog.exec() != QDialog.DialogCode.Accepted or dialog.created_item is None:
            return
        try:
            self.actions.add_item(dialog.created_item)
        except CollectionError as e:
            self._show_error("Could not add item", e)

    def show_edit_dialog(self):
        item = self.data.selected_item
        if item is None:
            QMessageBox.information(self, "No Selection", "Please select an item to edit.")
            return
        dialog = EditItemDialog(item, self)
        if dialog.exec() != QDialog.DialogCode.Accepted or not dialog.was_updated:
            return
        try:
            self.actions.edit_item(item, **dialog.changes)
        except CollectionError as e:
            self._show_error("Could not update item", e)

    def delete_selected(self):
        item = self.data.selected_item
        if item is None:
            QMessageBox.information(self, "No Selection", "Please select an item to delete.")
            return
        answer = QMessageBox.question(
            self,
            "Confirm Delete",
            f"Delete '{item.title}' by {item.artist}?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if answer != QMessageBox.StandardButton.Yes:
            logger.debug("Delete cancelled for %r", item.title)
            return
        try:
            self.actions.delete_item(item)
        except CollectionError as e:
            self._show_error("Could not delete item", e)

    def _show_error(self, title: str, error: Exception):
        logger.error("%s: %s", title, error)
        QMessageBox.warning(self, title, str(error))


def create_and_run_gui(config, log_file_path, demo=False):
    """
    Create and run the main GUI application.

    Args:
        config: Application config object
        log_file_path: Path to log file, shown by the crash dialog
        demo: Pre-populate the collection with the demo albums

    Returns:
        Exit code for the application
    """
    app = QApplication.instance()
    if app is None:
        logger.warning("QApplication not found, creating new instance")
        app = QApplication(sys.argv)
    apply_theme(app, config.theme)

    data = AppData(config)
    actions = CollectionActions(data)
    window = MainWindow(data, actions)
    _restore_window_state(window, config)

    if demo:
        actions.load_demo_items()

    app.aboutToQuit.connect(lambda: _save_window_state(window, config, data))
    app.aboutToQuit.connect(shutdown_async_logging)

    if config.window_maximized:
        window.showMaximized()
    else:
        window.show()
    logger.info("Main window shown (log file: %s)", log_file_path)

    return app.exec()


def _restore_window_state(window, config):
    if config.window_x >= 0 and config.window_y >= 0:
        window.move(config.window_x, config.window_y)
    window.resize(config.window_width, config.window_height)


def _save_window_state(window, config, data):
    """Save window geometry, maximized state, and filter text."""
    if not window.isMaximized():
        geometry = window.geometry()
        config.window_width = geometry.width()
        config.window_height = geometry.height()
        config.window_x = geometry.x()
        config.window_y = geometry.y()

    config.window_maximized = window.isMaximized()
    config.filter_text = data.items.filter_text
    config.default_sort = data.items.strategy.name
    config.save()

    logger.debug(
        "Window state saved: %sx%s at (%s, %s), maximized=%s",
        config.window_width,
        config.window_height,
        config.window_x,
        config.window_y,
        config.window_maximized,
    )
