"""Tests for the add and edit dialogs (accept handling and validation feedback)."""

import pytest
from unittest.mock import patch
from PySide6.QtWidgets import QDialog

from model.collection_item import CDDetails
from services import item_factory
from ui.add_item_dialog import AddItemDialog, MISSING_INFO_TEXT, MISSING_INFO_TITLE
from ui.edit_item_dialog import EditItemDialog


@pytest.fixture
def add_dialog(qtbot, config):
    dialog = AddItemDialog(None, config)
    qtbot.addWidget(dialog)
    return dialog


class TestAddItemDialog:

    def test_uses_form_defaults(self, add_dialog):
        assert add_dialog.form.year_spin.value() == 2025
        assert add_dialog.form.condition_combo.currentText() == "VG+"

    @patch("ui.add_item_dialog.QMessageBox.warning")
    def test_empty_fields_warn_and_stay_open(self, mock_warning, add_dialog):
        add_dialog.accept()

        mock_warning.assert_called_once_with(add_dialog, MISSING_INFO_TITLE, MISSING_INFO_TEXT)
        assert add_dialog.created_item is None
        assert add_dialog.result() != QDialog.DialogCode.Accepted

    @patch("ui.add_item_dialog.QMessageBox.warning")
    def test_valid_input_creates_item(self, mock_warning, add_dialog):
        add_dialog.form.title_edit.setText("Rumours")
        add_dialog.form.artist_edit.setText("Fleetwood Mac")
        add_dialog.form.media_type_combo.setCurrentText("CD")

        add_dialog.accept()

        mock_warning.assert_not_called()
        assert add_dialog.result() == QDialog.DialogCode.Accepted
        assert add_dialog.created_item.title == "Rumours"
        assert add_dialog.created_item.media_type == "CD"

    def test_without_config_uses_widget_defaults(self, qtbot):
        dialog = AddItemDialog()
        qtbot.addWidget(dialog)

        assert dialog.form.year_spin.value() == 1900


class TestEditItemDialog:

    @pytest.fixture
    def item(self):
        return item_factory.create_cd("Thriller", "Michael Jackson", 1982, "NM", 9, True)

    @pytest.fixture
    def edit_dialog(self, qtbot, item):
        dialog = EditItemDialog(item)
        qtbot.addWidget(dialog)
        return dialog

    def test_title_names_format(self, edit_dialog):
        assert edit_dialog.windowTitle() == "Edit CD"
        assert not edit_dialog.form.media_type_combo.isEnabled()

    def test_accept_collects_changes_without_touching_item(self, edit_dialog, item):
        edit_dialog.form.condition_combo.setCurrentText("VG")
        edit_dialog.form.booklet_check.setChecked(False)

        edit_dialog.accept()

        assert edit_dialog.was_updated
        assert edit_dialog.changes["condition"] == "VG"
        assert edit_dialog.changes["details"] == CDDetails(track_count=9, has_booklet=False)
        assert item.condition == "NM"
        assert item.details.has_booklet is True

    @patch("ui.edit_item_dialog.QMessageBox.warning")
    def test_cleared_title_is_rejected(self, mock_warning, edit_dialog):
        edit_dialog.form.title_edit.clear()

        edit_dialog.accept()

        mock_warning.assert_called_once()
        assert not edit_dialog.was_updated

    def test_reject_leaves_no_changes(self, edit_dialog):
        edit_dialog.reject()

        assert not edit_dialog.was_updated
        assert edit_dialog.result() == QDialog.DialogCode.Rejected
