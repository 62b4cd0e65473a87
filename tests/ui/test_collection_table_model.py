import pytest
from PySide6.QtCore import Qt

from common.constants import TABLE_COLUMNS
from model.sorting import SortByYear
from ui.collection_table_model import CollectionTableModel


@pytest.fixture
def model(qtbot, filled_store):
    return CollectionTableModel(filled_store)


def _column(model, column):
    return [model.data(model.index(row, column)) for row in range(model.rowCount())]


def test_rows_follow_store_order(model):
    assert model.rowCount() == 3
    assert model.columnCount() == len(TABLE_COLUMNS)
    assert _column(model, 0) == ["Michael Jackson", "Nirvana", "The Beatles"]


def test_headers(model):
    headers = [model.headerData(i, Qt.Orientation.Horizontal) for i in range(model.columnCount())]

    assert headers == ["Artist", "Title", "Year", "Condition", "Format", "Details"]


def test_display_values_for_each_column(model):
    row = _column(model, 1).index("Abbey Road")

    values = [model.data(model.index(row, column)) for column in range(model.columnCount())]

    assert values == ["The Beatles", "Abbey Road", "1969", "EX", "Vinyl Record", '12" @ 33 RPM']


def test_user_role_and_tooltip(model, filled_store):
    index = model.index(0, 3)

    assert model.data(index, Qt.ItemDataRole.UserRole) is filled_store[0]
    assert model.data(index, Qt.ItemDataRole.ToolTipRole) == str(filled_store[0])


def test_strategy_change_reorders_rows(qtbot, model, filled_store):
    with qtbot.waitSignal(model.modelReset):
        filled_store.set_strategy(SortByYear())

    assert _column(model, 2) == ["1969", "1982", "1991"]


def test_filter_limits_rows(model, filled_store):
    filled_store.filter_text = "cd"

    assert model.rowCount() == 1
    assert model.item_at(0).title == "Thriller"
    assert model.item_at(5) is None


def test_add_appears_in_sorted_position(model, filled_store, make_item):
    filled_store.add(make_item(artist="Bob Dylan"))

    assert _column(model, 0)[0] == "Bob Dylan"


def test_remove_drops_row(qtbot, model, filled_store):
    with qtbot.waitSignal(model.rowsRemoved):
        filled_store.remove(1)

    assert _column(model, 0) == ["Michael Jackson", "The Beatles"]


def test_update_refreshes_values(model, filled_store):
    filled_store.update(0, condition="P")

    row = model.row_of(filled_store[0])
    assert model.data(model.index(row, 3)) == "P"


def test_invalid_index_returns_none(model):
    assert model.data(model.index(10, 0)) is None
    assert model.flags(model.index(10, 0)) == Qt.ItemFlag.NoItemFlags
