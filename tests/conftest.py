import os
import sys
import pytest

# Ensure src directory is importable
PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
SRC_DIR = os.path.join(PROJECT_ROOT, 'src')
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("COLLECTION_SUPPRESS_ERROR_DIALOGS", "1")

from common.config import Config
from model.collection_item import CollectionItem
from model.collection_items import CollectionItems
from services import item_factory


@pytest.fixture
def make_item():
    """
    Factory fixture for creating items with sensible defaults.

    Usage:
        item = make_item(title="Blue", artist="Joni Mitchell", condition="NM")

    The format defaults to a 12" 33 RPM record; pass ``kind="cd"`` or
    ``kind="cassette"`` for the other formats.
    """
    def _create_item(
        title: str = "Test Album",
        artist: str = "Test Artist",
        year: int = 1975,
        condition: str = "VG+",
        kind: str = "record",
    ) -> CollectionItem:
        if kind == "cd":
            return item_factory.create_cd(title, artist, year, condition, 12, False)
        if kind == "cassette":
            return item_factory.create_cassette(title, artist, year, condition, "Normal", 60)
        return item_factory.create_record(title, artist, year, condition, '12"', "33")

    return _create_item


@pytest.fixture
def store():
    """Empty store with the default (artist) strategy."""
    return CollectionItems()


@pytest.fixture
def filled_store(store, make_item):
    """Store holding one item of each format."""
    store.add(make_item("Abbey Road", "The Beatles", 1969, "EX"))
    store.add(make_item("Thriller", "Michael Jackson", 1982, "NM", kind="cd"))
    store.add(make_item("Nevermind", "Nirvana", 1991, "VG", kind="cassette"))
    return store


@pytest.fixture
def config(tmp_path):
    """Config backed by a fresh config.ini in tmp_path."""
    return Config(custom_config_path=str(tmp_path / "config.ini"))


@pytest.fixture
def app_data(config):
    from app.app_data import AppData

    return AppData(config)
