"""Sample collection used by ``--demo`` to show the app with some content."""

from typing import List

from model.collection_item import CollectionItem
from services import item_factory


def build_demo_items() -> List[CollectionItem]:
    """Eight well-known albums spread over all three formats and several grades."""
    return [
        item_factory.create_record("Abbey Road", "The Beatles", 1969, "EX", '12"', "33"),
        item_factory.create_record("Dark Side of the Moon", "Pink Floyd", 1973, "M", '12"', "33"),
        item_factory.create_cd("Thriller", "Michael Jackson", 1982, "NM", 9, True),
        item_factory.create_cd("Back in Black", "AC/DC", 1980, "VG+", 10, True),
        item_factory.create_cassette("Nevermind", "Nirvana", 1991, "VG", "Chrome", 60),
        item_factory.create_cassette("Purple Rain", "Prince", 1984, "EX", "Normal", 90),
        item_factory.create_record("Led Zeppelin IV", "Led Zeppelin", 1971, "G", '12"', "33"),
        item_factory.create_cd("Rumours", "Fleetwood Mac", 1977, "NM", 11, True),
    ]
