"""
Tests for the sort strategies and their registry.

Each strategy must be idempotent, stable and harmless on trivial input;
the concrete orderings are checked against fixed examples.
"""

import pytest

from model.sorting import (
    SortByArtist,
    SortByCondition,
    SortByMediaType,
    SortByTitle,
    SortByYear,
    create_registry,
)

ALL_STRATEGIES = [SortByArtist(), SortByTitle(), SortByYear(), SortByCondition(), SortByMediaType()]
STRATEGY_IDS = [strategy.name for strategy in ALL_STRATEGIES]


@pytest.fixture
def mixed_items(make_item):
    return [
        make_item("Nevermind", "Nirvana", 1991, "VG", kind="cassette"),
        make_item("Abbey Road", "The Beatles", 1969, "EX"),
        make_item("Thriller", "Michael Jackson", 1982, "NM", kind="cd"),
        make_item("Arrival", "ABBA", 1976, "M", kind="cd"),
        make_item("Let It Be", "the beatles", 1970, "G"),
        make_item("Odd One", "Unknown", 1982, "Sealed"),
    ]


class TestStrategyProperties:

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=STRATEGY_IDS)
    def test_sort_is_idempotent(self, strategy, mixed_items):
        strategy.sort(mixed_items)
        once = list(mixed_items)
        strategy.sort(mixed_items)

        assert all(a is b for a, b in zip(once, mixed_items))

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=STRATEGY_IDS)
    def test_empty_and_single_are_noops(self, strategy, make_item):
        empty = []
        strategy.sort(empty)
        assert empty == []

        only = make_item()
        single = [only]
        strategy.sort(single)
        assert len(single) == 1 and single[0] is only

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=STRATEGY_IDS)
    def test_sorted_output_respects_compare(self, strategy, mixed_items):
        strategy.sort(mixed_items)

        for first, second in zip(mixed_items, mixed_items[1:]):
            assert strategy.compare(first, second) <= 0

    @pytest.mark.parametrize("strategy", ALL_STRATEGIES, ids=STRATEGY_IDS)
    def test_compare_is_antisymmetric(self, strategy, mixed_items):
        for first in mixed_items:
            for second in mixed_items:
                assert strategy.compare(first, second) == -strategy.compare(second, first)

    def test_sort_is_stable_for_equal_keys(self, make_item):
        first = make_item("B", "Same", 1980, "EX")
        second = make_item("A", "same", 1975, "M")
        third = make_item("C", "SAME", 1990, "P")
        items = [first, second, third]

        SortByArtist().sort(items)

        assert items == [first, second, third]


class TestConcreteOrderings:

    def test_condition_orders_by_grade(self, make_item):
        items = [make_item(condition=grade) for grade in ["G", "M", "P", "VG+"]]

        SortByCondition().sort(items)

        assert [item.condition for item in items] == ["M", "VG+", "G", "P"]

    def test_condition_unknown_grade_sorts_last(self, make_item):
        items = [make_item(condition="Sealed"), make_item(condition="P"), make_item(condition="NM")]

        SortByCondition().sort(items)

        assert [item.condition for item in items] == ["NM", "P", "Sealed"]
        assert SortByCondition().sort_key(items[-1]) == SortByCondition.UNKNOWN_RANK == 99

    def test_condition_rank_table_is_read_only(self):
        with pytest.raises(TypeError):
            SortByCondition.CONDITION_RANK["M"] = 100

    def test_artist_is_case_insensitive(self, make_item):
        items = [make_item(artist=name) for name in ["Zappa", "abba", "Queen"]]

        SortByArtist().sort(items)

        assert [item.artist for item in items] == ["abba", "Queen", "Zappa"]

    def test_title_is_case_insensitive(self, make_item):
        items = [make_item(title=title) for title in ["help!", "Abbey Road", "Revolver"]]

        SortByTitle().sort(items)

        assert [item.title for item in items] == ["Abbey Road", "help!", "Revolver"]

    def test_year_ascending(self, make_item):
        items = [make_item(year=year) for year in [1991, 1969, 1982]]

        SortByYear().sort(items)

        assert [item.year for item in items] == [1969, 1982, 1991]

    def test_media_type_groups_formats(self, mixed_items):
        SortByMediaType().sort(mixed_items)

        assert [item.media_type for item in mixed_items] == [
            "Cassette",
            "CD",
            "CD",
            "Vinyl Record",
            "Vinyl Record",
            "Vinyl Record",
        ]

    def test_compare_three_way(self, make_item):
        older, newer = make_item(year=1960), make_item(year=2000)
        strategy = SortByYear()

        assert strategy.compare(older, newer) < 0
        assert strategy.compare(newer, older) > 0
        assert strategy.compare(older, older) == 0


class TestRegistry:

    def test_names_in_selector_order(self):
        registry = create_registry()

        assert registry.names == ["Artist", "Title", "Year", "Condition", "Format"]
        assert len(registry) == 5
        assert isinstance(registry.default, SortByArtist)

    def test_get_is_case_insensitive(self):
        registry = create_registry()

        assert isinstance(registry.get("condition"), SortByCondition)
        assert isinstance(registry.get(" FORMAT "), SortByMediaType)

    def test_get_unknown_raises_and_find_returns_none(self):
        registry = create_registry()

        with pytest.raises(KeyError):
            registry.get("Label")
        assert registry.find("Label") is None

    def test_index_round_trip(self):
        registry = create_registry()

        for index, strategy in enumerate(registry):
            assert registry.at(index) is strategy
            assert registry.index_of(strategy) == index
