import pytest

from common.errors import InvalidVariant, MalformedAttributes
from model.collection_item import (
    CassetteDetails,
    CDDetails,
    CollectionItem,
    DETAILS_TYPES,
    MediaType,
    RecordDetails,
)


def test_every_media_type_has_a_payload_type():
    assert set(DETAILS_TYPES) == set(MediaType)
    assert DETAILS_TYPES[MediaType.RECORD] is RecordDetails


def test_media_type_parse_rejects_unknown_names():
    assert MediaType.parse("vinyl record") is MediaType.RECORD
    assert MediaType.parse("CASSETTE") is MediaType.CASSETTE
    with pytest.raises(InvalidVariant):
        MediaType.parse("8-track")


def test_constructor_rejects_unknown_payload():
    with pytest.raises(MalformedAttributes):
        CollectionItem("T", "A", 2000, "M", object())


def test_details_can_be_replaced_with_same_variant():
    item = CollectionItem("T", "A", 2000, "M", CDDetails(track_count=5))
    item.details = CDDetails(track_count=7, has_booklet=True)

    assert item.format_details == "7 tracks, includes booklet"


def test_variant_cannot_change_after_construction():
    item = CollectionItem("T", "A", 2000, "M", RecordDetails())

    with pytest.raises(MalformedAttributes):
        item.details = CassetteDetails()

    assert item.kind is MediaType.RECORD


def test_items_with_equal_fields_are_distinct():
    first = CollectionItem("T", "A", 2000, "M", RecordDetails())
    second = CollectionItem("T", "A", 2000, "M", RecordDetails())

    assert first != second
    assert first == first
