"""
Item factory: the single place where collection items are constructed.

Typed constructors exist per format; ``create_item`` is the dynamic entry point
used by the add dialog, where the format comes from a combo box and the
format-specific values arrive as a plain sequence.
"""

import logging
from typing import Any, Callable, Dict, Tuple

from common.errors import MalformedAttributes
from model.collection_item import (
    CassetteDetails,
    CDDetails,
    CollectionItem,
    DETAILS_TYPES,
    MediaDetails,
    MediaType,
    RecordDetails,
)

logger = logging.getLogger(__name__)


def create_record(title: str, artist: str, year: int, condition: str, size: str, speed: str) -> CollectionItem:
    return _build(title, artist, year, condition, RecordDetails(size=size, speed=str(speed)))


def create_cd(
    title: str, artist: str, year: int, condition: str, track_count: int, has_booklet: bool
) -> CollectionItem:
    return _build(title, artist, year, condition, CDDetails(track_count=track_count, has_booklet=has_booklet))


def create_cassette(
    title: str, artist: str, year: int, condition: str, tape_type: str, length: int
) -> CollectionItem:
    return _build(title, artist, year, condition, CassetteDetails(tape_type=tape_type, length_minutes=length))


def create_from_details(title: str, artist: str, year: int, condition: str, details: MediaDetails) -> CollectionItem:
    """Create an item from an already-typed format payload."""
    if type(details) not in DETAILS_TYPES.values():
        raise MalformedAttributes(f"Unsupported format details: {type(details).__name__}")
    return _build(title, artist, year, condition, details)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_speed(value) -> bool:
    return isinstance(value, str) or _is_int(value)


# Variant -> (constructor, ((extra name, type check), ...))
_EXTRAS: Dict[MediaType, Tuple[Callable[..., CollectionItem], Tuple[Tuple[str, Callable[[Any], bool]], ...]]] = {
    MediaType.RECORD: (
        create_record,
        (("size", lambda v: isinstance(v, str)), ("speed", _is_speed)),
    ),
    MediaType.CD: (
        create_cd,
        (("track_count", _is_int), ("has_booklet", lambda v: isinstance(v, bool))),
    ),
    MediaType.CASSETTE: (
        create_cassette,
        (("tape_type", lambda v: isinstance(v, str)), ("length", _is_int)),
    ),
}


def create_item(variant, title: str, artist: str, year: int, condition: str, *extras) -> CollectionItem:
    """
    Create an item of the requested format.

    Args:
        variant: MediaType member, its name ("CD") or display name ("Vinyl Record")
        title, artist, year, condition: Common item fields
        *extras: Exactly the format-specific values, in order:
            record: size, speed; CD: track_count, has_booklet; cassette: tape_type, length

    Returns:
        The new item

    Raises:
        InvalidVariant: If variant is not a known format
        MalformedAttributes: If extras has the wrong length or wrong value types
    """
    media_type = MediaType.parse(variant)
    constructor, expected = _EXTRAS[media_type]

    if len(extras) != len(expected):
        names = ", ".join(name for name, _ in expected)
        raise MalformedAttributes(
            f"{media_type.display_name} needs exactly {len(expected)} extra attributes ({names}), got {len(extras)}"
        )
    for (name, check), value in zip(expected, extras):
        if not check(value):
            raise MalformedAttributes(
                f"Invalid {name} for {media_type.display_name}: {value!r} ({type(value).__name__})"
            )

    return constructor(title, artist, year, condition, *extras)


def _build(title: str, artist: str, year: int, condition: str, details: MediaDetails) -> CollectionItem:
    item = CollectionItem(title, artist, year, condition, details)
    logger.debug("Factory created %r", item)
    return item
