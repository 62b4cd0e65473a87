from dataclasses import dataclass
from enum import Enum
import logging
from typing import Callable, Dict, Union

from common.errors import InvalidVariant, MalformedAttributes

logger = logging.getLogger(__name__)


class MediaType(Enum):
    RECORD = "Vinyl Record"
    CD = "CD"
    CASSETTE = "Cassette"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value) -> "MediaType":
        """Resolve a member, member name ("RECORD") or display name ("Vinyl Record")."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            for member in cls:
                if key.upper() == member.name or key.casefold() == member.value.casefold():
                    return member
        raise InvalidVariant(value)


@dataclass
class RecordDetails:
    size: str = '12"'
    speed: str = "33"


@dataclass
class CDDetails:
    track_count: int = 10
    has_booklet: bool = False


@dataclass
class CassetteDetails:
    tape_type: str = "Normal"
    length_minutes: int = 60


MediaDetails = Union[RecordDetails, CDDetails, CassetteDetails]


def _format_record(details: RecordDetails) -> str:
    return f"{details.size} @ {details.speed} RPM"


def _format_cd(details: CDDetails) -> str:
    text = f"{details.track_count} tracks"
    if details.has_booklet:
        text += ", includes booklet"
    return text


def _format_cassette(details: CassetteDetails) -> str:
    return f"{details.tape_type} tape, {details.length_minutes} min"


# Payload type -> (variant tag, details formatter)
_VARIANTS: Dict[type, tuple] = {
    RecordDetails: (MediaType.RECORD, _format_record),
    CDDetails: (MediaType.CD, _format_cd),
    CassetteDetails: (MediaType.CASSETTE, _format_cassette),
}

# Variant tag -> payload type
DETAILS_TYPES: Dict[MediaType, type] = {tag: details_type for details_type, (tag, _) in _VARIANTS.items()}


def _variant_of(details) -> tuple:
    entry = _VARIANTS.get(type(details))
    if entry is None:
        raise MalformedAttributes(f"Unsupported format details: {type(details).__name__}")
    return entry


class CollectionItem:
    """One entry of the collection: common fields plus a format-specific payload.

    The payload type decides the variant and never changes after construction;
    its fields and the common fields are freely editable.
    """

    def __init__(self, title: str, artist: str, year: int, condition: str, details: MediaDetails):
        _variant_of(details)
        self.title: str = title
        self.artist: str = artist
        self.year: int = year
        self.condition: str = condition
        self._details: MediaDetails = details

    @property
    def details(self) -> MediaDetails:
        return self._details

    @details.setter
    def details(self, value: MediaDetails):
        if type(value) is not type(self._details):
            raise MalformedAttributes(
                f"Cannot change a {self.media_type} into {type(value).__name__}; variant is fixed"
            )
        self._details = value

    @property
    def kind(self) -> MediaType:
        """Variant tag of this item."""
        return _variant_of(self._details)[0]

    @property
    def media_type(self) -> str:
        return self.kind.display_name

    @property
    def format_details(self) -> str:
        formatter: Callable = _variant_of(self._details)[1]
        return formatter(self._details)

    def __str__(self):
        return f"{self.artist} - {self.title} ({self.year}) [{self.condition}] - {self.media_type}"

    def __repr__(self):
        return f"<CollectionItem {self.kind.name}: {self.artist} - {self.title}>"
