"""
Error types raised by the collection core and the item forms.

Each error also derives from the closest builtin so callers that only know
about ValueError/TypeError/IndexError still catch it.
"""

from typing import Iterable, List


class CollectionError(Exception):
    """Base class for all collection manager errors."""


class InvalidVariant(CollectionError, ValueError):
    """Unknown media-type tag passed to the generic factory entry point."""

    def __init__(self, variant):
        self.variant = variant
        super().__init__(f"Unknown media type: {variant!r}")


class MalformedAttributes(CollectionError, TypeError):
    """Wrong count or type of format-specific attributes for a variant."""


class IndexOutOfRange(CollectionError, IndexError):
    """A store operation referenced a position that does not exist."""

    def __init__(self, index, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of range for collection of {size} items")


class ValidationFailed(CollectionError, ValueError):
    """Form submission rejected because required text fields are empty."""

    def __init__(self, fields: Iterable[str]):
        self.fields: List[str] = list(fields)
        super().__init__("Please fill in: " + ", ".join(self.fields))
