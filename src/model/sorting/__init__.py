"""
Sort Strategy Pattern for the collection store

Each ordering of the collection lives in its own small strategy class;
the store only holds a reference to the active one.
"""

from .base import SortStrategy
from .registry import StrategyRegistry
from .strategies import (
    SortByArtist,
    SortByTitle,
    SortByYear,
    SortByCondition,
    SortByMediaType,
)


def create_registry() -> StrategyRegistry:
    """Factory function to create a configured StrategyRegistry.

    Returns:
        Registry with all five strategies, in selector order (Artist first = default)
    """
    registry = StrategyRegistry()
    registry.register_all([
        SortByArtist(),
        SortByTitle(),
        SortByYear(),
        SortByCondition(),
        SortByMediaType(),
    ])
    return registry


__all__ = [
    'SortStrategy',
    'StrategyRegistry',
    'create_registry',
    'SortByArtist',
    'SortByTitle',
    'SortByYear',
    'SortByCondition',
    'SortByMediaType',
]
