"""
Sort Strategy Registry

Keeps the available strategies in selector order and resolves them by display name.
"""

from typing import Dict, List, Optional
from .base import SortStrategy


class StrategyRegistry:
    """Registry for sort strategies."""

    def __init__(self):
        self._strategies: Dict[str, SortStrategy] = {}

    def register(self, strategy: SortStrategy) -> None:
        """Register a strategy under its display name (replaces an existing one)."""
        self._strategies[strategy.name.casefold()] = strategy

    def register_all(self, strategies: List[SortStrategy]) -> None:
        """Register multiple strategies at once."""
        for strategy in strategies:
            self.register(strategy)

    def get(self, name: str) -> SortStrategy:
        """
        Look up a strategy by display name.

        Args:
            name: Display name, compared case-insensitively

        Returns:
            The registered strategy

        Raises:
            KeyError: If no strategy has that name
        """
        strategy = self._strategies.get(name.strip().casefold())
        if strategy is None:
            raise KeyError(f"No sort strategy named {name!r}")
        return strategy

    def find(self, name: str) -> Optional[SortStrategy]:
        """Like get(), but returns None for unknown names."""
        try:
            return self.get(name)
        except KeyError:
            return None

    def at(self, index: int) -> SortStrategy:
        """Strategy at a selector position."""
        return list(self._strategies.values())[index]

    def index_of(self, strategy: SortStrategy) -> int:
        return list(self._strategies.values()).index(strategy)

    @property
    def names(self) -> List[str]:
        """Display names in registration order."""
        return [strategy.name for strategy in self._strategies.values()]

    @property
    def default(self) -> SortStrategy:
        return self.at(0)

    def __len__(self):
        return len(self._strategies)

    def __iter__(self):
        return iter(list(self._strategies.values()))
