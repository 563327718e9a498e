"""
Sort strategies for Folio.

Strategies are interchangeable orderings over flattened item collections.
Every strategy returns a new list and keeps the original relative order of
items with equal keys.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple, Type

from ..models import ContentItem


def parse_date(value: str) -> Optional[date]:
    """
    Parse the day part of an ISO date or datetime string.

    Returns:
        The date, or None when the value is empty or malformed
    """
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


class SortStrategy(ABC):
    """Base class for sort strategies."""

    name: str

    @abstractmethod
    def sort(self, items: Iterable[ContentItem]) -> List[ContentItem]:
        pass


class SortByDate(SortStrategy):
    """Newest first. Items without a usable date go last."""

    name = "date"

    @staticmethod
    def _key(item: ContentItem) -> Tuple[bool, date]:
        parsed = parse_date(item.date)
        return (parsed is not None, parsed or date.min)

    def sort(self, items: Iterable[ContentItem]) -> List[ContentItem]:
        # sorted() stays stable with reverse=True
        return sorted(items, key=self._key, reverse=True)


class SortByTitle(SortStrategy):
    """Alphabetical, ignoring case."""

    name = "title"

    def sort(self, items: Iterable[ContentItem]) -> List[ContentItem]:
        return sorted(items, key=lambda item: item.title.casefold())


class SortByDescriptionLength(SortStrategy):
    """Longest description first."""

    name = "description"

    def sort(self, items: Iterable[ContentItem]) -> List[ContentItem]:
        return sorted(items, key=lambda item: len(item.description), reverse=True)


SORT_STRATEGIES: Dict[str, Type[SortStrategy]] = {
    SortByDate.name: SortByDate,
    SortByTitle.name: SortByTitle,
    SortByDescriptionLength.name: SortByDescriptionLength,
}


def get_sort_strategy(name: str) -> SortStrategy:
    """
    Look up a strategy by name, falling back to date ordering.

    Args:
        name: One of "date", "title", "description"

    Returns:
        A strategy instance
    """
    strategy_class = SORT_STRATEGIES.get(name.lower())
    if strategy_class is None:
        logging.warning(f"Unknown sort strategy '{name}', sorting by date")
        strategy_class = SortByDate
    return strategy_class()


class Sorter:
    """
    Holds the active sort strategy; the strategy can be swapped at any time.
    """

    def __init__(self, strategy: Optional[SortStrategy] = None):
        self.strategy = strategy or SortByDate()

    def set_strategy(self, strategy: SortStrategy) -> None:
        self.strategy = strategy

    def sort(self, items: Iterable[ContentItem]) -> List[ContentItem]:
        return self.strategy.sort(items)
