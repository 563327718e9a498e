"""Searching, filtering and sorting of flattened content collections."""

from .parser import (
    AndPredicate,
    DecorationPredicate,
    KeywordPredicate,
    KindPredicate,
    LockPredicate,
    MatchAll,
    Predicate,
    QueryParser,
    parse_query,
    tokenize,
)
from .filters import (
    FilterHandler,
    SearchFilterHandler,
    TagFilterHandler,
    TypeFilterHandler,
    build_filter_chain,
    filter_items,
)
from .sorting import (
    SORT_STRATEGIES,
    SortByDate,
    SortByDescriptionLength,
    SortByTitle,
    Sorter,
    SortStrategy,
    get_sort_strategy,
    parse_date,
)

__all__ = [
    "AndPredicate",
    "DecorationPredicate",
    "KeywordPredicate",
    "KindPredicate",
    "LockPredicate",
    "MatchAll",
    "Predicate",
    "QueryParser",
    "parse_query",
    "tokenize",
    "FilterHandler",
    "SearchFilterHandler",
    "TagFilterHandler",
    "TypeFilterHandler",
    "build_filter_chain",
    "filter_items",
    "SORT_STRATEGIES",
    "SortByDate",
    "SortByDescriptionLength",
    "SortByTitle",
    "Sorter",
    "SortStrategy",
    "get_sort_strategy",
    "parse_date"
]
