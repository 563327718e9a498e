"""
Filter chain for Folio.

Each handler checks one dimension of a FilterRequest and hands the item to the
next handler only when its own check passes. The first rejection ends the
chain; an item passes when every handler accepts it.

Default order: type -> search -> tag.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple

from ..models import ALL_KINDS, ContentItem, FilterRequest
from .parser import Predicate, QueryParser


class FilterHandler(ABC):
    """
    Base class for filter chain handlers.
    """

    def __init__(self):
        self._next: Optional["FilterHandler"] = None

    def set_next(self, handler: "FilterHandler") -> "FilterHandler":
        """
        Attach the next handler.

        Returns:
            The attached handler, so chains can be linked fluently
        """
        self._next = handler
        return handler

    def handle(self, item: ContentItem, request: FilterRequest) -> bool:
        if not self.check(item, request):
            return False
        if self._next is None:
            return True
        return self._next.handle(item, request)

    @abstractmethod
    def check(self, item: ContentItem, request: FilterRequest) -> bool:
        """Return True when the item passes this handler's own check."""
        pass


class TypeFilterHandler(FilterHandler):
    def check(self, item: ContentItem, request: FilterRequest) -> bool:
        if request.type_filter == ALL_KINDS:
            return True
        return item.kind == request.type_filter


class SearchFilterHandler(FilterHandler):
    def __init__(self, parser: Optional[QueryParser] = None):
        super().__init__()
        self.parser = parser or QueryParser()
        self._parsed: Optional[Tuple[str, Predicate]] = None

    def _predicate(self, query: str) -> Predicate:
        # the same request is checked against many items in a row
        if self._parsed is None or self._parsed[0] != query:
            self._parsed = (query, self.parser.parse(query))
        return self._parsed[1]

    def check(self, item: ContentItem, request: FilterRequest) -> bool:
        if not request.query.strip():
            return True
        return self._predicate(request.query)(item)


class TagFilterHandler(FilterHandler):
    def check(self, item: ContentItem, request: FilterRequest) -> bool:
        if not request.tags:
            return True
        return any(tag in request.tags for tag in item.meta)


def build_filter_chain() -> FilterHandler:
    """
    Link the standard handlers.

    Returns:
        The head of the chain (the type handler)
    """
    head = TypeFilterHandler()
    head.set_next(SearchFilterHandler()).set_next(TagFilterHandler())
    return head


def filter_items(items: Iterable[ContentItem], request: FilterRequest,
                 chain: Optional[FilterHandler] = None) -> List[ContentItem]:
    """
    Keep the items that pass every handler, preserving their order.

    Args:
        items: Candidate items
        request: The filter request
        chain: Handler chain; the standard chain when omitted

    Returns:
        The matching items
    """
    chain = chain or build_filter_chain()
    return [item for item in items if chain.handle(item, request)]
