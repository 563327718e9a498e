"""
Search query parsing for Folio.

A query is a whitespace-separated list of tokens combined with AND:

    type:<kind>        item kind equals <kind> (case-insensitive)
    is:<decoration>    item carries the badge; is:locked / is:unlocked test the lock flag
    anything else      case-insensitive substring of the title or description

Parsing never fails. Tokens with an unknown prefix, or a known prefix and no
value, are matched as plain keywords including the colon.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from ..models import ContentItem


class Predicate(ABC):
    """A boolean test over a content item."""

    @abstractmethod
    def __call__(self, item: ContentItem) -> bool:
        pass


class MatchAll(Predicate):
    def __call__(self, item: ContentItem) -> bool:
        return True

    def __repr__(self) -> str:
        return "MatchAll()"


class KeywordPredicate(Predicate):
    def __init__(self, keyword: str):
        self.keyword = keyword.lower()

    def __call__(self, item: ContentItem) -> bool:
        return self.keyword in item.title.lower() or self.keyword in item.description.lower()

    def __repr__(self) -> str:
        return f"Keyword({self.keyword!r})"


class KindPredicate(Predicate):
    def __init__(self, kind: str):
        self.kind = kind.lower()

    def __call__(self, item: ContentItem) -> bool:
        return item.kind.value.lower() == self.kind

    def __repr__(self) -> str:
        return f"Kind({self.kind!r})"


class DecorationPredicate(Predicate):
    def __init__(self, decoration: str):
        self.decoration = decoration.lower()

    def __call__(self, item: ContentItem) -> bool:
        return any(decoration.value == self.decoration for decoration in item.decorations)

    def __repr__(self) -> str:
        return f"Decoration({self.decoration!r})"


class LockPredicate(Predicate):
    def __init__(self, locked: bool):
        self.locked = locked

    def __call__(self, item: ContentItem) -> bool:
        return item.is_locked is self.locked

    def __repr__(self) -> str:
        return f"Locked({self.locked})"


class AndPredicate(Predicate):
    def __init__(self, left: Predicate, right: Predicate):
        self.left = left
        self.right = right

    def __call__(self, item: ContentItem) -> bool:
        return self.left(item) and self.right(item)

    def __repr__(self) -> str:
        return f"And({self.left!r}, {self.right!r})"


def tokenize(query: str) -> List[str]:
    """Split a query on whitespace, dropping empty tokens."""
    return query.split()


class QueryParser:
    """
    Turns a query string into a predicate tree.
    """

    def parse_token(self, token: str) -> Predicate:
        """
        Classify one token by its prefix and build its predicate.

        Args:
            token: A single non-empty query token

        Returns:
            The predicate for the token
        """
        prefix, sep, value = token.partition(":")
        if sep and value:
            prefix = prefix.lower()
            if prefix == "type":
                return KindPredicate(value)
            if prefix == "is":
                lowered = value.lower()
                if lowered == "locked":
                    return LockPredicate(True)
                if lowered == "unlocked":
                    return LockPredicate(False)
                return DecorationPredicate(lowered)
        if sep:
            logging.debug(f"Treating '{token}' as a keyword")
        return KeywordPredicate(token)

    def parse(self, query: str) -> Predicate:
        """
        Parse a full query.

        Args:
            query: The raw search string

        Returns:
            The AND of all token predicates, folded left; MatchAll for an empty query
        """
        predicate: Predicate = MatchAll()
        for index, token in enumerate(tokenize(query)):
            token_predicate = self.parse_token(token)
            predicate = token_predicate if index == 0 else AndPredicate(predicate, token_predicate)
        return predicate


def parse_query(query: str) -> Predicate:
    return QueryParser().parse(query)
