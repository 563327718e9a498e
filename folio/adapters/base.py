"""
Base adapter interface for Folio.

This module defines the abstract interface that all content adapters must
implement, and the decoration/lock policy they share.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Iterable, List, Optional, TypeVar

from ..config import ConfigManager, config
from ..models import ContentItem, ContentKind


RecordT = TypeVar("RecordT")


@dataclass(frozen=True)
class AdapterPolicy:
    """
    Fixed rules adapters use to derive badges and the lock flag.
    """
    popular_views_threshold: int = 10000
    locked_title_keyword: str = "Merchant"

    @classmethod
    def from_config(cls, manager: Optional[ConfigManager] = None) -> "AdapterPolicy":
        """Build a policy from configuration (the global one by default)."""
        manager = manager or config
        return cls(
            popular_views_threshold=manager.popular_views_threshold,
            locked_title_keyword=manager.locked_title_keyword
        )

    def is_locked(self, title: str) -> bool:
        return bool(self.locked_title_keyword) and self.locked_title_keyword in title


class BaseAdapter(ABC, Generic[RecordT]):
    """
    Abstract base class for all content adapters.

    Each adapter converts records from one source shape (projects, blog posts,
    articles, videos, docs) into the normalized ContentItem. Adapters are total:
    missing optional fields map to empty values, never to errors.
    """

    kind: ContentKind
    id_prefix: str

    def __init__(self, policy: Optional[AdapterPolicy] = None):
        """
        Initialize the adapter.

        Args:
            policy: Decoration and lock policy; read from configuration when omitted
        """
        self.policy = policy or AdapterPolicy.from_config()

    def make_id(self, source_id: str) -> str:
        """Derive a collision-free item id from the source id."""
        return f"{self.id_prefix}-{source_id}"

    @abstractmethod
    def adapt(self, record: RecordT) -> ContentItem:
        """
        Convert one source record.

        Args:
            record: The source record

        Returns:
            The normalized ContentItem
        """
        pass

    def adapt_many(self, records: Iterable[RecordT]) -> List[ContentItem]:
        return [self.adapt(record) for record in records]
