"""
Adapter factory for Folio.

Maps each content kind and source record type to its adapter, so mixed
collections can be normalized in one call.
"""

import logging
from typing import Dict, Iterable, List, Optional

from ..models import (
    ArticleRecord,
    BlogRecord,
    ContentItem,
    ContentKind,
    DocRecord,
    ProjectRecord,
    SourceRecord,
    VideoRecord,
)
from .base import AdapterPolicy, BaseAdapter
from .content import ArticleAdapter, BlogAdapter, DocAdapter, ProjectAdapter, VideoAdapter


RECORD_KINDS = {
    ProjectRecord: ContentKind.PROJECT,
    BlogRecord: ContentKind.BLOG,
    ArticleRecord: ContentKind.ARTICLE,
    VideoRecord: ContentKind.VIDEO,
    DocRecord: ContentKind.DOC,
}

ADAPTER_CLASSES = (ProjectAdapter, BlogAdapter, ArticleAdapter, VideoAdapter, DocAdapter)

# Id prefix per content kind, as declared on the adapters.
KIND_PREFIXES: Dict[ContentKind, str] = {
    adapter_class.kind: adapter_class.id_prefix for adapter_class in ADAPTER_CLASSES
}


class ContentAdapterFactory:
    """
    Creates and caches one adapter per content kind, all sharing one policy.
    """

    def __init__(self, policy: Optional[AdapterPolicy] = None):
        """
        Initialize the factory.

        Args:
            policy: Policy handed to every adapter; read from configuration when omitted
        """
        self.policy = policy or AdapterPolicy.from_config()
        self._adapters: Dict[ContentKind, BaseAdapter] = {
            adapter_class.kind: adapter_class(self.policy) for adapter_class in ADAPTER_CLASSES
        }

    def get_adapter(self, kind: ContentKind) -> BaseAdapter:
        return self._adapters[ContentKind(kind)]

    def adapt(self, record: SourceRecord) -> ContentItem:
        """
        Adapt a single record, choosing the adapter from the record type.

        Args:
            record: Any supported source record

        Returns:
            The normalized ContentItem
        """
        kind = RECORD_KINDS.get(type(record))
        if kind is None:
            raise TypeError(f"Unsupported source record: {type(record).__name__}")
        return self._adapters[kind].adapt(record)

    def adapt_all(self, records: Iterable[SourceRecord]) -> List[ContentItem]:
        items = [self.adapt(record) for record in records]
        logging.debug(f"Adapted {len(items)} source records")
        return items
