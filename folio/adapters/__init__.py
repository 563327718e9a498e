"""Adapters turning source records into content items."""

from .base import AdapterPolicy, BaseAdapter
from .content import (
    ArticleAdapter,
    BlogAdapter,
    DocAdapter,
    ProjectAdapter,
    VideoAdapter,
    to_iso_day,
)
from .factory import KIND_PREFIXES, ContentAdapterFactory

__all__ = [
    "AdapterPolicy",
    "BaseAdapter",
    "ArticleAdapter",
    "BlogAdapter",
    "DocAdapter",
    "ProjectAdapter",
    "VideoAdapter",
    "to_iso_day",
    "ContentAdapterFactory",
    "KIND_PREFIXES"
]
