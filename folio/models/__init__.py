"""Data models for Folio."""

from .content import ContentItem, ContentKind, Decoration, LayoutHint, copy_content_item
from .sources import (
    ArticleRecord,
    Author,
    BlogRecord,
    DocRecord,
    ProjectRecord,
    SourceRecord,
    VideoRecord,
)
from .tree import Container, Leaf, TreeNode
from .filters import ALL_KINDS, FilterRequest

__all__ = [
    "ContentItem",
    "ContentKind",
    "Decoration",
    "LayoutHint",
    "copy_content_item",
    "ArticleRecord",
    "Author",
    "BlogRecord",
    "DocRecord",
    "ProjectRecord",
    "SourceRecord",
    "VideoRecord",
    "Container",
    "Leaf",
    "TreeNode",
    "ALL_KINDS",
    "FilterRequest"
]
