"""
Folio: hierarchical content trees for a personal portfolio.

Normalizes projects, blog posts, articles, videos and docs into one content
shape, assembles them into nested page trees, and searches, filters and sorts
the results.
"""

__version__ = "0.1.0"
__author__ = "Folio Project"

# Import main components
from .exceptions import FolioError, TemplateNotFoundError
from .models import ContentItem, ContentKind, Decoration, LayoutHint, Container, Leaf, FilterRequest
from .adapters import AdapterPolicy, ContentAdapterFactory
from .importers import BaseImporter, MockImporter, YamlImporter
from .tree import ContentTreeBuilder, MetricsVisitor, TagCollectorVisitor, traverse, flatten
from .query import QueryParser, Sorter, filter_items, get_sort_strategy
from .templates import PrototypeRegistry

__all__ = [
    "FolioError",
    "TemplateNotFoundError",
    "ContentItem",
    "ContentKind",
    "Decoration",
    "LayoutHint",
    "Container",
    "Leaf",
    "FilterRequest",
    "AdapterPolicy",
    "ContentAdapterFactory",
    "BaseImporter",
    "MockImporter",
    "YamlImporter",
    "ContentTreeBuilder",
    "MetricsVisitor",
    "TagCollectorVisitor",
    "traverse",
    "flatten",
    "QueryParser",
    "Sorter",
    "filter_items",
    "get_sort_strategy",
    "PrototypeRegistry"
]
