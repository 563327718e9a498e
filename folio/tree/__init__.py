"""Content tree construction and traversal."""

from .builder import ContentTreeBuilder
from .traversal import TreeVisitor, count_nodes, find_node, traverse, walk
from .visitors import (
    ItemCollectorVisitor,
    MetricsVisitor,
    ReadingTimeVisitor,
    ReportVisitor,
    TagCollectorVisitor,
    collect_metrics,
    collect_tags,
    flatten,
    render_outline,
    total_reading_time,
)
from .portfolio import build_portfolio_tree

__all__ = [
    "ContentTreeBuilder",
    "TreeVisitor",
    "count_nodes",
    "find_node",
    "traverse",
    "walk",
    "ItemCollectorVisitor",
    "MetricsVisitor",
    "ReadingTimeVisitor",
    "ReportVisitor",
    "TagCollectorVisitor",
    "collect_metrics",
    "collect_tags",
    "flatten",
    "render_outline",
    "total_reading_time",
    "build_portfolio_tree"
]
