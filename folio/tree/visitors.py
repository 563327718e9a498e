"""
Standard tree visitors for Folio.

Each visitor implements one read-only analysis. Container summary items
(``Container.data``) are counted like leaf items wherever items are
inspected.
"""

import re
from typing import Dict, List, Optional, Set

from ..models import Container, ContentItem, ContentKind, Leaf, TreeNode
from .traversal import TreeVisitor, traverse


class MetricsVisitor(TreeVisitor):
    """
    Counts content items per kind, plus a running total.
    """

    def __init__(self):
        self.counts: Dict[ContentKind, int] = {kind: 0 for kind in ContentKind}
        self.total = 0

    def _count(self, item: ContentItem) -> None:
        self.counts[item.kind] += 1
        self.total += 1

    def visit_leaf(self, leaf: Leaf) -> None:
        self._count(leaf.item)

    def visit_container(self, container: Container) -> None:
        if container.data is not None:
            self._count(container.data)

    def get_result(self) -> Dict[str, int]:
        """
        Return the counts keyed by kind value, with a ``total`` entry.

        Kinds that were never seen report zero.
        """
        result = {kind.value: count for kind, count in self.counts.items()}
        result["total"] = self.total
        return result


class TagCollectorVisitor(TreeVisitor):
    """
    Collects the union of all tags seen across visited items.
    """

    def __init__(self):
        # dict keeps first-seen order for display
        self._seen: Dict[str, None] = {}

    def _collect(self, item: ContentItem) -> None:
        for tag in item.meta:
            self._seen.setdefault(tag, None)

    def visit_leaf(self, leaf: Leaf) -> None:
        self._collect(leaf.item)

    def visit_container(self, container: Container) -> None:
        if container.data is not None:
            self._collect(container.data)

    @property
    def tags(self) -> Set[str]:
        return set(self._seen)

    def ordered_tags(self) -> List[str]:
        """Tags in the order they were first encountered."""
        return list(self._seen)


class ItemCollectorVisitor(TreeVisitor):
    """
    Flattens a tree into its content items, in visiting order.
    """

    def __init__(self):
        self.items: List[ContentItem] = []

    def visit_leaf(self, leaf: Leaf) -> None:
        self.items.append(leaf.item)

    def visit_container(self, container: Container) -> None:
        if container.data is not None:
            self.items.append(container.data)


READ_TIME_PATTERN = re.compile(r"^(\d+)\s*min(?:ute)?s?\s+read$", re.IGNORECASE)


class ReadingTimeVisitor(TreeVisitor):
    """
    Adds up the reading time of every item tagged like "8 min read".

    Items without a reading-time tag contribute nothing.
    """

    def __init__(self):
        self.total_minutes = 0

    def _add(self, item: ContentItem) -> None:
        for tag in item.meta:
            match = READ_TIME_PATTERN.match(tag.strip())
            if match:
                self.total_minutes += int(match.group(1))
                break

    def visit_leaf(self, leaf: Leaf) -> None:
        self._add(leaf.item)

    def visit_container(self, container: Container) -> None:
        if container.data is not None:
            self._add(container.data)

    def get_result(self) -> int:
        return self.total_minutes


class ReportVisitor(TreeVisitor):
    """
    Renders an indented text outline of the tree.

    Containers show their title and layout, leaves show the item title, kind
    and leading tags.
    """

    def __init__(self, indent: str = "  ", meta_preview: Optional[int] = None):
        self.indent = indent
        self.meta_preview = meta_preview
        self.lines: List[str] = []

    def visit_leaf(self, leaf: Leaf) -> None:
        item = leaf.item
        line = f"{self.indent * self.depth}- {item.title} ({item.kind.value})"
        tags = item.meta_preview(self.meta_preview)
        if tags:
            line += f" [{', '.join(tags)}]"
        if item.is_locked:
            line += " (locked)"
        self.lines.append(line)

    def visit_container(self, container: Container) -> None:
        label = container.title or container.id
        line = f"{self.indent * self.depth}+ {label} <{container.layout_hint.value}>"
        if container.data is not None:
            line += f" :: {container.data.title}"
        self.lines.append(line)

    def get_result(self) -> str:
        return "\n".join(self.lines)


def collect_metrics(root: TreeNode) -> Dict[str, int]:
    visitor = MetricsVisitor()
    traverse(root, visitor)
    return visitor.get_result()


def collect_tags(root: TreeNode) -> Set[str]:
    visitor = TagCollectorVisitor()
    traverse(root, visitor)
    return visitor.tags


def total_reading_time(root: TreeNode) -> int:
    visitor = ReadingTimeVisitor()
    traverse(root, visitor)
    return visitor.get_result()


def flatten(root: TreeNode) -> List[ContentItem]:
    """
    Return every content item of the tree in pre-order.

    Args:
        root: The tree (or subtree) to flatten

    Returns:
        Leaf items and container summary items, in visiting order
    """
    visitor = ItemCollectorVisitor()
    traverse(root, visitor)
    return visitor.items


def render_outline(root: TreeNode, meta_preview: Optional[int] = None) -> str:
    visitor = ReportVisitor(meta_preview=meta_preview)
    traverse(root, visitor)
    return visitor.get_result()
