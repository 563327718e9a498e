"""
Tree traversal for Folio.

Every node is visited exactly once, depth-first and pre-order: a container is
visited before its children, and children are visited in insertion order.
Read-only analyses are written as visitors and never modify the tree.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple

from ..models import Container, Leaf, TreeNode


class TreeVisitor(ABC):
    """
    Base class for tree visitors.

    ``depth`` is set by ``traverse`` before each callback; the node passed to
    ``traverse`` has depth 0.
    """

    depth: int = 0

    @abstractmethod
    def visit_leaf(self, leaf: Leaf) -> None:
        pass

    @abstractmethod
    def visit_container(self, container: Container) -> None:
        pass


def walk(node: TreeNode) -> Iterator[Tuple[TreeNode, int]]:
    """
    Yield ``(node, depth)`` pairs in pre-order.

    Uses an explicit stack, so arbitrarily deep trees do not hit the
    interpreter's recursion limit.

    Args:
        node: The node to start from

    Yields:
        Each node of the subtree with its depth relative to ``node``
    """
    pending: List[Tuple[TreeNode, int]] = [(node, 0)]
    while pending:
        current, depth = pending.pop()
        yield current, depth
        if isinstance(current, Container):
            for child in reversed(current.children):
                pending.append((child, depth + 1))


def traverse(node: TreeNode, visitor: TreeVisitor) -> None:
    """
    Apply a visitor to every node under (and including) ``node``.

    Args:
        node: Root of the subtree to visit
        visitor: The visitor receiving one callback per node
    """
    for current, depth in walk(node):
        visitor.depth = depth
        if isinstance(current, Leaf):
            visitor.visit_leaf(current)
        elif isinstance(current, Container):
            visitor.visit_container(current)
        else:
            raise TypeError(f"Unknown tree node: {type(current).__name__}")


def find_node(root: TreeNode, node_id: str) -> Optional[TreeNode]:
    """
    Find the first node (in pre-order) with the given id.

    Leaves are identified by their item's id.
    """
    for node, _ in walk(root):
        if node.id == node_id:
            return node
    return None


def count_nodes(root: TreeNode) -> int:
    return sum(1 for _ in walk(root))
