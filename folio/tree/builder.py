"""
Content tree builder for Folio.

Assembles a Container tree from a flat sequence of calls. The builder keeps a
stack of open containers: ``add_container`` pushes, ``up`` pops, and items are
always appended to the container on top of the stack.

    tree = (ContentTreeBuilder("app", LayoutHint.COLUMN, "My Portfolio")
            .add_container("projects", LayoutHint.GRID, "Projects")
            .add_item(project_item)
            .up()
            .add_container("articles", LayoutHint.LIST, "Articles")
            .add_item(article_item)
            .up()
            .build())
"""

import logging
from typing import List, Optional

from ..models import Container, ContentItem, LayoutHint, Leaf


class ContentTreeBuilder:
    """
    Stack-based builder for nested content trees.

    Not thread-safe: a builder instance is meant to be driven by a single
    call sequence.
    """

    def __init__(self, root_id: str, root_layout: LayoutHint = LayoutHint.COLUMN,
                 root_title: Optional[str] = None):
        """
        Create the root container and focus on it.

        Args:
            root_id: Identifier of the root container
            root_layout: Layout hint of the root container
            root_title: Optional page title
        """
        self._root = Container(id=root_id, layout_hint=root_layout, title=root_title)
        self._stack: List[Container] = [self._root]

    @property
    def depth(self) -> int:
        """Current nesting depth; 1 when the root is in focus."""
        return len(self._stack)

    def add_container(self, container_id: str, layout: LayoutHint = LayoutHint.LIST,
                      title: Optional[str] = None,
                      data: Optional[ContentItem] = None) -> "ContentTreeBuilder":
        """
        Append a new container to the current focus and focus on it.

        Args:
            container_id: Identifier of the new container
            layout: Layout hint
            title: Optional section heading
            data: Optional item summarizing the container (e.g. a parent project card)

        Returns:
            The builder, for chaining
        """
        container = Container(id=container_id, layout_hint=layout, title=title, data=data)
        self._stack[-1].children.append(container)
        self._stack.append(container)
        return self

    def add_item(self, item: ContentItem) -> "ContentTreeBuilder":
        """
        Wrap an item in a leaf and append it to the current focus.

        Args:
            item: The content item to add

        Returns:
            The builder, for chaining
        """
        self._stack[-1].children.append(Leaf(item=item))
        return self

    def up(self) -> "ContentTreeBuilder":
        """
        Close the current container and return focus to its parent.

        Calling this while the root is in focus does nothing.

        Returns:
            The builder, for chaining
        """
        if len(self._stack) > 1:
            self._stack.pop()
        else:
            logging.debug("up() called at the root container, ignoring")
        return self

    def build(self) -> Container:
        """
        Return the root container.

        The builder state is left untouched, so repeated calls return the same
        root object.
        """
        return self._root
