"""
Content tree node models for Folio.

A tree is made of two node variants: a Leaf wrapping exactly one ContentItem,
and a Container holding ordered children plus optional summary content. The
``node_type`` field discriminates the variants so a dumped tree validates back
into the right classes.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .content import ContentItem, LayoutHint


class Leaf(BaseModel):
    """
    A tree node wrapping a single content item. Leaves have no children.
    """

    node_type: Literal["leaf"] = "leaf"

    item: ContentItem = Field(
        ...,
        description="The wrapped content item"
    )

    @property
    def id(self) -> str:
        return self.item.id


class Container(BaseModel):
    """
    A tree node holding an ordered sequence of children.

    Child order is insertion order and is the display order.
    """

    node_type: Literal["container"] = "container"

    id: str = Field(
        ...,
        description="Identifier of the container, unique within its tree"
    )

    layout_hint: LayoutHint = Field(
        default=LayoutHint.LIST,
        description="Advisory arrangement for the renderer"
    )

    title: Optional[str] = Field(
        default=None,
        description="Optional section heading"
    )

    data: Optional[ContentItem] = Field(
        default=None,
        description="Optional content item summarizing the container itself"
    )

    children: List[Annotated[Union[Leaf, 'Container'], Field(discriminator="node_type")]] = Field(
        default_factory=list,
        description="Ordered child nodes (leaves or containers)"
    )


# Enable forward references for self-referencing model
Container.model_rebuild()


TreeNode = Union[Leaf, Container]
