"""
Content data models for Folio.

This module defines the normalized content record that every adapter produces,
together with the closed enumerations shared by the rest of the system.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..config import config


class ContentKind(str, Enum):
    """The closed set of content kinds."""

    PROJECT = "project"
    BLOG = "blog"
    ARTICLE = "article"
    VIDEO = "video"
    DOC = "doc"


class Decoration(str, Enum):
    """Advisory badges attached to a content item."""

    NEW = "new"
    FEATURED = "featured"
    SPONSOR = "sponsor"
    HOT = "hot"
    POPULAR = "popular"


class LayoutHint(str, Enum):
    """Arrangement hint for a container; consumed by the renderer only."""

    GRID = "grid"
    LIST = "list"
    TIMELINE = "timeline"
    COLUMN = "column"
    ROW = "row"


class ContentItem(BaseModel):
    """
    The normalized unit of content.

    Projects, blog posts, articles, videos and docs are all converted into
    this shape before they are placed in a content tree or filtered.
    """

    id: str = Field(
        ...,
        description="Unique identifier, stable for the item's lifetime"
    )

    kind: ContentKind = Field(
        ...,
        description="The content kind (project, blog, article, video, doc)"
    )

    title: str = Field(
        ...,
        description="Display title"
    )

    description: str = Field(
        default="",
        description="Display description"
    )

    date: str = Field(
        default="",
        description="ISO date string used for chronological ordering"
    )

    image_url: Optional[str] = Field(
        default=None,
        description="Optional cover or thumbnail reference"
    )

    meta: List[str] = Field(
        default_factory=list,
        description="Ordered tag strings (tech stack, categories, view counts)"
    )

    action_link: Optional[str] = Field(
        default=None,
        description="Optional external reference"
    )

    decorations: List[Decoration] = Field(
        default_factory=list,
        description="Advisory badges, without duplicates"
    )

    is_locked: bool = Field(
        default=False,
        description="Access gate consumed by an external access-control layer"
    )

    @field_validator("meta", mode="before")
    @classmethod
    def _meta_never_none(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("decorations", mode="before")
    @classmethod
    def _decorations_never_none(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("decorations")
    @classmethod
    def _drop_duplicate_decorations(cls, value: List[Decoration]) -> List[Decoration]:
        unique: List[Decoration] = []
        for decoration in value:
            if decoration not in unique:
                unique.append(decoration)
        return unique

    def has_decoration(self, decoration: Decoration) -> bool:
        return decoration in self.decorations

    def meta_preview(self, limit: Optional[int] = None) -> List[str]:
        """
        Return the first ``limit`` tags for truncated display.

        Args:
            limit: Maximum number of tags to return; defaults to the
                ``display.meta_preview`` setting

        Returns:
            The leading tags in insertion order
        """
        if limit is None:
            limit = config.meta_preview
        return list(self.meta[:max(limit, 0)])


def copy_content_item(item: ContentItem, **overrides: Any) -> ContentItem:
    """
    Copy a content item field by field.

    The ``meta`` and ``decorations`` lists are always rebuilt, so the copy
    never shares a mutable list with the source item.

    Args:
        item: The item to copy
        **overrides: Field values that replace the copied ones

    Returns:
        A new, independent ContentItem
    """
    fields = {
        "id": item.id,
        "kind": item.kind,
        "title": item.title,
        "description": item.description,
        "date": item.date,
        "image_url": item.image_url,
        "meta": list(item.meta),
        "action_link": item.action_link,
        "decorations": list(item.decorations),
        "is_locked": item.is_locked,
    }
    fields.update(overrides)
    return ContentItem(**fields)
