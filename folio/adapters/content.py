"""
Concrete content adapters for Folio.

One adapter per source shape. Ids are prefixed by kind so records that share a
source id across kinds never collide.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional, Union

from ..models import (
    ArticleRecord,
    BlogRecord,
    ContentItem,
    ContentKind,
    Decoration,
    DocRecord,
    ProjectRecord,
    VideoRecord,
)
from .base import BaseAdapter


def _iso_text_to_day(text: str) -> str:
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return text[:10]
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().isoformat()


def to_iso_day(value: Optional[Union[int, str]]) -> str:
    """
    Truncate a timestamp to an ISO day string (UTC).

    Args:
        value: Epoch seconds, an ISO date/datetime string, or None

    Returns:
        "YYYY-MM-DD", or an empty string when the value cannot be interpreted
    """
    if value is None:
        return ""

    if isinstance(value, str):
        text = value.strip()
        if not text.isdigit():
            return _iso_text_to_day(text)
        value = int(text)

    try:
        return datetime.fromtimestamp(value, tz=timezone.utc).date().isoformat()
    except (OverflowError, OSError, ValueError) as e:
        logging.debug(f"Unusable timestamp {value!r}: {e}")
        return ""


class ProjectAdapter(BaseAdapter[ProjectRecord]):
    kind = ContentKind.PROJECT
    id_prefix = "proj"

    def adapt(self, record: ProjectRecord) -> ContentItem:
        decorations: List[Decoration] = []
        if record.featured:
            decorations.append(Decoration.FEATURED)

        return ContentItem(
            id=self.make_id(record.id),
            kind=self.kind,
            title=record.title,
            description=record.description,
            date=record.date,
            image_url=record.thumbnail,
            meta=list(record.tech_stack),
            action_link=record.github_url or record.live_url,
            decorations=decorations,
            is_locked=self.policy.is_locked(record.title)
        )


class BlogAdapter(BaseAdapter[BlogRecord]):
    kind = ContentKind.BLOG
    id_prefix = "blog"

    def adapt(self, record: BlogRecord) -> ContentItem:
        return ContentItem(
            id=self.make_id(record.id),
            kind=self.kind,
            title=record.title,
            description=record.summary,
            date=record.date,
            image_url=record.cover_image,
            meta=[record.category] if record.category else [],
            is_locked=self.policy.is_locked(record.title)
        )


class ArticleAdapter(BaseAdapter[ArticleRecord]):
    """
    Adapts technical articles. The reading time, when known, follows the
    topic tags (e.g. "8 min read").
    """

    kind = ContentKind.ARTICLE
    id_prefix = "article"

    def adapt(self, record: ArticleRecord) -> ContentItem:
        return ContentItem(
            id=self.make_id(record.id),
            kind=self.kind,
            title=record.title,
            description=record.excerpt,
            date=record.published_at,
            meta=list(record.tags) + ([record.read_time] if record.read_time else []),
            is_locked=self.policy.is_locked(record.title)
        )


class VideoAdapter(BaseAdapter[VideoRecord]):
    """
    Adapts externally hosted videos.

    The upload timestamp is truncated to a day, and the view count is
    rendered into the tags (e.g. "12,500 views"). Videos above the popular
    threshold get the popular and hot badges.
    """

    kind = ContentKind.VIDEO
    id_prefix = "video"

    def adapt(self, record: VideoRecord) -> ContentItem:
        decorations: List[Decoration] = []
        if record.views > self.policy.popular_views_threshold:
            decorations.extend([Decoration.POPULAR, Decoration.HOT])

        return ContentItem(
            id=self.make_id(record.id),
            kind=self.kind,
            title=record.title,
            description=record.description,
            date=to_iso_day(record.published_at),
            image_url=record.thumbnail_url,
            meta=[f"{record.views:,} views"],
            action_link=record.url,
            decorations=decorations,
            is_locked=self.policy.is_locked(record.title)
        )


class DocAdapter(BaseAdapter[DocRecord]):
    kind = ContentKind.DOC
    id_prefix = "doc"

    def adapt(self, record: DocRecord) -> ContentItem:
        return ContentItem(
            id=self.make_id(record.id),
            kind=self.kind,
            title=record.title,
            description=record.content,
            date=record.last_updated,
            meta=[record.section] if record.section else [],
            is_locked=self.policy.is_locked(record.title)
        )
