"""
Source record models for Folio.

Each record mirrors the shape of one raw content source (portfolio projects,
blog posts, technical articles, videos, documentation pages). Only the id and
title are required; every other field has an empty default so partially
filled fixtures still load.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field


class ProjectRecord(BaseModel):
    """A portfolio project."""

    id: str = Field(..., description="Source identifier")
    title: str = Field(..., description="Project name")
    description: str = Field(default="", description="Short project description")
    tech_stack: List[str] = Field(default_factory=list, description="Technologies used")
    github_url: Optional[str] = Field(default=None, description="Repository link")
    live_url: Optional[str] = Field(default=None, description="Deployed site link")
    thumbnail: Optional[str] = Field(default=None, description="Thumbnail reference")
    featured: bool = Field(default=False, description="Highlighted on the portfolio")
    date: str = Field(default="", description="Completion date (ISO)")


class BlogRecord(BaseModel):
    """A personal blog post."""

    id: str = Field(..., description="Source identifier")
    title: str = Field(..., description="Post title")
    slug: str = Field(default="", description="URL slug")
    summary: str = Field(default="", description="Teaser text")
    date: str = Field(default="", description="Publication date (ISO)")
    category: Optional[str] = Field(default=None, description="Personal, Lifestyle or DevLog")
    cover_image: Optional[str] = Field(default=None, description="Cover image reference")


class Author(BaseModel):
    name: str = ""
    avatar: Optional[str] = None


class ArticleRecord(BaseModel):
    """An in-depth technical article."""

    id: str = Field(..., description="Source identifier")
    title: str = Field(..., description="Article title")
    slug: str = Field(default="", description="URL slug")
    excerpt: str = Field(default="", description="Short excerpt")
    content: str = Field(default="", description="Full article body")
    published_at: str = Field(default="", description="Publication date (ISO)")
    tags: List[str] = Field(default_factory=list, description="Topic tags")
    read_time: Optional[str] = Field(default=None, description="Estimated reading time")
    author: Optional[Author] = Field(default=None, description="Article author")


class VideoRecord(BaseModel):
    """A video hosted on an external platform."""

    id: str = Field(..., description="Platform video identifier")
    title: str = Field(..., description="Video title")
    description: str = Field(default="", description="Video description")
    published_at: Optional[Union[int, str]] = Field(
        default=None,
        description="Upload time as epoch seconds or an ISO timestamp"
    )
    views: int = Field(default=0, description="View count")
    thumbnail_url: Optional[str] = Field(default=None, description="Thumbnail reference")
    url: Optional[str] = Field(default=None, description="Watch link")


class DocRecord(BaseModel):
    """A documentation page."""

    id: str = Field(..., description="Source identifier")
    title: str = Field(..., description="Page title")
    slug: str = Field(default="", description="URL slug")
    section: Optional[str] = Field(default=None, description="Documentation section")
    content: str = Field(default="", description="Page body")
    last_updated: str = Field(default="", description="Last update date (ISO)")


SourceRecord = Union[ProjectRecord, BlogRecord, ArticleRecord, VideoRecord, DocRecord]
