"""
Mock importer for Folio.

This module provides the hard-coded portfolio fixtures used by the demo page
and the test suite.
"""

from typing import List

from ..models import (
    ArticleRecord,
    Author,
    BlogRecord,
    DocRecord,
    ProjectRecord,
    VideoRecord,
)
from .base import BaseImporter


class MockImporter(BaseImporter):
    """
    Mock importer that returns hardcoded portfolio data.
    """

    def get_projects(self) -> List[ProjectRecord]:
        return [
            ProjectRecord(
                id="1",
                title="E-Commerce Dashboard",
                description="A comprehensive dashboard for managing products and orders using Next.js and Supabase.",
                tech_stack=["Next.js", "TypeScript", "Tailwind", "Supabase"],
                github_url="https://github.com",
                live_url="https://vercel.com",
                thumbnail="dashboard-thumb",
                featured=True,
                date="2023-08-15"
            ),
            ProjectRecord(
                id="2",
                title="AI Chat Interface",
                description="A chat application leveraging OpenAI API with real-time streaming.",
                tech_stack=["React", "Node.js", "Socket.io"],
                github_url="https://github.com",
                thumbnail="ai-thumb",
                featured=True,
                date="2023-06-10"
            ),
            ProjectRecord(
                id="3",
                title="Personal Finance Tracker",
                description="Mobile-first web app to track daily expenses.",
                tech_stack=["Vue", "Firebase"],
                github_url="https://github.com",
                thumbnail="finance-thumb",
                date="2022-12-05"
            ),
            ProjectRecord(
                id="4",
                title="Merchant Portal",
                description="Private SaaS back office for partner merchants.",
                tech_stack=["SaaS", "Django", "PostgreSQL"],
                thumbnail="merchant-thumb",
                date="2024-02-01"
            ),
        ]

    def get_blogs(self) -> List[BlogRecord]:
        return [
            BlogRecord(
                id="1",
                title="My Journey into Tech",
                slug="my-journey",
                summary="How I started coding and what I learned along the way.",
                date="2023-01-20",
                category="Personal",
                cover_image="journey.jpg"
            ),
            BlogRecord(
                id="2",
                title="Why I love Coffee while coding",
                slug="coffee-coding",
                summary="A lighthearted look at caffeine and bugs.",
                date="2023-05-10",
                category="Lifestyle"
            ),
        ]

    def get_articles(self) -> List[ArticleRecord]:
        author = Author(name="Dev User", avatar="/api/placeholder/32/32")
        return [
            ArticleRecord(
                id="1",
                title="Understanding React Server Components",
                slug="react-server-components",
                excerpt="Deep dive into how RSC works under the hood and why it changes everything.",
                content="Full content goes here...",
                published_at="2023-10-15",
                tags=["React", "Next.js", "Web"],
                read_time="8 min read",
                author=author
            ),
            ArticleRecord(
                id="2",
                title="Advanced TypeScript Patterns",
                slug="advanced-typescript",
                excerpt="Generic types, Utility types, and how to write cleaner code.",
                content="Full content goes here...",
                published_at="2023-11-02",
                tags=["TypeScript", "Programming"],
                read_time="12 min read",
                author=author
            ),
        ]

    def get_videos(self) -> List[VideoRecord]:
        return [
            VideoRecord(
                id="yt-101",
                title="Building a SaaS in a Weekend",
                description="Live coding a subscription SaaS from scratch.",
                published_at=1700000000,
                views=12500,
                thumbnail_url="saas-weekend.jpg",
                url="https://youtube.com/watch?v=yt-101"
            ),
            VideoRecord(
                id="yt-102",
                title="Design Patterns in Ten Minutes",
                description="A quick tour of builder, visitor and prototype.",
                published_at="2024-03-05T18:30:00Z",
                views=830,
                url="https://youtube.com/watch?v=yt-102"
            ),
        ]

    def get_docs(self) -> List[DocRecord]:
        return [
            DocRecord(
                id="1",
                title="Getting Started",
                slug="getting-started",
                section="Introduction",
                content="Installation guide and setup instructions.",
                last_updated="2024-01-10"
            ),
            DocRecord(
                id="2",
                title="Authentication",
                slug="auth",
                section="Core Concepts",
                content="How to handle user sessions securely.",
                last_updated="2024-01-12"
            ),
            DocRecord(
                id="3",
                title="Database Schema",
                slug="db-schema",
                section="Core Concepts",
                content="Explanation of the data models.",
                last_updated="2024-01-15"
            ),
        ]
