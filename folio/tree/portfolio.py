"""
Portfolio page assembly for Folio.

Builds the standard portfolio content tree from an importer's records:

    portfolio <column>
      projects <grid>
        projects-featured <row>
        ...remaining projects
      articles <list>
      blog <timeline>
      videos <row>
      docs <column>
        docs-<section> <list>   (one per documentation section, matched by slug)

Sections without content are left out. Items inside a section are ordered
newest first.
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

from ..adapters import ContentAdapterFactory
from ..importers import BaseImporter
from ..models import Container, ContentItem, Decoration, LayoutHint
from ..query.sorting import SortByDate
from .builder import ContentTreeBuilder


DEFAULT_DOC_SECTION = "General"


def _slug(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-") or "section"


def _add_items(builder: ContentTreeBuilder, items: List[ContentItem]) -> None:
    for item in items:
        builder.add_item(item)


def build_portfolio_tree(importer: BaseImporter,
                         factory: Optional[ContentAdapterFactory] = None,
                         title: str = "My Portfolio") -> Container:
    """
    Assemble the portfolio page tree.

    Args:
        importer: Source of raw records
        factory: Adapter factory; a default one is created when omitted
        title: Page title stored on the root container

    Returns:
        The root container of the page
    """
    factory = factory or ContentAdapterFactory()
    by_date = SortByDate()
    builder = ContentTreeBuilder("portfolio", LayoutHint.COLUMN, title)

    projects = by_date.sort(factory.adapt_all(importer.get_projects()))
    if projects:
        featured = [item for item in projects if item.has_decoration(Decoration.FEATURED)]
        others = [item for item in projects if not item.has_decoration(Decoration.FEATURED)]
        builder.add_container("projects", LayoutHint.GRID, "Projects")
        if featured:
            builder.add_container("projects-featured", LayoutHint.ROW, "Featured")
            _add_items(builder, featured)
            builder.up()
        _add_items(builder, others)
        builder.up()

    flat_sections = [
        ("articles", LayoutHint.LIST, "Articles", importer.get_articles()),
        ("blog", LayoutHint.TIMELINE, "Blog", importer.get_blogs()),
        ("videos", LayoutHint.ROW, "Videos", importer.get_videos()),
    ]
    for section_id, layout, section_title, records in flat_sections:
        items = by_date.sort(factory.adapt_all(records))
        if not items:
            continue
        builder.add_container(section_id, layout, section_title)
        _add_items(builder, items)
        builder.up()

    docs = factory.adapt_all(importer.get_docs())
    if docs:
        # Sections are keyed by slug; the first spelling seen names the section.
        grouped: Dict[str, Tuple[str, List[ContentItem]]] = {}
        for item in docs:
            section = item.meta[0] if item.meta else DEFAULT_DOC_SECTION
            grouped.setdefault(_slug(section), (section, []))[1].append(item)

        builder.add_container("docs", LayoutHint.COLUMN, "Documentation")
        for slug, (section, items) in grouped.items():
            builder.add_container(f"docs-{slug}", LayoutHint.LIST, section)
            _add_items(builder, items)
            builder.up()
        builder.up()

    root = builder.build()
    logging.info(f"Built portfolio tree with {len(root.children)} sections")
    return root
