#!/usr/bin/env python3
"""
Folio - Portfolio Content Trees

Main entry point for Folio. Loads portfolio records, assembles the page tree,
and prints the outline, statistics, or a filtered and sorted item list.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from folio import __version__
from folio.adapters import ContentAdapterFactory
from folio.config import config
from folio.importers import BaseImporter, MockImporter, YamlImporter
from folio.models import ALL_KINDS, Container, ContentItem, ContentKind, FilterRequest
from folio.query import Sorter, filter_items, get_sort_strategy
from folio.tree import build_portfolio_tree, collect_metrics, collect_tags, flatten, render_outline


def setup_logging():
    """Configure logging for the application."""
    level = getattr(logging, config.get("logging.level", "INFO").upper(), logging.INFO)
    format_str = config.get("logging.format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    log_file = config.log_filename

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(log_file)
        ]
    )


def create_importer(source: str, data_path: Optional[str]) -> BaseImporter:
    """
    Create the importer for the selected data source.

    Args:
        source: "mock" or "yaml"
        data_path: YAML file path; the configured data file when omitted

    Returns:
        The importer instance
    """
    if source == "yaml":
        return YamlImporter(data_path or config.data_filename)
    return MockImporter()


def format_item(item: ContentItem) -> str:
    """Format one item as a single listing line."""
    line = f"{item.date or '----------'}  [{item.kind.value:<7}] {item.title}"
    tags = item.meta_preview(config.meta_preview)
    if tags:
        line += f"  ({', '.join(tags)})"
    if item.decorations:
        line += "  " + " ".join(f"#{decoration.value}" for decoration in item.decorations)
    if item.is_locked:
        line += "  [locked]"
    return line


def select_items(root: Container, query: str, type_filter: str, tags: List[str],
                 sort_name: str) -> List[ContentItem]:
    """
    Flatten the tree, filter it, and sort the result.

    Args:
        root: Page tree
        query: Search query
        type_filter: A content kind or "all"
        tags: Tags of which at least one must be present
        sort_name: Sort strategy name

    Returns:
        The view-ready item list
    """
    request = FilterRequest(query=query, type_filter=type_filter, tags=set(tags))
    matches = filter_items(flatten(root), request)
    return Sorter(get_sort_strategy(sort_name)).sort(matches)


def export_tree(root: Container, export_path: str) -> None:
    path = Path(export_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(root.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
    logging.info(f"Exported content tree to {path}")


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Folio - Portfolio Content Trees",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                  # List all items, newest first
  python main.py --show-tree --stats              # Print the page outline and counts
  python main.py --query "type:video saas"        # Search with the query language
  python main.py --type project --tag React       # Filter by kind and tag
  python main.py --source yaml --data site.yaml   # Load records from a YAML file
        """
    )

    parser.add_argument(
        "--source",
        choices=["mock", "yaml"],
        default="mock",
        help="Data source to load records from (default: mock)"
    )

    parser.add_argument(
        "--data",
        type=str,
        help="Path to the YAML data file (yaml source only)"
    )

    parser.add_argument(
        "--query",
        default="",
        help="Search query, e.g. 'is:featured react'"
    )

    parser.add_argument(
        "--type",
        dest="type_filter",
        choices=[ALL_KINDS] + [kind.value for kind in ContentKind],
        default=ALL_KINDS,
        help="Only show one content kind (default: all)"
    )

    parser.add_argument(
        "--tag",
        action="append",
        default=[],
        help="Required tag; repeat to accept any of several tags"
    )

    parser.add_argument(
        "--sort",
        choices=["date", "title", "description"],
        default=config.default_sort,
        help="Sort order of the item list"
    )

    parser.add_argument(
        "--show-tree",
        action="store_true",
        help="Print the page outline"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print item counts per kind and all tags"
    )

    parser.add_argument(
        "--export",
        type=str,
        help="Write the page tree as JSON to this path"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Folio {__version__}"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = parse_arguments(argv)
    setup_logging()

    try:
        importer = create_importer(args.source, args.data)
        root = build_portfolio_tree(importer, ContentAdapterFactory())

        if args.show_tree:
            print(render_outline(root, config.meta_preview))
            print()

        if args.stats:
            metrics = collect_metrics(root)
            print("Content statistics:")
            for kind in ContentKind:
                print(f"  {kind.value:<8} {metrics[kind.value]}")
            print(f"  {'total':<8} {metrics['total']}")
            print(f"Tags: {', '.join(sorted(collect_tags(root)))}")
            print()

        items = select_items(root, args.query, args.type_filter, args.tag, args.sort)
        for item in items:
            print(format_item(item))
        if not items:
            print("No matching content.")

        if args.export:
            export_tree(root, args.export)

    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        print("\nInterrupted.")

    except (OSError, ValueError) as e:
        logging.error(f"Folio failed: {e}")
        print(f"\nFolio failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
