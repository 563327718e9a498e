"""
Tests for the command line entry point.
"""

import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

import main
from folio.importers import MockImporter, YamlImporter
from folio.models import ContentItem
from folio.tree import build_portfolio_tree


class TestUtilityFunctions(unittest.TestCase):
    """Test helpers used by the CLI."""

    def test_create_importer(self):
        """Test importer selection."""
        self.assertIsInstance(main.create_importer("mock", None), MockImporter)
        with tempfile.TemporaryDirectory() as temp_dir:
            importer = main.create_importer("yaml", str(Path(temp_dir) / "none.yaml"))
            self.assertIsInstance(importer, YamlImporter)

    def test_format_item(self):
        """Test the listing line for an item."""
        item = ContentItem(
            id="proj-4",
            kind="project",
            title="Merchant Portal",
            date="2024-02-01",
            meta=["SaaS", "Django", "PostgreSQL", "Redis"],
            decorations=["featured"],
            is_locked=True
        )
        line = main.format_item(item)

        self.assertTrue(line.startswith("2024-02-01  [project] Merchant Portal"))
        self.assertIn("(SaaS, Django, PostgreSQL)", line)
        self.assertNotIn("Redis", line)
        self.assertIn("#featured", line)
        self.assertTrue(line.endswith("[locked]"))

    def test_select_items(self):
        """Test flatten, filter and sort in one pass."""
        root = build_portfolio_tree(MockImporter())

        items = main.select_items(root, "type:video", "all", [], "date")
        self.assertEqual([item.id for item in items], ["video-yt-102", "video-yt-101"])

        items = main.select_items(root, "", "project", ["React", "Vue"], "title")
        self.assertEqual([item.title for item in items],
                         ["AI Chat Interface", "Personal Finance Tracker"])


class TestMain(unittest.TestCase):
    """Test full CLI runs."""

    def run_main(self, *argv):
        output = io.StringIO()
        with patch("main.setup_logging"), redirect_stdout(output):
            main.main(list(argv))
        return output.getvalue()

    def test_stats_and_tree(self):
        """Test the outline and statistics output."""
        output = self.run_main("--show-tree", "--stats", "--query", "is:featured")

        self.assertIn("+ My Portfolio <column>", output)
        self.assertIn("total    13", output)
        self.assertIn("E-Commerce Dashboard", output)

    def test_no_matches(self):
        """Test the empty result message."""
        output = self.run_main("--query", "nothing-matches-this")
        self.assertIn("No matching content.", output)

    def test_export(self):
        """Test JSON export of the tree."""
        with tempfile.TemporaryDirectory() as temp_dir:
            export_path = Path(temp_dir) / "out" / "tree.json"
            self.run_main("--export", str(export_path))

            with open(export_path, encoding="utf-8") as f:
                exported = json.load(f)

        self.assertEqual(exported["id"], "portfolio")
        self.assertEqual(exported["node_type"], "container")
        self.assertEqual(exported["children"][0]["layout_hint"], "grid")


if __name__ == '__main__':
    unittest.main()
