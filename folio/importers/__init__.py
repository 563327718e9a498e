"""Data importers for portfolio sources."""

from .base import BaseImporter
from .mock import MockImporter
from .yaml_file import YamlImporter

__all__ = ["BaseImporter", "MockImporter", "YamlImporter"]
