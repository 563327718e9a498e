"""
YAML importer for Folio.

Loads portfolio records from a YAML document with one top-level list per
source kind:

    projects: [...]
    blogs: [...]
    articles: [...]
    videos: [...]
    docs: [...]
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Type, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from ..models import ArticleRecord, BlogRecord, DocRecord, ProjectRecord, VideoRecord
from .base import BaseImporter


RecordT = TypeVar("RecordT", bound=BaseModel)


class YamlImporter(BaseImporter):
    """
    Importer for portfolio data stored in a YAML file.

    A missing or unreadable file yields empty collections; records that fail
    validation are logged and skipped.
    """

    def __init__(self, data_path: str):
        """
        Initialize the YAML importer.

        Args:
            data_path: Path to the YAML data file
        """
        self.data_path = Path(data_path)
        self._data: Dict[str, Any] = self._load()

        logging.info(f"Initialized YAML importer for: {self.data_path}")

    def _load(self) -> Dict[str, Any]:
        if not self.data_path.exists():
            logging.warning(f"Data file not found: {self.data_path}")
            return {}

        try:
            with open(self.data_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logging.error(f"Failed to read data file {self.data_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logging.error(f"Data file root must be a mapping: {self.data_path}")
            return {}

        return data

    def _records(self, key: str, model: Type[RecordT]) -> List[RecordT]:
        raw_records = self._data.get(key) or []
        if not isinstance(raw_records, list):
            logging.warning(f"Section '{key}' is not a list, ignoring it")
            return []

        records: List[RecordT] = []
        for index, raw in enumerate(raw_records):
            try:
                records.append(model.model_validate(raw))
            except ValidationError as e:
                logging.warning(f"Skipping invalid {key} record #{index}: {e.error_count()} error(s)")
        return records

    def get_projects(self) -> List[ProjectRecord]:
        return self._records("projects", ProjectRecord)

    def get_blogs(self) -> List[BlogRecord]:
        return self._records("blogs", BlogRecord)

    def get_articles(self) -> List[ArticleRecord]:
        return self._records("articles", ArticleRecord)

    def get_videos(self) -> List[VideoRecord]:
        return self._records("videos", VideoRecord)

    def get_docs(self) -> List[DocRecord]:
        return self._records("docs", DocRecord)
