"""
Base importer interface for Folio.

This module defines the abstract interface that all data importers must implement.
"""

from abc import ABC, abstractmethod
from typing import List

from ..adapters import ContentAdapterFactory
from ..models import (
    ArticleRecord,
    BlogRecord,
    ContentItem,
    DocRecord,
    ProjectRecord,
    SourceRecord,
    VideoRecord,
)


class BaseImporter(ABC):
    """
    Abstract base class for all data importers.

    Each importer loads raw source records from a specific origin (hard-coded
    fixtures, a YAML file, ...). Normalization is left to the adapters.
    """

    @abstractmethod
    def get_projects(self) -> List[ProjectRecord]:
        pass

    @abstractmethod
    def get_blogs(self) -> List[BlogRecord]:
        pass

    @abstractmethod
    def get_articles(self) -> List[ArticleRecord]:
        pass

    @abstractmethod
    def get_videos(self) -> List[VideoRecord]:
        pass

    @abstractmethod
    def get_docs(self) -> List[DocRecord]:
        pass

    def get_all_records(self) -> List[SourceRecord]:
        """
        Retrieve every record from the data source.

        Returns:
            Projects, blogs, articles, videos and docs, in that order
        """
        records: List[SourceRecord] = []
        records.extend(self.get_projects())
        records.extend(self.get_blogs())
        records.extend(self.get_articles())
        records.extend(self.get_videos())
        records.extend(self.get_docs())
        return records

    def get_all_items(self, factory: ContentAdapterFactory) -> List[ContentItem]:
        """
        Retrieve every record and normalize it.

        Args:
            factory: Adapter factory used for normalization

        Returns:
            List of ContentItem objects
        """
        return factory.adapt_all(self.get_all_records())
