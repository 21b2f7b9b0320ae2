"""Extractor framework for the indexer.

This module defines the BaseExtractor abstract class and the ExtractorRegistry
that discovers extractors and maps them to the content types they handle.

An extractor receives the raw bytes of one indexed file and returns a dict
of extracted data keyed by data type. It never touches the database; the
storage layer routes each data type to the matching database method.
"""

import importlib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from ..content_type import ContentType


class BaseExtractor(ABC):
    """Abstract base class for all content extractors."""

    def __init__(self, root_path: Path):
        """Initialize the extractor.

        Args:
            root_path: Indexing root
        """
        self.root_path = root_path

    @abstractmethod
    def supported_content_types(self) -> list[ContentType]:
        """Return the content types this extractor handles."""

    @abstractmethod
    def extract(self, file_info: dict[str, Any], content: bytes) -> dict[str, Any]:
        """Extract all relevant information from a file.

        Args:
            file_info: File metadata (``id``, ``path``, ``name``)
            content: Raw file bytes

        Returns:
            Dictionary containing all extracted data
        """


class ExtractorRegistry:
    """Registry for dynamic discovery and management of extractors.

    Every module in this package (except private ones) is imported and its
    first BaseExtractor subclass is registered for the content types it
    declares.
    """

    def __init__(self, root_path: Path):
        self.root_path = root_path
        self.extractors: dict[ContentType, BaseExtractor] = {}
        self._discover()

    def _discover(self):
        extractor_dir = Path(__file__).parent

        for file_path in sorted(extractor_dir.glob("*.py")):
            if file_path.name.startswith("_"):
                continue

            module = importlib.import_module(f".{file_path.stem}", package=__name__)

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, BaseExtractor)
                    and attr is not BaseExtractor
                ):
                    extractor = attr(self.root_path)

                    for content_type in extractor.supported_content_types():
                        self.extractors[content_type] = extractor

                    break

    def get_extractor(self, content_type: ContentType) -> BaseExtractor | None:
        """Get the extractor for a content type, or None if nothing is extracted from it."""
        return self.extractors.get(content_type)


__all__ = ["BaseExtractor", "ExtractorRegistry"]
