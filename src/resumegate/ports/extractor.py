"""Extractor port - interface for document text extraction."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import ExtractedText


class ExtractorPort(ABC):
    """Interface for pulling plain text out of an uploaded resume."""

    @abstractmethod
    def extract(self, path: Path) -> "ExtractedText":
        """Extract text content from a document."""
        pass
