"""Storage port - interface for file storage."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import ProcessingResult


class StoragePort(ABC):
    """Interface for file storage."""

    @abstractmethod
    def output_path(self, source: Path, suffix: str) -> Path:
        """Return a free destination path for a rendered resume."""
        pass

    @abstractmethod
    def quarantine(self, path: Path, quarantine_dir: Path) -> Path:
        """Move file to quarantine.

        Returns path to quarantined file.
        """
        pass

    @abstractmethod
    def write_report(self, quarantined: Path, result: "ProcessingResult") -> Path:
        """Write a rejection report next to a quarantined file."""
        pass
