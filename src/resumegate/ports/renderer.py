"""Renderer port - interface for writing structured resumes."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import ResumeData


class RendererPort(ABC):
    """Interface for rendering structured resume data to a file."""

    suffix: str = ""

    @abstractmethod
    def render(self, data: "ResumeData", dest: Path) -> Path:
        """Write ``data`` to ``dest`` and return the written path."""
        pass
