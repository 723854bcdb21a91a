"""LLM port - interface for resume structuring."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.models import JobMatch, ResumeData


class LLMPort(ABC):
    """Interface for LLM-based resume structuring."""

    @abstractmethod
    def structure(self, text: str, job_description: str | None = None) -> "ResumeData":
        """Turn sanitized resume text into structured data.

        ``job_description`` tailors the output to a posting when given.
        """
        pass

    @abstractmethod
    def match(self, text: str, job_description: str) -> "JobMatch | None":
        """Judge whether a resume is a reasonable fit for a job posting.

        Returns None when the response cannot be parsed.
        """
        pass
