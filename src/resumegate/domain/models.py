"""Domain models."""

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class RejectionType(str, Enum):
    """Why a resume was turned away before reaching the LLM."""

    LENGTH = "length"
    GIBBERISH = "gibberish"
    PROFANITY = "profanity"
    INJECTION = "injection"


@dataclass(frozen=True)
class PatternRule:
    """A compiled matcher with a human-readable description."""

    matcher: re.Pattern[str]
    description: str

    def search(self, text: str) -> bool:
        return self.matcher.search(text) is not None


@dataclass
class GateResult:
    """Outcome of the early rejection gate."""

    passed: bool
    error: str = ""
    rejection_type: RejectionType | None = None
    details: list[str] = field(default_factory=list)


@dataclass
class SanitizationResult:
    """Outcome of line-level sanitization.

    When ``is_safe`` is False the whole document is rejected and
    ``sanitized`` is empty.
    """

    sanitized: str
    removed_patterns: list[str] = field(default_factory=list)
    is_safe: bool = True
    critical_issue: str | None = None


@dataclass
class ExtractedText:
    """Plain text pulled out of an uploaded document."""

    text: str
    pages: int = 0


@dataclass
class ContactInfo:
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""


@dataclass
class WorkExperience:
    title: str
    organization: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    responsibilities: list[str] = field(default_factory=list)


@dataclass
class Education:
    degree: str
    institution: str = ""
    location: str = ""
    graduation_date: str = ""


@dataclass
class Certification:
    name: str
    issuer: str = ""
    date_obtained: str = ""


@dataclass
class ResumeData:
    """Structured resume content returned by the LLM."""

    contact: ContactInfo = field(default_factory=ContactInfo)
    work_experience: list[WorkExperience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    certifications: list[Certification] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.contact.name or self.work_experience or self.education)


class MatchLevel(str, Enum):
    """How well a resume fits a job posting."""

    GOOD_MATCH = "GOOD_MATCH"
    MODERATE_MATCH = "MODERATE_MATCH"
    NO_MATCH = "NO_MATCH"


@dataclass
class JobMatch:
    """Pre-screening verdict for tailoring a resume to a job."""

    level: MatchLevel
    reason: str

    @property
    def can_proceed(self) -> bool:
        return self.level != MatchLevel.NO_MATCH


@dataclass
class ProcessingResult:
    """Result of resume processing."""

    source_path: Path
    resume: ResumeData | None = None
    output_path: Path | None = None
    text_length: int = 0
    rejection_type: RejectionType | None = None
    details: list[str] = field(default_factory=list)
    removed_patterns: list[str] = field(default_factory=list)
    job_match: JobMatch | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return len(self.errors) == 0 and self.resume is not None

    @property
    def rejected(self) -> bool:
        return self.rejection_type is not None
