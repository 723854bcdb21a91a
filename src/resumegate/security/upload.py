"""Upload and job description validation."""

import re
from dataclasses import dataclass
from pathlib import Path

MAX_FILE_SIZE_MB = 10
ALLOWED_EXTENSIONS = (".pdf", ".docx")
MIN_JOB_DESCRIPTION_CHARS = 50

JOB_DESCRIPTION_INJECTION = (
    re.compile(r"ignore\s+(?:previous|all|above|prior)\s+(?:instructions|prompts|commands)", re.I),
    re.compile(r"system\s*:", re.I),
    re.compile(r"assistant\s*:", re.I),
    re.compile(r"\[/?INST\]", re.I),
    re.compile(r"<\|.*?\|>"),
    re.compile(r"you\s+are\s+now", re.I),
    re.compile(r"your\s+new\s+(?:role|instructions|task)", re.I),
    re.compile(r"forget\s+(?:everything|all|previous)", re.I),
    re.compile(r"disregard\s+(?:previous|all|above)", re.I),
)


@dataclass
class ValidationResult:
    valid: bool
    reason: str | None = None


def detect_file_type(filename: str) -> str:
    """Return "pdf", "docx" or "unknown" based on the file extension."""
    suffix = Path(filename).suffix.lower()
    if suffix == ".pdf":
        return "pdf"
    if suffix in (".docx", ".doc"):
        return "docx"
    return "unknown"


def validate_file(
    path: Path,
    max_size_mb: int = MAX_FILE_SIZE_MB,
    allowed_extensions: tuple[str, ...] | list[str] = ALLOWED_EXTENSIONS,
) -> ValidationResult:
    """Check an uploaded file before any extraction work."""
    if path.suffix.lower() not in allowed_extensions:
        return ValidationResult(
            valid=False,
            reason=f"Invalid file type. Allowed types: {', '.join(allowed_extensions)}",
        )

    size = path.stat().st_size
    if size == 0:
        return ValidationResult(valid=False, reason="File is empty. Please upload a valid resume.")
    if size > max_size_mb * 1024 * 1024:
        return ValidationResult(
            valid=False,
            reason=f"File size exceeds {max_size_mb}MB limit. Please upload a smaller file.",
        )

    return ValidationResult(valid=True)


def validate_job_description(text: str | None) -> ValidationResult:
    if not text or not text.strip():
        return ValidationResult(valid=False, reason="Job description cannot be empty")

    if len(text.strip()) < MIN_JOB_DESCRIPTION_CHARS:
        return ValidationResult(
            valid=False,
            reason=(
                "Job description is too short. "
                f"Please provide at least {MIN_JOB_DESCRIPTION_CHARS} characters."
            ),
        )

    if any(pattern.search(text) for pattern in JOB_DESCRIPTION_INJECTION):
        return ValidationResult(
            valid=False,
            reason="Invalid job description detected. Please provide a legitimate job posting.",
        )

    return ValidationResult(valid=True)
