"""Domain layer - core business logic."""

from .models import (
    GateResult,
    JobMatch,
    MatchLevel,
    ProcessingResult,
    RejectionType,
    ResumeData,
    SanitizationResult,
)

__all__ = [
    "GateResult",
    "JobMatch",
    "MatchLevel",
    "ProcessingResult",
    "RejectionType",
    "ResumeData",
    "SanitizationResult",
]
