"""Parse LLM JSON responses into domain models."""

import json
import logging
import re
from typing import Any

from ...domain.models import (
    Certification,
    ContactInfo,
    Education,
    JobMatch,
    MatchLevel,
    ResumeData,
    WorkExperience,
)
from .validation import looks_suspicious, sanitize_field

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")


def _strings(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def _records(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def parse_resume_response(text: str) -> ResumeData:
    """Parse a JSON (optionally fenced) response.

    Invalid JSON yields an empty ResumeData.
    """
    cleaned = _CODE_FENCE.sub("", text.strip())
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError:
        logger.warning(f"Invalid JSON response: {text[:200]}")
        return ResumeData()

    if not isinstance(data, dict):
        logger.warning(f"Unexpected JSON payload type: {type(data).__name__}")
        return ResumeData()

    contact_data = data.get("contact") or {}
    if not isinstance(contact_data, dict):
        contact_data = {}
    name = contact_data.get("name", "")
    if isinstance(name, str) and looks_suspicious(name):
        logger.warning(f"Suspicious name rejected: {name[:50]}")

    contact = ContactInfo(
        name=sanitize_field(name),
        email=sanitize_field(contact_data.get("email")),
        phone=sanitize_field(contact_data.get("phone")),
        location=sanitize_field(contact_data.get("location")),
    )

    experience = [
        WorkExperience(
            title=sanitize_field(job.get("title"), "Untitled"),
            organization=sanitize_field(job.get("organization")),
            location=sanitize_field(job.get("location")),
            start_date=sanitize_field(job.get("start_date")),
            end_date=sanitize_field(job.get("end_date")),
            responsibilities=_strings(job.get("responsibilities")),  # Allow free-form text
        )
        for job in _records(data.get("work_experience"))
    ]

    education = [
        Education(
            degree=sanitize_field(edu.get("degree"), "Unknown"),
            institution=sanitize_field(edu.get("institution")),
            location=sanitize_field(edu.get("location")),
            graduation_date=sanitize_field(edu.get("graduation_date")),
        )
        for edu in _records(data.get("education"))
    ]

    certifications = [
        Certification(
            name=sanitize_field(cert.get("name"), "Unknown"),
            issuer=sanitize_field(cert.get("issuer")),
            date_obtained=sanitize_field(cert.get("date_obtained")),
        )
        for cert in _records(data.get("certifications"))
    ]

    skills = [skill for skill in _strings(data.get("skills")) if not looks_suspicious(skill)]

    return ResumeData(
        contact=contact,
        work_experience=experience,
        education=education,
        certifications=certifications,
        skills=skills,
    )


def parse_match_response(text: str) -> JobMatch | None:
    """Parse a job match verdict. Returns None when the response is unusable."""
    cleaned = _CODE_FENCE.sub("", text.strip())
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError:
        logger.warning(f"Invalid match response: {text[:200]}")
        return None

    if not isinstance(data, dict):
        return None

    level = data.get("match_level")
    reason = data.get("reason")
    if not isinstance(level, str) or not isinstance(reason, str) or not reason.strip():
        logger.warning("Match response is missing match_level or reason")
        return None

    try:
        match_level = MatchLevel(level.strip().upper())
    except ValueError:
        logger.warning(f"Unknown match level: {level[:50]}")
        return None

    return JobMatch(level=match_level, reason=reason.strip())
