"""Profanity and placeholder-data checks."""

import re
from dataclasses import dataclass

PROFANITY_LIMIT = 5
PLACEHOLDER_LIMIT = 2

PROFANITY = re.compile(r"\b(?:fuck|shit|bitch|ass|damn|cunt|bastard)\b", re.IGNORECASE)

PLACEHOLDER_MARKERS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"test\s*test\s*test", re.IGNORECASE), "test repetition"),
    (re.compile(r"lorem\s*ipsum", re.IGNORECASE), "Lorem Ipsum placeholder"),
    (re.compile(r"asdf", re.IGNORECASE), "keyboard mashing"),
    (re.compile(r"qwerty", re.IGNORECASE), "keyboard pattern"),
)


@dataclass
class QualityCheck:
    valid: bool
    reason: str | None = None


def check_quality(
    text: str,
    profanity_limit: int = PROFANITY_LIMIT,
    placeholder_limit: int = PLACEHOLDER_LIMIT,
) -> QualityCheck:
    """Reject abusive text or test/placeholder submissions.

    A handful of profanity matches is tolerated (company names such as
    "Badass Labs"); more than ``profanity_limit`` is not.
    """
    if not text or not text.strip():
        return QualityCheck(valid=True)

    if len(PROFANITY.findall(text)) > profanity_limit:
        return QualityCheck(valid=False, reason="Resume contains inappropriate content.")

    for pattern, name in PLACEHOLDER_MARKERS:
        if len(pattern.findall(text)) > placeholder_limit:
            return QualityCheck(
                valid=False,
                reason=f"Resume appears to contain test or placeholder data ({name} detected).",
            )

    return QualityCheck(valid=True)
