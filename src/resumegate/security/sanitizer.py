"""Line-level removal of suspicious resume content.

Runs only after the rejection gate has passed. Critical markers are checked
again over the whole document before any line is removed.
"""

import logging
from collections.abc import Sequence

from ..domain.models import PatternRule, SanitizationResult
from .injection import detect_critical_injection
from .patterns import CRITICAL_PATTERNS, LEGITIMATE_CONTEXTS, SUSPICIOUS_PATTERNS

logger = logging.getLogger(__name__)

DOCUMENT_START_CHARS = 300
MAX_DOCUMENT_START_MATCHES = 2
CONTEXT_LINES = 2
MAX_REMOVED_LINES = 5


def _rejected(issue: str) -> SanitizationResult:
    return SanitizationResult(
        sanitized="",
        is_safe=False,
        critical_issue=f"Critical security issue detected: {issue}",
    )


def has_legitimate_context(
    lines: Sequence[str],
    index: int,
    contexts: Sequence[PatternRule] = LEGITIMATE_CONTEXTS,
) -> bool:
    """Check the line at ``index`` and its surrounding window for allowed usage.

    The span a suspicious rule matched is not consulted: the whole line is
    checked first, then the window of ``CONTEXT_LINES`` lines on either side.
    Pure function of its arguments.
    """
    if any(rule.search(lines[index]) for rule in contexts):
        return True
    start = max(0, index - CONTEXT_LINES)
    end = min(len(lines), index + CONTEXT_LINES + 1)
    window = "\n".join(lines[start:end])
    return any(rule.search(window) for rule in contexts)


def find_critical_issue(text: str) -> str | None:
    """Return a description of the first critical issue in ``text``."""
    detection = detect_critical_injection(text)
    if detection.has_critical:
        return (
            f"{detection.patterns[0]}. Resume contains chat template markers "
            "or LLM control sequences."
        )

    for rule in CRITICAL_PATTERNS:
        if rule.search(text):
            return (
                f"{rule.description}. Resume contains chat template markers "
                "or LLM control sequences."
            )

    start = text[:DOCUMENT_START_CHARS]
    start_matches = sum(1 for rule in SUSPICIOUS_PATTERNS if rule.search(start))
    if start_matches >= MAX_DOCUMENT_START_MATCHES:
        return (
            "Multiple injection patterns found at document start. "
            "This appears to be a deliberate attack."
        )
    return None


def _first_suspicious(line: str) -> PatternRule | None:
    for rule in SUSPICIOUS_PATTERNS:
        if rule.search(line):
            return rule
    return None


def sanitize(text: str) -> SanitizationResult:
    """Strip suspicious lines while keeping the rest of the resume intact."""
    if not text or not text.strip():
        return SanitizationResult(sanitized=text)

    issue = find_critical_issue(text)
    if issue:
        logger.debug(f"Sanitizer rejected document: {issue}")
        return _rejected(issue)

    lines = text.split("\n")
    kept: list[str] = []
    removed: list[str] = []

    for index, line in enumerate(lines):
        rule = _first_suspicious(line)
        if rule is None or has_legitimate_context(lines, index):
            kept.append(line)
            continue

        removed.append(f"Line {index + 1}: {rule.description} (content hidden)")
        if len(removed) >= MAX_REMOVED_LINES:
            return _rejected(
                f"Multiple injection attempts found ({len(removed)} patterns). "
                "This appears to be a deliberate attack."
            )

    return SanitizationResult(sanitized="\n".join(kept), removed_patterns=removed)
