"""Detection of prompt-injection markers that always warrant rejection.

Patterns here are narrow literal markers that do not occur in genuine resume
prose. Borderline phrasing is left to the sanitizer.
"""

import base64
import binascii
import logging
from dataclasses import dataclass, field

from .patterns import (
    BASE64_PAYLOAD,
    CHAT_TEMPLATE_MARKERS,
    HTML_COMMENT_CLOSE,
    HTML_COMMENT_OPEN,
    INJECTION_KEYWORDS,
    OVERRIDE_ATTEMPT,
    STRUCTURED_OVERRIDE,
)

logger = logging.getLogger(__name__)

MIN_OVERRIDE_ATTEMPTS = 3


@dataclass
class CriticalInjectionResult:
    has_critical: bool
    patterns: list[str] = field(default_factory=list)


def decode_base64(payload: str) -> str | None:
    """Decode a base64 candidate, tolerating missing padding.

    Returns None when the payload is not decodable.
    """
    stripped = payload.rstrip("=")
    padded = stripped + "=" * (-len(stripped) % 4)
    try:
        raw = base64.b64decode(padded, validate=True)
    except (binascii.Error, ValueError):
        return None
    return raw.decode("utf-8", errors="replace")


def has_base64_injection(text: str) -> bool:
    """Check whether any ``base64:`` payload decodes to injection keywords."""
    for match in BASE64_PAYLOAD.finditer(text):
        decoded = decode_base64(match.group(1))
        if decoded is None:
            logger.debug("Skipping undecodable base64 candidate")
            continue
        if INJECTION_KEYWORDS.search(decoded):
            return True
    return False


def count_html_comment_injections(text: str) -> int:
    """Count HTML comments whose body contains an injection keyword.

    Each opener is paired with the next closer and scanning resumes after it,
    so the text is walked once. An opener with no closer ends the scan.
    """
    count = 0
    pos = text.find(HTML_COMMENT_OPEN)
    while pos != -1:
        body_start = pos + len(HTML_COMMENT_OPEN)
        end = text.find(HTML_COMMENT_CLOSE, body_start)
        if end == -1:
            break
        if INJECTION_KEYWORDS.search(text, body_start, end):
            count += 1
        pos = text.find(HTML_COMMENT_OPEN, end + len(HTML_COMMENT_CLOSE))
    return count


def detect_critical_injection(text: str) -> CriticalInjectionResult:
    if not text or not text.strip():
        return CriticalInjectionResult(has_critical=False)

    patterns = [rule.description for rule in CHAT_TEMPLATE_MARKERS if rule.search(text)]

    attempts = len(OVERRIDE_ATTEMPT.findall(text))
    if attempts >= MIN_OVERRIDE_ATTEMPTS:
        patterns.append(f"{attempts} instruction override attempts detected")

    comments = count_html_comment_injections(text)
    if comments:
        patterns.append(f"{comments} HTML comment injection(s) detected")

    if has_base64_injection(text):
        patterns.append("Base64-encoded injection attempt detected (decoded suspicious content)")

    if STRUCTURED_OVERRIDE.search(text):
        patterns.append("Structured override/configuration injection detected")

    return CriticalInjectionResult(has_critical=bool(patterns), patterns=patterns)
