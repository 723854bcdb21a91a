"""LLM response validation for prompt injection mitigation."""

import re

# Unique delimiters for resume text boundaries
DOC_BEGIN = "<<<RESUME_TEXT_BEGIN>>>"
DOC_END = "<<<RESUME_TEXT_END>>>"

# Code-like content, markup and control chars have no place in a short field
_SUSPICIOUS_PATTERN = re.compile(r"[{}<>`]|[\x00-\x08\x0b-\x1f]")


def looks_suspicious(text: str) -> bool:
    """Check if a returned field looks like an injection attempt."""
    if not text:
        return False
    return bool(_SUSPICIOUS_PATTERN.search(text))


def sanitize_field(text: object, fallback: str = "") -> str:
    """Return text if it is a safe string, otherwise fallback."""
    if not isinstance(text, str) or not text:
        return fallback
    if looks_suspicious(text):
        return fallback
    return text.strip()


def wrap_document(text: str) -> str:
    return f"{DOC_BEGIN}\n{text}\n{DOC_END}"
