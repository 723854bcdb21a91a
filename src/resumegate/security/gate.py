"""Early rejection gate run before any paid LLM call."""

import logging

from ..domain.models import GateResult, RejectionType
from .gibberish import score_gibberish
from .injection import detect_critical_injection
from .length import MAX_CHARS, check_length
from .quality import PLACEHOLDER_LIMIT, PROFANITY_LIMIT, check_quality

logger = logging.getLogger(__name__)

GIBBERISH_ERROR = (
    "Resume contains invalid or malicious content and cannot be processed. "
    "Please submit a legitimate resume with actual work experience and qualifications."
)
INJECTION_ERROR = (
    "Resume contains suspicious content that appears to be a security threat. "
    "Please remove any AI commands, chat markers, or malicious instructions and resubmit."
)


def run_early_rejection_gate(
    text: str,
    *,
    max_chars: int = MAX_CHARS,
    profanity_limit: int = PROFANITY_LIMIT,
    placeholder_limit: int = PLACEHOLDER_LIMIT,
) -> GateResult:
    """Run all rejecting checks in order and stop at the first failure.

    Order: length, gibberish, profanity/placeholder data, critical injection.
    Cheap structural checks run first so broken uploads never reach the
    injection scan.
    """
    length = check_length(text, max_chars=max_chars)
    if not length.valid:
        return GateResult(
            passed=False,
            error=length.reason or "",
            rejection_type=RejectionType.LENGTH,
            details=["Resume exceeds maximum length limit"],
        )

    gibberish = score_gibberish(text)
    logger.debug(f"Gibberish score: {gibberish.score}")
    if gibberish.is_gibberish:
        return GateResult(
            passed=False,
            error=GIBBERISH_ERROR,
            rejection_type=RejectionType.GIBBERISH,
            details=list(gibberish.details),
        )

    quality = check_quality(
        text, profanity_limit=profanity_limit, placeholder_limit=placeholder_limit
    )
    if not quality.valid:
        reason = quality.reason or ""
        return GateResult(
            passed=False,
            error=reason,
            rejection_type=RejectionType.PROFANITY,
            details=[reason],
        )

    injection = detect_critical_injection(text)
    if injection.has_critical:
        return GateResult(
            passed=False,
            error=INJECTION_ERROR,
            rejection_type=RejectionType.INJECTION,
            details=list(injection.patterns),
        )

    return GateResult(passed=True)
