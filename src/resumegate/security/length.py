"""Hard ceiling on extracted resume length."""

import math
from dataclasses import dataclass

MAX_CHARS = 200_000
CHARS_PER_PAGE = 6_700  # rough estimate for a dense text page


@dataclass
class LengthCheck:
    valid: bool
    reason: str | None = None


def estimate_pages(char_count: int) -> int:
    return math.ceil(char_count / CHARS_PER_PAGE)


def check_length(text: str, max_chars: int = MAX_CHARS) -> LengthCheck:
    """Reject text longer than ``max_chars``.

    Runs before every other check so later scans are bounded.
    """
    char_count = len(text)
    if char_count <= max_chars:
        return LengthCheck(valid=True)

    pages = estimate_pages(char_count)
    max_pages = estimate_pages(max_chars)
    return LengthCheck(
        valid=False,
        reason=(
            f"Resume is too long ({char_count:,} characters, approximately {pages} pages). "
            f"Maximum is {max_chars:,} characters (approximately {max_pages} pages). "
            "Please upload a shorter version focusing on recent and relevant experience."
        ),
    )
