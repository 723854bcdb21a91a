"""Content-safety gate for extracted resume text."""

from .gate import run_early_rejection_gate
from .gibberish import score_gibberish
from .injection import detect_critical_injection
from .length import check_length
from .quality import check_quality
from .sanitizer import sanitize

__all__ = [
    "check_length",
    "check_quality",
    "detect_critical_injection",
    "run_early_rejection_gate",
    "sanitize",
    "score_gibberish",
]
