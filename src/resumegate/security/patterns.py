"""Pattern libraries for resume content screening.

Three immutable rule sets drive the screening:

- ``CRITICAL_PATTERNS``: markers that never appear in a genuine resume. Any
  match rejects the whole document.
- ``SUSPICIOUS_PATTERNS``: phrasing typical of prompt injection that can also
  show up in ordinary prose. Matching lines are stripped unless a legitimate
  context is nearby.
- ``LEGITIMATE_CONTEXTS``: allow-list that overrides a suspicious match.

Tables are tuples built once at import time and never mutated.
"""

import re

from ..domain.models import PatternRule


def _rule(pattern: str, description: str, flags: int = re.IGNORECASE) -> PatternRule:
    return PatternRule(re.compile(pattern, flags), description)


# Chat template / role markers used by instruction-tuned models
CHAT_TEMPLATE_MARKERS: tuple[PatternRule, ...] = (
    _rule(r"\[INST\]", "Chat template marker [INST]"),
    _rule(r"\[/INST\]", "Chat template marker [/INST]"),
    _rule(r"<\|im_start\|>", "Chat template start marker"),
    _rule(r"<\|im_end\|>", "Chat template end marker"),
    _rule(r"<\|system\|>", "System role marker"),
    _rule(r"<\|user\|>", "User role marker"),
    _rule(r"<\|assistant\|>", "Assistant role marker"),
)

INJECTION_KEYWORDS = re.compile(
    r"ignore|override|injection|instruction|system|prompt|respond|print|execute|eval",
    re.IGNORECASE,
)

HTML_COMMENT_OPEN = "<!--"
HTML_COMMENT_CLOSE = "-->"

BASE64_PAYLOAD = re.compile(r"base64\s*:\s*([A-Za-z0-9+/]{20,}={0,2})", re.IGNORECASE)

STRUCTURED_OVERRIDE = re.compile(
    r"(?:<!--|\{|\[)\s*(?:override|action|instruction|system)\s*[:=]\s*[\"']?"
    r"(?:true|print|ignore|execute)",
    re.IGNORECASE,
)

OVERRIDE_ATTEMPT = re.compile(
    r"\b(?:ignore|disregard|forget)\s+(?:previous|all|above)\s+"
    r"(?:instructions|prompts|commands)",
    re.IGNORECASE,
)

CRITICAL_PATTERNS: tuple[PatternRule, ...] = CHAT_TEMPLATE_MARKERS + (
    PatternRule(BASE64_PAYLOAD, "Base64 payload injection"),
    PatternRule(STRUCTURED_OVERRIDE, "Structured override injection"),
)

SUSPICIOUS_PATTERNS: tuple[PatternRule, ...] = (
    _rule(
        r"\bignore\s+(?:previous|all|above|prior)\s+(?:instructions|prompts|commands|rules)\b",
        "Instruction override attempt",
    ),
    _rule(
        r"\bdisregard\s+(?:previous|all|above|prior)\s+(?:instructions|prompts|commands|rules)\b",
        "Instruction override attempt",
    ),
    _rule(
        r"\bforget\s+(?:everything|all|previous|prior|past)\s+(?:instructions|prompts|commands)?\b",
        "Memory manipulation attempt",
    ),
    _rule(r"\byou\s+are\s+now\s+(?:a|an|the)\b", "Role manipulation attempt"),
    _rule(
        r"\byour\s+new\s+(?:role|task|instruction|job)\s+(?:is\b|:)",
        "Role manipulation attempt",
    ),
    _rule(r"\bact\s+as\s+if\s+you\s+(?:are|were)\b", "Identity manipulation"),
    _rule(r"^[ \t]*system\s*:", "System prompt injection", re.IGNORECASE | re.MULTILINE),
    _rule(r"\breturn\s+all\s+(?:data|information|content)\b", "Output manipulation"),
    _rule(
        r"\bprint\s+(?:all|everything|your)\s+(?:instructions|prompts|rules)\b",
        "Instruction extraction attempt",
    ),
    _rule(
        r"\bshow\s+(?:me\s+)?(?:your|the)\s+(?:instructions|prompts|system\s+message)\b",
        "Instruction extraction attempt",
    ),
)

LEGITIMATE_CONTEXTS: tuple[PatternRule, ...] = (
    _rule(
        r"system\s+(?:architecture|design|engineer|administrator|analyst|developer|admin|integration)",
        "Systems job title or skill",
    ),
    _rule(
        r"instruction\s+(?:manual|guide|document|set|materials|booklet)",
        "Technical writing",
    ),
    _rule(
        r"role\s*:\s*[\w ]+(?:engineer|manager|developer|architect|analyst|scientist|administrator)",
        "Job title",
    ),
    _rule(r"ignore\s+(?:case|whitespace|errors|warnings|files)", "Programming usage"),
    _rule(r"forget\s+(?:password|username|credentials)", "Account recovery feature"),
)
