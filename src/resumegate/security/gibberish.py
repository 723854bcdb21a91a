"""Statistical scoring of garbage and attack payloads.

Six independent signals each add to a single integer score. Text scoring at
or above ``GIBBERISH_THRESHOLD`` is treated as non-human or malicious.
"""

import re
from dataclasses import dataclass, field

GIBBERISH_THRESHOLD = 10

BLOCK_SIZE = 50
BLOCK_STEP = 10
BLOCK_ALPHA_RATIO = 0.2
MIN_RANDOM_BLOCKS = 3
RANDOM_BLOCK_WEIGHT = 3

SPECIAL_CHAR_RATIO = 0.35
SPECIAL_CHAR_WEIGHT = 8

NO_VOWEL_RUN_LENGTH = 15
MIN_NO_VOWEL_RUNS = 5
NO_VOWEL_WEIGHT = 2

SYMBOL_LINE_MIN_LENGTH = 10
SYMBOL_LINE_RATIO = 0.7
MIN_SYMBOL_LINES = 10

UNICODE_ABUSE_WEIGHT = 5

MIN_NONSENSE_MATCHES = 2
NONSENSE_REPETITION_RATIO = 2
NONSENSE_WEIGHT = 3

_ALPHA = re.compile(r"[a-zA-Z]")
_SPECIAL_CHARS = re.compile(r"""[!@#$%^&*()_+\-=\[\]{}|\\:;"'<>,.?/~`]""")
_NO_VOWEL_RUN = re.compile(r"[^aeiouAEIOU\s]{%d,}" % NO_VOWEL_RUN_LENGTH)
_NON_ALPHA_NON_SPACE = re.compile(r"[^a-zA-Z\s]")
_UNICODE_SYMBOLS = re.compile(r"[■□▪▫●○◆◇★☆►◄▲▼λ∑∏∫≈≠±]")
_SEPARATOR_ABUSE = re.compile(r"\|{3,}|={5,}|-{5,}")
_NONSENSE = re.compile(r"\b\w+\s*-\s*[^a-zA-Z\s]{10,}")


@dataclass
class GibberishScore:
    is_gibberish: bool
    score: int
    reason: str = ""
    details: list[str] = field(default_factory=list)


def count_random_blocks(text: str) -> int:
    """Count sliding windows that are mostly non-alphabetic."""
    count = 0
    for start in range(0, len(text) - BLOCK_SIZE + 1, BLOCK_STEP):
        block = text[start : start + BLOCK_SIZE]
        if len(_ALPHA.findall(block)) / BLOCK_SIZE < BLOCK_ALPHA_RATIO:
            count += 1
    return count


def special_char_ratio(text: str) -> float:
    if not text:
        return 0.0
    return len(_SPECIAL_CHARS.findall(text)) / len(text)


def count_no_vowel_runs(text: str) -> int:
    return len(_NO_VOWEL_RUN.findall(text))


def count_symbol_heavy_lines(text: str) -> int:
    count = 0
    for line in text.split("\n"):
        if len(line.strip()) < SYMBOL_LINE_MIN_LENGTH:
            continue
        if len(_NON_ALPHA_NON_SPACE.findall(line)) / len(line) > SYMBOL_LINE_RATIO:
            count += 1
    return count


def has_unicode_abuse(text: str) -> bool:
    return bool(_UNICODE_SYMBOLS.search(text) or _SEPARATOR_ABUSE.search(text))


def repeated_nonsense_ratio(text: str) -> int:
    """Return floor(total / unique) for "word - <symbols>" runs, or 0."""
    matches = _NONSENSE.findall(text)
    if len(matches) < MIN_NONSENSE_MATCHES:
        return 0
    ratio = len(matches) / len(set(matches))
    return int(ratio) if ratio >= NONSENSE_REPETITION_RATIO else 0


def score_gibberish(text: str) -> GibberishScore:
    """Score text for gibberish and attack payload signals."""
    if not text or not text.strip():
        return GibberishScore(is_gibberish=False, score=0)

    score = 0
    details: list[str] = []

    random_blocks = count_random_blocks(text)
    if random_blocks >= MIN_RANDOM_BLOCKS:
        score += random_blocks * RANDOM_BLOCK_WEIGHT
        details.append(f"{random_blocks} random character blocks detected")

    ratio = special_char_ratio(text)
    if ratio > SPECIAL_CHAR_RATIO:
        score += SPECIAL_CHAR_WEIGHT
        details.append(f"High special character ratio: {ratio * 100:.1f}%")

    no_vowel_runs = count_no_vowel_runs(text)
    if no_vowel_runs >= MIN_NO_VOWEL_RUNS:
        score += no_vowel_runs * NO_VOWEL_WEIGHT
        details.append(f"{no_vowel_runs} gibberish sequences (no vowels) found")

    symbol_lines = count_symbol_heavy_lines(text)
    if symbol_lines >= MIN_SYMBOL_LINES:
        score += symbol_lines
        details.append(f"{symbol_lines} lines with excessive symbols (>70%)")

    if has_unicode_abuse(text):
        score += UNICODE_ABUSE_WEIGHT
        details.append("Unusual Unicode symbols or separator abuse detected")

    repetition = repeated_nonsense_ratio(text)
    if repetition:
        score += repetition * NONSENSE_WEIGHT
        details.append(f"Repeated nonsense patterns found (repetition ratio {repetition})")

    is_gibberish = score >= GIBBERISH_THRESHOLD
    reason = ""
    if is_gibberish:
        reason = (
            f"Resume contains obvious gibberish or attack payload "
            f"(score: {score}/{GIBBERISH_THRESHOLD} threshold). "
            f"Details: {'; '.join(details)}"
        )
    return GibberishScore(is_gibberish=is_gibberish, score=score, reason=reason, details=details)
