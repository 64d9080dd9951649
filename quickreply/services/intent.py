"""Lightweight intent and language-style detection for adaptive answers."""
from __future__ import annotations

import re
from typing import Iterable

HINGLISH_HINTS = frozenset(
    {
        "kya", "kaise", "kaisa", "kaisi", "kyu", "kyun", "kab", "kahan", "kaun",
        "hai", "hain", "tha", "thi", "hoga", "hogi",
        "nahi", "nahin",
        "kar", "karo", "karna", "kare", "karu", "karein",
        "mujhe", "mera", "meri", "mere", "aap", "tum",
        "batao", "bata", "samjhao", "chahiye", "raha", "rahi",
        "aur", "ya", "yeh", "woh", "kuch", "sab",
        "bhai", "yaar", "accha", "acha", "theek", "thik",
    }
)

CASUAL_HINTS = [
    r"\bplz\b|\bpls\b",
    r"\bbro\b|\bbhai\b",
    r"\bthx\b|\btysm\b",
    r"\bk\s?r\b|\bkrna\b|\bkro\b",
]

HOW_TO_HINTS = frozenset(
    {"how", "setup", "install", "configure", "enable", "steps", "guide", "kaise", "kaisa"}
)

ERROR_HINTS = frozenset(
    {
        "error", "errors", "bug", "bugs", "issue", "issues", "problem", "problems",
        "crash", "crashing", "broken", "fail", "failed", "failing", "fix",
    }
)


def _matches(hints: list[str], text: str) -> bool:
    return any(re.search(pattern, text, flags=re.IGNORECASE) for pattern in hints)


def is_code_switched(raw_input: str, input_tokens: Iterable[str]) -> bool:
    """Return True when the text reads like casual Hinglish."""
    if any(token in HINGLISH_HINTS for token in input_tokens):
        return True
    return _matches(CASUAL_HINTS, raw_input or "")


def classify_query_intent(tokens: Iterable[str]) -> str:
    """Return a coarse intent label ("how_to", "error" or "general") for section labelling."""
    token_set = set(tokens)
    if token_set & HOW_TO_HINTS:
        return "how_to"
    if token_set & ERROR_HINTS:
        return "error"
    return "general"
