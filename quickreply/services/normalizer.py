"""Text normalization and tokenization shared by the matcher and composer."""
from __future__ import annotations

import re
from typing import List, Optional

_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")

STOP_WORDS = frozenset(
    {
        "a", "an", "the",
        "is", "are", "was", "were", "be", "been", "am",
        "do", "does", "did", "can", "could", "would", "should", "will",
        "to", "of", "in", "on", "at", "for", "with", "by", "from", "into", "about",
        "and", "or", "but",
        "i", "me", "my", "you", "your", "we", "us", "our", "it", "its",
        "this", "that", "these", "those",
        "please",
    }
)


def normalize(text: Optional[str]) -> str:
    """Lowercase, drop punctuation and collapse whitespace."""
    if not text:
        return ""
    lowered = _NON_WORD_RE.sub("", text.lower())
    return _WHITESPACE_RE.sub(" ", lowered.strip())


def tokenize(text: Optional[str], remove_stop_words: bool = False) -> List[str]:
    tokens = [token for token in normalize(text).split(" ") if token]
    if remove_stop_words:
        return [token for token in tokens if token not in STOP_WORDS]
    return tokens
