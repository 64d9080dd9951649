"""Token-level similarity scores used by the matcher."""
from __future__ import annotations

from typing import Sequence

NEAR_MISS_CREDIT = 0.8
MIN_PARTIAL_TOKEN_LEN = 4  # shorter tokens only score on a verbatim hit


def token_overlap(a: Sequence[str], b: Sequence[str]) -> float:
    """Shared distinct tokens over the larger distinct-token count."""
    set_a, set_b = set(a), set(b)
    if not set_a or not set_b:
        return 0.0
    return len(set_a & set_b) / max(len(set_a), len(set_b))


def is_near_miss(a: str, b: str) -> bool:
    """True when ``a`` and ``b`` are at most one insert, delete or substitution apart."""
    if a == b:
        return True
    len_a, len_b = len(a), len(b)
    if abs(len_a - len_b) > 1:
        return False

    i = j = edits = 0
    while i < len_a and j < len_b:
        if a[i] == b[j]:
            i += 1
            j += 1
            continue
        edits += 1
        if edits > 1:
            return False
        if len_a > len_b:
            i += 1
        elif len_b > len_a:
            j += 1
        else:
            i += 1
            j += 1
    # a trailing unmatched character counts as one more edit
    edits += (len_a - i) + (len_b - j)
    return edits <= 1


def fuzzy_token_score(input_tokens: Sequence[str], candidate_tokens: Sequence[str]) -> float:
    if not input_tokens or not candidate_tokens:
        return 0.0
    candidates = set(candidate_tokens)
    credit = 0.0
    for token in input_tokens:
        if token in candidates:
            credit += 1.0
        elif len(token) >= MIN_PARTIAL_TOKEN_LEN and any(
            is_near_miss(token, candidate) for candidate in candidate_tokens
        ):
            credit += NEAR_MISS_CREDIT
    return credit / max(len(input_tokens), len(candidate_tokens))
