"""Service-layer helpers (normalization, scoring, matching, composition)."""

__all__ = [
    "composer",
    "corpus_index",
    "intent",
    "matcher",
    "normalizer",
    "picker",
    "prefix",
    "similarity",
]
