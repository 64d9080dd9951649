"""Pre-normalized view over the response and keyword catalogs."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from ..schemas import CanonicalTopic, KeywordIntent
from .normalizer import normalize, tokenize

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CorpusIndex:
    topics: Dict[str, CanonicalTopic] = field(default_factory=dict)
    by_normalized_key: Dict[str, CanonicalTopic] = field(default_factory=dict)
    keywords: List[KeywordIntent] = field(default_factory=list)

    def get(self, topic_key: str) -> Optional[CanonicalTopic]:
        return self.topics.get(topic_key)

    def __contains__(self, topic_key: object) -> bool:
        return topic_key in self.topics


def build_corpus_index(
    responses: Mapping[str, Sequence[str]],
    keywords: Optional[Mapping[str, str]] = None,
) -> CorpusIndex:
    """
    Normalize and tokenize every topic key and keyword phrase once.

    Args:
        responses: Topic key to non-empty response sequence (already normalized
            by ``ingestion.catalog.normalize_responses``).
        keywords: Keyword phrase to target topic key.

    Returns:
        CorpusIndex with topics in catalog order. Response text is stored
        untouched and never tokenized.
    """
    topics: Dict[str, CanonicalTopic] = {}
    by_normalized_key: Dict[str, CanonicalTopic] = {}

    for key, variants in responses.items():
        normalized_key = normalize(key)
        if not normalized_key:
            LOGGER.warning("Skipping topic %r: key is empty after normalization", key)
            continue
        topic = CanonicalTopic(
            key=key,
            normalized_key=normalized_key,
            tokens=tuple(tokenize(key, remove_stop_words=True)),
            responses=tuple(variants),
        )
        topics[key] = topic
        if normalized_key in by_normalized_key:
            LOGGER.warning(
                "Topic %r normalizes like %r; exact lookups keep the first",
                key,
                by_normalized_key[normalized_key].key,
            )
        else:
            by_normalized_key[normalized_key] = topic

    intents: List[KeywordIntent] = []
    for phrase, target in (keywords or {}).items():
        normalized_phrase = normalize(phrase)
        if not normalized_phrase:
            LOGGER.warning("Skipping keyword %r: phrase is empty after normalization", phrase)
            continue
        if target not in topics:
            LOGGER.debug("Keyword %r targets unknown topic %r; it will never match", phrase, target)
        intents.append(
            KeywordIntent(
                phrase=phrase,
                normalized_phrase=normalized_phrase,
                tokens=tuple(tokenize(phrase, remove_stop_words=True)),
                target_topic_key=target,
            )
        )

    LOGGER.info("Corpus index built: %d topics, %d keyword intents", len(topics), len(intents))
    return CorpusIndex(topics=topics, by_normalized_key=by_normalized_key, keywords=intents)
