"""Local answer engine: match free text to a canned topic and compose the reply."""
from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Union

from .config import Config, get_config
from .ingestion.catalog import load_catalog, normalize_keywords, normalize_responses
from .schemas import ComposedAnswer, MatchCandidate, MatchPath
from .services.composer import compose_answer
from .services.corpus_index import CorpusIndex, build_corpus_index
from .services.matcher import GREETING_WORDS, Matcher
from .services.picker import pick_response
from .services.prefix import should_use_catalog, strip_catalog_prefix

LOGGER = logging.getLogger(__name__)


class LocalAnswerEngine:
    """
    Resolve user text against a static response catalog without any network call.

    The corpus index is built lazily on first use and never changes afterwards,
    so a built engine can be queried from several callers at once. Pass a seeded
    ``random.Random`` as ``rng`` for deterministic variant selection.
    """

    def __init__(
        self,
        responses: Mapping[str, Union[str, Sequence[str]]],
        keywords: Optional[Mapping[str, str]] = None,
        *,
        rng: Optional[random.Random] = None,
        config: Optional[Config] = None,
    ):
        self._raw_responses = responses
        self._raw_keywords = keywords or {}
        self._rng = rng or random.Random()
        self.config = config or get_config()
        self._index: Optional[CorpusIndex] = None
        self._matcher: Optional[Matcher] = None

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs) -> "LocalAnswerEngine":
        responses, keywords = load_catalog(path)
        return cls(responses, keywords, **kwargs)

    def build_index(self) -> CorpusIndex:
        if self._index is None:
            index = build_corpus_index(
                normalize_responses(self._raw_responses),
                normalize_keywords(self._raw_keywords),
            )
            self._matcher = Matcher(index, self.config)
            self._index = index
        return self._index

    def available_topics(self) -> List[str]:
        return list(self.build_index().topics)

    def match(self, text: str) -> Optional[MatchCandidate]:
        self.build_index()
        return self._matcher.find_match(text)

    def resolve(self, text: str) -> Optional[ComposedAnswer]:
        """Run the full pipeline and return the answer with its match diagnostics."""
        if should_use_catalog(text):
            text = strip_catalog_prefix(text)
        candidate = self.match(text)
        if candidate is None:
            LOGGER.debug("No local match for %r", text)
            return None
        topic = self._index.get(candidate.topic_key)
        if topic is None:
            return None

        response = pick_response(topic, self._rng)
        if candidate.path is MatchPath.GREETING or topic.normalized_key in GREETING_WORDS:
            return ComposedAnswer(
                text=response,
                topic_key=topic.key,
                confidence=candidate.score,
                path=candidate.path,
            )

        answer = compose_answer(text, topic.key, response, candidate.score, self.config)
        if answer is None:
            return None
        return ComposedAnswer(
            text=answer,
            topic_key=topic.key,
            confidence=candidate.score,
            path=candidate.path,
            composed=answer != response,
        )

    def find_match(self, text: str) -> Optional[str]:
        """
        Return a ready-to-display answer, or None so the caller can fall back.

        An explicit catalog query such as ``"@firewall"`` is accepted; the prefix is
        stripped before matching and composing.
        """
        answer = self.resolve(text)
        return answer.text if answer else None
