"""Two-path topic matcher: keyword intents vs. whole-corpus fuzzy scoring."""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..config import Config, get_config
from ..schemas import MatchCandidate, MatchPath
from .corpus_index import CorpusIndex
from .normalizer import normalize, tokenize
from .similarity import fuzzy_token_score, token_overlap

LOGGER = logging.getLogger(__name__)

GREETING_WORDS = ("hi", "hello", "hey", "thanks", "thank you")

KEYWORD_SUBSTRING_SCORE = 0.90
KEYWORD_OVERLAP_WEIGHT = 0.8
KEYWORD_FUZZY_WEIGHT = 0.75
CORPUS_SUBSTRING_SCORE = 0.88


def _contains_phrase(text: str, phrase: str) -> bool:
    """Whole-token containment: "hi" is in "oh hi there" but not in "this"."""
    return f" {phrase} " in f" {text} "


def _length_ratio(a: List[str], b: Tuple[str, ...]) -> float:
    if not a or not b:
        return 0.0
    return min(len(a), len(b)) / max(len(a), len(b))


def resolve_winner(
    best_keyword: Optional[MatchCandidate],
    best_corpus: Optional[MatchCandidate],
    config: Config,
) -> Optional[MatchCandidate]:
    """
    Pick between the best keyword and best corpus candidates.

    A keyword intent wins when it clears KEYWORD_WIN_THRESHOLD and beats the
    corpus by at least KEYWORD_MARGIN; otherwise the corpus wins if it clears
    CORPUS_WIN_THRESHOLD; otherwise a keyword clearing
    KEYWORD_FALLBACK_THRESHOLD wins; otherwise nothing does.
    """
    keyword_score = best_keyword.score if best_keyword else 0.0
    corpus_score = best_corpus.score if best_corpus else 0.0

    if (
        best_keyword
        and keyword_score >= config.KEYWORD_WIN_THRESHOLD
        and keyword_score >= corpus_score + config.KEYWORD_MARGIN
    ):
        return best_keyword
    if best_corpus and corpus_score >= config.CORPUS_WIN_THRESHOLD:
        return best_corpus
    if best_keyword and keyword_score >= config.KEYWORD_FALLBACK_THRESHOLD:
        return best_keyword
    return None


class Matcher:
    """Scores free text against a CorpusIndex and returns at most one winner."""

    def __init__(self, index: CorpusIndex, config: Optional[Config] = None):
        self.index = index
        self.config = config or get_config()

    def find_match(self, raw_input: str) -> Optional[MatchCandidate]:
        cleaned = normalize(raw_input)
        if not cleaned:
            return None
        input_tokens = tokenize(cleaned, remove_stop_words=True)

        exact = self.index.by_normalized_key.get(cleaned)
        if exact is not None:
            LOGGER.debug("Exact topic hit: %s", exact.key)
            return MatchCandidate(topic_key=exact.key, score=1.0, path=MatchPath.EXACT)

        best_keyword = self._best_keyword(cleaned, input_tokens)

        greeting = self._greeting(cleaned)
        if greeting is not None:
            LOGGER.debug("Greeting shortcut: %s", greeting.topic_key)
            return greeting

        best_corpus = self._best_corpus(cleaned, input_tokens)
        winner = resolve_winner(best_keyword, best_corpus, self.config)
        LOGGER.debug(
            "Match scores for %r: keyword=%s corpus=%s winner=%s",
            cleaned,
            best_keyword,
            best_corpus,
            winner,
        )
        return winner

    def _best_keyword(self, cleaned: str, input_tokens: List[str]) -> Optional[MatchCandidate]:
        best: Optional[MatchCandidate] = None
        for intent in self.index.keywords:
            if intent.target_topic_key not in self.index:
                continue
            if cleaned == intent.normalized_phrase:
                score = 1.0
            elif _contains_phrase(cleaned, intent.normalized_phrase):
                score = KEYWORD_SUBSTRING_SCORE
            else:
                score = max(
                    KEYWORD_OVERLAP_WEIGHT * token_overlap(input_tokens, intent.tokens),
                    KEYWORD_FUZZY_WEIGHT * fuzzy_token_score(input_tokens, intent.tokens),
                )
            if best is None or score > best.score:
                best = MatchCandidate(
                    topic_key=intent.target_topic_key, score=score, path=MatchPath.KEYWORD
                )
        return best

    def _greeting(self, cleaned: str) -> Optional[MatchCandidate]:
        for word in GREETING_WORDS:
            if not cleaned.startswith(word + " "):
                continue
            topic = self.index.by_normalized_key.get(word)
            if topic is not None:
                return MatchCandidate(topic_key=topic.key, score=1.0, path=MatchPath.GREETING)
        return None

    def _best_corpus(self, cleaned: str, input_tokens: List[str]) -> Optional[MatchCandidate]:
        cfg = self.config
        best: Optional[MatchCandidate] = None
        for topic in self.index.topics.values():
            if cleaned == topic.normalized_key:
                score = 1.0
            elif _contains_phrase(cleaned, topic.normalized_key):
                score = CORPUS_SUBSTRING_SCORE
            else:
                score = (
                    cfg.OVERLAP_WEIGHT * token_overlap(input_tokens, topic.tokens)
                    + cfg.FUZZY_WEIGHT * fuzzy_token_score(input_tokens, topic.tokens)
                    + cfg.LENGTH_WEIGHT * _length_ratio(input_tokens, topic.tokens)
                )
            score = min(score, 1.0)
            if best is None or score > best.score:
                best = MatchCandidate(topic_key=topic.key, score=score, path=MatchPath.CORPUS)
        return best
