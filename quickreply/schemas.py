"""Pydantic models for catalog entries, match candidates and answers."""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MatchPath(str, Enum):
    EXACT = "exact"
    KEYWORD = "keyword"
    GREETING = "greeting"
    CORPUS = "corpus"


class CanonicalTopic(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    normalized_key: str
    tokens: Tuple[str, ...] = ()
    responses: Tuple[str, ...]

    @field_validator("responses")
    @classmethod
    def _responses_not_empty(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ValueError("a topic needs at least one response")
        return value


class KeywordIntent(BaseModel):
    model_config = ConfigDict(frozen=True)

    phrase: str
    normalized_phrase: str
    tokens: Tuple[str, ...] = ()
    target_topic_key: str


class MatchCandidate(BaseModel):
    """Winning topic for a single query, discarded after the call."""

    model_config = ConfigDict(frozen=True)

    topic_key: str
    score: float = Field(..., ge=0.0, le=1.0)
    path: MatchPath


class ComposedAnswer(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    topic_key: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    path: MatchPath
    composed: bool = False


class CatalogFile(BaseModel):
    """On-disk catalog: topic responses plus keyword phrases."""

    model_config = ConfigDict(extra="ignore")

    responses: Dict[str, Union[str, List[str]]] = Field(default_factory=dict)
    keywords: Dict[str, str] = Field(default_factory=dict)
    description: Optional[str] = None
