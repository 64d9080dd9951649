"""Local-first topic matching and canned answer composition."""

from .engine import LocalAnswerEngine
from .schemas import ComposedAnswer, MatchCandidate, MatchPath

__all__ = ["ComposedAnswer", "LocalAnswerEngine", "MatchCandidate", "MatchPath"]
