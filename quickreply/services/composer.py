"""Restructure long canned answers into summary + key points + next step."""
from __future__ import annotations

import logging
import re
from typing import List, Optional

from ..config import Config, get_config
from ..prompts.answer_templates import (
    CODE_LEAD_IN,
    CONFIDENCE_LINE,
    NEXT_STEP_HINTS,
    SECTION_LABELS,
    SEPARATOR,
    SUMMARY_HEADING,
)
from .intent import classify_query_intent, is_code_switched
from .normalizer import tokenize

LOGGER = logging.getLogger(__name__)

CODE_BLOCK_RE = re.compile(r"```[\s\S]*?```")
_CODE_SPLIT_RE = re.compile(r"(```[\s\S]*?```)")
_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")
_LIST_LINE_RE = re.compile(r"^[ \t]*(?:[-*+•]|\d+[.)])[ \t]+(.+?)[ \t]*$", re.MULTILINE)
_MARKER_RE = re.compile(r"^\s*(?:[-*+•]|\d+[.)])\s+")
_DEDUPE_RE = re.compile(r"[^a-z0-9]")

PASS_THROUGH_MAX_CHARS = 160
SUMMARY_FALLBACK_CHARS = 180
MAX_KEY_POINTS = 4
MIN_POINT_CHARS = 20


def _flatten(text: str) -> str:
    return " ".join(text.split())


def _split_sentences(text: str) -> List[str]:
    return [unit.strip() for unit in _SENTENCE_SPLIT_RE.split(_flatten(text)) if unit.strip()]


def split_units(text: str) -> List[str]:
    """Split into sentence-like units; fenced code blocks stay whole."""
    if not CODE_BLOCK_RE.search(text):
        return _split_sentences(text)
    units: List[str] = []
    # odd indices of a capturing split are the fenced blocks
    for position, part in enumerate(_CODE_SPLIT_RE.split(text)):
        if position % 2:
            units.append(part)
        elif part.strip():
            units.extend(_split_sentences(part))
    return units


def extract_key_points(raw_response: str, units: List[str]) -> List[str]:
    limit = MAX_KEY_POINTS
    prose = CODE_BLOCK_RE.sub("\n", raw_response)
    list_items = [match.group(1) for match in _LIST_LINE_RE.finditer(prose)]
    if len(list_items) >= 2:
        return list_items[:limit]

    points: List[str] = []
    seen = set()
    for unit in units:
        if unit.startswith("```"):
            continue
        point = _MARKER_RE.sub("", unit).strip()
        if len(point) < MIN_POINT_CHARS:
            continue
        key = _DEDUPE_RE.sub("", point.lower())
        if key in seen:
            continue
        seen.add(key)
        points.append(point)
        if len(points) >= limit:
            break
    return points


def confidence_tag(confidence: float, config: Config) -> str:
    if confidence >= config.HIGH_CONFIDENCE:
        return "High"
    if confidence >= config.MEDIUM_CONFIDENCE:
        return "Medium"
    return "Low"


def compose_answer(
    raw_input: str,
    topic_key: str,
    raw_response: Optional[str],
    confidence: float,
    config: Optional[Config] = None,
) -> Optional[str]:
    """
    Build the final answer text for a matched topic.

    Short single-line responses are returned unchanged. Longer ones are
    rearranged into a quick summary, up to MAX_KEY_POINTS labelled points,
    any fenced code kept verbatim, and a confidence-tagged next-step line.

    Args:
        raw_input: The user's original text, used for intent and style hints.
        topic_key: Matched topic key (logging only).
        raw_response: Canned response chosen for the topic.
        confidence: Match score in [0, 1].
        config: Optional configuration override.

    Returns:
        The answer text, or None when the canned response is blank.
    """
    if not raw_response or not raw_response.strip():
        return None
    cfg = config or get_config()
    if len(raw_response) <= PASS_THROUGH_MAX_CHARS and "\n" not in raw_response:
        return raw_response

    code_blocks: List[str] = []
    for block in CODE_BLOCK_RE.findall(raw_response):
        if block not in code_blocks:
            code_blocks.append(block)
    pure_code = bool(CODE_BLOCK_RE.fullmatch(raw_response.strip()))
    units = split_units(raw_response)

    if code_blocks and units and units[0].startswith("```"):
        summary = CODE_LEAD_IN
    elif len(units) > 1:
        summary = units[0]
    else:
        summary = _flatten(raw_response)[:SUMMARY_FALLBACK_CHARS].strip()

    points = extract_key_points(raw_response, units)

    input_tokens = tokenize(raw_input)
    intent = classify_query_intent(input_tokens)
    style = "hinglish" if is_code_switched(raw_input, input_tokens) else "en"
    tag = confidence_tag(confidence, cfg)

    lines = [SUMMARY_HEADING, summary, ""]
    if points and not pure_code:
        lines.append(f"**{SECTION_LABELS[intent]}**")
        for number, point in enumerate(points, start=1):
            lines.append(f"{number}. {point}" if intent == "how_to" else f"- {point}")
        lines.append("")
    for block in code_blocks:
        if block not in summary:
            lines.extend([block, ""])
    lines.append(SEPARATOR)
    lines.append(CONFIDENCE_LINE.format(tag=tag, hint=NEXT_STEP_HINTS[intent][style]))

    LOGGER.debug(
        "Composed answer for topic %s: intent=%s style=%s points=%d confidence=%s",
        topic_key,
        intent,
        style,
        len(points),
        tag,
    )
    return "\n".join(lines)
