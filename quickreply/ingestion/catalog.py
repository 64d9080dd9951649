"""Catalog ingestion: coerce loosely-typed entries and load JSON catalogs."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Mapping, Sequence, Tuple, Union

from pydantic import ValidationError

from ..schemas import CatalogFile

LOGGER = logging.getLogger(__name__)

RawResponses = Mapping[str, Union[str, Sequence[str]]]


class CatalogError(ValueError):
    """Raised when a catalog file cannot be read or validated."""


def _as_variants(value: Union[str, Sequence[str], None]) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    return tuple(item for item in value if isinstance(item, str) and item.strip())


def normalize_responses(raw: RawResponses) -> Dict[str, Tuple[str, ...]]:
    """Return topic -> non-empty tuple of responses, dropping topics with nothing usable."""
    responses: Dict[str, Tuple[str, ...]] = {}
    for key, value in raw.items():
        variants = _as_variants(value)
        if not variants:
            LOGGER.warning("Dropping topic %r: no non-empty responses", key)
            continue
        responses[key] = variants
    return responses


def normalize_keywords(raw: Mapping[str, str]) -> Dict[str, str]:
    keywords: Dict[str, str] = {}
    for phrase, target in raw.items():
        if not phrase or not phrase.strip() or not target or not target.strip():
            LOGGER.warning("Dropping keyword entry %r -> %r", phrase, target)
            continue
        keywords[phrase] = target
    return keywords


def load_catalog(path: Union[str, Path]) -> Tuple[Dict[str, Tuple[str, ...]], Dict[str, str]]:
    """
    Load a JSON catalog of the form {"responses": {...}, "keywords": {...}}.

    Raises:
        CatalogError: If the file is missing, not JSON, or has the wrong shape.
    """
    catalog_path = Path(path)
    try:
        payload = json.loads(catalog_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CatalogError(f"Catalog file not found: {catalog_path}") from exc
    except UnicodeDecodeError as exc:
        raise CatalogError(f"Catalog file is not valid UTF-8: {catalog_path}: {exc}") from exc
    except OSError as exc:
        raise CatalogError(f"Catalog file cannot be read: {catalog_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog file is not valid JSON: {catalog_path}: {exc}") from exc

    try:
        catalog = CatalogFile.model_validate(payload)
    except ValidationError as exc:
        raise CatalogError(f"Catalog file has an invalid shape: {catalog_path}: {exc}") from exc

    responses = normalize_responses(catalog.responses)
    keywords = normalize_keywords(catalog.keywords)
    LOGGER.info(
        "Loaded catalog %s: %d topics, %d keywords", catalog_path.name, len(responses), len(keywords)
    )
    return responses, keywords
