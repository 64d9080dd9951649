"""Prefix-based routing of explicit catalog queries."""
from __future__ import annotations

import re

CATALOG_PREFIX = "@"
_PREFIX_RE = re.compile(r"^\s*@\s*")


def should_use_catalog(text: str) -> bool:
    """Return True when the user explicitly addressed the local catalog (``@topic``)."""
    return bool(text) and text.strip().startswith(CATALOG_PREFIX)


def strip_catalog_prefix(text: str) -> str:
    return _PREFIX_RE.sub("", text or "", count=1).strip()
