"""Ingestion utilities (catalog shape normalization, JSON loading)."""

from .catalog import CatalogError, load_catalog, normalize_keywords, normalize_responses

__all__ = ["CatalogError", "load_catalog", "normalize_keywords", "normalize_responses"]
