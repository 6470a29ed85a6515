"""Keyword catalog — categories, builtin lists, lookup."""

from jailfmt.keywords.catalog import (
    DEFAULT_CATALOG,
    CatalogError,
    KeywordCatalog,
    build_catalog,
    classify,
)
from jailfmt.keywords.models import KeywordCategory

__all__ = [
    "DEFAULT_CATALOG",
    "CatalogError",
    "KeywordCatalog",
    "KeywordCategory",
    "build_catalog",
    "classify",
]
