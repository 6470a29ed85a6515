"""Keyword catalog — builtin lists plus config/YAML extras, frozen on build."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

import yaml

from jailfmt.config.schema import JailfmtConfig
from jailfmt.keywords.builtin import BUILTIN_KEYWORDS
from jailfmt.keywords.models import KeywordCategory

CUSTOM_KEYWORDS_DIR = ".jailfmt-keywords"


class CatalogError(Exception):
    """Raised when an extra keyword source is malformed."""


class KeywordCatalog:
    """Read-only mapping from keyword to the category it was declared in.

    Lookups are exact and case-sensitive: ``net`` does not match ``network``
    and ``NOROOT`` does not match ``noroot``.
    """

    def __init__(self, entries: Iterable[Tuple[str, KeywordCategory]]) -> None:
        table: Dict[str, KeywordCategory] = {}
        for word, category in entries:
            # First declaration wins.
            table.setdefault(word, category)
        self._table: Mapping[str, KeywordCategory] = MappingProxyType(table)

    # ---- queries ----

    def classify(self, word: str) -> Optional[KeywordCategory]:
        return self._table.get(word)

    def keywords(self, category: Optional[KeywordCategory] = None) -> List[str]:
        """Keywords in declaration order, optionally limited to *category*."""
        return [w for w, c in self._table.items() if category is None or c is category]

    def categories(self) -> List[KeywordCategory]:
        return [c for c in KeywordCategory if any(v is c for v in self._table.values())]

    @property
    def table(self) -> Mapping[str, KeywordCategory]:
        return self._table

    def __contains__(self, word: object) -> bool:
        return word in self._table

    def __len__(self) -> int:
        return len(self._table)


def builtin_entries() -> List[Tuple[str, KeywordCategory]]:
    return [(word, cat) for cat, words in BUILTIN_KEYWORDS.items() for word in words]


# ---- extra keyword loading ----


def _is_word_list(value: object) -> bool:
    return isinstance(value, list) and all(isinstance(w, str) for w in value)


def _config_entries(config: JailfmtConfig) -> List[Tuple[str, KeywordCategory]]:
    entries: List[Tuple[str, KeywordCategory]] = []
    for f in dataclasses.fields(config.keywords):
        category = KeywordCategory.parse(f.name)
        words = getattr(config.keywords, f.name)
        if not _is_word_list(words):
            raise CatalogError(f"keywords.{f.name} must be a list of strings, got {words!r}")
        entries.extend((word, category) for word in words)
    return entries


def _load_yaml_keywords(path: Path) -> List[Tuple[str, KeywordCategory]]:
    """Read one YAML file of ``{category: ..., keywords: [...]}`` entries."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise CatalogError(f"Failed to read {path}: {exc}") from exc
    if data is None:
        return []
    if not isinstance(data, list):
        data = [data]
    entries: List[Tuple[str, KeywordCategory]] = []
    for entry in data:
        if not isinstance(entry, dict) or "category" not in entry:
            raise CatalogError(f"{path}: each entry needs a 'category' key")
        try:
            category = KeywordCategory.parse(str(entry["category"]))
        except ValueError as exc:
            raise CatalogError(f"{path}: unknown category {entry['category']!r}") from exc
        words = entry.get("keywords", [])
        if not _is_word_list(words):
            raise CatalogError(f"{path}: 'keywords' must be a list of strings, got {words!r}")
        entries.extend((word, category) for word in words)
    return entries


def load_custom_keywords(directory: Path) -> List[Tuple[str, KeywordCategory]]:
    """Load every YAML file in *directory*, in name order."""
    if not directory.is_dir():
        return []
    entries: List[Tuple[str, KeywordCategory]] = []
    for path in sorted(directory.iterdir()):
        if path.suffix in (".yaml", ".yml"):
            entries.extend(_load_yaml_keywords(path))
    return entries


def build_catalog(config: JailfmtConfig, root: Path) -> KeywordCatalog:
    """Builtin keywords, then config extras, then ``.jailfmt-keywords/*.yaml``."""
    entries = builtin_entries()
    entries.extend(_config_entries(config))
    entries.extend(load_custom_keywords(root / CUSTOM_KEYWORDS_DIR))
    return KeywordCatalog(entries)


DEFAULT_CATALOG = KeywordCatalog(builtin_entries())


def classify(word: str) -> Optional[KeywordCategory]:
    """Classify *word* against the builtin catalog."""
    return DEFAULT_CATALOG.classify(word)
