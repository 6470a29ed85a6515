"""Highlight span model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from jailfmt.keywords.models import KeywordCategory
from jailfmt.lexer.models import TokenKind


@dataclass(frozen=True)
class Span:
    """A highlighted column range on one line (end exclusive)."""

    line: int  # 1-based
    start: int  # 0-based column
    end: int
    kind: TokenKind
    category: Optional[KeywordCategory] = None

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def label(self) -> str:
        """Keyword category for keywords, the token kind otherwise."""
        if self.category is not None:
            return self.category.value
        return self.kind.value


@dataclass
class HighlightResult:
    """Spans computed for one profile."""

    path: str
    text: str
    spans: List[Span] = field(default_factory=list)

    def spans_by_line(self) -> Dict[int, List[Span]]:
        grouped: Dict[int, List[Span]] = {}
        for span in self.spans:
            grouped.setdefault(span.line, []).append(span)
        return grouped
