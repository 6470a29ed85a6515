"""Highlighting and indentation — classifier, indenter, spans."""

from jailfmt.highlight.classifier import classify_token, highlight, highlight_line, lines
from jailfmt.highlight.indenter import FLUSH_LEFT, format_text, indent_for_line
from jailfmt.highlight.models import HighlightResult, Span

__all__ = [
    "FLUSH_LEFT",
    "HighlightResult",
    "Span",
    "classify_token",
    "format_text",
    "highlight",
    "highlight_line",
    "indent_for_line",
    "lines",
]
