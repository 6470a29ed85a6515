"""Token classification and per-line highlight spans.

Highlight priority, highest first: comment, keyword, variable, path, word.
A comment starts at any ``#`` and swallows the rest of the line, so a
keyword after ``#`` is never reported.
"""

from __future__ import annotations

import dataclasses
import re
from typing import Iterator, List, Optional, Tuple

from jailfmt.highlight.indenter import DEFAULT_OFFSET, indent_for_line
from jailfmt.highlight.models import Span
from jailfmt.keywords.catalog import DEFAULT_CATALOG, KeywordCatalog
from jailfmt.keywords.models import KeywordCategory
from jailfmt.lexer.models import Line, Token, TokenKind
from jailfmt.lexer.tokenizer import split_lines, tokenize

VARIABLE_RE = re.compile(r"\$\{[A-Z_][A-Z0-9_]*\}")
PATH_RE = re.compile(r"/\S+")

_PRIORITY = {
    TokenKind.WORD: 0,
    TokenKind.PATH: 1,
    TokenKind.VARIABLE: 2,
    TokenKind.KEYWORD: 3,
    TokenKind.COMMENT: 4,
}

_Paint = Tuple[int, TokenKind, Optional[KeywordCategory]]


def classify_token(token: Token, catalog: KeywordCatalog = DEFAULT_CATALOG) -> Token:
    """Return *token* with its kind (and keyword category) filled in."""
    if token.kind in (TokenKind.COMMENT, TokenKind.PUNCTUATION):
        return token
    category = catalog.classify(token.text)
    if category is not None:
        return dataclasses.replace(token, kind=TokenKind.KEYWORD, category=category)
    if token.text.startswith("#"):
        kind = TokenKind.COMMENT
    elif VARIABLE_RE.search(token.text):
        kind = TokenKind.VARIABLE
    elif PATH_RE.search(token.text):
        kind = TokenKind.PATH
    else:
        kind = TokenKind.WORD
    return dataclasses.replace(token, kind=kind, category=None)


def highlight_line(
    text: str,
    line_no: int = 1,
    catalog: KeywordCatalog = DEFAULT_CATALOG,
) -> List[Span]:
    """Return the highlight spans of one line (no line ending).

    Every column is painted with the highest-priority match covering it;
    variable and path patterns are matched against the whole line, so
    ``${HOME}/.cache`` gives a variable span followed by a path span and
    ``/opt/app=1`` is one path. Punctuation outside a path is left unpainted.
    """
    paint: List[Optional[_Paint]] = [None] * len(text)

    def _paint(start: int, end: int, kind: TokenKind, category: Optional[KeywordCategory] = None) -> None:
        rank = _PRIORITY[kind]
        for i in range(start, end):
            current = paint[i]
            if current is None or current[0] < rank:
                paint[i] = (rank, kind, category)

    for token in tokenize(text, include_comments=True):
        if token.kind is TokenKind.PUNCTUATION:
            continue
        if token.kind is TokenKind.COMMENT:
            _paint(token.start, token.end, TokenKind.COMMENT)
            continue
        category = catalog.classify(token.text)
        if category is not None:
            _paint(token.start, token.end, TokenKind.KEYWORD, category)
            continue
        _paint(token.start, token.end, TokenKind.WORD)

    # Overlays run on the raw line; comments and keywords outrank them.
    for m in PATH_RE.finditer(text):
        _paint(m.start(), m.end(), TokenKind.PATH)
    for m in VARIABLE_RE.finditer(text):
        _paint(m.start(), m.end(), TokenKind.VARIABLE)

    spans: List[Span] = []
    i = 0
    while i < len(paint):
        current = paint[i]
        if current is None:
            i += 1
            continue
        j = i + 1
        while j < len(paint) and paint[j] == current:
            j += 1
        spans.append(Span(line_no, i, j, current[1], current[2]))
        i = j
    return spans


def highlight(source: str, catalog: KeywordCatalog = DEFAULT_CATALOG) -> Iterator[Span]:
    """Yield spans for every line of *source*, top to bottom."""
    for line_no, (body, _) in enumerate(split_lines(source), 1):
        yield from highlight_line(body, line_no, catalog)


def lines(
    source: str,
    catalog: KeywordCatalog = DEFAULT_CATALOG,
    offset: int = DEFAULT_OFFSET,
) -> Iterator[Line]:
    """Yield a classified, indented Line record for each line of *source*."""
    for line_no, (body, _) in enumerate(split_lines(source), 1):
        tokens = tuple(
            classify_token(t, catalog) for t in tokenize(body, include_comments=True)
        )
        yield Line(number=line_no, text=body, tokens=tokens, indent=indent_for_line(body, offset))
