"""Data models for tokenized profile text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from jailfmt.keywords.models import KeywordCategory


class TokenKind(str, Enum):
    COMMENT = "comment"
    KEYWORD = "keyword"
    VARIABLE = "variable"
    PATH = "path"
    WORD = "word"
    PUNCTUATION = "punctuation"


@dataclass(frozen=True, slots=True)
class Token:
    """A token with absolute offsets into the text it was cut from."""

    text: str
    start: int
    end: int
    kind: TokenKind = TokenKind.WORD
    category: Optional[KeywordCategory] = None  # set only for KEYWORD


@dataclass(frozen=True)
class Line:
    """One source line with its tokens and computed indentation."""

    number: int  # 1-based
    text: str  # without the line ending
    tokens: Tuple[Token, ...]
    indent: int
