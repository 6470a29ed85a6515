"""Lexer — token models and the forward tokenizer."""

from jailfmt.lexer.models import Line, Token, TokenKind
from jailfmt.lexer.tokenizer import PUNCTUATION, first_token, split_lines, tokenize

__all__ = [
    "PUNCTUATION",
    "Line",
    "Token",
    "TokenKind",
    "first_token",
    "split_lines",
    "tokenize",
]
