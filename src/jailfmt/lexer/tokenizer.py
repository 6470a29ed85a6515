"""Forward tokenizer for firejail profile text.

Whitespace and ``#`` comments are skipped before each token. A token is
either a maximal run of punctuation characters or a maximal run of word
characters; word characters are everything else that is not whitespace or
``#``, so ``private-bin``, ``/usr/bin/firefox`` and ``${HOME}/.cache`` each
come out as one token.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from jailfmt.lexer.models import Token, TokenKind

COMMENT_START = "#"
PUNCTUATION = frozenset(",;=()[]<>|&!\"\\`")


def is_word_char(ch: str) -> bool:
    return not ch.isspace() and ch != COMMENT_START and ch not in PUNCTUATION


def tokenize(source: str, *, include_comments: bool = False) -> Iterator[Token]:
    """Yield tokens from *source* left to right.

    Comments run from ``#`` to the end of the line with no escaping. They are
    skipped unless *include_comments* is set, in which case they are yielded
    as COMMENT tokens (trailing ``\\r`` excluded).
    """
    pos = 0
    n = len(source)
    while True:
        while pos < n:
            ch = source[pos]
            if ch.isspace():
                pos += 1
            elif ch == COMMENT_START:
                eol = source.find("\n", pos)
                if eol == -1:
                    eol = n
                if include_comments:
                    text = source[pos:eol].rstrip("\r")
                    yield Token(text, pos, pos + len(text), TokenKind.COMMENT)
                pos = eol
            else:
                break
        if pos >= n:
            return

        start = pos
        if source[pos] in PUNCTUATION:
            while pos < n and source[pos] in PUNCTUATION:
                pos += 1
            kind = TokenKind.PUNCTUATION
        else:
            while pos < n and is_word_char(source[pos]):
                pos += 1
            kind = TokenKind.WORD
        yield Token(source[start:pos], start, pos, kind)


def first_token(line: str) -> Optional[Token]:
    """Return the first token of *line* after leading whitespace, or None."""
    return next(tokenize(line), None)


def split_lines(source: str) -> Iterator[Tuple[str, str]]:
    """Yield ``(body, line_ending)`` pairs; the ending is ``\\n``, ``\\r\\n`` or ``""``."""
    start = 0
    n = len(source)
    while start < n:
        eol = source.find("\n", start)
        if eol == -1:
            body, ending = source[start:], ""
            start = n
        else:
            body, ending = source[start:eol], "\n"
            start = eol + 1
        if ending and body.endswith("\r"):
            body, ending = body[:-1], "\r\n"
        yield body, ending
