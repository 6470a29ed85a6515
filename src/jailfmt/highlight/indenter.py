"""Line indentation and whole-text formatting.

Profiles have no blocks, so there is no indentation stack: every line gets
the same offset except lines whose first token is a flush-left directive.
"""

from __future__ import annotations

from typing import List, Optional

from jailfmt.config.schema import IndentConfig
from jailfmt.lexer.tokenizer import first_token, split_lines

DEFAULT_OFFSET = 2
FLUSH_LEFT: frozenset[str] = frozenset({"include", "blacklist", "whitelist"})


def indent_for_line(line: str, offset: int = DEFAULT_OFFSET) -> int:
    """Return the indentation (in columns) *line* should have."""
    token = first_token(line)
    if token is not None and token.text in FLUSH_LEFT:
        return 0
    return offset


def leading_whitespace(columns: int, *, use_tabs: bool = False, tab_width: int = 8) -> str:
    if use_tabs:
        tabs, spaces = divmod(columns, tab_width)
        return "\t" * tabs + " " * spaces
    return " " * columns


def format_line(line: str, config: Optional[IndentConfig] = None) -> str:
    """Re-indent a single line (no line ending). Blank lines come back empty."""
    cfg = config or IndentConfig()
    body = line.lstrip()
    if not body:
        return ""
    indent = indent_for_line(body, cfg.offset)
    return leading_whitespace(indent, use_tabs=cfg.use_tabs, tab_width=cfg.tab_width) + body


def format_text(source: str, config: Optional[IndentConfig] = None) -> str:
    """Re-indent every line of *source*, preserving line endings.

    >>> format_text("noblacklist /tmp\\ninclude whitelist-common.inc\\n")
    '  noblacklist /tmp\\ninclude whitelist-common.inc\\n'
    """
    out: List[str] = []
    for body, ending in split_lines(source):
        out.append(format_line(body, config))
        out.append(ending)
    return "".join(out)
