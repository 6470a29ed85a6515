"""Rich terminal renderer — the profile text, coloured by span label."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from jailfmt.highlight.models import HighlightResult
from jailfmt.lexer.tokenizer import split_lines

_LABEL_STYLE = {
    "comment": "italic bright_black",
    "variable": "bold magenta",
    "path": "green",
    "directive": "bold blue",
    "option": "cyan",
    "private-option": "bold cyan",
    "dbus-option": "yellow",
    "special-option": "bold yellow",
    "landlock-option": "bright_blue",
    "allow-option": "bold red",
}


def style_for(label: str) -> str:
    """Style for a span label; plain words are unstyled."""
    return _LABEL_STYLE.get(label, "")


def render(results: Sequence[HighlightResult], *, console: Optional[Console] = None) -> None:
    """Print every result to stdout, one Rich Text per source line."""
    console = console or Console(highlight=False)
    for result in results:
        if len(results) > 1:
            console.rule(f"[bold]{escape(result.path)}[/bold]", style="dim")
        by_line = result.spans_by_line()
        for line_no, (body, _) in enumerate(split_lines(result.text), 1):
            text = Text(body)
            for span in by_line.get(line_no, []):
                style = style_for(span.label)
                if style:
                    text.stylize(style, span.start, span.end)
            console.print(text, soft_wrap=True)
