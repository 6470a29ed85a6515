"""LSP semantic-tokens encoder.

Each span becomes five integers: delta line, delta start column (relative
to the previous span when on the same line), length, token type index and
a zero modifier bitset. Plain words are not emitted.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Sequence

from jailfmt.highlight.models import HighlightResult, Span
from jailfmt.keywords.models import KeywordCategory

TOKEN_TYPES: tuple[str, ...] = (
    "comment",
    "variable",
    "path",
    *(c.value for c in KeywordCategory),
)
_TYPE_INDEX = {name: i for i, name in enumerate(TOKEN_TYPES)}


def legend() -> Dict[str, List[str]]:
    return {"tokenTypes": list(TOKEN_TYPES), "tokenModifiers": []}


def encode(spans: Iterable[Span]) -> List[int]:
    """Encode *spans* with the relative five-integer layout."""
    data: List[int] = []
    prev_line = 1
    prev_start = 0
    for span in sorted(spans, key=lambda s: (s.line, s.start)):
        token_type = _TYPE_INDEX.get(span.label)
        if token_type is None:
            continue
        delta_line = span.line - prev_line
        delta_start = span.start - prev_start if delta_line == 0 else span.start
        data.extend((delta_line, delta_start, span.length, token_type, 0))
        prev_line, prev_start = span.line, span.start
    return data


def to_dict(results: Sequence[HighlightResult]) -> Dict[str, Any]:
    return {
        "legend": legend(),
        "files": [{"path": r.path, "data": encode(r.spans)} for r in results],
    }


def render(results: Sequence[HighlightResult]) -> str:
    """Return semantic tokens as a JSON string."""
    return json.dumps(to_dict(results), indent=2)
