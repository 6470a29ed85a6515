"""JSON reporter — highlight spans for editors and scripts."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

from jailfmt.highlight.models import HighlightResult


def to_dict(results: Sequence[HighlightResult]) -> Dict[str, Any]:
    """Convert highlight results to a JSON-serialisable dict."""
    files: List[Dict[str, Any]] = []
    for result in results:
        files.append({
            "path": result.path,
            "spans": [
                {
                    "line": s.line,
                    "start": s.start,
                    "end": s.end,
                    "kind": s.kind.value,
                    **({"category": s.category.value} if s.category else {}),
                }
                for s in result.spans
            ],
        })
    return {"version": "1.0", "files": files}


def render(results: Sequence[HighlightResult]) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(results), indent=2)
