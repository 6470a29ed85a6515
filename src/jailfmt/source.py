"""Profile input/output — path discovery, read, in-place write."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from fnmatch import fnmatch
from pathlib import Path
from typing import Iterable, List

from jailfmt.config.schema import FilesConfig

STDIN = "-"


class SourceError(Exception):
    """Raised when a profile cannot be found, read, or written."""


@dataclass(frozen=True)
class Source:
    """A profile and its full text."""

    path: str  # "-" for standard input
    text: str


def _is_excluded(path: Path, exclude: List[str]) -> bool:
    return any(fnmatch(path.name, pat) or fnmatch(str(path), pat) for pat in exclude)


def discover(paths: Iterable[str], files: FilesConfig) -> List[str]:
    """Expand directories into profile files; plain files are kept as given."""
    found: List[str] = []
    for raw in paths:
        if raw == STDIN:
            found.append(raw)
            continue
        p = Path(raw)
        if p.is_dir():
            for child in sorted(p.rglob("*")):
                if (
                    child.is_file()
                    and child.suffix in files.extensions
                    and not _is_excluded(child, files.exclude)
                ):
                    found.append(str(child))
        else:
            found.append(raw)
    return found


def read_source(path: str) -> Source:
    """Read one profile. Line endings are kept as they are on disk."""
    if path == STDIN:
        try:
            return Source(path, sys.stdin.read())
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceError(f"cannot read standard input: {exc}") from exc
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return Source(path, f.read())
    except FileNotFoundError as exc:
        raise SourceError(f"no such file: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceError(f"cannot read {path}: {exc}") from exc


def read_sources(paths: Iterable[str], files: FilesConfig) -> List[Source]:
    """Read every input up front so a failure leaves no partial output."""
    return [read_source(p) for p in discover(paths, files)]


def write_source(path: str, text: str) -> None:
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as exc:
        raise SourceError(f"cannot write {path}: {exc}") from exc
