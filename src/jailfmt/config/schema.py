"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

OutputFormat = Literal["terminal", "json", "semantic"]

OUTPUT_FORMATS: tuple[str, ...] = ("terminal", "json", "semantic")


@dataclass
class IndentConfig:
    offset: int = 2  # columns for every line that is not flush-left
    use_tabs: bool = False
    tab_width: int = 8


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"


@dataclass
class FilesConfig:
    extensions: List[str] = field(default_factory=lambda: [".profile", ".inc", ".local"])
    exclude: List[str] = field(default_factory=list)


@dataclass
class KeywordsConfig:
    """Extra keywords per category, merged into the builtin catalog."""

    directive: List[str] = field(default_factory=list)
    option: List[str] = field(default_factory=list)
    private_option: List[str] = field(default_factory=list)
    dbus_option: List[str] = field(default_factory=list)
    special_option: List[str] = field(default_factory=list)
    landlock_option: List[str] = field(default_factory=list)
    allow_option: List[str] = field(default_factory=list)


@dataclass
class JailfmtConfig:
    indent: IndentConfig = field(default_factory=IndentConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    files: FilesConfig = field(default_factory=FilesConfig)
    keywords: KeywordsConfig = field(default_factory=KeywordsConfig)
