"""Load and merge configuration from .jailfmt.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from jailfmt.config.schema import (
    OUTPUT_FORMATS,
    FilesConfig,
    IndentConfig,
    JailfmtConfig,
    KeywordsConfig,
    OutputConfig,
)

CONFIG_FILENAME = ".jailfmt.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge_env_overrides(cfg: JailfmtConfig) -> None:
    """Apply JAILFMT_* environment variable overrides."""
    if val := os.environ.get("JAILFMT_INDENT_OFFSET"):
        try:
            if int(val) >= 0:
                cfg.indent.offset = int(val)
        except ValueError:
            pass
    if val := os.environ.get("JAILFMT_USE_TABS"):
        cfg.indent.use_tabs = val.lower() in ("1", "true", "yes")
    if val := os.environ.get("JAILFMT_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {
        k.replace("-", "_"): v for k, v in raw.items() if k.replace("-", "_") in valid_fields
    }
    return cls(**filtered)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_str_list(value: object) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def _validate(cfg: JailfmtConfig) -> None:
    if not _is_int(cfg.indent.offset) or cfg.indent.offset < 0:
        raise ConfigError(f"indent.offset must be a non-negative integer, got {cfg.indent.offset!r}")
    if not _is_int(cfg.indent.tab_width) or cfg.indent.tab_width < 1:
        raise ConfigError(f"indent.tab_width must be a positive integer, got {cfg.indent.tab_width!r}")
    if not isinstance(cfg.indent.use_tabs, bool):
        raise ConfigError(f"indent.use_tabs must be true or false, got {cfg.indent.use_tabs!r}")
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"output.format must be one of {', '.join(OUTPUT_FORMATS)}, got {cfg.output.format!r}"
        )
    for name in ("extensions", "exclude"):
        value = getattr(cfg.files, name)
        if not _is_str_list(value):
            raise ConfigError(f"files.{name} must be a list of strings, got {value!r}")
    for f in dataclasses.fields(cfg.keywords):
        value = getattr(cfg.keywords, f.name)
        if not _is_str_list(value):
            raise ConfigError(f"keywords.{f.name} must be a list of strings, got {value!r}")


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> JailfmtConfig:
    """Load, validate, and return a JailfmtConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = JailfmtConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = JailfmtConfig(
            indent=_build_section(raw, IndentConfig, "indent"),
            output=_build_section(raw, OutputConfig, "output"),
            files=_build_section(raw, FilesConfig, "files"),
            keywords=_build_section(raw, KeywordsConfig, "keywords"),
        )
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
