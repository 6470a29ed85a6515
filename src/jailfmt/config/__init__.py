"""Configuration loading, schema, and defaults."""

from jailfmt.config.loader import ConfigError, load_config
from jailfmt.config.schema import IndentConfig, JailfmtConfig

__all__ = [
    "ConfigError",
    "IndentConfig",
    "JailfmtConfig",
    "load_config",
]
