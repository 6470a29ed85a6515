"""Keyword category model."""

from __future__ import annotations

from enum import Enum


class KeywordCategory(str, Enum):
    """Which keyword list a profile keyword was declared in.

    Categories stay distinct so renderers can style them differently.
    """

    DIRECTIVE = "directive"
    OPTION = "option"
    PRIVATE_OPTION = "private-option"
    DBUS_OPTION = "dbus-option"
    SPECIAL_OPTION = "special-option"
    LANDLOCK_OPTION = "landlock-option"
    ALLOW_OPTION = "allow-option"

    @classmethod
    def parse(cls, name: str) -> "KeywordCategory":
        """Accept ``private-option`` as well as ``private_option``."""
        return cls(name.strip().replace("_", "-"))
