"""Built-in keyword lists — aggregate all categories."""

from jailfmt.keywords.builtin.dbus import DBUS_OPTIONS
from jailfmt.keywords.builtin.directives import DIRECTIVES
from jailfmt.keywords.builtin.landlock import LANDLOCK_OPTIONS
from jailfmt.keywords.builtin.options import ALLOW_OPTIONS, OPTIONS, SPECIAL_OPTIONS
from jailfmt.keywords.builtin.private import PRIVATE_OPTIONS
from jailfmt.keywords.models import KeywordCategory

BUILTIN_KEYWORDS: dict[KeywordCategory, tuple[str, ...]] = {
    KeywordCategory.DIRECTIVE: DIRECTIVES,
    KeywordCategory.OPTION: OPTIONS,
    KeywordCategory.PRIVATE_OPTION: PRIVATE_OPTIONS,
    KeywordCategory.DBUS_OPTION: DBUS_OPTIONS,
    KeywordCategory.SPECIAL_OPTION: SPECIAL_OPTIONS,
    KeywordCategory.LANDLOCK_OPTION: LANDLOCK_OPTIONS,
    KeywordCategory.ALLOW_OPTION: ALLOW_OPTIONS,
}

__all__ = ["BUILTIN_KEYWORDS"]
