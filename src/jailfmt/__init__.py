"""jailfmt — highlight and indent firejail sandbox profiles."""

__version__ = "0.1.0"
