"""Starter .jailfmt.toml template."""

DEFAULT_TOML = """\
# jailfmt configuration

[indent]
offset = 2                # columns for every line except include/blacklist/whitelist
use_tabs = false
tab_width = 8

[output]
format = "terminal"       # terminal | json | semantic

[files]
extensions = [".profile", ".inc", ".local"]
# exclude = ["disable-*.inc"]

[keywords]
# Extra keywords per category, e.g. for options newer than this release.
# option = ["my-new-option"]
# private_option = []
"""
