"""Directives — profile instructions that take a path-like argument."""

DIRECTIVES = (
    "include",
    "blacklist",
    "blacklist-nolog",
    "noblacklist",
    "whitelist",
    "whitelist-ro",
    "nowhitelist",
    "read-only",
    "read-write",
    "noexec",
    "tmpfs",
    "mkdir",
    "mkfile",
    "bind",
    "ignore",
)
