"""private-* options — mount a private copy of a directory."""

PRIVATE_OPTIONS = (
    "private",
    "private-bin",
    "private-cache",
    "private-cwd",
    "private-dev",
    "private-etc",
    "private-home",
    "private-lib",
    "private-opt",
    "private-srv",
    "private-tmp",
)
