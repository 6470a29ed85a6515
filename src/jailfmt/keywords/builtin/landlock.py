"""Landlock LSM filesystem rules."""

LANDLOCK_OPTIONS = (
    "landlock.enforce",
    "landlock.fs.read",
    "landlock.fs.write",
    "landlock.fs.makeipc",
    "landlock.fs.makedev",
    "landlock.fs.execute",
)
