"""Flag-style options, plus the special and allow- option groups."""

OPTIONS = (
    "apparmor",
    "caps",
    "caps.drop",
    "caps.keep",
    "cpu",
    "disable-mnt",
    "dns",
    "env",
    "hostname",
    "ipc-namespace",
    "join-or-start",
    "machine-id",
    "memory-deny-write-execute",
    "name",
    "net",
    "netfilter",
    "netns",
    "nice",
    "no3d",
    "nodvd",
    "nogroups",
    "noinput",
    "nonewprivs",
    "noroot",
    "nosound",
    "notv",
    "nou2f",
    "novideo",
    "protocol",
    "quiet",
    "restrict-namespaces",
    "rlimit-as",
    "rlimit-fsize",
    "rlimit-nofile",
    "rlimit-nproc",
    "rlimit-sigpending",
    "rmenv",
    "seccomp",
    "seccomp.block-secondary",
    "seccomp.drop",
    "seccomp.keep",
    "shell",
    "timeout",
    "tracelog",
    "x11",
)

# Options that relax a default restriction of the sandbox.
SPECIAL_OPTIONS = (
    "allusers",
    "deterministic-exit-code",
    "keep-config-pulse",
    "keep-dev-shm",
    "keep-fd",
    "keep-shell-rc",
    "keep-var-tmp",
    "writable-etc",
    "writable-run-user",
    "writable-var",
    "writable-var-log",
)

ALLOW_OPTIONS = (
    "allow-debuggers",
)
