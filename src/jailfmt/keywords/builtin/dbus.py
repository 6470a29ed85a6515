"""D-Bus filtering options for the session and system buses."""

DBUS_OPTIONS = (
    "dbus-user",
    "dbus-user.own",
    "dbus-user.talk",
    "dbus-user.see",
    "dbus-user.call",
    "dbus-user.broadcast",
    "dbus-system",
    "dbus-system.own",
    "dbus-system.talk",
    "dbus-system.see",
    "dbus-system.call",
    "dbus-system.broadcast",
)
