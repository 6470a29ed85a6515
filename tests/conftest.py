"""Shared test fixtures — sample profiles and a temp profile tree."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def sample_profile() -> str:
    """An unindented profile mixing every keyword category."""
    return textwrap.dedent("""\
        # Firejail profile for firefox
        include firefox.local
        include globals.local

        noblacklist ${HOME}/.mozilla
        blacklist /usr/libexec
        whitelist ${HOME}/.mozilla
        mkdir ${HOME}/.cache/mozilla
        include whitelist-common.inc

        caps.drop all
        netfilter
        nonewprivs
        noroot
        private-bin firefox,sh # trimmed
        private-dev
        dbus-user filter
        dbus-user.own org.mozilla.firefox.*
        landlock.fs.read /usr
        keep-dev-shm
        allow-debuggers
        seccomp !chroot
    """)


@pytest.fixture
def sample_profile_formatted() -> str:
    """``sample_profile`` after formatting with the default offset."""
    return textwrap.dedent("""\
          # Firejail profile for firefox
        include firefox.local
        include globals.local

          noblacklist ${HOME}/.mozilla
        blacklist /usr/libexec
        whitelist ${HOME}/.mozilla
          mkdir ${HOME}/.cache/mozilla
        include whitelist-common.inc

          caps.drop all
          netfilter
          nonewprivs
          noroot
          private-bin firefox,sh # trimmed
          private-dev
          dbus-user filter
          dbus-user.own org.mozilla.firefox.*
          landlock.fs.read /usr
          keep-dev-shm
          allow-debuggers
          seccomp !chroot
    """)


@pytest.fixture
def profile_tree(tmp_path: Path) -> Path:
    """A directory holding profiles, an include, a local override and noise."""
    root = tmp_path / "profiles"
    root.mkdir()
    (root / "firefox.profile").write_text("noroot\ninclude firefox.local\n")
    (root / "firefox.local").write_text("  noblacklist /tmp\n")
    (root / "disable-common.inc").write_text("blacklist /boot\n")
    (root / "README.md").write_text("not a profile\n")
    return root
