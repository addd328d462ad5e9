# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Platform classes and the hadolint candidate path tables."""

from __future__ import annotations

from enum import Enum
from typing import Final


class PlatformKind(str, Enum):
    """Host platform classes with distinct executable layouts."""

    MACOS = "macos"
    UNIX = "unix"
    WINDOWS = "windows"
    UNKNOWN = "unknown"


DEFAULT_EXECUTABLE: Final[str] = "hadolint"

# Ordered; the first existing entry wins. ``{name}`` is the executable name and
# ``${VAR}`` references are expanded from the environment at lookup time.
CANDIDATE_PATHS: Final[dict[PlatformKind, tuple[str, ...]]] = {
    PlatformKind.MACOS: (
        "/usr/local/bin/{name}",
        "/opt/homebrew/bin/{name}",
    ),
    PlatformKind.UNIX: (
        "/usr/local/bin/{name}",
        "/usr/bin/{name}",
        "/bin/{name}",
    ),
    PlatformKind.WINDOWS: (
        "${ProgramFiles}\\Hadolint\\{name}.exe",
        "${LocalAppData}\\Hadolint\\{name}.exe",
        "C:\\tools\\hadolint\\{name}.exe",
    ),
    PlatformKind.UNKNOWN: (),
}

PATH_SEARCH_COMMANDS: Final[dict[PlatformKind, str]] = {
    PlatformKind.MACOS: "which",
    PlatformKind.UNIX: "which",
    PlatformKind.WINDOWS: "where",
    PlatformKind.UNKNOWN: "which",
}

_UNIX_SYSTEMS: Final[frozenset[str]] = frozenset({"linux", "aix", "sunos"})


def detect_platform(system: str) -> PlatformKind:
    """Return the :class:`PlatformKind` for an operating system name.

    Args:
        system: Name as returned by :func:`platform.system` (``"Darwin"``,
            ``"Linux"``, ``"Windows"`` ...).

    Returns:
        PlatformKind: Matching platform class, ``UNKNOWN`` when unrecognised.
    """

    name = system.strip().lower()
    if name == "darwin" or name.startswith("mac"):
        return PlatformKind.MACOS
    if name.startswith("win") or name.startswith("cygwin") or name.startswith("msys"):
        return PlatformKind.WINDOWS
    if name in _UNIX_SYSTEMS or name.endswith("bsd"):
        return PlatformKind.UNIX
    return PlatformKind.UNKNOWN


__all__ = [
    "CANDIDATE_PATHS",
    "DEFAULT_EXECUTABLE",
    "PATH_SEARCH_COMMANDS",
    "PlatformKind",
    "detect_platform",
]
