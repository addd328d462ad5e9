# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate the hadolint executable on the host machine."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Final

from ..platform.constants import (
    CANDIDATE_PATHS,
    DEFAULT_EXECUTABLE,
    PATH_SEARCH_COMMANDS,
    PlatformKind,
    detect_platform,
)
from ..platform.host import HostServices, default_host

if TYPE_CHECKING:
    from ..config import LinterSettings

LOGGER = logging.getLogger(__name__)

_ENV_REFERENCE: Final[re.Pattern[str]] = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")
_NAME_PLACEHOLDER: Final[str] = "{name}"


class PathResolver:
    """Find an executable path for hadolint without requiring configuration.

    Resolution checks an optional explicit path, then the platform candidate
    table in order, then falls back to ``which``/``where``. Nothing is cached;
    every call repeats the search.
    """

    def __init__(
        self,
        host: HostServices | None = None,
        *,
        executable_name: str = DEFAULT_EXECUTABLE,
        executable: str | None = None,
    ) -> None:
        """Initialise the resolver.

        Args:
            host: Host probes used for filesystem, environment and process access.
            executable_name: Bare executable name searched for.
            executable: Optional explicit path checked before the candidate table.
        """

        self._host = host or default_host()
        self._name = executable_name
        self._explicit = executable

    @classmethod
    def from_settings(cls, settings: LinterSettings, host: HostServices | None = None) -> PathResolver:
        """Build a resolver from the ``[linter]`` configuration section."""

        explicit = str(settings.executable) if settings.executable is not None else None
        return cls(host, executable_name=settings.executable_name, executable=explicit)

    @property
    def executable_name(self) -> str:
        """Return the bare executable name searched for."""

        return self._name

    def platform(self) -> PlatformKind:
        """Return the platform class of the host."""

        return detect_platform(self._host.system())

    def candidates(self) -> list[str]:
        """Return the expanded candidate paths for the current platform, in order.

        Templates referencing an unset environment variable are omitted.
        """

        expanded: list[str] = []
        for template in CANDIDATE_PATHS[self.platform()]:
            candidate = self._expand(template)
            if candidate is not None:
                expanded.append(candidate)
        return expanded

    def resolve(self) -> str | None:
        """Return the path of the executable, or ``None`` when it cannot be found.

        Returns:
            str | None: First existing explicit or candidate path, else the first
            line reported by the PATH search command, else ``None``.
        """

        if self._explicit:
            if self._host.is_file(self._explicit):
                LOGGER.info("Using configured hadolint at: %s", self._explicit)
                return self._explicit
            LOGGER.warning("Configured hadolint path does not exist: %s", self._explicit)

        for candidate in self.candidates():
            if self._host.is_file(candidate):
                LOGGER.info("Found hadolint at: %s", candidate)
                return candidate

        return self._search_path()

    def _search_path(self) -> str | None:
        """Ask the OS path-search command for the executable."""

        command = (PATH_SEARCH_COMMANDS[self.platform()], self._name)
        try:
            result = self._host.run(command)
        except OSError as exc:
            LOGGER.error("Error searching PATH for %s: %s", self._name, exc)
            return None
        if result.returncode != 0:
            LOGGER.debug("%s exited with status %d", command[0], result.returncode)
            return None
        for raw_line in result.output.splitlines():
            found = raw_line.strip()
            if found:
                LOGGER.info("Found %s on PATH at: %s", self._name, found)
                return found
        return None

    def _expand(self, template: str) -> str | None:
        """Expand ``${VAR}`` references and the name placeholder in ``template``."""

        missing = False

        def _replace(match: re.Match[str]) -> str:
            nonlocal missing
            value = self._host.getenv(match.group(1))
            if not value:
                missing = True
                return ""
            return value

        expanded = _ENV_REFERENCE.sub(_replace, template)
        if missing:
            return None
        return expanded.replace(_NAME_PLACEHOLDER, self._name)


__all__ = ["PathResolver"]
