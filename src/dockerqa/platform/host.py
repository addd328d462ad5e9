# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Default host probes backed by the real filesystem, environment and processes."""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass, field
from pathlib import Path

from ..interfaces.host import CommandRunner, EnvironmentReader, FileProbe, SystemProbe
from ..runtime.process import run_command


def _is_file(path: str) -> bool:
    """Return ``True`` when ``path`` is an existing regular file."""

    try:
        return Path(path).is_file()
    except OSError:
        return False


def _getenv(name: str) -> str | None:
    """Return the environment variable ``name`` or ``None`` when unset."""

    return os.environ.get(name)


@dataclass(frozen=True, slots=True)
class HostServices:
    """Bundle the host probes consumed by resolution, execution and health checks.

    Tests substitute fakes for any field instead of touching the real
    filesystem or spawning processes.
    """

    is_file: FileProbe = field(default=_is_file)
    run: CommandRunner = field(default=run_command)
    getenv: EnvironmentReader = field(default=_getenv)
    system: SystemProbe = field(default=platform.system)


def default_host() -> HostServices:
    """Return host services bound to the running machine."""

    return HostServices()


__all__ = ["HostServices", "default_host"]
