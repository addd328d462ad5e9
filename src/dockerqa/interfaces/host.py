# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Host probes injected into path resolution and tool execution."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ..runtime.process import CommandResult


@runtime_checkable
class FileProbe(Protocol):
    """Report whether a path exists as a regular file."""

    def __call__(self, path: str) -> bool:
        """Return ``True`` when ``path`` names an existing file."""

        raise NotImplementedError


@runtime_checkable
class CommandRunner(Protocol):
    """Run a command to completion, merging stderr into stdout."""

    def __call__(self, args: Sequence[str], *, input_text: str | None = None) -> CommandResult:
        """Execute ``args`` and return its result.

        Implementations raise :class:`OSError` when the process cannot be launched.
        """

        raise NotImplementedError


@runtime_checkable
class EnvironmentReader(Protocol):
    """Read a single environment variable."""

    def __call__(self, name: str) -> str | None:
        """Return the value of ``name`` or ``None`` when unset."""

        raise NotImplementedError


@runtime_checkable
class SystemProbe(Protocol):
    """Return the host operating system name (``platform.system`` style)."""

    def __call__(self) -> str:
        """Return the operating system name, e.g. ``"Linux"``."""

        raise NotImplementedError


__all__ = ["CommandRunner", "EnvironmentReader", "FileProbe", "SystemProbe"]
