# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; the wrapper passes argument lists
# directly and never enables ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Exit status and combined stdout/stderr of a finished command."""

    args: tuple[str, ...]
    returncode: int
    output: str


def _normalize_args(args: Sequence[str]) -> list[str]:
    """Return ``args`` with the executable resolved to an absolute path.

    Args:
        args: Command sequence whose first element names the executable.

    Returns:
        list[str]: Command sequence ready for :func:`subprocess.run`.

    Raises:
        ValueError: If ``args`` is empty.
        FileNotFoundError: If a bare executable name cannot be found on ``PATH``.
    """

    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def run_command(args: Sequence[str], *, input_text: str | None = None) -> CommandResult:
    """Run ``args`` to completion with stderr merged into stdout.

    When ``input_text`` is provided it is written to the process' standard input
    as UTF-8 and the stream is closed; otherwise stdin is attached to
    ``/dev/null``. The call blocks until the process exits and applies no
    timeout.

    Args:
        args: Command sequence to execute.
        input_text: Optional text fed to standard input.

    Returns:
        CommandResult: Exit status and combined output of the process.

    Raises:
        OSError: If the process cannot be launched.
    """

    normalized = _normalize_args(args)
    # Bandit: commands are built from resolved executables and fixed flags.
    completed = subprocess.run(  # nosec B603
        normalized,
        input=input_text,
        stdin=subprocess.DEVNULL if input_text is None else None,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        check=False,
        text=True,
        encoding="utf-8",
        errors="replace",
    )
    return CommandResult(
        args=tuple(normalized),
        returncode=completed.returncode,
        output=completed.stdout or "",
    )


__all__ = ["CommandResult", "run_command"]
