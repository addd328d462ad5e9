# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Collect the Dockerfiles to lint from user-supplied paths."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Final

from .config import FileSettings

LOGGER = logging.getLogger(__name__)

_SKIPPED_DIRS: Final[frozenset[str]] = frozenset({".git", ".hg", ".svn", ".venv", "node_modules", "__pycache__"})


def collect_targets(paths: Iterable[Path], settings: FileSettings) -> list[Path]:
    """Return the files to lint, de-duplicated, in discovery order.

    Files named explicitly are kept regardless of the configured patterns.
    Directories are walked recursively (sorted, skipping VCS and virtualenv
    folders) and only files matching ``settings.patterns`` are kept.

    Args:
        paths: Files or directories supplied by the caller.
        settings: File selection settings.

    Returns:
        list[Path]: Files to lint.
    """

    seen: set[Path] = set()
    targets: list[Path] = []

    def _add(candidate: Path) -> None:
        key = candidate.resolve()
        if key not in seen:
            seen.add(key)
            targets.append(candidate)

    for path in paths:
        if path.is_file():
            _add(path)
        elif path.is_dir():
            for found in _walk(path, settings):
                _add(found)
        else:
            LOGGER.warning("Skipping missing path: %s", path)
    return targets


def _walk(root: Path, settings: FileSettings) -> list[Path]:
    found: list[Path] = []
    for current, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if name not in _SKIPPED_DIRS)
        for filename in sorted(filenames):
            candidate = Path(current) / filename
            if settings.matches(candidate):
                found.append(candidate)
    return found


__all__ = ["collect_targets"]
