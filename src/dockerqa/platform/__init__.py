# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Platform-specific heuristics (executable locations, host probes)."""

from __future__ import annotations

from .constants import CANDIDATE_PATHS, DEFAULT_EXECUTABLE, PATH_SEARCH_COMMANDS, PlatformKind, detect_platform
from .host import HostServices, default_host

__all__ = [
    "CANDIDATE_PATHS",
    "DEFAULT_EXECUTABLE",
    "PATH_SEARCH_COMMANDS",
    "HostServices",
    "PlatformKind",
    "default_host",
    "detect_platform",
]
