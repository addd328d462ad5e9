# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Hadolint lint pipeline: resolve, execute, parse and map diagnostics."""

from __future__ import annotations

from .executor import LintExecutor
from .health import HealthCheck, HealthReport, HealthState
from .parser import OutputParser, ParsedEntry, RejectedEntry
from .ranges import map_line
from .resolver import PathResolver

__all__ = [
    "HealthCheck",
    "HealthReport",
    "HealthState",
    "LintExecutor",
    "OutputParser",
    "ParsedEntry",
    "PathResolver",
    "RejectedEntry",
    "map_line",
]
