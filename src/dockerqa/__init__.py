# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Hadolint-backed Dockerfile validation with offset-precise diagnostics."""

from __future__ import annotations

from importlib import metadata

from .core.models import DiagnosticRecord, LintReport, LintStatus, TextRange
from .core.severity import Severity
from .core.text import LineIndexedText, TextBuffer
from .linting.executor import LintExecutor
from .linting.parser import OutputParser
from .linting.ranges import map_line
from .linting.resolver import PathResolver

__all__ = [
    "DiagnosticRecord",
    "LineIndexedText",
    "LintExecutor",
    "LintReport",
    "LintStatus",
    "OutputParser",
    "PathResolver",
    "Severity",
    "TextBuffer",
    "TextRange",
    "__version__",
    "map_line",
]

try:
    __version__ = metadata.version("dockerqa")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
