# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity tiers normalising the hadolint level vocabulary."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


_LEVEL_TO_SEVERITY: Final[dict[str, Severity]] = {
    "error": Severity.ERROR,
    "warning": Severity.WARNING,
}


def severity_from_level(level: object, default: Severity = Severity.INFO) -> Severity:
    """Return the :class:`Severity` tier matching a tool-reported ``level``.

    Matching is case-insensitive. Only ``error`` and ``warning`` are recognised;
    hadolint's ``info`` and ``style`` levels, unknown labels and non-string
    values all fall back to ``default``.

    Args:
        level: Level label reported by the tool.
        default: Severity returned when ``level`` is not recognised.

    Returns:
        Severity: Matching severity tier.
    """

    if not isinstance(level, str):
        return default
    return _LEVEL_TO_SEVERITY.get(level.strip().lower(), default)


__all__ = ["Severity", "severity_from_level"]
