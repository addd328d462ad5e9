# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for severity tier mapping."""

from __future__ import annotations

import pytest

from dockerqa.core.severity import Severity, severity_from_level


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        ("error", Severity.ERROR),
        ("ERROR", Severity.ERROR),
        ("Warning", Severity.WARNING),
        ("info", Severity.INFO),
        ("style", Severity.INFO),
        ("fatal", Severity.INFO),
        ("", Severity.INFO),
    ],
)
def test_severity_from_level(level: str, expected: Severity) -> None:
    assert severity_from_level(level) is expected


def test_severity_from_level_non_string_uses_default() -> None:
    assert severity_from_level(3) is Severity.INFO
    assert severity_from_level(None, default=Severity.WARNING) is Severity.WARNING
