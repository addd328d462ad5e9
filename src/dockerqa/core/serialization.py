# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for converting diagnostics and lint reports to serializable data."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from .models import DiagnosticRecord, LintReport

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = "JsonScalar | list[JsonValue] | dict[str, JsonValue]"


def serialize_diagnostic(record: DiagnosticRecord) -> dict[str, JsonValue]:
    """Convert a diagnostic record into a JSON-friendly mapping.

    The range is flattened to a ``[start, end]`` pair, or ``None`` when absent.
    """

    payload: dict[str, JsonValue] = record.model_dump(mode="json", exclude={"range"})
    payload["range"] = None if record.range is None else [record.range.start, record.range.end]
    return payload


def serialize_report(report: LintReport, *, path: str | None = None) -> dict[str, JsonValue]:
    """Serialize a lint report including its diagnostics.

    Args:
        report: Outcome of one lint pass.
        path: Optional display path of the linted document.

    Returns:
        dict[str, JsonValue]: JSON-compatible representation of ``report``.
    """

    payload: dict[str, JsonValue] = {"path": path}
    payload.update(report.model_dump(mode="json", include={"status", "executable", "exit_code"}))
    payload["diagnostics"] = [serialize_diagnostic(record) for record in report.diagnostics]
    return payload


def dumps(payload: JsonValue) -> str:
    """Return ``payload`` rendered as indented JSON."""

    return json.dumps(payload, indent=2, sort_keys=False)


__all__ = ["JsonScalar", "JsonValue", "dumps", "serialize_diagnostic", "serialize_report"]
