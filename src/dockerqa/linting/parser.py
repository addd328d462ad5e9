# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decode hadolint JSON output into diagnostic records."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Final

from ..core.models import DiagnosticRecord
from ..core.serialization import JsonValue
from ..core.severity import severity_from_level
from ..core.text import TextBuffer
from .ranges import map_line

LOGGER = logging.getLogger(__name__)

LINE_KEY: Final[str] = "line"
MESSAGE_KEY: Final[str] = "message"
LEVEL_KEY: Final[str] = "level"
CODE_KEY: Final[str] = "code"
LOGGED_OUTPUT_LIMIT: Final[int] = 200


@dataclass(frozen=True, slots=True)
class ParsedEntry:
    """Required fields extracted from one well-formed output entry."""

    line: int
    message: str
    level: str
    code: str | None = None


@dataclass(frozen=True, slots=True)
class RejectedEntry:
    """Output entry that could not be interpreted, with the reason."""

    position: int
    reason: str
    raw: JsonValue


EntryResult = ParsedEntry | RejectedEntry


def abbreviate(output: str, limit: int = LOGGED_OUTPUT_LIMIT) -> str:
    """Return ``output`` stripped and cut to ``limit`` characters for log messages."""

    stripped = output.strip()
    if len(stripped) <= limit:
        return stripped
    return f"{stripped[:limit]}... ({len(stripped) - limit} more characters)"


def decode_output(output: str) -> list[JsonValue] | None:
    """Decode ``output`` as a top-level JSON array.

    Blank output is treated as an empty array. Invalid JSON and non-array
    documents return ``None``.

    Args:
        output: Combined output captured from the linter.

    Returns:
        list[JsonValue] | None: Array elements, or ``None`` when undecodable.
    """

    stripped = output.strip()
    if not stripped:
        return []
    try:
        payload = json.loads(stripped)
    except (ValueError, RecursionError):
        # JSONDecodeError is a ValueError; oversized integers and deep nesting
        # raise plain ValueError and RecursionError.
        return None
    if not isinstance(payload, list):
        return None
    return payload


def extract_entry(raw: JsonValue, position: int) -> EntryResult:
    """Return the explicit parse result for a single array element.

    Args:
        raw: Decoded JSON element.
        position: Index of the element inside the array.

    Returns:
        EntryResult: :class:`ParsedEntry` when all required fields are usable,
        otherwise :class:`RejectedEntry` describing the first problem found.
    """

    if not isinstance(raw, Mapping):
        return RejectedEntry(position, "entry is not an object", raw)
    line = raw.get(LINE_KEY)
    # bool is an int subclass; JSON true/false is not a line number.
    if isinstance(line, bool) or not isinstance(line, int):
        return RejectedEntry(position, f"'{LINE_KEY}' is missing or not an integer", raw)
    if line < 1:
        return RejectedEntry(position, f"'{LINE_KEY}' must be positive, got {line}", raw)
    message = raw.get(MESSAGE_KEY)
    if not isinstance(message, str) or not message.strip():
        return RejectedEntry(position, f"'{MESSAGE_KEY}' is missing or blank", raw)
    level = raw.get(LEVEL_KEY)
    if not isinstance(level, str):
        return RejectedEntry(position, f"'{LEVEL_KEY}' is missing or not a string", raw)
    code = raw.get(CODE_KEY)
    return ParsedEntry(
        line=line,
        message=message.strip(),
        level=level,
        code=code if isinstance(code, str) and code else None,
    )


class OutputParser:
    """Turn hadolint's JSON diagnostics into :class:`DiagnosticRecord` values.

    One malformed entry never discards the batch: each element is extracted
    independently and rejected entries are skipped.
    """

    def parse_entries(self, output: str) -> list[EntryResult]:
        """Return the per-entry results for ``output``.

        Args:
            output: Combined output captured from the linter.

        Returns:
            list[EntryResult]: One result per array element, in input order.
            Empty when the output is blank or undecodable.
        """

        items = decode_output(output)
        if items is None:
            LOGGER.warning("Failed to parse hadolint output: %s", abbreviate(output))
            return []
        return [extract_entry(item, position) for position, item in enumerate(items)]

    def parse(self, output: str, buffer: TextBuffer) -> list[DiagnosticRecord]:
        """Decode ``output`` and map every valid entry onto ``buffer``.

        Args:
            output: Combined output captured from the linter.
            buffer: Line-indexed view of the linted document.

        Returns:
            list[DiagnosticRecord]: Records for the well-formed entries, in input order.
        """

        return self.build_records(self.parse_entries(output), buffer)

    @staticmethod
    def build_records(entries: Sequence[EntryResult], buffer: TextBuffer) -> list[DiagnosticRecord]:
        """Materialise :class:`DiagnosticRecord` values from parsed entries.

        Args:
            entries: Explicit per-entry results.
            buffer: Line-indexed view of the linted document.

        Returns:
            list[DiagnosticRecord]: One record per :class:`ParsedEntry`.
        """

        records: list[DiagnosticRecord] = []
        for entry in entries:
            if isinstance(entry, RejectedEntry):
                LOGGER.debug("Skipping invalid issue #%d (%s): %r", entry.position, entry.reason, entry.raw)
                continue
            records.append(
                DiagnosticRecord(
                    line=entry.line,
                    message=entry.message,
                    severity=severity_from_level(entry.level),
                    level=entry.level,
                    code=entry.code,
                    range=map_line(buffer, entry.line),
                )
            )
        return records


__all__ = [
    "EntryResult",
    "OutputParser",
    "ParsedEntry",
    "RejectedEntry",
    "abbreviate",
    "decode_output",
    "extract_entry",
]
