# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the dockerqa package."""

from __future__ import annotations

from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .severity import Severity

EXPECTED_EXIT_CODES: Final[frozenset[int]] = frozenset({0, 1})


class TextRange(BaseModel):
    """Half-open ``[start, end)`` interval of character offsets in a text buffer."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    end: int

    @model_validator(mode="after")
    def _check_non_empty(self) -> TextRange:
        """Reject empty or inverted ranges.

        Returns:
            TextRange: The validated range.

        Raises:
            ValueError: If ``end`` does not lie strictly after ``start``.
        """

        if self.end <= self.start:
            raise ValueError(f"range end {self.end} must be greater than start {self.start}")
        return self

    @property
    def length(self) -> int:
        """Return the number of characters covered by the range."""

        return self.end - self.start


class DiagnosticRecord(BaseModel):
    """Immutable finding reported by hadolint for one document line."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=1)
    message: str = Field(min_length=1)
    severity: Severity
    level: str = ""
    code: str | None = None
    range: TextRange | None = None

    @field_validator("message")
    @classmethod
    def _reject_blank_message(cls, value: str) -> str:
        """Ensure the message carries visible text.

        Args:
            value: Message supplied by the parser.

        Returns:
            str: The unchanged message.

        Raises:
            ValueError: If the message only contains whitespace.
        """

        if not value.strip():
            raise ValueError("diagnostic message must not be blank")
        return value


class LintStatus(str, Enum):
    """Enumerate the distinguishable outcomes of a lint pass."""

    MISSING_EXECUTABLE = "missing_executable"
    SPAWN_FAILED = "spawn_failed"
    CLEAN = "clean"
    REPORTED = "reported"


class LintReport(BaseModel):
    """Capture the outcome of one lint pass alongside its diagnostics.

    The pipeline collapses every failure to "fewer diagnostics"; this bundle
    keeps the reason visible to callers that want more than an empty list.
    """

    model_config = ConfigDict(frozen=True)

    status: LintStatus
    diagnostics: tuple[DiagnosticRecord, ...] = ()
    executable: str | None = None
    exit_code: int | None = None
    output: str = ""

    @property
    def ran(self) -> bool:
        """Return ``True`` when the linter process was actually executed."""

        return self.status in {LintStatus.CLEAN, LintStatus.REPORTED}

    @property
    def expected_exit(self) -> bool:
        """Return ``True`` when the tool exited with a documented status code."""

        return self.exit_code in EXPECTED_EXIT_CODES

    @classmethod
    def from_run(
        cls,
        *,
        diagnostics: list[DiagnosticRecord],
        executable: str,
        exit_code: int,
        output: str,
    ) -> LintReport:
        """Build a report for a completed tool run.

        Args:
            diagnostics: Records decoded from the tool output.
            executable: Path of the executable that was run.
            exit_code: Exit status reported by the process.
            output: Combined stdout/stderr captured from the process.

        Returns:
            LintReport: Report classified as ``CLEAN`` or ``REPORTED``.
        """

        status = LintStatus.REPORTED if diagnostics else LintStatus.CLEAN
        return cls(
            status=status,
            diagnostics=tuple(diagnostics),
            executable=executable,
            exit_code=exit_code,
            output=output,
        )


__all__ = [
    "EXPECTED_EXIT_CODES",
    "DiagnosticRecord",
    "LintReport",
    "LintStatus",
    "TextRange",
]
