# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run hadolint over a document and collect its diagnostics."""

from __future__ import annotations

import logging
from typing import Final

from ..core.models import EXPECTED_EXIT_CODES, DiagnosticRecord, LintReport, LintStatus
from ..core.text import LineIndexedText, TextBuffer
from ..platform.host import HostServices, default_host
from .parser import OutputParser, abbreviate
from .resolver import PathResolver

LOGGER = logging.getLogger(__name__)

LINT_ARGS: Final[tuple[str, ...]] = ("--format", "json", "-")


class LintExecutor:
    """Own the subprocess lifecycle of a single hadolint pass.

    ``run`` and ``run_report`` never raise: a missing executable, a failed
    spawn, an unexpected exit status or unreadable output all degrade to fewer
    diagnostics. The call blocks until the process exits and imposes no timeout.
    """

    def __init__(
        self,
        resolver: PathResolver | None = None,
        *,
        host: HostServices | None = None,
        parser: OutputParser | None = None,
    ) -> None:
        """Initialise the executor.

        Args:
            resolver: Executable resolver; built from ``host`` when omitted.
            host: Host probes used to spawn the linter process.
            parser: Output parser; a default :class:`OutputParser` when omitted.
        """

        self._host = host or default_host()
        self._resolver = resolver or PathResolver(self._host)
        self._parser = parser or OutputParser()

    @property
    def resolver(self) -> PathResolver:
        """Return the resolver used to locate hadolint."""

        return self._resolver

    def run(self, content: str, buffer: TextBuffer | None = None) -> list[DiagnosticRecord]:
        """Lint ``content`` and return its diagnostics in reported order.

        Args:
            content: Full document text written to the linter's stdin.
            buffer: Line-indexed view of ``content``; built from it when omitted.

        Returns:
            list[DiagnosticRecord]: Diagnostics decoded from the tool output.
        """

        return list(self.run_report(content, buffer).diagnostics)

    def run_report(self, content: str, buffer: TextBuffer | None = None) -> LintReport:
        """Lint ``content`` and return the outcome with its diagnostics.

        Args:
            content: Full document text written to the linter's stdin.
            buffer: Line-indexed view of ``content``; built from it when omitted.

        Returns:
            LintReport: Outcome distinguishing a missing executable, a failed
            spawn, a clean run and a run with reported issues.
        """

        executable = self._resolver.resolve()
        if executable is None:
            LOGGER.error("hadolint not found in common paths or system PATH")
            return LintReport(status=LintStatus.MISSING_EXECUTABLE)

        command = (executable, *LINT_ARGS)
        try:
            result = self._host.run(command, input_text=content)
        except OSError as exc:
            LOGGER.error("Hadolint execution failed: %s", exc)
            return LintReport(status=LintStatus.SPAWN_FAILED, executable=executable)

        if result.returncode not in EXPECTED_EXIT_CODES:
            LOGGER.warning("Hadolint error (code %d): %s", result.returncode, abbreviate(result.output))

        text_buffer = buffer if buffer is not None else LineIndexedText(content)
        diagnostics = self._parser.parse(result.output, text_buffer)
        LOGGER.debug("hadolint exited with %d and reported %d issue(s)", result.returncode, len(diagnostics))
        return LintReport.from_run(
            diagnostics=diagnostics,
            executable=executable,
            exit_code=result.returncode,
            output=result.output,
        )


__all__ = ["LINT_ARGS", "LintExecutor"]
