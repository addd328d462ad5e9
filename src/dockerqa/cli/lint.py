# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""The ``dockerqa lint`` command."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Annotated, Final

import typer
from rich.console import Console

from ..core.logging import configure_logging
from ..core.models import LintReport, LintStatus
from ..core.text import LineIndexedText
from ..discovery import collect_targets
from ..linting.executor import LintExecutor
from ..linting.resolver import PathResolver
from ..platform.host import HostServices
from ..reporting.console import render_json, render_lint_result, render_summary
from ..runtime.console import get_console
from .shared import CLIError, build_cli_logger, load_cli_config

EXIT_CLEAN: Final[int] = 0
EXIT_ISSUES: Final[int] = 1
EXIT_UNUSABLE: Final[int] = 2


class OutputFormat(str, Enum):
    """Supported report formats."""

    TEXT = "text"
    JSON = "json"


@dataclass(slots=True)
class LintOptions:
    """Inputs of a ``dockerqa lint`` invocation."""

    paths: list[Path] = field(default_factory=list)
    root: Path = field(default_factory=Path.cwd)
    output_format: OutputFormat = OutputFormat.TEXT
    color: bool | None = None
    emoji: bool | None = None
    debug: bool = False


def _read_document(path: Path) -> str:
    # Line terminators are kept as-is so offsets match the file on disk.
    return path.read_bytes().decode("utf-8", errors="replace")


def run_lint(options: LintOptions, *, host: HostServices | None = None, console: Console | None = None) -> int:
    """Lint the Dockerfiles selected by ``options`` and return an exit status.

    Args:
        options: Paths and presentation flags for the run.
        host: Optional host probes (tests substitute fakes).
        console: Optional Rich console used for text output.

    Returns:
        int: ``0`` when no issue was reported, ``1`` when issues were reported,
        ``2`` when hadolint is unusable, no Dockerfile was found or the
        configuration is invalid.
    """

    configure_logging(debug=options.debug)
    root = options.root.resolve()
    try:
        config = load_cli_config(root)
    except CLIError as exc:
        build_cli_logger(emoji=True).fail(str(exc))
        return exc.exit_code

    color = config.output.color if options.color is None else options.color
    use_emoji = config.output.emoji if options.emoji is None else options.emoji
    logger = build_cli_logger(emoji=use_emoji, debug=options.debug, no_color=not color)
    console = console or get_console(color=color, emoji=use_emoji)

    targets = collect_targets(options.paths or [root], config.files)
    if not targets:
        logger.fail("No Dockerfiles found.")
        return EXIT_UNUSABLE

    executor = LintExecutor(PathResolver.from_settings(config.linter, host), host=host)
    results: list[tuple[str, LintReport]] = []
    exit_code = EXIT_CLEAN
    for target in targets:
        try:
            content = _read_document(target)
        except OSError as exc:
            logger.warn(f"Unable to read {target}: {exc}")
            exit_code = EXIT_UNUSABLE
            continue
        text = LineIndexedText(content)
        logger.debug(f"lint path={target}")
        report = executor.run_report(content, text)
        if report.status is LintStatus.MISSING_EXECUTABLE:
            logger.fail("hadolint executable not found in common paths or system PATH.")
            return EXIT_UNUSABLE
        if report.status is LintStatus.SPAWN_FAILED:
            logger.fail(f"Unable to run hadolint at {report.executable}.")
            return EXIT_UNUSABLE
        if not report.expected_exit:
            logger.warn(f"hadolint exited with unexpected status {report.exit_code} for {target}.")
        logger.debug(f"result path={target} status={report.status.value} exit={report.exit_code}")
        results.append((str(target), report))
        if options.output_format is OutputFormat.TEXT:
            render_lint_result(console, str(target), text, report)
        if report.diagnostics and exit_code == EXIT_CLEAN:
            exit_code = EXIT_ISSUES

    if options.output_format is OutputFormat.JSON:
        typer.echo(render_json(results))
    else:
        render_summary(console, [report for _, report in results])
    return exit_code


def lint_command(
    paths: Annotated[
        list[Path] | None,
        typer.Argument(help="Dockerfiles or directories to lint (defaults to the project root)."),
    ] = None,
    root: Annotated[Path, typer.Option("--root", "-r", help="Project root.")] = Path("."),
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", case_sensitive=False, help="Report format."),
    ] = OutputFormat.TEXT,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Emit debug logging.")] = False,
) -> None:
    """Lint Dockerfiles with hadolint."""

    options = LintOptions(
        paths=list(paths or []),
        root=root,
        output_format=output_format,
        color=False if no_color else None,
        emoji=False if no_emoji else None,
        debug=debug,
    )
    raise typer.Exit(code=run_lint(options))


__all__ = ["EXIT_CLEAN", "EXIT_ISSUES", "EXIT_UNUSABLE", "LintOptions", "OutputFormat", "lint_command", "run_lint"]
