# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""System diagnostics for the hadolint installation."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.rule import Rule

from ..core.logging import configure_logging
from ..linting.health import HealthCheck, HealthState
from ..linting.resolver import PathResolver
from ..platform.host import HostServices
from ..reporting.console import render_health
from .shared import CLIError, build_cli_logger, load_cli_config


def run_doctor(
    root: Path,
    *,
    host: HostServices | None = None,
    console: Console | None = None,
    debug: bool = False,
) -> int:
    """Probe the hadolint executable and return an exit status (0 healthy, 1 otherwise)."""

    configure_logging(debug=debug)
    console = console or Console()
    console.print(Rule("[bold cyan]dockerqa Doctor[/bold cyan]"))

    try:
        config = load_cli_config(root.resolve())
    except CLIError as exc:
        build_cli_logger(emoji=True).fail(str(exc))
        return 1

    logger = build_cli_logger(emoji=config.output.emoji, debug=debug, no_color=not config.output.color)
    resolver = PathResolver.from_settings(config.linter, host)
    report = HealthCheck(resolver, host=host).check()
    render_health(console, report, resolver.candidates())

    if report.state is HealthState.MISSING:
        logger.fail(report.summary())
    elif report.state is HealthState.UNHEALTHY:
        logger.warn(report.summary())
    else:
        logger.ok(report.summary())
    return 0 if report.healthy else 1


def doctor_command(
    root: Annotated[Path, typer.Option("--root", "-r", help="Project root.")] = Path("."),
    debug: Annotated[bool, typer.Option("--debug", help="Emit debug logging.")] = False,
) -> None:
    """Check that hadolint can be found and answers ``--version``."""

    raise typer.Exit(code=run_doctor(root, debug=debug))


__all__ = ["doctor_command", "run_doctor"]
