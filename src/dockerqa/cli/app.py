# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .doctor import doctor_command
from .lint import lint_command

app = typer.Typer(
    help="Dockerfile validation powered by hadolint.",
    add_completion=False,
    no_args_is_help=True,
)
app.command(name="lint")(lint_command)
app.command(name="doctor")(doctor_command)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main"]
