# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the lint executor subprocess lifecycle."""

from __future__ import annotations

import logging

import pytest

from dockerqa.core.models import LintStatus, TextRange
from dockerqa.core.severity import Severity
from dockerqa.core.text import LineIndexedText
from dockerqa.linting.executor import LINT_ARGS, LintExecutor
from dockerqa.linting.resolver import PathResolver

from .conftest import HostFactory, result

HADOLINT = "/usr/local/bin/hadolint"
DOCKERFILE = "FROM ubuntu:latest\n"
LATEST_WARNING = '[{"line":1,"message":"Always tag the version of an image explicitly","level":"warning"}]'


def _executor(fake) -> LintExecutor:
    return LintExecutor(PathResolver(fake.services), host=fake.services)


def test_run_feeds_document_and_maps_diagnostics(make_host: HostFactory) -> None:
    fake = make_host(files={HADOLINT}, responses={HADOLINT: result(LATEST_WARNING, 1)})

    records = _executor(fake).run(DOCKERFILE, LineIndexedText(DOCKERFILE))

    assert fake.runner.calls == [((HADOLINT, *LINT_ARGS), DOCKERFILE)]
    assert LINT_ARGS == ("--format", "json", "-")
    assert len(records) == 1
    record = records[0]
    assert record.line == 1
    assert record.severity is Severity.WARNING
    assert record.message == "Always tag the version of an image explicitly"
    assert record.range == TextRange(start=0, end=18)


def test_run_builds_buffer_when_omitted(make_host: HostFactory) -> None:
    fake = make_host(files={HADOLINT}, responses={HADOLINT: result(LATEST_WARNING, 1)})

    records = _executor(fake).run(DOCKERFILE)

    assert records[0].range == TextRange(start=0, end=18)


def test_missing_executable_returns_empty_without_spawning(
    make_host: HostFactory, caplog: pytest.LogCaptureFixture
) -> None:
    fake = make_host(responses={"which": result("")})
    executor = _executor(fake)

    assert executor.resolver.resolve() is None
    assert executor.run(DOCKERFILE) == []
    report = executor.run_report(DOCKERFILE)
    assert report.status is LintStatus.MISSING_EXECUTABLE
    assert all(command[0] == "which" for command in fake.runner.commands)
    assert any(record.levelno == logging.ERROR for record in caplog.records)


def test_spawn_failure_is_contained(make_host: HostFactory, caplog: pytest.LogCaptureFixture) -> None:
    fake = make_host(files={HADOLINT}, responses={HADOLINT: PermissionError("Permission denied")})

    report = _executor(fake).run_report(DOCKERFILE)

    assert report.status is LintStatus.SPAWN_FAILED
    assert report.diagnostics == ()
    assert report.executable == HADOLINT
    assert any("Hadolint execution failed" in record.message for record in caplog.records)


def test_unexpected_exit_code_is_logged_but_parsed(make_host: HostFactory, caplog: pytest.LogCaptureFixture) -> None:
    fake = make_host(files={HADOLINT}, responses={HADOLINT: result("[]", 2)})

    report = _executor(fake).run_report(DOCKERFILE)

    assert report.diagnostics == ()
    assert report.status is LintStatus.CLEAN
    assert report.exit_code == 2
    assert not report.expected_exit
    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert any("code 2" in record.message for record in warnings)
    assert not any(record.levelno >= logging.ERROR for record in caplog.records)


def test_unexpected_exit_code_still_yields_partial_diagnostics(make_host: HostFactory) -> None:
    fake = make_host(files={HADOLINT}, responses={HADOLINT: result(LATEST_WARNING, 3)})

    assert len(_executor(fake).run(DOCKERFILE)) == 1


@pytest.mark.parametrize("returncode", [0, 1])
def test_expected_exit_codes_do_not_warn(
    make_host: HostFactory, caplog: pytest.LogCaptureFixture, returncode: int
) -> None:
    fake = make_host(files={HADOLINT}, responses={HADOLINT: result("", returncode)})

    report = _executor(fake).run_report(DOCKERFILE)

    assert report.status is LintStatus.CLEAN
    assert report.expected_exit
    assert not [record for record in caplog.records if record.levelno >= logging.WARNING]


def test_non_json_output_yields_empty_list(make_host: HostFactory) -> None:
    fake = make_host(files={HADOLINT}, responses={HADOLINT: result("hadolint: invalid option --format", 1)})

    report = _executor(fake).run_report(DOCKERFILE)

    assert report.status is LintStatus.CLEAN
    assert report.output.startswith("hadolint:")


def test_reported_status_counts_diagnostics(make_host: HostFactory) -> None:
    fake = make_host(files={HADOLINT}, responses={HADOLINT: result(LATEST_WARNING, 1)})

    report = _executor(fake).run_report(DOCKERFILE)

    assert report.status is LintStatus.REPORTED
    assert report.ran
    assert len(report.diagnostics) == 1


@pytest.mark.parametrize(
    "output",
    [
        '[{"line": ' + "9" * 5000 + ', "message": "m", "level": "error"}, ' + LATEST_WARNING[1:],
        "[" * 100000,
    ],
    ids=["oversized-integer", "deep-nesting"],
)
def test_hostile_output_never_raises(make_host: HostFactory, caplog: pytest.LogCaptureFixture, output: str) -> None:
    fake = make_host(files={HADOLINT}, responses={HADOLINT: result(output, 1)})

    assert _executor(fake).run(DOCKERFILE) == []
    assert any("Failed to parse hadolint output" in record.message for record in caplog.records)
