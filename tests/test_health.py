# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the hadolint version probe."""

from __future__ import annotations

from dockerqa.linting.health import VERSION_ARGS, HealthCheck, HealthState
from dockerqa.linting.resolver import PathResolver

from .conftest import HostFactory, result

HADOLINT = "/usr/bin/hadolint"


def _check(fake) -> HealthCheck:
    return HealthCheck(PathResolver(fake.services), host=fake.services)


def test_healthy_when_version_query_succeeds(make_host: HostFactory) -> None:
    fake = make_host(files={HADOLINT}, responses={HADOLINT: result("Haskell Dockerfile Linter 2.12.0\n")})

    report = _check(fake).check()

    assert report.state is HealthState.HEALTHY
    assert report.healthy
    assert report.version == "Haskell Dockerfile Linter 2.12.0"
    assert fake.runner.commands == [(HADOLINT, *VERSION_ARGS)]
    assert "2.12.0" in report.summary()


def test_unhealthy_on_non_zero_exit(make_host: HostFactory) -> None:
    fake = make_host(files={HADOLINT}, responses={HADOLINT: result("boom", 3)})

    report = _check(fake).check()

    assert report.state is HealthState.UNHEALTHY
    assert report.exit_code == 3
    assert "returned error code 3" in report.summary()


def test_missing_when_not_resolved(make_host: HostFactory) -> None:
    report = _check(make_host()).check()

    assert report.state is HealthState.MISSING
    assert report.executable is None
    assert "not found" in report.summary()


def test_missing_when_launch_fails(make_host: HostFactory) -> None:
    fake = make_host(files={HADOLINT}, responses={HADOLINT: OSError("Exec format error")})

    report = _check(fake).check()

    assert report.state is HealthState.MISSING
    assert report.executable == HADOLINT
    assert "Exec format error" in report.summary()
