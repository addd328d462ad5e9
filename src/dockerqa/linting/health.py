# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Startup health probe for the hadolint executable."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final

from ..platform.host import HostServices, default_host
from .resolver import PathResolver

LOGGER = logging.getLogger(__name__)

VERSION_ARGS: Final[tuple[str, ...]] = ("--version",)


class HealthState(str, Enum):
    """Outcome categories of the version probe."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    MISSING = "missing"


@dataclass(frozen=True, slots=True)
class HealthReport:
    """Result of probing the hadolint executable with ``--version``."""

    state: HealthState
    executable: str | None = None
    version: str | None = None
    exit_code: int | None = None
    detail: str = ""

    @property
    def healthy(self) -> bool:
        """Return ``True`` when the executable answered the version query."""

        return self.state is HealthState.HEALTHY

    def summary(self) -> str:
        """Return the user-facing message describing this report."""

        if self.state is HealthState.HEALTHY:
            return f"hadolint {self.version or '(unknown version)'} available at {self.executable}."
        if self.state is HealthState.UNHEALTHY:
            return (
                f"hadolint is installed but returned error code {self.exit_code}. "
                "Dockerfile validation will not work properly."
            )
        suffix = f" {self.detail}" if self.detail else ""
        return f"hadolint executable not found. Dockerfile validation will not work.{suffix}"


class HealthCheck:
    """Probe the resolved hadolint executable independently of the lint pipeline."""

    def __init__(self, resolver: PathResolver | None = None, *, host: HostServices | None = None) -> None:
        """Initialise the health check.

        Args:
            resolver: Executable resolver; built from ``host`` when omitted.
            host: Host probes used to launch the version query.
        """

        self._host = host or default_host()
        self._resolver = resolver or PathResolver(self._host)

    def check(self) -> HealthReport:
        """Run ``<hadolint> --version`` and classify the outcome.

        Returns:
            HealthReport: ``HEALTHY`` on exit status 0, ``UNHEALTHY`` on any other
            status, ``MISSING`` when the executable cannot be resolved or launched.
        """

        executable = self._resolver.resolve()
        if executable is None:
            return HealthReport(state=HealthState.MISSING, detail="Not found in common paths or system PATH.")
        try:
            result = self._host.run((executable, *VERSION_ARGS))
        except OSError as exc:
            LOGGER.error("Unable to launch %s: %s", executable, exc)
            return HealthReport(state=HealthState.MISSING, executable=executable, detail=str(exc))

        output = result.output.strip()
        if result.returncode != 0:
            LOGGER.warning("%s --version exited with status %d", executable, result.returncode)
            return HealthReport(
                state=HealthState.UNHEALTHY,
                executable=executable,
                exit_code=result.returncode,
                detail=output,
            )
        version = next((line.strip() for line in output.splitlines() if line.strip()), None)
        return HealthReport(
            state=HealthState.HEALTHY,
            executable=executable,
            version=version,
            exit_code=0,
            detail=output,
        )


__all__ = ["VERSION_ARGS", "HealthCheck", "HealthReport", "HealthState"]
