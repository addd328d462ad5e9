# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures: fake host probes for resolution and execution."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field

import pytest

from dockerqa.core.logging import PACKAGE_LOGGER
from dockerqa.platform.host import HostServices
from dockerqa.runtime.process import CommandResult

Response = CommandResult | OSError


@dataclass
class FakeRunner:
    """Scripted command runner keyed by the first command argument."""

    responses: dict[str, Response] = field(default_factory=dict)
    calls: list[tuple[tuple[str, ...], str | None]] = field(default_factory=list)

    def __call__(self, args: Sequence[str], *, input_text: str | None = None) -> CommandResult:
        self.calls.append((tuple(args), input_text))
        response = self.responses.get(args[0])
        if response is None:
            raise FileNotFoundError(f"No such file or directory: {args[0]!r}")
        if isinstance(response, OSError):
            raise response
        return response

    @property
    def commands(self) -> list[tuple[str, ...]]:
        return [args for args, _ in self.calls]


@dataclass
class FakeHost:
    """Host services wired to an in-memory file set, environment and runner."""

    files: set[str]
    env: dict[str, str]
    system_name: str
    runner: FakeRunner

    @property
    def services(self) -> HostServices:
        return HostServices(
            is_file=lambda path: path in self.files,
            run=self.runner,
            getenv=self.env.get,
            system=lambda: self.system_name,
        )


HostFactory = Callable[..., FakeHost]


def result(output: str = "", returncode: int = 0) -> CommandResult:
    """Return a :class:`CommandResult` with the given output and status."""

    return CommandResult(args=(), returncode=returncode, output=output)


@pytest.fixture
def make_host() -> HostFactory:
    """Return a factory building :class:`FakeHost` instances."""

    def _make(
        *,
        files: Iterable[str] = (),
        env: Mapping[str, str] | None = None,
        system: str = "Linux",
        responses: Mapping[str, Response] | None = None,
    ) -> FakeHost:
        return FakeHost(
            files=set(files),
            env=dict(env or {}),
            system_name=system,
            runner=FakeRunner(responses=dict(responses or {})),
        )

    return _make


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by ``configure_logging`` between tests."""

    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
