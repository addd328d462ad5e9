# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the subprocess wrapper."""

from __future__ import annotations

import subprocess
from typing import Any

import pytest

from dockerqa.runtime.process import CommandResult, run_command


class _Recorder:
    def __init__(self, stdout: str = "", returncode: int = 0) -> None:
        self.kwargs: dict[str, Any] = {}
        self.args: list[str] = []
        self._stdout = stdout
        self._returncode = returncode

    def __call__(self, args: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        self.args = args
        self.kwargs = kwargs
        return subprocess.CompletedProcess(args=args, returncode=self._returncode, stdout=self._stdout)


def test_run_command_writes_input_and_merges_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    recorder = _Recorder(stdout="[]", returncode=1)
    monkeypatch.setattr("dockerqa.runtime.process.subprocess.run", recorder)

    completed = run_command(["/opt/bin/hadolint", "--format", "json", "-"], input_text="FROM a\n")

    assert completed == CommandResult(args=("/opt/bin/hadolint", "--format", "json", "-"), returncode=1, output="[]")
    assert recorder.kwargs["input"] == "FROM a\n"
    assert recorder.kwargs["stdin"] is None
    assert recorder.kwargs["stderr"] is subprocess.STDOUT
    assert recorder.kwargs["check"] is False
    assert "timeout" not in recorder.kwargs


def test_run_command_without_input_discards_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    recorder = _Recorder()
    monkeypatch.setattr("dockerqa.runtime.process.subprocess.run", recorder)
    monkeypatch.setattr("dockerqa.runtime.process.shutil.which", lambda name: f"/usr/bin/{name}")

    run_command(["which", "hadolint"])

    assert recorder.args == ["/usr/bin/which", "hadolint"]
    assert recorder.kwargs["stdin"] is subprocess.DEVNULL


def test_run_command_unknown_executable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("dockerqa.runtime.process.shutil.which", lambda name: None)

    with pytest.raises(FileNotFoundError):
        run_command(["where", "hadolint"])


def test_run_command_requires_arguments() -> None:
    with pytest.raises(ValueError, match="at least one argument"):
        run_command([])
