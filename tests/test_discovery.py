# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for Dockerfile discovery."""

from __future__ import annotations

from pathlib import Path

from dockerqa.config import FileSettings
from dockerqa.discovery import collect_targets


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("FROM scratch\n", encoding="utf-8")
    return path


def test_directories_are_walked_for_matching_files(tmp_path: Path) -> None:
    root_file = _touch(tmp_path / "Dockerfile")
    nested = _touch(tmp_path / "services" / "api" / "api.dockerfile")
    _touch(tmp_path / "services" / "api" / "main.py")
    _touch(tmp_path / ".git" / "Dockerfile")
    _touch(tmp_path / "node_modules" / "pkg" / "Dockerfile")

    assert collect_targets([tmp_path], FileSettings()) == [root_file, nested]


def test_explicit_files_bypass_patterns_and_are_deduplicated(tmp_path: Path) -> None:
    custom = _touch(tmp_path / "build.container")
    dockerfile = _touch(tmp_path / "Dockerfile")

    assert collect_targets([custom, tmp_path, dockerfile], FileSettings()) == [custom, dockerfile]


def test_missing_paths_are_skipped(tmp_path: Path) -> None:
    assert collect_targets([tmp_path / "absent"], FileSettings()) == []
